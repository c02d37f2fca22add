"""Tests for Car CRUD endpoints."""
import pytest
from unittest.mock import AsyncMock

from tests.api.conftest import make_mock_result


@pytest.fixture
def car_payload():
    return {"skiltNummer": "EL99999", "bilmerke": "Toyota", "arsmodell": 2021}


class TestListCars:

    async def test_list_embeds_latest_shifts(self, client, mock_session, make_car, make_skift):
        car = make_car()
        for i in range(7):
            make_skift(id=i + 1, skift_number=f"S-{i + 1:03d}", car=car)
        mock_session.execute = AsyncMock(return_value=make_mock_result(scalars_list=[car]))

        response = await client.get("/api/v1/cars")
        assert response.status_code == 200
        data = response.json()[0]
        assert data["skiltNummer"] == "EL12345"
        assert data["bilmerke"] == "Tesla"
        assert len(data["skifts"]) == 5


class TestGetCar:

    async def test_found_includes_shift_driver(
        self, client, mock_session, make_car, make_driver, make_skift
    ):
        car = make_car()
        make_skift(car=car, driver=make_driver())
        mock_session.execute = AsyncMock(return_value=make_mock_result(scalar_value=car))

        response = await client.get("/api/v1/cars/1")
        assert response.status_code == 200
        assert response.json()["skifts"][0]["driver"]["sjåforNummer"] == "DRV001"

    async def test_not_found_returns_404(self, client, mock_session):
        mock_session.execute = AsyncMock(return_value=make_mock_result(scalar_value=None))

        response = await client.get("/api/v1/cars/999")
        assert response.status_code == 404


class TestCreateCar:

    async def test_create_returns_201(self, client, mock_session, car_payload):
        mock_session.execute = AsyncMock(return_value=make_mock_result(scalar_value=None))

        response = await client.post("/api/v1/cars", json=car_payload)
        assert response.status_code == 201
        data = response.json()
        assert data["skiltNummer"] == "EL99999"
        assert data["arsmodell"] == 2021
        mock_session.add.assert_called_once()

    async def test_duplicate_license_number(self, client, mock_session, make_car, car_payload):
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=make_car(license_number="EL99999"))
        )

        response = await client.post("/api/v1/cars", json=car_payload)
        assert response.status_code == 400
        assert response.json()["detail"] == "Skiltnummer eksisterer allerede"

    async def test_model_year_too_old_returns_422(self, client, car_payload):
        car_payload["arsmodell"] = 1850

        response = await client.post("/api/v1/cars", json=car_payload)
        assert response.status_code == 422


class TestUpdateCar:

    async def test_update_returns_200(self, client, mock_session, make_car, car_payload):
        car = make_car()
        mock_session.execute = AsyncMock(side_effect=[
            make_mock_result(scalar_value=car),
            make_mock_result(scalar_value=None),
        ])

        response = await client.put("/api/v1/cars/1", json=car_payload)
        assert response.status_code == 200
        assert car.license_number == "EL99999"
        assert car.car_brand == "Toyota"


class TestDeleteCar:

    async def test_delete_returns_200(self, client, mock_session, make_car):
        car = make_car()
        mock_session.execute = AsyncMock(return_value=make_mock_result(scalar_value=car))
        mock_session.scalar = AsyncMock(return_value=None)

        response = await client.delete("/api/v1/cars/1")
        assert response.status_code == 200
        mock_session.delete.assert_awaited_once_with(car)

    async def test_delete_with_shifts_returns_409(self, client, mock_session, make_car):
        mock_session.execute = AsyncMock(return_value=make_mock_result(scalar_value=make_car()))
        mock_session.scalar = AsyncMock(return_value=3)

        response = await client.delete("/api/v1/cars/1")
        assert response.status_code == 409
        assert response.json()["detail"] == "Bilen har registrerte skift"
