"""Tests for Driver CRUD endpoints."""
import pytest
from unittest.mock import AsyncMock
from sqlalchemy.exc import IntegrityError

from taxiadmin.core.security import verify_password
from taxiadmin.models import Driver, User, UserRole
from tests.api.conftest import make_mock_result


@pytest.fixture
def driver_payload():
    return {
        "sjåforNummer": "DRV010",
        "personNummer": "01018012345",
        "fornavn": "Ola",
        "etternavn": "Nordmann",
        "adresse": "Storgata 1",
        "by": "Oslo",
        "postnummer": "0155",
        "telefon": "+47 98765432",
        "epost": "ola@example.com",
        "lonnprosent": 45,
    }


class TestListDrivers:

    async def test_list_uses_norwegian_fields(self, client, mock_session, make_driver):
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalars_list=[make_driver()])
        )

        response = await client.get("/api/v1/drivers")
        assert response.status_code == 200
        data = response.json()
        assert data[0]["sjåforNummer"] == "DRV001"
        assert data[0]["fornavn"] == "John"
        assert data[0]["ikkeVisMegForAndre"] is False
        assert data[0]["skifts"] == []
        assert "driverNumber" not in data[0]

    async def test_admin_sees_hidden_drivers(self, client, mock_session, make_driver):
        drivers = [
            make_driver(id=1, hide_from_others=True),
            make_driver(id=3, driver_number="DRV003", email="c@example.com"),
        ]
        mock_session.execute = AsyncMock(return_value=make_mock_result(scalars_list=drivers))

        response = await client.get("/api/v1/drivers")
        assert [d["id"] for d in response.json()] == [1, 3]

    async def test_driver_sees_self_but_not_other_hidden(
        self, driver_client, mock_session, make_driver
    ):
        drivers = [
            make_driver(id=1, hide_from_others=True),
            make_driver(id=2, driver_number="DRV002", email="b@example.com", hide_from_others=True),
            make_driver(id=3, driver_number="DRV003", email="c@example.com"),
        ]
        mock_session.execute = AsyncMock(return_value=make_mock_result(scalars_list=drivers))

        response = await driver_client.get("/api/v1/drivers")
        assert response.status_code == 200
        assert [d["id"] for d in response.json()] == [2, 3]


class TestGetDriver:

    async def test_found_includes_shifts_with_car(
        self, client, mock_session, make_driver, make_car, make_skift
    ):
        driver = make_driver()
        make_skift(driver=driver, car=make_car())
        mock_session.execute = AsyncMock(return_value=make_mock_result(scalar_value=driver))

        response = await client.get("/api/v1/drivers/1")
        assert response.status_code == 200
        skifts = response.json()["skifts"]
        assert skifts[0]["skiftNummer"] == "S-001"
        assert skifts[0]["car"]["skiltNummer"] == "EL12345"

    async def test_not_found_returns_404(self, client, mock_session):
        mock_session.execute = AsyncMock(return_value=make_mock_result(scalar_value=None))

        response = await client.get("/api/v1/drivers/999")
        assert response.status_code == 404

    async def test_hidden_driver_is_404_for_other_driver(
        self, driver_client, mock_session, make_driver
    ):
        hidden = make_driver(id=1, hide_from_others=True)
        mock_session.execute = AsyncMock(return_value=make_mock_result(scalar_value=hidden))

        response = await driver_client.get("/api/v1/drivers/1")
        assert response.status_code == 404


class TestCreateDriver:

    async def test_create_returns_201_and_account(self, client, mock_session, driver_payload):
        mock_session.execute = AsyncMock(side_effect=[
            make_mock_result(scalars_list=[]),
            make_mock_result(scalar_value=None),
        ])

        response = await client.post("/api/v1/drivers", json=driver_payload)
        assert response.status_code == 201
        data = response.json()
        assert data["sjåforNummer"] == "DRV010"
        assert data["etternavn"] == "Nordmann"
        assert data["ikkeVisMegForAndre"] is False

        added = [call.args[0] for call in mock_session.add.call_args_list]
        assert isinstance(added[0], Driver)
        user = added[1]
        assert isinstance(user, User)
        assert user.username == "DRV010"
        assert user.role == UserRole.DRIVER
        assert verify_password("DRV010Ola", user.hashed_password)

    async def test_duplicate_driver_number(self, client, mock_session, make_driver, driver_payload):
        existing = make_driver(driver_number="DRV010")
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalars_list=[existing])
        )

        response = await client.post("/api/v1/drivers", json=driver_payload)
        assert response.status_code == 400
        assert response.json()["detail"] == "Sjåførnummer eksisterer allerede"

    async def test_duplicate_email(self, client, mock_session, make_driver, driver_payload):
        existing = make_driver(driver_number="DRV099", email="ola@example.com")
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalars_list=[existing])
        )

        response = await client.post("/api/v1/drivers", json=driver_payload)
        assert response.status_code == 400
        assert response.json()["detail"] == "E-post eksisterer allerede"

    async def test_duplicate_username(self, client, mock_session, driver_payload):
        mock_session.execute = AsyncMock(side_effect=[
            make_mock_result(scalars_list=[]),
            make_mock_result(scalar_value=User(username="DRV010")),
        ])

        response = await client.post("/api/v1/drivers", json=driver_payload)
        assert response.status_code == 400
        assert response.json()["detail"] == "Brukernavn eksisterer allerede"

    async def test_integrity_error_on_flush(self, client, mock_session, driver_payload):
        mock_session.execute = AsyncMock(side_effect=[
            make_mock_result(scalars_list=[]),
            make_mock_result(scalar_value=None),
        ])
        mock_session.flush = AsyncMock(
            side_effect=IntegrityError("INSERT", {}, Exception("unique violation"))
        )

        response = await client.post("/api/v1/drivers", json=driver_payload)
        assert response.status_code == 400
        assert response.json()["detail"] == "En eller flere felt eksisterer allerede"

    async def test_missing_salary_percentage_returns_422(self, client, driver_payload):
        del driver_payload["lonnprosent"]

        response = await client.post("/api/v1/drivers", json=driver_payload)
        assert response.status_code == 422

    async def test_invalid_email_returns_422(self, client, driver_payload):
        driver_payload["epost"] = "not-an-email"

        response = await client.post("/api/v1/drivers", json=driver_payload)
        assert response.status_code == 422


class TestUpdateDriver:

    async def test_update_applies_norwegian_fields(
        self, client, mock_session, make_driver, driver_payload
    ):
        driver = make_driver(id=1)
        mock_session.execute = AsyncMock(side_effect=[
            make_mock_result(scalar_value=driver),
            make_mock_result(scalars_list=[]),
        ])
        driver_payload["ikkeVisMegForAndre"] = True

        response = await client.put("/api/v1/drivers/1", json=driver_payload)
        assert response.status_code == 200
        assert driver.name == "Ola"
        assert driver.hide_from_others is True
        assert response.json()["fornavn"] == "Ola"

    async def test_update_not_found(self, client, mock_session, driver_payload):
        mock_session.execute = AsyncMock(return_value=make_mock_result(scalar_value=None))

        response = await client.put("/api/v1/drivers/42", json=driver_payload)
        assert response.status_code == 404


class TestDeleteDriver:

    async def test_delete_returns_200(self, client, mock_session, make_driver):
        driver = make_driver()
        mock_session.execute = AsyncMock(return_value=make_mock_result(scalar_value=driver))
        mock_session.scalar = AsyncMock(return_value=None)

        response = await client.delete("/api/v1/drivers/1")
        assert response.status_code == 200
        mock_session.delete.assert_awaited_once_with(driver)

    async def test_delete_with_shifts_returns_409(self, client, mock_session, make_driver):
        mock_session.execute = AsyncMock(
            return_value=make_mock_result(scalar_value=make_driver())
        )
        mock_session.scalar = AsyncMock(return_value=17)

        response = await client.delete("/api/v1/drivers/1")
        assert response.status_code == 409
        mock_session.delete.assert_not_awaited()

    async def test_delete_not_found_returns_404(self, client, mock_session):
        mock_session.execute = AsyncMock(return_value=make_mock_result(scalar_value=None))

        response = await client.delete("/api/v1/drivers/999")
        assert response.status_code == 404
