"""API test fixtures -- helpers for configuring mock session returns."""
from unittest.mock import MagicMock


def make_mock_result(scalar_value=None, scalars_list=None, row=None):
    """Create a mock SQLAlchemy Result object."""
    result = MagicMock()
    result.scalar_one_or_none = MagicMock(return_value=scalar_value)

    items = scalars_list or []
    scalars_mock = MagicMock()
    scalars_mock.all = MagicMock(return_value=items)
    scalars_mock.first = MagicMock(return_value=items[0] if items else scalar_value)
    scalars_mock.unique = MagicMock(return_value=scalars_mock)
    result.scalars = MagicMock(return_value=scalars_mock)
    result.first = MagicMock(return_value=None)
    result.one = MagicMock(return_value=row)
    result.rowcount = len(items) if items else (1 if scalar_value else 0)

    return result


def make_upsert_row(inserted: bool = True, varsel_id: int = 1):
    """Row returned by the varsel upsert."""
    row = MagicMock()
    row.id = varsel_id
    row.inserted = inserted
    return row
