"""
Base model classes and mixins for CAdministrator.

Persisted column names follow the English camelCase vocabulary that the
field-mapping layer translates; Python attributes are snake_case.
"""
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from taxiadmin.db.database import Base


class TimestampMixin:
    """Mixin for createdAt and updatedAt timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        "createdAt",
        DateTime(timezone=True),
        server_default=func.current_timestamp(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt",
        DateTime(timezone=True),
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp(),
        nullable=False,
    )


class IntegerPrimaryKeyMixin:
    """Mixin for auto-increment integer primary key."""

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )


class BaseModel(Base, IntegerPrimaryKeyMixin, TimestampMixin):
    """
    Abstract base model with integer primary key and timestamps.

    All domain models should inherit from this class.
    """
    __abstract__ = True

    @classmethod
    def column_attributes(cls) -> dict[str, str]:
        """Map persisted column names to ORM attribute names."""
        return {
            prop.columns[0].name: prop.key
            for prop in cls.__mapper__.column_attrs
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "BaseModel":
        """Build an instance from a record keyed by persisted column names."""
        instance = cls()
        instance.apply_record(record)
        return instance

    def apply_record(self, record: dict[str, Any]) -> None:
        """Assign values from a record keyed by persisted column names.

        Keys that are not columns of this model are ignored.
        """
        attributes = self.column_attributes()
        for name, value in record.items():
            if name in attributes:
                setattr(self, attributes[name], value)

    def to_dict(self, *relations: str) -> dict[str, Any]:
        """Convert model instance to a record keyed by persisted column names.

        Each name in ``relations`` adds that relationship, converted the same
        way (one level deep).
        """
        data = {
            column: getattr(self, key)
            for column, key in self.column_attributes().items()
        }
        for name in relations:
            related = getattr(self, name)
            if related is None:
                continue
            if isinstance(related, list):
                data[name] = [item.to_dict() for item in related]
            else:
                data[name] = related.to_dict()
        return data

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<{self.__class__.__name__}(id={self.id})>"
