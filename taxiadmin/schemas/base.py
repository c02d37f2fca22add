"""
Base Pydantic schemas and common types.
"""
from pydantic import BaseModel, ConfigDict

# HH:MM, 24-hour clock
TIME_OF_DAY_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,  # Enable ORM mode
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_api_record(self) -> dict:
        """Validated data keyed by the API (alias) names."""
        return self.model_dump(by_alias=True)
