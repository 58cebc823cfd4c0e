"""
Common Models
=============

Base request/response models and field helpers.

Version: 0.1.0
"""

from datetime import UTC, date, datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def validate_iso_date(value: str | None) -> str | None:
    """
    Accept an empty value or a calendar date written as ``YYYY-MM-DD``.

    Dates are stored as ISO strings so that range checks can compare them
    lexicographically.
    """
    if value is None or value == "":
        return value
    try:
        parsed = date.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"expected a YYYY-MM-DD date, got {value!r}") from e
    if parsed.isoformat() != value:
        raise ValueError(f"expected a YYYY-MM-DD date, got {value!r}")
    return value


IsoDate = Annotated[str | None, AfterValidator(validate_iso_date)]


class RecordInput(BaseModel):
    """
    Base for request bodies.

    Fields are accepted under their snake_case name or the camelCase
    spelling older clients send; surrounding whitespace is stripped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


class RecordOutput(BaseModel):
    """Base for rows returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SuccessResponse(BaseModel):
    """Acknowledgement for updates that return no record."""

    success: bool = True


class ErrorResponse(BaseModel):
    """Error response model."""

    success: bool = False
    error: str
    status_code: int
    details: dict[str, Any] | None = None


class HealthResponse(BaseModel):
    """Service health check response."""

    status: str = "healthy"
    service: str
    version: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    # Component health
    components: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @property
    def is_healthy(self) -> bool:
        """Check if all components are healthy."""
        if self.status != "healthy":
            return False
        return all(
            c.get("status") == "healthy" for c in self.components.values()
        )
