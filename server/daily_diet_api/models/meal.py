"""Meal data models."""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator, model_validator


def _to_naive_utc(value: datetime) -> datetime:
    # Stored as ISO text, so every value must share one clock for ordering.
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class MealCreate(BaseModel):
    """Request body for creating a meal."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    description: str
    date_time: datetime = Field(..., alias="dateTime")
    diet: StrictBool

    @field_validator("date_time")
    @classmethod
    def normalize_date_time(cls, value: datetime) -> datetime:
        return _to_naive_utc(value)


class MealUpdate(BaseModel):
    """
    Request body for a partial meal update.

    Only keys present in the payload are applied, whatever their value, so
    ``{"diet": false}`` and ``{"description": ""}`` are real updates.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    date_time: Optional[datetime] = Field(None, alias="dateTime")
    diet: Optional[StrictBool] = None

    @field_validator("date_time")
    @classmethod
    def normalize_date_time(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _to_naive_utc(value) if value is not None else None

    @model_validator(mode="after")
    def reject_explicit_nulls(self) -> "MealUpdate":
        nulls = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self

    def changes(self) -> dict[str, Any]:
        """Fields explicitly supplied by the client, keyed by field name."""
        return self.model_dump(exclude_unset=True)


class Meal(BaseModel):
    """Stored meal record."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    session_id: str = Field(..., alias="sessionId")
    name: str
    description: str
    date_time: datetime = Field(..., alias="dateTime")
    diet: bool


class MealResponse(BaseModel):
    """Single meal envelope."""

    meal: Meal


class MealListResponse(BaseModel):
    """Meal list envelope."""

    meals: list[Meal]
