"""Diet adherence summary model."""
from pydantic import BaseModel, Field


class MealSummary(BaseModel):
    """Aggregated meal counts and the best on-diet streak for one session."""

    total_meals: int = Field(0, ge=0)
    on_diet_meals: int = Field(0, ge=0)
    off_diet_meals: int = Field(0, ge=0)
    best_sequence: int = Field(0, ge=0)
