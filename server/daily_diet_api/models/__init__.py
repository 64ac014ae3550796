"""Pydantic models for meal API requests and responses."""
from .meal import Meal, MealCreate, MealUpdate, MealResponse, MealListResponse
from .summary import MealSummary

__all__ = [
    "Meal",
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "MealListResponse",
    "MealSummary",
]
