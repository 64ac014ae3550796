"""Meal API routes."""
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response

from ..models.meal import MealCreate, MealListResponse, MealResponse, MealUpdate
from ..models.summary import MealSummary
from ..services.meal_store import MealStore, get_meal_store
from ..services.session import ensure_session_id, require_session_id
from ..services.streak import summarize_meals

router = APIRouter(prefix="/meals", tags=["Meals"])

MEAL_NOT_FOUND = "Meal not found."


@router.get("", response_model=MealListResponse)
def list_meals(
    session_id: str = Depends(require_session_id),
    store: MealStore = Depends(get_meal_store),
):
    """List the session's meals in chronological order."""
    return MealListResponse(meals=store.list_meals(session_id))


# Declared before /{meal_id} so "summary" is not parsed as an id.
@router.get("/summary", response_model=MealSummary)
def get_summary(
    session_id: str = Depends(require_session_id),
    store: MealStore = Depends(get_meal_store),
):
    """
    Get diet adherence for the session.
    Counts all, on-diet and off-diet meals and the longest on-diet streak.
    """
    return summarize_meals(store.list_meals(session_id))


@router.get("/{meal_id}", response_model=MealResponse)
def get_meal(
    meal_id: UUID,
    session_id: str = Depends(require_session_id),
    store: MealStore = Depends(get_meal_store),
):
    """Get a single meal owned by the session."""
    meal = store.get_meal(session_id, str(meal_id))
    if meal is None:
        raise HTTPException(status_code=404, detail=MEAL_NOT_FOUND)
    return MealResponse(meal=meal)


@router.post("", response_model=MealResponse, status_code=201)
def create_meal(
    payload: MealCreate,
    session_id: str = Depends(ensure_session_id),
    store: MealStore = Depends(get_meal_store),
):
    """Register a meal, starting a new session when the client has none."""
    return MealResponse(meal=store.create_meal(session_id, payload))


@router.put("/{meal_id}", response_model=MealResponse)
def update_meal(
    meal_id: UUID,
    payload: MealUpdate,
    session_id: str = Depends(require_session_id),
    store: MealStore = Depends(get_meal_store),
):
    """Change only the fields supplied in the body."""
    meal = store.update_meal(session_id, str(meal_id), payload)
    if meal is None:
        raise HTTPException(status_code=404, detail=MEAL_NOT_FOUND)
    return MealResponse(meal=meal)


@router.delete("/{meal_id}", status_code=204)
def delete_meal(
    meal_id: UUID,
    session_id: str = Depends(require_session_id),
    store: MealStore = Depends(get_meal_store),
):
    """Delete a meal. Unknown or foreign ids are ignored."""
    store.delete_meal(session_id, str(meal_id))
    return Response(status_code=204)
