"""Diet adherence aggregation over a session's meals.

Pure functions only: no database or request access happens here, the caller
hands in the meals it already fetched.
"""
from typing import Iterable, Sequence

from ..models.meal import Meal
from ..models.summary import MealSummary


def chronological(meals: Iterable[Meal]) -> list[Meal]:
    """Return meals ordered by ``date_time`` ascending.

    The sort is stable, so meals sharing a timestamp keep their given order.
    """
    return sorted(meals, key=lambda meal: meal.date_time)


def longest_on_diet_run(flags: Sequence[bool]) -> int:
    """Length of the longest contiguous run of ``True`` in ``flags``."""
    best_sequence = 0
    current_sequence = 0
    for on_diet in flags:
        if on_diet:
            current_sequence += 1
        else:
            best_sequence = max(best_sequence, current_sequence)
            current_sequence = 0
    # A run that reaches the end of the sequence never hits the reset above.
    return max(best_sequence, current_sequence)


def summarize_meals(meals: Iterable[Meal]) -> MealSummary:
    """
    Compute meal counts and the best on-diet streak.

    Meals are re-sorted chronologically first, so the streak reflects the
    order in which they were eaten regardless of the order they arrive in.

    Args:
        meals: Meals belonging to a single session.

    Returns:
        MealSummary with total, on-diet and off-diet counts plus the length
        of the longest consecutive on-diet run.
    """
    flags = [meal.diet for meal in chronological(meals)]
    on_diet_meals = sum(1 for on_diet in flags if on_diet)

    return MealSummary(
        total_meals=len(flags),
        on_diet_meals=on_diet_meals,
        off_diet_meals=len(flags) - on_diet_meals,
        best_sequence=longest_on_diet_run(flags),
    )
