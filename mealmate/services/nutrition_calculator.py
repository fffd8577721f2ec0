from typing import Iterable
from mealmate.models import DailyProgress, NutritionGoals, NutritionInfo, NutritionProgress
from mealmate.core.rules import NUTRITION_ON_TRACK_UP_TO_PERCENT, NUTRITION_UNDER_BELOW_PERCENT


def sum_nutrition(items: Iterable[NutritionInfo]) -> NutritionInfo:
    totals = NutritionInfo(cholesterol=0)
    for item in items:
        totals = NutritionInfo(
            calories=totals.calories + item.calories,
            protein=totals.protein + item.protein,
            carbohydrates=totals.carbohydrates + item.carbohydrates,
            fat=totals.fat + item.fat,
            fiber=totals.fiber + item.fiber,
            sugar=totals.sugar + item.sugar,
            sodium=totals.sodium + item.sodium,
            cholesterol=(totals.cholesterol or 0) + (item.cholesterol or 0)
        )
    return totals


def _round1(value: float) -> float:
    return round(value * 10) / 10


def scale_nutrition(nutrition: NutritionInfo, servings: float) -> NutritionInfo:
    """Scale per-serving nutrition; energy and sodium to whole units, macros to 0.1 g."""
    return NutritionInfo(
        calories=round(nutrition.calories * servings),
        protein=_round1(nutrition.protein * servings),
        carbohydrates=_round1(nutrition.carbohydrates * servings),
        fat=_round1(nutrition.fat * servings),
        fiber=_round1(nutrition.fiber * servings),
        sugar=_round1(nutrition.sugar * servings),
        sodium=round(nutrition.sodium * servings),
        cholesterol=round(nutrition.cholesterol * servings) if nutrition.cholesterol else None
    )


def calculate_progress(consumed: float, goal: float) -> NutritionProgress:
    percentage = (consumed / goal) * 100 if goal > 0 else 0.0
    if percentage < NUTRITION_UNDER_BELOW_PERCENT:
        status = "under"
    elif percentage <= NUTRITION_ON_TRACK_UP_TO_PERCENT:
        status = "on-track"
    else:
        status = "over"
    return NutritionProgress(
        consumed=consumed,
        goal=goal,
        percentage=percentage,
        remaining=max(0, goal - consumed),
        status=status
    )


def calculate_daily_progress(date: str, totals: NutritionInfo, goals: NutritionGoals) -> DailyProgress:
    return DailyProgress(
        date=date,
        calories=calculate_progress(totals.calories, goals.daily_calories),
        protein=calculate_progress(totals.protein, goals.daily_protein),
        carbs=calculate_progress(totals.carbohydrates, goals.daily_carbs),
        fat=calculate_progress(totals.fat, goals.daily_fat),
        fiber=calculate_progress(totals.fiber, goals.daily_fiber) if goals.daily_fiber else None
    )
