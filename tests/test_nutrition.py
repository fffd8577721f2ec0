import pytest
from mealmate.models import NutritionGoals, NutritionInfo
from mealmate.services.nutrition_calculator import (
    calculate_daily_progress,
    calculate_progress,
    scale_nutrition,
    sum_nutrition,
)
from mealmate.services.nutrition_tracker import NutritionTracker


class TestProgressStatus:

    @pytest.mark.parametrize("consumed,status", [
        (0, "under"),
        (1599, "under"),
        (1600, "on-track"),
        (2200, "on-track"),
        (2201, "over"),
    ])
    def test_status_thresholds(self, consumed, status):
        assert calculate_progress(consumed, 2000).status == status

    def test_remaining_never_negative(self):
        progress = calculate_progress(2500, 2000)
        assert progress.remaining == 0
        assert progress.percentage == 125

    def test_zero_goal(self):
        progress = calculate_progress(100, 0)
        assert progress.percentage == 0
        assert progress.status == "under"


def test_scale_nutrition_rounding():
    per_serving = NutritionInfo(calories=333, protein=10.33, carbohydrates=60, fat=12, fiber=4,
                                sugar=3, sodium=301, cholesterol=45)
    scaled = scale_nutrition(per_serving, 1.5)

    assert scaled.calories == 500
    assert scaled.protein == 15.5
    assert scaled.carbohydrates == 90
    assert scaled.sugar == 4.5
    assert scaled.sodium == 452
    assert scaled.cholesterol == 68


def test_scale_nutrition_without_cholesterol():
    assert scale_nutrition(NutritionInfo(calories=100), 2).cholesterol is None


def test_sum_nutrition():
    total = sum_nutrition([NutritionInfo(calories=100, protein=5, cholesterol=10), NutritionInfo(calories=250, fiber=3)])
    assert total.calories == 350
    assert total.protein == 5
    assert total.fiber == 3
    assert total.cholesterol == 10


def test_daily_progress_fiber_only_with_goal():
    totals = NutritionInfo(calories=1000, protein=50, carbohydrates=100, fat=70, fiber=10)
    goals = NutritionGoals(daily_calories=2000, daily_protein=50, daily_carbs=250, daily_fat=65)

    progress = calculate_daily_progress("2026-01-05", totals, goals)
    assert progress.calories.status == "under"
    assert progress.protein.status == "on-track"
    assert progress.fat.status == "on-track"
    assert progress.fiber is None

    with_fiber = calculate_daily_progress("2026-01-05", totals, goals.model_copy(update={"daily_fiber": 25}))
    assert with_fiber.fiber.percentage == 40


class TestNutritionTracker:

    def test_defaults_to_balanced_goals(self, store):
        tracker = NutritionTracker(store)
        assert tracker.goals.daily_calories == 2000
        assert tracker.goals.daily_fiber == 25

    def test_log_meal_scales_by_servings(self, store, make_recipe):
        tracker = NutritionTracker(store)
        entry = tracker.log_meal(make_recipe("dosa", name="Masala Dosa"), "breakfast", servings=2, day="2026-01-05")

        assert entry.recipe_name == "Masala Dosa"
        assert entry.nutrition.calories == 800
        assert tracker.get_totals("2026-01-05").calories == 800
        assert tracker.get_totals("2026-01-06").calories == 0

    def test_daily_progress(self, store, make_recipe):
        tracker = NutritionTracker(store)
        tracker.log_meal(make_recipe("a"), "lunch", servings=2, day="2026-01-05")
        tracker.log_meal(make_recipe("b"), "dinner", servings=2, day="2026-01-05")

        progress = tracker.get_daily_progress("2026-01-05")
        assert progress.calories.consumed == 1600
        assert progress.calories.status == "on-track"
        assert progress.fiber.consumed == 16

    def test_remove_meal(self, store, make_recipe):
        tracker = NutritionTracker(store)
        entry = tracker.log_meal(make_recipe("a"), "lunch", day="2026-01-05")

        assert not tracker.remove_meal("unknown", day="2026-01-05")
        assert tracker.remove_meal(entry.id, day="2026-01-05")
        assert tracker.get_meals("2026-01-05") == []

    def test_logs_and_goals_persist(self, store, make_recipe):
        tracker = NutritionTracker(store)
        tracker.log_meal(make_recipe("a"), "lunch", day="2026-01-05")
        tracker.apply_preset("muscle-gain")

        reopened = NutritionTracker(store)
        assert [m.recipe_id for m in reopened.get_meals("2026-01-05")] == ["a"]
        assert reopened.goals.daily_protein == 150

    def test_unknown_preset(self, store):
        with pytest.raises(KeyError):
            NutritionTracker(store).apply_preset("carnivore")

    def test_recent_recipe_ids_newest_first_without_repeats(self, store, make_recipe):
        tracker = NutritionTracker(store)
        for day, recipe_id in [("2026-01-03", "a"), ("2026-01-04", "b"), ("2026-01-05", "a"), ("2026-01-06", "c")]:
            tracker.log_meal(make_recipe(recipe_id), "lunch", day=day)

        assert tracker.recent_recipe_ids() == ["c", "a", "b"]
        assert tracker.recent_recipe_ids(limit=2) == ["c", "a"]
