import uuid
from datetime import date, datetime
from typing import Dict, List, Optional
from mealmate.models import DailyProgress, MealEntry, NutritionGoals, NutritionInfo, Recipe
from mealmate.services.storage import KeyValueStore
from mealmate.services.nutrition_calculator import calculate_daily_progress, scale_nutrition, sum_nutrition
from mealmate.core.rules import NUTRITION_PRESETS
from mealmate.core.logging_config import get_logger

logger = get_logger(__name__)

LOGS_KEY = "mealmate_nutrition_logs"
GOALS_KEY = "mealmate_nutrition_goals"


class NutritionTracker:
    """Daily log of eaten meals, persisted through a key-value store."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.logs: Dict[str, List[MealEntry]] = {}
        raw_logs = store.load(LOGS_KEY) or {}
        for day, entries in raw_logs.items():
            self.logs[day] = [MealEntry.model_validate(e) for e in entries]

        raw_goals = store.load(GOALS_KEY)
        self.goals = (
            NutritionGoals.model_validate(raw_goals)
            if raw_goals
            else NutritionGoals(**NUTRITION_PRESETS["balanced"])
        )

    def _save(self) -> None:
        self.store.save(LOGS_KEY, {
            day: [e.model_dump() for e in entries] for day, entries in self.logs.items()
        })

    def log_meal(self, recipe: Recipe, meal_type: str, servings: float = 1, day: Optional[str] = None) -> MealEntry:
        """Record a meal; nutrition is the recipe's per-serving values times servings."""
        day = day or date.today().isoformat()
        entry = MealEntry(
            id=str(uuid.uuid4()),
            recipe_id=recipe.id,
            recipe_name=recipe.name,
            meal_type=meal_type,
            servings=servings,
            nutrition=scale_nutrition(recipe.nutrition, servings),
            timestamp=datetime.now().isoformat()
        )
        self.logs.setdefault(day, []).append(entry)
        self._save()
        logger.info(f"Logged {recipe.name} ({meal_type}) on {day}")
        return entry

    def remove_meal(self, entry_id: str, day: Optional[str] = None) -> bool:
        day = day or date.today().isoformat()
        entries = self.logs.get(day, [])
        kept = [e for e in entries if e.id != entry_id]
        if len(kept) == len(entries):
            return False
        self.logs[day] = kept
        self._save()
        return True

    def get_meals(self, day: Optional[str] = None) -> List[MealEntry]:
        return list(self.logs.get(day or date.today().isoformat(), []))

    def get_totals(self, day: Optional[str] = None) -> NutritionInfo:
        meals = self.get_meals(day)
        if not meals:
            return NutritionInfo()
        return sum_nutrition(m.nutrition for m in meals)

    def get_daily_progress(self, day: Optional[str] = None) -> DailyProgress:
        day = day or date.today().isoformat()
        return calculate_daily_progress(day, self.get_totals(day), self.goals)

    def set_goals(self, goals: NutritionGoals) -> None:
        self.goals = goals
        self.store.save(GOALS_KEY, goals.model_dump())

    def apply_preset(self, preset_id: str) -> NutritionGoals:
        if preset_id not in NUTRITION_PRESETS:
            raise KeyError(f"Unknown nutrition preset: {preset_id}")
        goals = NutritionGoals(**NUTRITION_PRESETS[preset_id])
        self.set_goals(goals)
        return goals

    def recent_recipe_ids(self, limit: int = 14) -> List[str]:
        """Recipe ids eaten, most recent first, without repeats."""
        entries = [e for day in sorted(self.logs, reverse=True) for e in
                   sorted(self.logs[day], key=lambda e: e.timestamp, reverse=True)]
        ids: List[str] = []
        for entry in entries:
            if entry.recipe_id not in ids:
                ids.append(entry.recipe_id)
        return ids[:limit]
