from datetime import date, datetime, timedelta
from typing import Callable, Dict, List, Optional
from mealmate.models import DayPlan, MealSlot, NutritionInfo, Recipe, ShoppingItem, WeeklyPlan
from mealmate.services.storage import KeyValueStore
from mealmate.services.nutrition_calculator import scale_nutrition, sum_nutrition
from mealmate.core.logging_config import get_logger

logger = get_logger(__name__)

PLANS_KEY = "mealmate_meal_plans"
DAYS_OF_WEEK = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
MAIN_MEALS = ("breakfast", "lunch", "dinner")


def get_week_start(day: date) -> date:
    """Monday of the week containing `day`."""
    return day - timedelta(days=day.weekday())


def create_empty_week_plan(day: date) -> WeeklyPlan:
    start = get_week_start(day)
    now = datetime.now().isoformat()
    return WeeklyPlan(
        id=f"week-{start.isoformat()}",
        week_start=start.isoformat(),
        week_end=(start + timedelta(days=6)).isoformat(),
        days=[
            DayPlan(date=(start + timedelta(days=i)).isoformat(), day_of_week=DAYS_OF_WEEK[i])
            for i in range(7)
        ],
        created_at=now,
        updated_at=now
    )


def _parse_quantity(quantity: str) -> float:
    try:
        return float(quantity)
    except (TypeError, ValueError):
        return 0.0


def _format_quantity(value: float) -> str:
    rounded = round(value * 10) / 10
    return str(int(rounded)) if rounded == int(rounded) else str(rounded)


class MealPlanner:
    """Weekly meal plans keyed by week, persisted through a key-value store."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        raw = store.load(PLANS_KEY) or {}
        self.plans: Dict[str, WeeklyPlan] = {
            plan_id: WeeklyPlan.model_validate(plan) for plan_id, plan in raw.items()
        }

    def _save(self) -> None:
        self.store.save(PLANS_KEY, {plan_id: p.model_dump() for plan_id, p in self.plans.items()})

    def get_week_plan(self, day: date) -> WeeklyPlan:
        plan_id = f"week-{get_week_start(day).isoformat()}"
        return self.plans.get(plan_id) or create_empty_week_plan(day)

    def _update_day(self, day_str: str, updater: Callable[[DayPlan], DayPlan]) -> WeeklyPlan:
        """Apply `updater` to one day and persist; unknown dates leave the plan untouched."""
        plan = self.get_week_plan(date.fromisoformat(day_str))
        days = [updater(d) if d.date == day_str else d for d in plan.days]
        updated = plan.model_copy(update={"days": days, "updated_at": datetime.now().isoformat()})
        self.plans[updated.id] = updated
        self._save()
        return updated

    def add_meal_to_slot(self, day: str, meal_type: str, recipe: Recipe, servings: Optional[float] = None) -> WeeklyPlan:
        slot = MealSlot(
            id=f"{day}-{meal_type}-{int(datetime.now().timestamp() * 1000)}",
            meal_type=meal_type,
            recipe_id=recipe.id,
            recipe=recipe,
            servings=servings if servings is not None else recipe.servings
        )
        logger.info(f"Planned {recipe.name} for {meal_type} on {day}")

        def updater(d: DayPlan) -> DayPlan:
            if meal_type == "snack":
                return d.model_copy(update={"snacks": [*d.snacks, slot]})
            return d.model_copy(update={meal_type: slot})

        return self._update_day(day, updater)

    def remove_meal_from_slot(self, day: str, meal_type: str) -> WeeklyPlan:
        if meal_type == "snack":
            return self._update_day(day, lambda d: d.model_copy(update={"snacks": []}))
        if meal_type not in MAIN_MEALS:
            return self.get_week_plan(date.fromisoformat(day))
        return self._update_day(day, lambda d: d.model_copy(update={meal_type: None}))

    def update_servings(self, day: str, meal_type: str, servings: float) -> WeeklyPlan:
        def updater(d: DayPlan) -> DayPlan:
            slot = getattr(d, meal_type, None) if meal_type in MAIN_MEALS else None
            if slot is None:
                return d
            return d.model_copy(update={meal_type: slot.model_copy(update={"servings": servings})})

        return self._update_day(day, updater)

    def toggle_lock(self, day: str, meal_type: str) -> WeeklyPlan:
        def updater(d: DayPlan) -> DayPlan:
            # Snacks cannot be locked
            slot = getattr(d, meal_type, None) if meal_type in MAIN_MEALS else None
            if slot is None:
                return d
            return d.model_copy(update={meal_type: slot.model_copy(update={"is_locked": not slot.is_locked})})

        return self._update_day(day, updater)

    def clear_day(self, day: str) -> WeeklyPlan:
        return self._update_day(
            day,
            lambda d: d.model_copy(update={"breakfast": None, "lunch": None, "dinner": None, "snacks": []})
        )

    def clear_week(self, day: date) -> WeeklyPlan:
        plan = self.get_week_plan(day)
        for d in plan.days:
            plan = self.clear_day(d.date)
        return plan

    def copy_day_to_day(self, source_day: str, target_day: str) -> WeeklyPlan:
        source = self._find_day(source_day)
        if source is None:
            return self.get_week_plan(date.fromisoformat(target_day))
        meals = {"breakfast": source.breakfast, "lunch": source.lunch,
                 "dinner": source.dinner, "snacks": list(source.snacks)}
        return self._update_day(target_day, lambda d: d.model_copy(update=meals))

    def copy_previous_week(self, day: date) -> WeeklyPlan:
        """Copy last week's meals day-by-day into the week containing `day`."""
        previous = self.plans.get(f"week-{(get_week_start(day) - timedelta(days=7)).isoformat()}")
        plan = self.get_week_plan(day)
        if previous is None:
            return plan
        for target, prev_day in zip(plan.days, previous.days):
            plan = self.copy_day_to_day(prev_day.date, target.date)
        return plan

    def _find_day(self, day_str: str) -> Optional[DayPlan]:
        plan = self.get_week_plan(date.fromisoformat(day_str))
        return next((d for d in plan.days if d.date == day_str), None)

    def get_day_nutrition(self, day: str) -> NutritionInfo:
        plan_day = self._find_day(day)
        if plan_day is None:
            return NutritionInfo()
        values = [
            scale_nutrition(slot.recipe.nutrition, slot.servings / slot.recipe.servings)
            for slot in plan_day.slots()
        ]
        if not values:
            return NutritionInfo()
        return sum_nutrition(values)

    def get_week_nutrition(self, day: date) -> NutritionInfo:
        plan = self.get_week_plan(day)
        per_day = [self.get_day_nutrition(d.date) for d in plan.days]
        if all(n.calories == 0 for n in per_day):
            return NutritionInfo()
        return sum_nutrition(per_day)

    def generate_shopping_list(self, day: date) -> List[ShoppingItem]:
        """Sum raw recipe ingredients over the week, scaled to planned servings.

        Items are keyed by lower-cased name and unit, then sorted by category.
        """
        items: Dict[str, ShoppingItem] = {}
        totals: Dict[str, float] = {}

        for plan_day in self.get_week_plan(day).days:
            for slot in plan_day.slots():
                multiplier = slot.servings / slot.recipe.servings
                for ingredient in slot.recipe.ingredients:
                    key = f"{ingredient.name.lower()}-{ingredient.unit}"
                    amount = _parse_quantity(ingredient.quantity) * multiplier
                    if key in items:
                        totals[key] += amount
                        if slot.recipe.name not in items[key].recipes:
                            items[key].recipes.append(slot.recipe.name)
                    else:
                        totals[key] = amount
                        items[key] = ShoppingItem(
                            id=key,
                            name=ingredient.name,
                            quantity="",
                            unit=ingredient.unit,
                            category=ingredient.category,
                            recipes=[slot.recipe.name]
                        )

        for key, item in items.items():
            item.quantity = _format_quantity(totals[key])
        return sorted(items.values(), key=lambda i: i.category)
