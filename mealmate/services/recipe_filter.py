from typing import List, Optional
from mealmate.models import FilterCriteria, Recipe
from mealmate.core.rules import ALL, DIET_ACCEPTANCE


def matches_diet(recipe: Recipe, diet_type: Optional[str]) -> bool:
    """Apply the diet acceptance policy. None or "all" admits everything."""
    if not diet_type or diet_type == ALL:
        return True
    return recipe.diet_type in DIET_ACCEPTANCE.get(diet_type, frozenset())


def matches_search(recipe: Recipe, query: str) -> bool:
    query = query.lower()
    return (
        query in recipe.name.lower()
        or query in recipe.description.lower()
        or any(query in tag.lower() for tag in recipe.tags)
        or query in recipe.cuisine.lower()
    )


def _passes(recipe: Recipe, criteria: FilterCriteria) -> bool:
    # 1. Meal type
    if criteria.meal_type and criteria.meal_type != ALL:
        if criteria.meal_type not in recipe.meal_types:
            return False

    # 2. Diet
    if not matches_diet(recipe, criteria.diet_type):
        return False

    # 3. Cuisine allow-list
    if criteria.cuisines and recipe.cuisine not in criteria.cuisines:
        return False

    # 4. Total time budget (0 means no budget)
    if criteria.max_cook_time and recipe.total_time > criteria.max_cook_time:
        return False

    # 5. Spice ceiling (0 means no ceiling)
    if criteria.spice_level_max and recipe.spice_level > criteria.spice_level_max:
        return False

    # 6. Free-text search
    if criteria.search_query and not matches_search(recipe, criteria.search_query):
        return False

    return True


def filter_recipes_with_criteria(recipes: List[Recipe], criteria: Optional[FilterCriteria] = None) -> List[Recipe]:
    """Return the recipes passing every given hard constraint, in catalog order."""
    if criteria is None:
        return list(recipes)
    return [r for r in recipes if _passes(r, criteria)]
