from typing import Iterable, List, Set
from mealmate.models import IngredientMatchResult, Recipe
from mealmate.services.synonyms import ingredient_variants
from mealmate.core.logging_config import get_logger

logger = get_logger(__name__)


def normalize_available(available: Iterable[str]) -> List[str]:
    """Lower-case and trim pantry items, dropping blank entries."""
    normalized = []
    for item in available or []:
        text = (item or "").strip().lower()
        if text:
            normalized.append(text)
    return normalized


def _overlaps(ingredient_name: str, candidate: str) -> bool:
    return candidate in ingredient_name or ingredient_name in candidate


def _matches_any(ingredient_name: str, names: Iterable[str]) -> bool:
    return any(_overlaps(ingredient_name, name) for name in names)


def filter_by_available_ingredients(
    recipes: List[Recipe],
    available: List[str],
    threshold: float = 0.05
) -> List[Recipe]:
    """Keep recipes that use at least one available ingredient, most matches first.

    Args:
        recipes: Candidate recipes.
        available: Free-text pantry items.
        threshold: Accepted for callers that pass a match ratio; the minimum is
            always one matching ingredient.

    Returns:
        Matching recipes sorted by match count (descending, stable). When no
        pantry items are given the recipes are returned unchanged.
    """
    pantry = normalize_available(available)
    if not pantry:
        return list(recipes)

    # Every variant of every pantry item, resolved once up front
    all_variants: Set[str] = set()
    for item in pantry:
        all_variants.update(ingredient_variants(item))

    counted = []
    for recipe in recipes:
        # Optional ingredients count here too
        match_count = 0
        for ingredient in recipe.ingredients:
            name = ingredient.name.strip().lower()
            if _matches_any(name, pantry) or _matches_any(name, all_variants):
                match_count += 1
        if match_count >= 1:
            counted.append((match_count, recipe))

    counted.sort(key=lambda item: -item[0])
    logger.debug(f"Ingredient filter kept {len(counted)} of {len(recipes)} recipes")
    return [recipe for _, recipe in counted]


def get_ingredient_match_score(recipe: Recipe, available: List[str]) -> IngredientMatchResult:
    """Report which required ingredients of a recipe the pantry covers."""
    required = [i for i in recipe.ingredients if not i.is_optional]
    pantry = normalize_available(available)

    if not pantry:
        return IngredientMatchResult(
            match_percentage=0.0,
            matched_ingredients=[],
            missing_ingredients=[i.name for i in required]
        )

    variants_by_item = {item: ingredient_variants(item) for item in pantry}
    matched: List[str] = []
    missing: List[str] = []

    for ingredient in required:
        name = ingredient.name.strip().lower()
        has_match = any(
            _overlaps(name, item) or _matches_any(name, variants_by_item[item])
            for item in pantry
        )
        if has_match:
            matched.append(ingredient.name)
        else:
            missing.append(ingredient.name)

    match_percentage = len(matched) / len(required) if required else 0.0
    return IngredientMatchResult(
        match_percentage=match_percentage,
        matched_ingredients=matched,
        missing_ingredients=missing
    )
