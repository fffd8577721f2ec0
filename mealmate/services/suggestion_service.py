import random
from typing import Callable, List, Optional
from mealmate.models import BrowseResult, FilterCriteria, Recipe, ScoredRecipe, SuggestionContext
from mealmate.services.recipe_filter import filter_recipes_with_criteria, matches_diet
from mealmate.services.ingredient_matcher import filter_by_available_ingredients
from mealmate.services.scoring import score_recipe
from mealmate.core.rules import ALL, DEFAULT_PREFERRED_CUISINES, SPICE_LEVEL_MAX
from mealmate.core.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SUGGESTION_LIMIT = 5


class SuggestionService:
    def __init__(self, rng: Optional[Callable[[], float]] = None):
        # Uniform [0, 1) source; injectable for deterministic tests
        self.rng = rng or random.random

    def _score_admissible(self, recipes: List[Recipe], context: SuggestionContext) -> List[ScoredRecipe]:
        # Only the diet is a hard constraint here; everything else is scored
        admissible = [r for r in recipes if matches_diet(r, context.diet_type)]
        return [score_recipe(r, context) for r in admissible]

    def get_smart_suggestions(
        self,
        recipes: List[Recipe],
        context: SuggestionContext,
        limit: int = DEFAULT_SUGGESTION_LIMIT
    ) -> List[ScoredRecipe]:
        """Top recipes by score; ties keep catalog order."""
        scored = self._score_admissible(recipes, context)
        ranked = sorted(scored, key=lambda sr: -sr.score)
        logger.debug(f"Scored {len(scored)} recipes, returning top {limit}")
        return ranked[:limit]

    def get_weighted_random_recipe(self, recipes: List[Recipe], context: SuggestionContext) -> Optional[Recipe]:
        """Pick one recipe with probability proportional to its score."""
        scored = self._score_admissible(recipes, context)
        if not scored:
            return None

        total_score = sum(sr.score for sr in scored)
        remaining = self.rng() * total_score
        for sr in scored:
            remaining -= sr.score
            if remaining <= 0:
                return sr.recipe

        # Rounding drift can leave a sliver of remainder
        return scored[-1].recipe

    def build_context(
        self,
        criteria: FilterCriteria,
        default_cuisines: Optional[List[str]] = None,
        recent_meal_ids: Optional[List[str]] = None,
        prefer_quick_meals: bool = False
    ) -> SuggestionContext:
        """Derive soft preferences from the current filter controls.

        "all" selections and the maximum spice level mean no preference; with
        no cuisines picked the default cuisines are preferred instead.
        """
        cuisines = list(criteria.cuisines) or list(
            default_cuisines if default_cuisines is not None else DEFAULT_PREFERRED_CUISINES
        )
        spice_max = criteria.spice_level_max
        return SuggestionContext(
            meal_type=criteria.meal_type if criteria.meal_type != ALL else None,
            diet_type=criteria.diet_type if criteria.diet_type != ALL else None,
            preferred_cuisines=cuisines,
            spice_level_max=spice_max if spice_max is not None and spice_max < SPICE_LEVEL_MAX else None,
            max_cook_time=criteria.max_cook_time or None,
            recent_meal_ids=list(recent_meal_ids or []),
            prefer_quick_meals=prefer_quick_meals
        )

    def browse(
        self,
        recipes: List[Recipe],
        criteria: FilterCriteria,
        available: Optional[List[str]] = None,
        filter_by_ingredients: bool = True,
        default_cuisines: Optional[List[str]] = None,
        limit: int = DEFAULT_SUGGESTION_LIMIT
    ) -> BrowseResult:
        """Run the picker flow: criteria filter, pantry filter, then suggestions.

        The pantry filter narrows the listing only when it finds something;
        otherwise the criteria-filtered listing is kept.
        """
        available = available or []
        base = filter_recipes_with_criteria(recipes, criteria)

        by_ingredients = base
        if filter_by_ingredients and available:
            by_ingredients = filter_by_available_ingredients(base, available)

        listing = by_ingredients if by_ingredients else base
        has_matches = bool(by_ingredients) or not available

        context = self.build_context(criteria, default_cuisines)
        suggestions = self.get_smart_suggestions(listing, context, limit)
        logger.info(
            f"Browse: {len(base)} after filters, {len(listing)} listed, "
            f"{len(suggestions)} suggestions"
        )
        return BrowseResult(
            recipes=listing,
            ingredient_filter_has_matches=has_matches,
            suggestions=suggestions
        )


suggestion_service = SuggestionService()
