from typing import List
from mealmate.models import Recipe, ScoredRecipe, SuggestionContext

BASE_SCORE = 100.0
MEAL_TYPE_MATCH_BONUS = 30
MEAL_TYPE_MISMATCH_PENALTY = 50
NOVELTY_BONUS = 25
RECENCY_PENALTY = 30
RECENCY_DECAY_PER_POSITION = 3
CUISINE_BONUS = 20
CUISINE_DECAY_PER_POSITION = 2
SPICE_FIT_BONUS = 10
SPICE_VIOLATION_PENALTY = 40
TIME_FIT_BONUS = 15
QUICK_TO_MAKE_BONUS = 10
TIME_OVERAGE_WEIGHT = 15
TIME_OVERAGE_MAX_PENALTY = 30
QUICK_MEAL_BONUS = 15
MEAL_PREP_BONUS = 5
ONE_POT_BONUS = 5
MAX_REASONS = 3


def score_recipe(recipe: Recipe, context: SuggestionContext) -> ScoredRecipe:
    """Score a recipe deterministically against soft preferences.

    Args:
        recipe: Recipe to score.
        context: Soft preferences for this request.

    Returns:
        ScoredRecipe with a score >= 0 and at most three reasons.

    Notes:
        - Factors are applied in a fixed order; that order also decides which
          reasons survive when more than three apply.
        - Recipes eaten recently lose more the more recently they were eaten;
          past the tenth position the penalty turns into a small bonus.
        - Earlier preferred cuisines earn a larger bonus.
        - Going over the time budget costs proportionally, capped.
    """
    score = BASE_SCORE
    reasons: List[str] = []

    # 1. Meal type fit
    if context.meal_type:
        if context.meal_type in recipe.meal_types:
            score += MEAL_TYPE_MATCH_BONUS
            reasons.append(f"Perfect for {context.meal_type}")
        else:
            score -= MEAL_TYPE_MISMATCH_PENALTY

    # 2. Variety vs. recently eaten
    recent = context.recent_meal_ids
    if recent:
        if recipe.id not in recent:
            score += NOVELTY_BONUS
            reasons.append("Something different")
        else:
            position = recent.index(recipe.id)
            score -= RECENCY_PENALTY - position * RECENCY_DECAY_PER_POSITION

    # 3. Cuisine preference
    if context.preferred_cuisines and recipe.cuisine in context.preferred_cuisines:
        position = context.preferred_cuisines.index(recipe.cuisine)
        score += CUISINE_BONUS - position * CUISINE_DECAY_PER_POSITION
        reasons.append(f"Your favorite: {recipe.cuisine}")

    # 4. Spice tolerance
    if context.spice_level_max is not None:
        if recipe.spice_level <= context.spice_level_max:
            score += SPICE_FIT_BONUS
            if recipe.spice_level == context.spice_level_max:
                reasons.append("Just the right spice level")
        else:
            score -= SPICE_VIOLATION_PENALTY

    # 5. Time budget
    if context.max_cook_time is not None:
        total_time = recipe.total_time
        if total_time <= context.max_cook_time:
            score += TIME_FIT_BONUS
            if total_time <= context.max_cook_time * 0.5:
                score += QUICK_TO_MAKE_BONUS
                reasons.append("Quick to make")
        else:
            overage_ratio = (
                total_time / context.max_cook_time if context.max_cook_time > 0 else float("inf")
            )
            score -= min(TIME_OVERAGE_MAX_PENALTY, overage_ratio * TIME_OVERAGE_WEIGHT)

    # 6. Quick meal preference
    if context.prefer_quick_meals and recipe.is_quick_meal:
        score += QUICK_MEAL_BONUS
        reasons.append("Ready in under 30 min")

    # 7. Batch-cooking friendly
    if recipe.is_meal_prep:
        score += MEAL_PREP_BONUS

    # 8. Single vessel
    if recipe.is_one_pot:
        score += ONE_POT_BONUS
        reasons.append("Easy cleanup")

    return ScoredRecipe(recipe=recipe, score=max(0.0, score), reasons=reasons[:MAX_REASONS])
