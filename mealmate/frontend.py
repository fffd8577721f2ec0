from datetime import date

import streamlit as st

from mealmate.models import FilterCriteria
from mealmate.core.settings import load_settings
from mealmate.core.rules import SPICE_LEVEL_MAX
from mealmate.services.recipe_service import recipe_service, RecipeSourceError
from mealmate.services.suggestion_service import suggestion_service
from mealmate.services.ingredient_matcher import get_ingredient_match_score
from mealmate.services.storage import JsonFileStore
from mealmate.services.planner import MealPlanner
from mealmate.services.nutrition_tracker import NutritionTracker

settings = load_settings()
store = JsonFileStore(settings.storage_dir)
planner = MealPlanner(store)
tracker = NutritionTracker(store)
today = date.today()

st.set_page_config(page_title="MealMate", layout="wide")
st.title("MealMate: What should I cook?")

try:
    all_recipes = recipe_service.get_recipes()
except RecipeSourceError as exc:
    st.error(f"Could not load the recipe catalog: {'; '.join(exc.errors)}")
    st.stop()

# Filter controls
with st.sidebar:
    st.header("Filters")
    meal_type = st.selectbox("Meal", ["all", "breakfast", "lunch", "dinner", "snack"])
    diet_type = st.selectbox("Diet", ["all", "veg", "egg", "non-veg"])
    cuisines = st.multiselect("Cuisines", sorted({r.cuisine for r in all_recipes}))
    time_choice = st.selectbox("Max time", ["Any", "15 min", "30 min", "45 min", "60 min"])
    spice_level_max = st.slider("Max spice", 1, SPICE_LEVEL_MAX, SPICE_LEVEL_MAX)
    search_query = st.text_input("Search")
    prefer_quick = st.checkbox("Prefer quick meals")

    st.header("Today")
    progress = tracker.get_daily_progress(today.isoformat())
    for label, item in [("Calories", progress.calories), ("Protein", progress.protein),
                        ("Carbs", progress.carbs), ("Fat", progress.fat)]:
        st.progress(min(item.percentage / 100, 1.0), text=f"{label}: {item.consumed:.0f} / {item.goal:.0f} ({item.status})")

    week_nutrition = planner.get_week_nutrition(today)
    st.caption(f"Planned this week: {week_nutrition.calories:.0f} kcal")
    with st.expander("Shopping list"):
        for item in planner.generate_shopping_list(today):
            st.markdown(f"- {item.quantity} {item.unit} {item.name}")

max_cook_time = None if time_choice == "Any" else int(time_choice.split()[0])
criteria = FilterCriteria(
    meal_type=meal_type,
    diet_type=diet_type,
    cuisines=cuisines,
    max_cook_time=max_cook_time,
    spice_level_max=spice_level_max,
    search_query=search_query or None
)

# Pantry
pantry_text = st.text_input("What do you have? (comma separated)", placeholder="tomato, onion, paneer")
available = [p.strip() for p in pantry_text.split(",") if p.strip()]

result = suggestion_service.browse(
    all_recipes,
    criteria,
    available,
    default_cuisines=settings.default_preferred_cuisines,
    limit=settings.suggestion_limit
)

if available:
    if result.ingredient_filter_has_matches:
        st.success(f"Found {len(result.recipes)} recipes you can make!")
    else:
        st.warning("No recipes use those ingredients; showing all matches for your filters.")

col1, col2 = st.columns([3, 1])
with col2:
    st.subheader("Spin the wheel")
    if st.button("Surprise me", type="primary"):
        context = suggestion_service.build_context(
            criteria,
            settings.default_preferred_cuisines,
            recent_meal_ids=tracker.recent_recipe_ids(),
            prefer_quick_meals=prefer_quick
        )
        picked = suggestion_service.get_weighted_random_recipe(result.recipes, context)
        if picked:
            st.markdown(f"### {picked.name}")
            st.caption(f"{picked.cuisine} | {picked.total_time} mins")
        else:
            st.info("Nothing matches your diet filter.")

with col1:
    st.subheader("Smart suggestions")
    for scored in result.suggestions:
        recipe = scored.recipe
        st.markdown(f"**{recipe.name}** ({recipe.cuisine}, {recipe.total_time} mins)")
        if scored.reasons:
            st.caption(" | ".join(scored.reasons))
        plan_meal = meal_type if meal_type != "all" else next(iter(recipe.meal_types), "lunch")
        if st.button(f"Plan for today's {plan_meal}", key=f"plan-{recipe.id}"):
            planner.add_meal_to_slot(today.isoformat(), plan_meal, recipe)
            st.rerun()
        if st.button("I ate this", key=f"log-{recipe.id}"):
            tracker.log_meal(recipe, plan_meal, day=today.isoformat())
            st.rerun()

st.divider()
st.subheader(f"All recipes ({len(result.recipes)})")
for recipe in result.recipes:
    with st.expander(f"{recipe.name} | {recipe.total_time} mins | spice {recipe.spice_level}/5"):
        st.write(recipe.description)
        if available:
            match = get_ingredient_match_score(recipe, available)
            st.progress(match.match_percentage, text=f"{round(match.match_percentage * 100)}% of ingredients")
            if match.missing_ingredients:
                st.caption("Missing: " + ", ".join(match.missing_ingredients))
        for ingredient in recipe.ingredients:
            optional = " (optional)" if ingredient.is_optional else ""
            st.markdown(f"- {ingredient.quantity} {ingredient.unit} {ingredient.name}{optional}")
