import pytest
from mealmate.models import Ingredient, NutritionInfo, Recipe
from mealmate.services.storage import InMemoryStore


def build_recipe(recipe_id="r1", **overrides):
    fields = dict(
        id=recipe_id,
        name=f"Recipe {recipe_id}",
        description="",
        cuisine="karnataka",
        meal_types=["lunch"],
        diet_type="veg",
        prep_time=10,
        cook_time=20,
        servings=2,
        spice_level=2,
        ingredients=[Ingredient(name="Rice", quantity="1", unit="cup", category="grain")],
        nutrition=NutritionInfo(calories=400, protein=10, carbohydrates=60, fat=12, fiber=4, sugar=3, sodium=300),
        tags=[]
    )
    fields.update(overrides)
    return Recipe(**fields)


@pytest.fixture
def make_recipe():
    """Factory for Recipe objects with sensible defaults."""
    return build_recipe


@pytest.fixture
def diet_recipes():
    """One recipe per diet type, in catalog order veg, egg, non-veg."""
    return [
        build_recipe("veg", diet_type="veg"),
        build_recipe("egg", diet_type="egg"),
        build_recipe("nonveg", diet_type="non-veg"),
    ]


@pytest.fixture
def store():
    return InMemoryStore()
