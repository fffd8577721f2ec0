import json

import pytest
from mealmate.core.settings import PROJECT_ROOT
from mealmate.services.sources.local import LocalSource


def catalog_record(recipe_id, **overrides):
    record = {
        "id": recipe_id,
        "name": "Akki Rotti",
        "nameLocal": "ಅಕ್ಕಿ ರೊಟ್ಟಿ",
        "description": "Rice flour flatbread",
        "cuisine": "karnataka",
        "mealType": ["breakfast"],
        "dietType": "veg",
        "prepTime": 15,
        "cookTime": 20,
        "difficulty": "medium",
        "servings": 4,
        "spiceLevel": 2,
        "isQuickMeal": False,
        "isMealPrep": True,
        "isOnePot": False,
        "ingredients": [
            {"name": "Rice flour", "quantity": "2", "unit": "cups", "category": "grain"},
            {"name": "Coconut", "quantity": 0.5, "unit": "cup", "category": "fruit", "isOptional": True},
        ],
        "steps": [
            {"stepNumber": 1, "instruction": "Mix the dough.", "duration": 5},
            {"instruction": "Pat onto a hot tawa.", "tip": "Wet your hands."},
        ],
        "nutrition": {"calories": 280, "protein": 5, "carbohydrates": 52, "fat": 6, "fiber": 3},
        "tags": ["traditional"],
    }
    record.update(overrides)
    return record


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps({"recipes": [catalog_record("ka-1"), catalog_record("ka-2", name="Ragi Rotti")]}))
    return path


def test_adapts_catalog_records(catalog_file):
    recipes = LocalSource(str(catalog_file)).get_recipes()

    assert [r.id for r in recipes] == ["ka-1", "ka-2"]
    recipe = recipes[0]
    assert recipe.name_local == "ಅಕ್ಕಿ ರೊಟ್ಟಿ"
    assert recipe.meal_types == ["breakfast"]
    assert recipe.diet_type == "veg"
    assert recipe.total_time == 35
    assert recipe.is_meal_prep
    assert recipe.ingredients[1].is_optional
    assert recipe.ingredients[1].quantity == "0.5"
    assert [s.step_number for s in recipe.steps] == [1, 2]
    assert recipe.steps[1].tip == "Wet your hands."
    assert recipe.nutrition.calories == 280
    assert recipe.nutrition.cholesterol is None


def test_bare_list_layout(tmp_path):
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps([catalog_record("a")]))
    assert [r.id for r in LocalSource(str(path)).get_recipes()] == ["a"]


def test_directory_read_in_file_name_order(tmp_path):
    (tmp_path / "02-north.json").write_text(json.dumps([catalog_record("b")]))
    (tmp_path / "01-south.json").write_text(json.dumps([catalog_record("a")]))
    (tmp_path / "notes.txt").write_text("not a catalog")

    assert [r.id for r in LocalSource(str(tmp_path)).get_recipes()] == ["a", "b"]


def test_invalid_records_are_skipped(tmp_path):
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps([
        catalog_record("ok"),
        catalog_record("bad-diet", dietType="pescatarian"),
        catalog_record("bad-spice", spiceLevel=9),
        catalog_record("no-name", name=None),
    ]))
    assert [r.id for r in LocalSource(str(path)).get_recipes()] == ["ok"]


def test_non_object_records_are_skipped(tmp_path):
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps({"recipes": ["ka-masala-dosa", catalog_record("ok"), 42, None]}))
    assert [r.id for r in LocalSource(str(path)).get_recipes()] == ["ok"]


def test_missing_path_yields_nothing(tmp_path):
    assert LocalSource(str(tmp_path / "missing.json")).get_recipes() == []


def test_malformed_json_yields_nothing(tmp_path):
    path = tmp_path / "recipes.json"
    path.write_text("{not json")
    assert LocalSource(str(path)).get_recipes() == []


def test_bundled_catalog_loads():
    recipes = LocalSource(str(PROJECT_ROOT / "data" / "recipes")).get_recipes()
    ids = [r.id for r in recipes]
    assert len(ids) == len(set(ids))
    assert "ka-masala-dosa" in ids
    assert {r.diet_type for r in recipes} == {"veg", "egg", "non-veg"}
