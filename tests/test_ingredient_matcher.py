from mealmate.models import Ingredient
from mealmate.services.ingredient_matcher import (
    filter_by_available_ingredients,
    get_ingredient_match_score,
    normalize_available,
)


def ingredients(*names, optional=()):
    return [Ingredient(name=n, is_optional=n in optional) for n in names]


class TestFilterByAvailableIngredients:

    def test_keeps_recipes_with_any_match_sorted_by_count(self, make_recipe):
        one = make_recipe("one", ingredients=ingredients("Tomatoes (chopped)", "Salt"))
        none = make_recipe("none", ingredients=ingredients("Salt", "Sugar"))
        two = make_recipe("two", ingredients=ingredients("Tomato", "Onion", "Salt"))

        result = filter_by_available_ingredients([one, none, two], ["tomato", "onion"])

        assert [r.id for r in result] == ["two", "one"]

    def test_ties_keep_catalog_order(self, make_recipe):
        a = make_recipe("a", ingredients=ingredients("Onion"))
        b = make_recipe("b", ingredients=ingredients("Paneer", "Onions"))
        c = make_recipe("c", ingredients=ingredients("Red onion"))

        result = filter_by_available_ingredients([a, b, c], ["onion"])

        # One match each
        assert [r.id for r in result] == ["a", "b", "c"]

    def test_optional_ingredients_count(self, make_recipe):
        recipe = make_recipe("r", ingredients=ingredients("Cream", optional=("Cream",)))
        assert filter_by_available_ingredients([recipe], ["cream"]) == [recipe]

    def test_matches_through_regional_variants(self, make_recipe):
        recipe = make_recipe("r", ingredients=ingredients("Aloo (diced)", "Salt"))
        assert filter_by_available_ingredients([recipe], ["Potato"]) == [recipe]

    def test_available_item_containing_ingredient_name_matches(self, make_recipe):
        recipe = make_recipe("r", ingredients=ingredients("Rice"))
        assert filter_by_available_ingredients([recipe], ["leftover rice"]) == [recipe]

    def test_recipe_without_ingredients_excluded(self, make_recipe):
        recipe = make_recipe("r", ingredients=[])
        assert filter_by_available_ingredients([recipe], ["tomato"]) == []

    def test_threshold_does_not_raise_the_floor(self, make_recipe):
        recipe = make_recipe("r", ingredients=ingredients("Tomato", "Salt", "Sugar", "Water"))
        assert filter_by_available_ingredients([recipe], ["tomato"], threshold=0.9) == [recipe]

    def test_empty_pantry_returns_recipes_unchanged(self, make_recipe):
        recipes = [make_recipe("a"), make_recipe("b", ingredients=[])]
        assert filter_by_available_ingredients(recipes, []) == recipes
        assert filter_by_available_ingredients(recipes, ["  ", ""]) == recipes


class TestIngredientMatchScore:

    def test_empty_input_reports_all_required_missing(self, make_recipe):
        recipe = make_recipe(
            "r",
            ingredients=ingredients("Rice", "Dal", "Ghee", optional=("Ghee",))
        )
        result = get_ingredient_match_score(recipe, [])

        assert result.match_percentage == 0
        assert result.matched_ingredients == []
        assert result.missing_ingredients == ["Rice", "Dal"]

    def test_substring_match(self, make_recipe):
        recipe = make_recipe("r", ingredients=ingredients("Tomatoes (chopped)"))
        result = get_ingredient_match_score(recipe, ["tomato"])

        assert result.match_percentage == 1.0
        assert result.matched_ingredients == ["Tomatoes (chopped)"]

    def test_only_required_ingredients_count(self, make_recipe):
        recipe = make_recipe(
            "r",
            ingredients=ingredients("Spinach", "Paneer", "Cream", "Salt", optional=("Cream",))
        )
        result = get_ingredient_match_score(recipe, ["palak", "cottage cheese", "cream"])

        assert result.matched_ingredients == ["Spinach", "Paneer"]
        assert result.missing_ingredients == ["Salt"]
        assert result.match_percentage == 2 / 3

    def test_all_optional_recipe_scores_zero(self, make_recipe):
        recipe = make_recipe("r", ingredients=ingredients("Lemon", optional=("Lemon",)))
        result = get_ingredient_match_score(recipe, ["lemon"])

        assert result.match_percentage == 0
        assert result.matched_ingredients == []
        assert result.missing_ingredients == []

    def test_case_and_whitespace_are_normalized(self, make_recipe):
        recipe = make_recipe("r", ingredients=ingredients("  Green Peas "))
        result = get_ingredient_match_score(recipe, ["  MATAR "])
        assert result.matched_ingredients == ["  Green Peas "]


def test_normalize_available_drops_blanks():
    assert normalize_available([" Tomato ", "", "  ", "ONION"]) == ["tomato", "onion"]
