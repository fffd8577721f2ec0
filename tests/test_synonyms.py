from mealmate.services.synonyms import ingredient_variants


def test_variants_always_include_term():
    assert ingredient_variants("dragonfruit") == {"dragonfruit"}
    assert ingredient_variants("") == {""}


def test_regional_name_resolves_to_canonical():
    variants = ingredient_variants("murgh")
    assert "chicken" in variants
    assert "poultry" in variants
    assert "kozhi" in variants


def test_canonical_name_resolves_to_regional_names():
    variants = ingredient_variants("potato")
    assert {"aloo", "batata", "potatoes"} <= variants


def test_term_containing_key_matches():
    # "chicken breast boneless" contains the key "chicken"
    variants = ingredient_variants("chicken breast boneless")
    assert "chicken" in variants
    assert "murgi" in variants
    assert "chicken breast boneless" in variants


def test_key_containing_term_matches():
    # "tamarin" is contained in the key "tamarind"
    assert "imli" in ingredient_variants("tamarin")


def test_matching_has_no_word_boundaries():
    # "egg" is inside "eggplant", so the brinjal entry is pulled in as well
    variants = ingredient_variants("egg")
    assert "anda" in variants
    assert "baingan" in variants


def test_unrelated_entries_not_included():
    variants = ingredient_variants("tomato")
    assert "tamatar" in variants
    assert "onion" not in variants
    assert "chicken" not in variants


def test_custom_table():
    table = {"leek": ["allium"]}
    assert ingredient_variants("leeks", table) == {"leeks", "leek", "allium"}
