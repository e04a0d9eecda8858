"""Unit tests for ingredient parsing and unit normalization."""

import pytest

from recipebox.normalize.units import (
    CANONICAL_UNITS,
    UNIT_SYNONYMS,
    normalize_unit,
    parse_ingredient,
)

# =============================================================================
# Unit Normalization Tests
# =============================================================================


class TestNormalizeUnit:
    """Tests for normalize_unit function."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("cups", "cup"),
            ("Tablespoons", "tbsp"),
            ("tablespoon", "tbsp"),
            ("teaspoons", "tsp"),
            ("ounce", "oz"),
            ("pounds", "lb"),
            ("LBS", "lb"),
            ("kg", "kg"),
            ("l", "l"),
        ],
    )
    def test_synonyms(self, raw, expected):
        """Test that synonyms map to their canonical token."""
        assert normalize_unit(raw) == expected

    def test_every_synonym_is_canonical(self):
        """Test that the table only produces canonical units."""
        for synonym in UNIT_SYNONYMS:
            assert normalize_unit(synonym) in CANONICAL_UNITS
        assert CANONICAL_UNITS == {"cup", "tbsp", "tsp", "oz", "lb", "kg", "g", "ml", "l"}

    def test_unknown_unit_passes_through_lowercased(self):
        """Test that unknown units are kept, lowercased."""
        assert normalize_unit("Pinch") == "pinch"
        assert normalize_unit("cloves") == "cloves"

    def test_empty_unit(self):
        assert normalize_unit("") == ""


# =============================================================================
# Ingredient Parsing Tests
# =============================================================================


class TestParseIngredient:
    """Tests for parse_ingredient function."""

    def test_integer_with_unit(self):
        """Test parsing '2 cups flour'."""
        parsed = parse_ingredient("2 cups flour")
        assert parsed.quantity == 2.0
        assert parsed.unit == "cup"
        assert parsed.name == "flour"
        assert parsed.original_text == "2 cups flour"

    def test_plain_name(self):
        """Test that a line without a quantity is a count of one."""
        parsed = parse_ingredient("salt")
        assert parsed.quantity == 1.0
        assert parsed.unit == ""
        assert parsed.name == "salt"

    def test_fraction(self):
        """Test parsing '1/2 tsp vanilla extract'."""
        parsed = parse_ingredient("1/2 tsp vanilla extract")
        assert parsed.quantity == 0.5
        assert parsed.unit == "tsp"
        assert parsed.name == "vanilla extract"

    def test_decimal(self):
        parsed = parse_ingredient("1.5 kg potatoes")
        assert parsed.quantity == 1.5
        assert parsed.unit == "kg"
        assert parsed.name == "potatoes"

    def test_mixed_number(self):
        """Test that '2 1/2 cups flour' reads as two and a half cups."""
        parsed = parse_ingredient("2 1/2 cups flour")
        assert parsed.quantity == 2.5
        assert parsed.unit == "cup"
        assert parsed.name == "flour"

    def test_unit_attached_to_number(self):
        """Test parsing '400g spaghetti'."""
        parsed = parse_ingredient("400g spaghetti")
        assert parsed.quantity == 400.0
        assert parsed.unit == "g"
        assert parsed.name == "spaghetti"

    def test_count_without_unit(self):
        """Test that a unit-less count keeps the rest as the name."""
        parsed = parse_ingredient("4 eggs")
        assert parsed.quantity == 4.0
        assert parsed.unit == ""
        assert parsed.name == "eggs"

    def test_unit_must_be_whole_word(self):
        """Test that 'lemons' is not read as the unit 'l'."""
        parsed = parse_ingredient("2 lemons")
        assert parsed.unit == ""
        assert parsed.name == "lemons"

    def test_case_insensitive_unit_and_lowercased_name(self):
        parsed = parse_ingredient("  3 TBSP Soy Sauce  ")
        assert parsed.quantity == 3.0
        assert parsed.unit == "tbsp"
        assert parsed.name == "soy sauce"

    def test_trailing_s_on_unit(self):
        parsed = parse_ingredient("2 lbss chicken")
        assert parsed.unit == "lb"
        assert parsed.name == "chicken"

    def test_unit_followed_by_punctuation_stays_in_name(self):
        parsed = parse_ingredient("2 tbsp. olive oil")
        assert parsed.quantity == 2.0
        assert parsed.unit == ""
        assert parsed.name == "tbsp. olive oil"

    @pytest.mark.parametrize("text", ["2", "1/0 cup sugar", "", "   "])
    def test_degenerate_lines_fall_back(self, text):
        """Test that malformed lines become the whole text as name."""
        parsed = parse_ingredient(text)
        assert parsed.quantity == 1.0
        assert parsed.unit == ""
        assert parsed.name == text.strip().lower()

    @pytest.mark.parametrize(
        "text",
        [
            "2 1/0 cups flour",
            "2 " + "9" * 400 + "/1 cups flour",
            "2 " + "1" * 5000 + "/2 cups flour",
            "9" * 400 + " cups flour",
        ],
    )
    def test_out_of_range_quantities_fall_back(self, text):
        """Test that quantities that cannot become a finite float never raise."""
        parsed = parse_ingredient(text)
        assert parsed.quantity == 1.0
        assert parsed.unit == ""
        assert parsed.name == text.lower()

    def test_unit_without_name_is_the_name(self):
        """Test that "3 cups" keeps "cups" as the name rather than losing it."""
        parsed = parse_ingredient("3 cups")
        assert parsed.quantity == 3.0
        assert parsed.unit == ""
        assert parsed.name == "cups"

    def test_text_without_leading_number(self):
        parsed = parse_ingredient("Salt and black pepper")
        assert parsed.quantity == 1.0
        assert parsed.name == "salt and black pepper"
