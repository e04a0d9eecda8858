"""Unit tests for ingredient aggregation."""

import pytest

from recipebox.normalize.aggregate import (
    AggregatedItem,
    IngredientLine,
    combine_ingredients,
    format_display_text,
)


def lines(*texts: str, recipe: str = "Bread", category: str = "Baking") -> list[IngredientLine]:
    return [IngredientLine(text=t, recipe_category=category, recipe_name=recipe) for t in texts]


class TestCombineIngredients:
    """Tests for combine_ingredients function."""

    def test_merges_same_name_and_unit(self):
        """Test that '1 cup flour' and '2 cups flour' become one item."""
        result = combine_ingredients(lines("1 cup flour", "2 cups flour"))

        assert len(result) == 1
        item = result[0]
        assert item.quantity == 3.0
        assert item.unit == "cup"
        assert item.name == "flour"
        assert item.key == "flour-cup"
        assert item.sources == ["1 cup flour", "2 cups flour"]

    def test_different_units_stay_separate(self):
        result = combine_ingredients(lines("1 cup milk", "250 ml milk"))
        assert [item.key for item in result] == ["milk-cup", "milk-ml"]

    def test_synonym_units_merge(self):
        result = combine_ingredients(lines("1 tablespoon honey", "2 tbsp honey"))
        assert len(result) == 1
        assert result[0].quantity == 3.0
        assert result[0].unit == "tbsp"

    def test_first_encounter_order(self):
        """Test that output follows first appearance, not alphabetical order."""
        result = combine_ingredients(lines("2 onions", "1 cup rice", "1 onions", "apples"))
        assert [item.name for item in result] == ["onions", "rice", "apples"]

    def test_tracks_provenance_without_duplicates(self):
        """Test that recipe names and categories are de-duplicated in order."""
        merged = (
            lines("1 cup flour", recipe="Lasagna", category="Italian")
            + lines("1 cup flour", recipe="Enchiladas", category="Mexican")
            + lines("1 cup flour", recipe="Lasagna", category="Italian")
        )
        item = combine_ingredients(merged)[0]

        assert item.quantity == 3.0
        assert len(item.sources) == 3
        assert item.recipe_names == ["Lasagna", "Enchiladas"]
        assert item.categories == ["Italian", "Mexican"]

    def test_empty_input(self):
        assert combine_ingredients([]) == []

    def test_unchecked_by_default(self):
        assert combine_ingredients(lines("salt"))[0].checked is False

    def test_recombining_output_keeps_totals(self):
        """Test that combining reconstructed output yields the same totals."""
        first = combine_ingredients(
            lines("1 cup flour", "2 cups flour", "1/2 tsp salt", "3 eggs", "1/4 tsp salt")
        )
        rebuilt = lines(*(item.display_text for item in first))
        second = combine_ingredients(rebuilt)

        assert [(i.key, i.quantity) for i in second] == [
            (i.key, pytest.approx(i.quantity)) for i in first
        ]


class TestDisplayText:
    """Tests for display text formatting."""

    def test_quantity_unit_and_name(self):
        assert format_display_text(2.5, "cup", "flour") == "2.5 cup flour"

    def test_quantity_of_one_is_omitted(self):
        assert format_display_text(1, "", "salt") == "salt"
        assert format_display_text(1, "cup", "rice") == "cup rice"

    def test_rounds_to_two_decimals(self):
        assert format_display_text(1 / 3, "cup", "sugar") == "0.33 cup sugar"

    def test_whole_numbers_drop_decimals(self):
        assert format_display_text(3.0, "", "eggs") == "3 eggs"

    def test_zero_quantity_is_omitted(self):
        assert format_display_text(0, "g", "yeast") == "g yeast"

    def test_item_property(self):
        item = AggregatedItem(quantity=0.75, unit="tsp", name="vanilla extract")
        assert item.display_text == "0.75 tsp vanilla extract"
