"""Unit tests for similar-recipe suggestions."""

import pytest

from recipebox.plan.similar import (
    find_similar_recipes,
    ingredient_signature,
    ingredient_similarity,
)
from recipebox.schemas import Recipe


class TestIngredientSignature:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("2 cups flour", "flour"),
            ("1 Cup Flour", "flour"),
            ("500g ground beef", "ground beef"),
            ("1/2 tsp vanilla extract", "vanilla extract"),
            ("1.5 lbs chicken thighs", "chicken thighs"),
            ("1 onion", "onion"),
        ],
    )
    def test_quantities_and_units_are_dropped(self, text, expected):
        assert ingredient_signature(text) == expected

    def test_unit_letters_inside_words_are_kept(self):
        assert ingredient_signature("2 garlic cloves") == "garlic cloves"


class TestIngredientSimilarity:
    def test_jaccard_over_signatures(self, lasagna, enchiladas):
        # flour and tomato sauce shared out of four distinct ingredients
        assert ingredient_similarity(lasagna.ingredients, enchiladas.ingredients) == 0.5

    def test_identical_lists(self):
        assert ingredient_similarity(["1 cup rice"], ["2 cups rice"]) == 1.0

    def test_empty_lists(self):
        assert ingredient_similarity([], []) == 0.0


class TestFindSimilarRecipes:
    """Tests for find_similar_recipes function."""

    @pytest.fixture
    def salad(self) -> Recipe:
        return Recipe(id=3, name="Salad", ingredients=["1 head lettuce", "2 tomatoes"])

    @pytest.fixture
    def lasagna_bake(self) -> Recipe:
        return Recipe(
            id="bake",
            name="Lasagna Bake",
            ingredients=["2 cups flour", "1 cup tomato sauce", "1 lb ground beef"],
        )

    def test_ranks_highest_score_first(self, lasagna, enchiladas, salad, lasagna_bake):
        matches = find_similar_recipes([lasagna], [enchiladas, salad, lasagna_bake])

        assert [match.recipe.name for match in matches] == ["Lasagna Bake", "Enchiladas"]
        assert [match.similarity for match in matches] == [1.0, 0.5]

    def test_selected_recipes_are_excluded(self, lasagna, enchiladas):
        matches = find_similar_recipes([lasagna], [lasagna, enchiladas])
        assert [match.recipe.id for match in matches] == [2]

    def test_threshold_is_inclusive(self, lasagna, enchiladas):
        assert len(find_similar_recipes([lasagna], [enchiladas], threshold=0.5)) == 1
        assert find_similar_recipes([lasagna], [enchiladas], threshold=0.51) == []

    def test_nothing_selected(self, enchiladas):
        assert find_similar_recipes([], [enchiladas]) == []

    def test_selected_ingredients_are_pooled(self, lasagna, salad):
        candidate = Recipe(
            id=9,
            name="Taco Salad",
            ingredients=["1 head lettuce", "500g ground beef"],
        )
        matches = find_similar_recipes([lasagna, salad], [candidate])

        # two shared out of lettuce, tomatoes, flour, tomato sauce, ground beef
        assert matches[0].similarity == pytest.approx(0.4)
