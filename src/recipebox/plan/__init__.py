"""Pantry filtering and grocery list assembly."""

from recipebox.plan.grocery_list import (
    ALL_ITEMS_GROUP,
    GroceryList,
    GroceryListAssembler,
    build_grocery_list,
    flatten_meal_plan,
)
from recipebox.plan.pantry import (
    DEFAULT_PANTRY_STAPLES,
    is_grocery_item,
    normalize_staples,
)
from recipebox.plan.similar import (
    SIMILARITY_THRESHOLD,
    SimilarRecipe,
    find_similar_recipes,
    ingredient_similarity,
)

__all__ = [
    "ALL_ITEMS_GROUP",
    "DEFAULT_PANTRY_STAPLES",
    "GroceryList",
    "GroceryListAssembler",
    "SIMILARITY_THRESHOLD",
    "SimilarRecipe",
    "build_grocery_list",
    "find_similar_recipes",
    "flatten_meal_plan",
    "ingredient_similarity",
    "is_grocery_item",
    "normalize_staples",
]
