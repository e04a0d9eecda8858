"""Key-value persistence for recipes, meal plans and grocery-list state."""

from recipebox.storage.base import KeyValueStore, StorageError
from recipebox.storage.memory import InMemoryStore
from recipebox.storage.repository import (
    CHECKED_ITEMS_KEY,
    MEAL_PLAN_KEY,
    PANTRY_STAPLES_KEY,
    PREFERENCES_KEY,
    RECIPES_KEY,
    RecipeBoxStorage,
)
from recipebox.storage.sql import SqlKeyValueStore

__all__ = [
    "CHECKED_ITEMS_KEY",
    "InMemoryStore",
    "KeyValueStore",
    "MEAL_PLAN_KEY",
    "PANTRY_STAPLES_KEY",
    "PREFERENCES_KEY",
    "RECIPES_KEY",
    "RecipeBoxStorage",
    "SqlKeyValueStore",
    "StorageError",
]
