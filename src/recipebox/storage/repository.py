"""Typed access to persisted recipe-box state."""

import json
from typing import Any

from pydantic import ValidationError

from recipebox.config import get_settings
from recipebox.logging_config import LoggingContext, get_logger
from recipebox.plan.pantry import DEFAULT_PANTRY_STAPLES
from recipebox.schemas import DietaryPreferences, Recipe, WeeklyMealPlan
from recipebox.storage.base import KeyValueStore, StorageError
from recipebox.storage.samples import SAMPLE_RECIPES

logger = get_logger(__name__)

MEAL_PLAN_KEY = "weekly-meal-plan"
CHECKED_ITEMS_KEY = "grocery-list-checked"
PANTRY_STAPLES_KEY = "pantry-staples"
RECIPES_KEY = "recipes"
PREFERENCES_KEY = "dietary-preferences"


class RecipeBoxStorage:
    """
    Repository over a KeyValueStore.

    Values are stored as JSON text. A missing, unreadable or corrupt entry is
    logged and replaced by its default; writes report failure as False
    instead of raising.
    """

    def __init__(self, store: KeyValueStore, seed_sample_recipes: bool | None = None):
        self.store = store
        if seed_sample_recipes is None:
            seed_sample_recipes = get_settings().seed_sample_recipes
        self.seed_sample_recipes = seed_sample_recipes

    # =========================================================================
    # Raw JSON access
    # =========================================================================

    def _read_json(self, key: str) -> Any | None:
        """Return the decoded value under ``key``, or None if absent or unreadable."""
        with LoggingContext(storage_key=key):
            try:
                raw = self.store.get(key)
            except StorageError as e:
                logger.error(f"Storage get error ({self.store.name}): {e}")
                return None

            if raw is None:
                return None

            try:
                return json.loads(raw)
            except ValueError as e:
                logger.warning(f"Discarding corrupt entry: {e}")
                return None

    def _write_json(self, key: str, value: Any) -> bool:
        with LoggingContext(storage_key=key):
            try:
                self.store.set(key, json.dumps(value))
            except StorageError as e:
                logger.error(f"Storage set error ({self.store.name}): {e}")
                return False
            return True

    # =========================================================================
    # Meal plan
    # =========================================================================

    def load_meal_plan(self) -> WeeklyMealPlan:
        """Load the weekly plan, skipping recipe records that fail validation."""
        data = self._read_json(MEAL_PLAN_KEY)
        if not isinstance(data, dict):
            if data is not None:
                logger.warning(f"Meal plan is not a mapping: {type(data).__name__}")
            return WeeklyMealPlan()

        days: dict[str, list[Recipe]] = {}
        for day, records in data.items():
            if not isinstance(records, list):
                logger.warning(f"Ignoring meal plan day {day}: expected a list")
                continue
            days[day] = self._validate_recipes(records, context=f"meal plan day {day}")

        return WeeklyMealPlan(days)

    def save_meal_plan(self, plan: WeeklyMealPlan) -> bool:
        return self._write_json(MEAL_PLAN_KEY, plan.model_dump(mode="json", by_alias=True))

    # =========================================================================
    # Pantry staples
    # =========================================================================

    def load_pantry_staples(self) -> list[str]:
        """Load staples, seeding the default set the first time."""
        data = self._read_json(PANTRY_STAPLES_KEY)
        if isinstance(data, list) and all(isinstance(item, str) for item in data):
            return data

        if data is not None:
            logger.warning("Pantry staples entry is malformed, using defaults")

        staples = list(DEFAULT_PANTRY_STAPLES)
        self.save_pantry_staples(staples)
        logger.info(f"Seeded {len(staples)} default pantry staples")
        return staples

    def save_pantry_staples(self, staples: list[str]) -> bool:
        return self._write_json(PANTRY_STAPLES_KEY, staples)

    # =========================================================================
    # Checked grocery items
    # =========================================================================

    def load_checked_items(self) -> dict[str, bool]:
        data = self._read_json(CHECKED_ITEMS_KEY)
        if not isinstance(data, dict):
            if data is not None:
                logger.warning("Checked items entry is not a mapping, starting empty")
            return {}
        return {str(key): value for key, value in data.items() if isinstance(value, bool)}

    def save_checked_items(self, checked: dict[str, bool]) -> bool:
        return self._write_json(CHECKED_ITEMS_KEY, checked)

    # =========================================================================
    # Recipes
    # =========================================================================

    def load_recipes(self) -> list[Recipe]:
        """Load saved recipes, seeding the samples into an empty store."""
        data = self._read_json(RECIPES_KEY)
        if isinstance(data, list):
            return self._validate_recipes(data, context="recipes")

        if data is not None:
            logger.warning("Recipes entry is not a list, starting over")

        if not self.seed_sample_recipes:
            return []

        recipes = self._validate_recipes(SAMPLE_RECIPES, context="sample recipes")
        self.save_recipes(recipes)
        logger.info(f"Seeded {len(recipes)} sample recipes")
        return recipes

    def save_recipes(self, recipes: list[Recipe]) -> bool:
        return self._write_json(
            RECIPES_KEY,
            [recipe.model_dump(mode="json", by_alias=True) for recipe in recipes],
        )

    # =========================================================================
    # Dietary preferences
    # =========================================================================

    def load_preferences(self) -> DietaryPreferences | None:
        data = self._read_json(PREFERENCES_KEY)
        if data is None:
            return None
        try:
            return DietaryPreferences.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Discarding invalid dietary preferences: {e.error_count()} errors")
            return None

    def save_preferences(self, preferences: DietaryPreferences) -> bool:
        return self._write_json(PREFERENCES_KEY, preferences.model_dump(by_alias=True))

    def clear_preferences(self) -> bool:
        with LoggingContext(storage_key=PREFERENCES_KEY):
            try:
                self.store.delete(PREFERENCES_KEY)
            except StorageError as e:
                logger.error(f"Storage delete error ({self.store.name}): {e}")
                return False
            return True

    # =========================================================================
    # Helpers
    # =========================================================================

    def _validate_recipes(self, records: list[Any], context: str) -> list[Recipe]:
        recipes: list[Recipe] = []
        for record in records:
            try:
                recipes.append(Recipe.model_validate(record))
            except ValidationError as e:
                logger.warning(f"Skipping invalid recipe in {context}: {e.error_count()} errors")
        return recipes
