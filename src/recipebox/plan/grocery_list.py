"""Grocery list generation from the weekly meal plan."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from recipebox.logging_config import get_logger
from recipebox.normalize.aggregate import AggregatedItem, IngredientLine, combine_ingredients
from recipebox.plan.pantry import is_grocery_item, normalize_staples
from recipebox.schemas import WeeklyMealPlan

if TYPE_CHECKING:
    from recipebox.storage.repository import RecipeBoxStorage

logger = get_logger(__name__)

ALL_ITEMS_GROUP = "All Items"


@dataclass
class GroceryList:
    """Display-ready grocery list."""

    items: list[AggregatedItem] = field(default_factory=list)
    group_by_category: bool = False

    @property
    def groups(self) -> dict[str, list[AggregatedItem]]:
        """
        Items keyed by group label.

        When grouping by category an item appears under every category it
        was sourced from; otherwise everything sits in a single group.
        """
        if not self.group_by_category:
            return {ALL_ITEMS_GROUP: list(self.items)}

        grouped: dict[str, list[AggregatedItem]] = {}
        for item in self.items:
            for category in item.categories:
                grouped.setdefault(category, []).append(item)
        return grouped

    @property
    def checked_count(self) -> int:
        return sum(1 for item in self.items if item.checked)

    @property
    def total_count(self) -> int:
        return len(self.items)


def flatten_meal_plan(plan: WeeklyMealPlan) -> list[IngredientLine]:
    """Turn the weekly plan into ingredient lines tagged with their recipe."""
    return [
        IngredientLine(text=text, recipe_category=recipe.category, recipe_name=recipe.name)
        for recipe in plan.recipes()
        for text in recipe.ingredients
    ]


def apply_checked_state(items: Iterable[AggregatedItem], checked: dict[str, bool]) -> None:
    """Copy persisted check marks onto freshly aggregated items."""
    for item in items:
        item.checked = checked.get(item.key, False)


def build_grocery_list(
    plan: WeeklyMealPlan,
    staples: Iterable[str],
    checked: dict[str, bool],
    group_by_category: bool = False,
) -> GroceryList:
    """
    Run the full pipeline over a meal plan.

    Args:
        plan: Weekly meal plan.
        staples: Pantry staples to leave off the list.
        checked: Persisted check marks keyed by item key.
        group_by_category: Group items by recipe category for display.

    Returns:
        GroceryList with check marks applied.
    """
    staples = list(staples)
    lines = flatten_meal_plan(plan)
    needed = [line for line in lines if is_grocery_item(line.text, staples)]

    items = combine_ingredients(needed)
    apply_checked_state(items, checked)

    logger.info(
        f"Built grocery list: {len(lines)} lines, {len(lines) - len(needed)} staples skipped, "
        f"{len(items)} items"
    )

    return GroceryList(items=items, group_by_category=group_by_category)


class GroceryListAssembler:
    """
    Builds the grocery list from persisted state and records check marks.

    Recomputing never discards check marks for items that still exist;
    marks for items no longer in the plan stay in storage but are not shown.
    """

    def __init__(self, storage: "RecipeBoxStorage"):
        self.storage = storage

    def build(self, group_by_category: bool = False) -> GroceryList:
        """Compute the grocery list from the current plan, staples and check marks."""
        return build_grocery_list(
            plan=self.storage.load_meal_plan(),
            staples=self.storage.load_pantry_staples(),
            checked=self.storage.load_checked_items(),
            group_by_category=group_by_category,
        )

    def toggle_item(self, key: str) -> dict[str, bool]:
        """Flip one item's check mark and persist the whole map."""
        checked = self.storage.load_checked_items()
        checked[key] = not checked.get(key, False)
        self.storage.save_checked_items(checked)
        logger.info(f"Toggled grocery item {key} -> {checked[key]}")
        return checked

    def clear_checked(self) -> dict[str, bool]:
        """Reset all check marks."""
        self.storage.save_checked_items({})
        logger.info("Cleared checked grocery items")
        return {}

    def update_pantry_staples(
        self,
        staples: Iterable[str],
        group_by_category: bool = False,
    ) -> GroceryList:
        """Save a new staples set and recompute the list with it."""
        cleaned = normalize_staples(staples)
        self.storage.save_pantry_staples(cleaned)
        logger.info(f"Updated pantry staples: {len(cleaned)} entries")

        return build_grocery_list(
            plan=self.storage.load_meal_plan(),
            staples=cleaned,
            checked=self.storage.load_checked_items(),
            group_by_category=group_by_category,
        )
