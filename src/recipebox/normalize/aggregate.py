"""Ingredient aggregation across planned recipes."""

from dataclasses import dataclass, field

from recipebox.logging_config import get_logger
from recipebox.normalize.units import parse_ingredient

logger = get_logger(__name__)


@dataclass(frozen=True)
class IngredientLine:
    """A raw ingredient line with the recipe it came from."""

    text: str
    recipe_category: str
    recipe_name: str


@dataclass
class AggregatedItem:
    """All occurrences of one ingredient sharing a name and canonical unit."""

    quantity: float
    unit: str
    name: str
    sources: list[str] = field(default_factory=list)
    recipe_names: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    checked: bool = False

    @property
    def key(self) -> str:
        """Stable identifier used for checked state."""
        return item_key(self.name, self.unit)

    @property
    def display_text(self) -> str:
        """Human-readable line, e.g. "2.5 cup flour" or "salt"."""
        return format_display_text(self.quantity, self.unit, self.name)

    def fold(self, line: IngredientLine, quantity: float) -> None:
        """Add another occurrence of this ingredient."""
        self.quantity += quantity
        self.sources.append(line.text)
        if line.recipe_name not in self.recipe_names:
            self.recipe_names.append(line.recipe_name)
        if line.recipe_category not in self.categories:
            self.categories.append(line.recipe_category)


def item_key(name: str, unit: str) -> str:
    return f"{name}-{unit}"


def format_quantity(quantity: float) -> str:
    """Round to two decimals and drop trailing zeros."""
    return f"{quantity:.2f}".rstrip("0").rstrip(".")


def format_display_text(quantity: float, unit: str, name: str) -> str:
    """
    Build the display line for an aggregated item.

    The quantity is omitted when it is 1 (or not positive) and the unit is
    omitted when empty.
    """
    parts = []
    if quantity > 0 and quantity != 1:
        parts.append(format_quantity(quantity))
    if unit:
        parts.append(unit)
    if name:
        parts.append(name)
    return " ".join(parts)


def combine_ingredients(lines: list[IngredientLine]) -> list[AggregatedItem]:
    """
    Merge ingredient lines by (name, canonical unit).

    Args:
        lines: Ingredient lines with provenance, in plan order.

    Returns:
        One AggregatedItem per distinct key, in first-encounter order.
    """
    combined: dict[str, AggregatedItem] = {}

    for line in lines:
        parsed = parse_ingredient(line.text)
        key = item_key(parsed.name, parsed.unit)

        if key in combined:
            combined[key].fold(line, parsed.quantity)
        else:
            combined[key] = AggregatedItem(
                quantity=parsed.quantity,
                unit=parsed.unit,
                name=parsed.name,
                sources=[line.text],
                recipe_names=[line.recipe_name],
                categories=[line.recipe_category],
            )

    logger.debug(f"Combined {len(lines)} ingredient lines into {len(combined)} items")

    return list(combined.values())
