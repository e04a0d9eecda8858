"""Normalize ingredient lines, units and recipe categories."""

from recipebox.normalize.aggregate import (
    AggregatedItem,
    IngredientLine,
    combine_ingredients,
    format_display_text,
)
from recipebox.normalize.categories import normalize_category
from recipebox.normalize.units import (
    CANONICAL_UNITS,
    UNIT_SYNONYMS,
    ParsedIngredient,
    normalize_unit,
    parse_ingredient,
)

__all__ = [
    "AggregatedItem",
    "CANONICAL_UNITS",
    "IngredientLine",
    "ParsedIngredient",
    "UNIT_SYNONYMS",
    "combine_ingredients",
    "format_display_text",
    "normalize_category",
    "normalize_unit",
    "parse_ingredient",
]
