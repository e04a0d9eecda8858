"""Ingredient line parsing and unit normalization."""

import math
import re
from dataclasses import dataclass

from recipebox.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Unit Vocabulary
# =============================================================================

# Every accepted unit spelling mapped to its canonical token
UNIT_SYNONYMS: dict[str, str] = {
    "cup": "cup",
    "cups": "cup",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "tbsp": "tbsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tsp": "tsp",
    "oz": "oz",
    "ounce": "oz",
    "ounces": "oz",
    "pound": "lb",
    "pounds": "lb",
    "lb": "lb",
    "lbs": "lb",
    "kg": "kg",
    "g": "g",
    "ml": "ml",
    "l": "l",
}

CANONICAL_UNITS: frozenset[str] = frozenset(UNIT_SYNONYMS.values())


@dataclass(frozen=True)
class ParsedIngredient:
    """A free-text ingredient line split into quantity, unit and name."""

    quantity: float
    unit: str
    name: str
    original_text: str


# =============================================================================
# Tokenizer
# =============================================================================

_NUMBER_TOKEN = re.compile(r"\d+(?:/\d+)?(?:\.\d+)?")
_MIXED_FRACTION_TOKEN = re.compile(r"\s+(\d+)/(\d+)\b")
_WORD_TOKEN = re.compile(r"\s*([A-Za-z]+)\b")


def normalize_unit(raw_unit: str) -> str:
    """
    Map a unit spelling to its canonical token.

    Unknown units are returned lowercased, so the vocabulary stays open.
    """
    unit = raw_unit.strip().lower()
    return UNIT_SYNONYMS.get(unit, unit)


def _parse_number(token: str) -> float:
    """Evaluate an integer, decimal or ``a/b`` token; non-finite results raise ValueError."""
    if "/" in token:
        numerator, denominator = token.split("/", 1)
        value = float(numerator) / float(denominator)
    else:
        value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"Quantity out of range: {token!r}")
    return value


def _match_unit(word: str) -> str | None:
    """Return the vocabulary spelling for ``word``, tolerating a trailing 's'."""
    lowered = word.lower()
    if lowered in UNIT_SYNONYMS:
        return lowered
    if lowered.endswith("s") and lowered[:-1] in UNIT_SYNONYMS:
        return lowered[:-1]
    return None


def _fallback(text: str) -> ParsedIngredient:
    return ParsedIngredient(
        quantity=1.0,
        unit="",
        name=text.strip().lower(),
        original_text=text,
    )


def _name_after(text: str, position: int) -> str:
    """Return the lowercased name after ``position``, or "" if not whitespace-separated."""
    remainder = text[position:]
    if not remainder[:1].isspace():
        return ""
    return remainder.strip().lower()


def parse_ingredient(text: str) -> ParsedIngredient:
    """
    Parse a free-text ingredient line.

    The line is read as three tokens: a leading quantity (integer, decimal,
    simple fraction or mixed number), an optional unit from the fixed
    vocabulary, and the remaining ingredient name. Lines without a leading
    quantity, or without a name after it, become a unit-less count of one
    named by the whole line.

    Examples:
        "2 cups flour" -> (2.0, "cup", "flour")
        "400g spaghetti" -> (400.0, "g", "spaghetti")
        "2 1/2 cups flour" -> (2.5, "cup", "flour")
        "salt" -> (1.0, "", "salt")
    """
    stripped = text.strip()

    number = _NUMBER_TOKEN.match(stripped)
    if not number:
        return _fallback(text)

    position = number.end()
    mixed = None
    if "/" not in number.group():
        mixed = _MIXED_FRACTION_TOKEN.match(stripped, position)

    try:
        quantity = _parse_number(number.group())
        if mixed:
            quantity += _parse_number(f"{mixed.group(1)}/{mixed.group(2)}")
            if not math.isfinite(quantity):
                raise ValueError(f"Quantity out of range: {text!r}")
    except (ZeroDivisionError, OverflowError, ValueError) as e:
        logger.debug(f"Unusable ingredient quantity in {text!r}: {e}")
        return _fallback(text)

    if mixed:
        position = mixed.end()

    # "2 tbsp. oil" keeps "tbsp. oil" as the name rather than dropping the line
    word = _WORD_TOKEN.match(stripped, position)
    if word:
        spelling = _match_unit(word.group(1))
        if spelling is not None:
            name = _name_after(stripped, word.end())
            if name:
                return ParsedIngredient(
                    quantity=quantity,
                    unit=normalize_unit(spelling),
                    name=name,
                    original_text=text,
                )

    name = _name_after(stripped, position)
    if not name:
        return _fallback(text)

    return ParsedIngredient(
        quantity=quantity,
        unit="",
        name=name,
        original_text=text,
    )
