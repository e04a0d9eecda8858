"""Pantry staples: ingredients the user always has on hand."""

from collections.abc import Iterable

# Seeded on first use, before the user has customized their pantry
DEFAULT_PANTRY_STAPLES: list[str] = [
    "water",
    "salt",
    "black pepper",
    "olive oil",
    "vegetable oil",
    "canola oil",
    "cooking spray",
    "sugar",
    "brown sugar",
    "flour",
    "all-purpose flour",
    "baking soda",
    "baking powder",
    "vanilla extract",
    "cinnamon",
    "paprika",
    "cumin",
    "chili powder",
    "garlic powder",
    "onion powder",
    "oregano",
    "dried basil",
    "dried thyme",
    "red pepper flakes",
    "bay leaves",
    "soy sauce",
    "worcestershire sauce",
    "white vinegar",
    "apple cider vinegar",
    "balsamic vinegar",
    "red wine vinegar",
]

# Longer lines name something more specific than the staple they contain
MAX_STAPLE_WORDS = 3


def is_grocery_item(text: str, staples: Iterable[str]) -> bool:
    """
    Decide whether an ingredient line belongs on the shopping list.

    A line is treated as a staple, and left off the list, when it contains a
    staple and is at most three words long. "2 tbsp pink himalayan salt for
    finishing" stays on the list even though it contains "salt".
    """
    lowered = text.lower()
    if len(lowered.split()) > MAX_STAPLE_WORDS:
        return True
    return not any(staple and staple in lowered for staple in staples)


def normalize_staples(values: Iterable[str]) -> list[str]:
    """Lowercase and trim staples, dropping blanks and duplicates."""
    staples: list[str] = []
    for value in values:
        staple = value.strip().lower()
        if staple and staple not in staples:
            staples.append(staple)
    return staples
