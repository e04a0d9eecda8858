"""Recipe category normalization."""

import re
from collections.abc import Iterable

STANDARD_CATEGORIES: list[str] = [
    "Italian",
    "Mexican",
    "Chinese",
    "Japanese",
    "Indian",
    "Thai",
    "Mediterranean",
    "American",
    "French",
    "Korean",
    "Vietnamese",
    "Middle Eastern",
    "Greek",
    "Spanish",
    "Asian",
    "Breakfast",
    "Dessert",
    "Appetizer",
    "Salad",
    "Soup",
    "Pasta",
    "Noodles",
    "Pizza",
    "Burger",
    "Sandwich",
    "BBQ",
    "Vegetarian",
    "Vegan",
    "Seafood",
]

DEFAULT_CATEGORY = "Other"

# None means "known but too generic to map"
CATEGORY_MAPPINGS: dict[str, str | None] = {
    # Cuisine variations
    "tex-mex": "Mexican",
    "latin": "Mexican",
    "latin american": "Mexican",
    "middle-eastern": "Middle Eastern",
    "mideast": "Middle Eastern",
    # Meal types
    "main course": None,
    "main dish": None,
    "entree": None,
    "entrée": None,
    "dinner": None,
    "lunch": None,
    "brunch": "Breakfast",
    "side dish": "Appetizer",
    "side": "Appetizer",
    # Pasta shapes
    "spaghetti": "Pasta",
    "linguine": "Pasta",
    "fettuccine": "Pasta",
    "penne": "Pasta",
    "ravioli": "Pasta",
    "lasagna": "Pasta",
    # Asian noodles stay out of Pasta
    "ramen": "Japanese",
    "udon": "Japanese",
    "soba": "Japanese",
    "pho": "Vietnamese",
    "pad thai": "Thai",
    "lo mein": "Chinese",
    "chow mein": "Chinese",
    "rice noodles": "Noodles",
    "egg noodles": "Noodles",
    # Dishes
    "stir fry": "Chinese",
    "stir-fry": "Chinese",
    "curry": "Indian",
    "taco": "Mexican",
    "burrito": "Mexican",
    "enchilada": "Mexican",
    "quesadilla": "Mexican",
    "sushi": "Japanese",
    "tempura": "Japanese",
    "teriyaki": "Japanese",
    "bibimbap": "Korean",
    "bulgogi": "Korean",
    "kimchi": "Korean",
    "kebab": "Middle Eastern",
    "shawarma": "Middle Eastern",
    "falafel": "Middle Eastern",
    "hummus": "Middle Eastern",
    "gyro": "Greek",
    "souvlaki": "Greek",
    "paella": "Spanish",
    "tapas": "Spanish",
    "crepe": "French",
    "croissant": "French",
    "quiche": "French",
    "coq au vin": "French",
    "ratatouille": "French",
    "risotto": "Italian",
    "carbonara": "Italian",
    "bruschetta": "Italian",
    "tiramisu": "Italian",
    # Seafood
    "fish": "Seafood",
    "shrimp": "Seafood",
    "shellfish": "Seafood",
    "crab": "Seafood",
    "lobster": "Seafood",
    "salmon": "Seafood",
    # Diets
    "plant-based": "Vegetarian",
    "meatless": "Vegetarian",
    "dairy-free": "Vegan",
    # Lowercase cuisines, so keyword matching finds them inside longer names
    "italian": "Italian",
    "mexican": "Mexican",
    "american": "American",
    "french": "French",
    "chinese": "Chinese",
    "japanese": "Japanese",
    "indian": "Indian",
    "thai": "Thai",
    "korean": "Korean",
    "vietnamese": "Vietnamese",
    "greek": "Greek",
    "spanish": "Spanish",
}

_FILLER_WORDS = re.compile(r"\b(cuisine|dish|food|style|recipe)\b", re.IGNORECASE)


def normalize_category(category: str | None, existing_categories: Iterable[str] = ()) -> str:
    """
    Normalize a free-form category to the standard set.

    Resolution order:
    1. A standard category (case-insensitive)
    2. A direct mapping
    3. A mapped keyword contained in the category
    4. A category the user already has (case-insensitive)
    5. The cleaned-up, title-cased input
    """
    if not category:
        return DEFAULT_CATEGORY

    cleaned = category.strip()
    lowered = cleaned.lower()

    for standard in STANDARD_CATEGORIES:
        if standard.lower() == lowered:
            return standard

    mapped = CATEGORY_MAPPINGS.get(lowered)
    if mapped is not None:
        return mapped

    for keyword, target in CATEGORY_MAPPINGS.items():
        if target and keyword in lowered:
            return target

    for existing in existing_categories:
        if existing.lower() == lowered:
            return existing

    stripped = " ".join(_FILLER_WORDS.sub("", cleaned).split())
    if stripped:
        return " ".join(word[:1].upper() + word[1:].lower() for word in stripped.split(" "))

    return DEFAULT_CATEGORY
