"""Suggest recipes that share ingredients with a day's planned meals."""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from recipebox.logging_config import get_logger
from recipebox.normalize.units import UNIT_SYNONYMS
from recipebox.schemas import Recipe

logger = get_logger(__name__)

SIMILARITY_THRESHOLD = 0.3

_QUANTITY = re.compile(r"[\d/.]+")
_UNIT_WORDS = re.compile(
    r"\b(" + "|".join(sorted(UNIT_SYNONYMS, key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)


@dataclass
class SimilarRecipe:
    """Candidate recipe with its ingredient overlap score."""

    recipe: Recipe
    similarity: float


def ingredient_signature(text: str) -> str:
    """
    Reduce an ingredient line to the part that names the ingredient.

    Quantities and unit words are dropped, so "2 cups flour" and
    "1 cup flour" compare equal.
    """
    without_units = _UNIT_WORDS.sub(" ", _QUANTITY.sub(" ", text.lower()))
    return " ".join(without_units.split())


def ingredient_similarity(first: Iterable[str], second: Iterable[str]) -> float:
    """Jaccard similarity of two ingredient lists; 0.0 when both are empty."""
    first_set = {ingredient_signature(text) for text in first}
    second_set = {ingredient_signature(text) for text in second}
    union = first_set | second_set
    if not union:
        return 0.0
    return len(first_set & second_set) / len(union)


def find_similar_recipes(
    selected: list[Recipe],
    candidates: Iterable[Recipe],
    threshold: float = SIMILARITY_THRESHOLD,
) -> list[SimilarRecipe]:
    """
    Rank candidates by how many ingredients they share with the selected recipes.

    The selected recipes' ingredients are pooled into one set. Candidates
    already selected are skipped, scores below ``threshold`` are dropped,
    and the rest are returned highest score first (ties keep candidate order).
    """
    if not selected:
        return []

    selected_ids = {str(recipe.id) for recipe in selected}
    pooled = [text for recipe in selected for text in recipe.ingredients]

    matches = []
    for candidate in candidates:
        if str(candidate.id) in selected_ids:
            continue
        score = ingredient_similarity(pooled, candidate.ingredients)
        if score >= threshold:
            matches.append(SimilarRecipe(recipe=candidate, similarity=score))

    # Sort by score (highest first)
    matches.sort(key=lambda match: match.similarity, reverse=True)

    logger.debug(f"Found {len(matches)} similar recipes for {len(selected)} selected")
    return matches
