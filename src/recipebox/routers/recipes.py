"""API routes for the user's recipe collection."""

import time

from fastapi import APIRouter, Depends, HTTPException, Query, status

from recipebox.dependencies import get_storage
from recipebox.logging_config import get_logger
from recipebox.normalize.categories import normalize_category
from recipebox.schemas import Recipe, RecipeCreate
from recipebox.storage import RecipeBoxStorage

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])

ALL_CATEGORIES = "All"


# =============================================================================
# Helper Functions
# =============================================================================


def find_recipe(recipes: list[Recipe], recipe_id: str) -> Recipe | None:
    for recipe in recipes:
        if str(recipe.id) == recipe_id:
            return recipe
    return None


def new_recipe_id(recipes: list[Recipe]) -> int:
    """Millisecond timestamp, bumped past any existing numeric id."""
    candidate = int(time.time() * 1000)
    numeric_ids = [recipe.id for recipe in recipes if isinstance(recipe.id, int)]
    if numeric_ids and candidate <= max(numeric_ids):
        candidate = max(numeric_ids) + 1
    return candidate


def resolve_category(payload: RecipeCreate, recipes: list[Recipe]) -> str:
    existing = {recipe.category for recipe in recipes}
    return normalize_category(payload.category, existing)


# =============================================================================
# Endpoints
# =============================================================================


@router.get("", response_model=list[Recipe])
def list_recipes(
    category: str | None = Query(None, description="Only recipes in this category"),
    storage: RecipeBoxStorage = Depends(get_storage),
) -> list[Recipe]:
    """List saved recipes, optionally filtered by category."""
    recipes = storage.load_recipes()
    if not category or category == ALL_CATEGORIES:
        return recipes
    wanted = category.strip().lower()
    return [recipe for recipe in recipes if recipe.category.lower() == wanted]


@router.post("", response_model=Recipe, status_code=status.HTTP_201_CREATED)
def add_recipe(
    payload: RecipeCreate,
    storage: RecipeBoxStorage = Depends(get_storage),
) -> Recipe:
    """Add a recipe; its category is normalized against the standard set."""
    recipes = storage.load_recipes()
    recipe_id = new_recipe_id(recipes)

    recipe = Recipe(
        **payload.model_dump(exclude={"category"}),
        id=recipe_id,
        category=resolve_category(payload, recipes),
        created_at=recipe_id,
    )
    recipes.append(recipe)
    storage.save_recipes(recipes)

    logger.info(f"Added recipe {recipe.id}: {recipe.name} ({recipe.category})")
    return recipe


@router.get("/{recipe_id}", response_model=Recipe)
def get_recipe(
    recipe_id: str,
    storage: RecipeBoxStorage = Depends(get_storage),
) -> Recipe:
    """Get a single recipe."""
    recipe = find_recipe(storage.load_recipes(), recipe_id)
    if not recipe:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Recipe not found: {recipe_id}",
        )
    return recipe


@router.put("/{recipe_id}", response_model=Recipe)
def update_recipe(
    recipe_id: str,
    payload: RecipeCreate,
    storage: RecipeBoxStorage = Depends(get_storage),
) -> Recipe:
    """Replace a recipe's fields, keeping its id and creation time."""
    recipes = storage.load_recipes()
    existing = find_recipe(recipes, recipe_id)
    if not existing:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Recipe not found: {recipe_id}",
        )

    category = existing.category
    if payload.category is not None:
        category = resolve_category(payload, recipes)
    updated = Recipe(
        **payload.model_dump(exclude={"category"}),
        id=existing.id,
        category=category,
        created_at=existing.created_at,
    )
    recipes = [updated if recipe is existing else recipe for recipe in recipes]
    storage.save_recipes(recipes)

    logger.info(f"Updated recipe {recipe_id}")
    return updated


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(
    recipe_id: str,
    storage: RecipeBoxStorage = Depends(get_storage),
) -> None:
    """Delete a recipe."""
    recipes = storage.load_recipes()
    if not find_recipe(recipes, recipe_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Recipe not found: {recipe_id}",
        )

    storage.save_recipes([recipe for recipe in recipes if str(recipe.id) != recipe_id])
    logger.info(f"Deleted recipe {recipe_id}")
