"""API routes for the weekly meal plan."""

from fastapi import APIRouter, Depends, Query

from recipebox.dependencies import get_storage
from recipebox.logging_config import get_logger
from recipebox.plan.similar import SIMILARITY_THRESHOLD, find_similar_recipes
from recipebox.schemas import Recipe, SimilarRecipeResponse, WeeklyMealPlan
from recipebox.storage import RecipeBoxStorage

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/meal-plan", tags=["meal-plan"])


@router.get("", response_model=dict[str, list[Recipe]])
def get_meal_plan(storage: RecipeBoxStorage = Depends(get_storage)) -> dict[str, list[Recipe]]:
    """Return the weekly meal plan, keyed by day."""
    return storage.load_meal_plan().root


@router.put("", response_model=dict[str, list[Recipe]])
def replace_meal_plan(
    days: dict[str, list[Recipe]],
    storage: RecipeBoxStorage = Depends(get_storage),
) -> dict[str, list[Recipe]]:
    """Replace the whole weekly meal plan."""
    plan = WeeklyMealPlan({day.lower(): recipes for day, recipes in days.items()})
    logger.info(f"Replacing meal plan: {len(plan.recipes())} recipes over {len(plan.root)} days")
    storage.save_meal_plan(plan)
    return plan.root


@router.put("/{day}", response_model=dict[str, list[Recipe]])
def set_day_recipes(
    day: str,
    recipes: list[Recipe],
    storage: RecipeBoxStorage = Depends(get_storage),
) -> dict[str, list[Recipe]]:
    """Set the recipes planned for one day; an empty list clears the day."""
    plan = storage.load_meal_plan()
    day_key = day.lower()
    if recipes:
        plan.root[day_key] = recipes
    else:
        plan.root.pop(day_key, None)

    logger.info(f"Planned {len(recipes)} recipes for {day_key}")
    storage.save_meal_plan(plan)
    return plan.root


@router.get("/{day}/similar", response_model=list[SimilarRecipeResponse])
def get_similar_recipes(
    day: str,
    threshold: float = Query(SIMILARITY_THRESHOLD, ge=0.0, le=1.0),
    storage: RecipeBoxStorage = Depends(get_storage),
) -> list[SimilarRecipeResponse]:
    """Suggest saved recipes sharing ingredients with the recipes planned for a day."""
    selected = storage.load_meal_plan().root.get(day.lower(), [])
    matches = find_similar_recipes(selected, storage.load_recipes(), threshold=threshold)
    return [
        SimilarRecipeResponse(recipe=match.recipe, similarity=match.similarity)
        for match in matches
    ]
