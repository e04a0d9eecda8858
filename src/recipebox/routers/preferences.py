"""API routes for dietary preferences."""

from fastapi import APIRouter, Depends, HTTPException, status

from recipebox.dependencies import get_storage
from recipebox.logging_config import get_logger
from recipebox.schemas import DietaryPreferences
from recipebox.storage import RecipeBoxStorage

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/preferences", tags=["preferences"])


@router.get("", response_model=DietaryPreferences)
def get_preferences(storage: RecipeBoxStorage = Depends(get_storage)) -> DietaryPreferences:
    """Return saved preferences; 404 until the user has set them."""
    preferences = storage.load_preferences()
    if preferences is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No dietary preferences saved",
        )
    return preferences


@router.put("", response_model=DietaryPreferences)
def save_preferences(
    preferences: DietaryPreferences,
    storage: RecipeBoxStorage = Depends(get_storage),
) -> DietaryPreferences:
    logger.info(
        f"Saving preferences: {len(preferences.dietary_restrictions)} restrictions, "
        f"{len(preferences.allergies)} allergies"
    )
    storage.save_preferences(preferences)
    return preferences


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def clear_preferences(storage: RecipeBoxStorage = Depends(get_storage)) -> None:
    storage.clear_preferences()
