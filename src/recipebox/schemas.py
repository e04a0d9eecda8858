"""Record schemas validated at the storage boundary."""

from typing import Literal

from pydantic import BaseModel, Field, RootModel

from recipebox.normalize.categories import DEFAULT_CATEGORY


class Recipe(BaseModel):
    """Recipe with ingredients and instructions."""

    id: int | str
    name: str
    category: str = DEFAULT_CATEGORY
    servings: str | None = None
    prep_time: str | None = Field(None, alias="prepTime")
    cook_time: str | None = Field(None, alias="cookTime")
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    created_at: int | None = Field(None, alias="createdAt")

    model_config = {"populate_by_name": True}


class RecipeCreate(BaseModel):
    """Payload for adding or replacing a recipe; the id is assigned by the server."""

    name: str = Field(min_length=1)
    category: str | None = None
    servings: str | None = None
    prep_time: str | None = Field(None, alias="prepTime")
    cook_time: str | None = Field(None, alias="cookTime")
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class WeeklyMealPlan(RootModel[dict[str, list[Recipe]]]):
    """Mapping from day key (e.g. "monday") to the recipes planned that day."""

    root: dict[str, list[Recipe]] = Field(default_factory=dict)

    def recipes(self) -> list[Recipe]:
        """All planned recipes in day order."""
        return [recipe for day in self.root.values() for recipe in day]


class DietaryPreferences(BaseModel):
    """User dietary preferences."""

    dietary_restrictions: list[str] = Field(default_factory=list, alias="dietaryRestrictions")
    allergies: list[str] = Field(default_factory=list)
    cuisine_preferences: list[str] = Field(default_factory=list, alias="cuisinePreferences")
    skill_level: Literal["beginner", "intermediate", "advanced"] = Field(
        "intermediate", alias="skillLevel"
    )
    spice_level: Literal["mild", "medium", "spicy"] = Field("medium", alias="spiceLevel")
    avoid_ingredients: list[str] = Field(default_factory=list, alias="avoidIngredients")

    model_config = {"populate_by_name": True}


class PantryStaplesPayload(BaseModel):
    """Replacement set of pantry staples."""

    staples: list[str]


class GroceryItemResponse(BaseModel):
    """Single item in the grocery list."""

    key: str
    display: str
    quantity: float
    unit: str
    name: str
    sources: list[str]
    recipes: list[str]
    categories: list[str]
    checked: bool


class GroceryListResponse(BaseModel):
    """Consolidated grocery list for the weekly plan."""

    items: list[GroceryItemResponse]
    groups: dict[str, list[GroceryItemResponse]]
    group_by_category: bool
    checked_count: int
    total_count: int


class SimilarRecipeResponse(BaseModel):
    """Recipe suggested for a day, with its ingredient overlap score."""

    recipe: Recipe
    similarity: float
