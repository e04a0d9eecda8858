"""API routers for the recipebox application."""

from recipebox.routers.grocery_list import router as grocery_list_router
from recipebox.routers.meal_plan import router as meal_plan_router
from recipebox.routers.preferences import router as preferences_router
from recipebox.routers.recipes import router as recipes_router

__all__ = [
    "grocery_list_router",
    "meal_plan_router",
    "preferences_router",
    "recipes_router",
]
