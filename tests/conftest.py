"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from recipebox.database import Base, build_engine
from recipebox.dependencies import get_storage
from recipebox.main import app
from recipebox.schemas import Recipe, WeeklyMealPlan
from recipebox.storage import InMemoryStore, RecipeBoxStorage

# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def lasagna() -> Recipe:
    return Recipe(
        id=1,
        name="Lasagna",
        category="Italian",
        ingredients=["1 cup flour", "2 cups tomato sauce", "500g ground beef"],
    )


@pytest.fixture
def enchiladas() -> Recipe:
    return Recipe(
        id=2,
        name="Enchiladas",
        category="Mexican",
        ingredients=["2 cups flour", "1 cup tomato sauce", "1 onion"],
    )


@pytest.fixture
def weekly_plan(lasagna, enchiladas) -> WeeklyMealPlan:
    return WeeklyMealPlan({"monday": [lasagna], "wednesday": [enchiladas]})


# =============================================================================
# Storage Fixtures
# =============================================================================


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def storage(memory_store) -> RecipeBoxStorage:
    """Repository over an empty in-memory store, without sample recipes."""
    return RecipeBoxStorage(memory_store, seed_sample_recipes=False)


@pytest.fixture
def planned_storage(storage, weekly_plan) -> RecipeBoxStorage:
    """Repository holding the weekly plan and a staples set without flour."""
    storage.save_meal_plan(weekly_plan)
    storage.save_pantry_staples(["salt", "olive oil"])
    return storage


@pytest.fixture
def sql_session():
    """Session on a fresh in-memory SQLite database."""
    from recipebox import models  # noqa: F401

    engine = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    Base.metadata.drop_all(engine)
    engine.dispose()


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client(storage):
    """Test client whose endpoints all share the in-memory repository."""
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()
