"""FastAPI dependencies shared by the routers."""

from collections.abc import Iterator

from fastapi import Depends
from sqlalchemy.orm import Session

from recipebox.database import get_db
from recipebox.plan.grocery_list import GroceryListAssembler
from recipebox.storage import RecipeBoxStorage, SqlKeyValueStore


def get_storage(db: Session = Depends(get_db)) -> Iterator[RecipeBoxStorage]:
    """Storage repository bound to the request's database session."""
    yield RecipeBoxStorage(SqlKeyValueStore(db))


def get_assembler(storage: RecipeBoxStorage = Depends(get_storage)) -> GroceryListAssembler:
    return GroceryListAssembler(storage)
