"""API routes for the weekly grocery list and pantry staples."""

from fastapi import APIRouter, Depends, Query

from recipebox.dependencies import get_assembler, get_storage
from recipebox.logging_config import get_logger
from recipebox.normalize.aggregate import AggregatedItem
from recipebox.plan.grocery_list import GroceryList, GroceryListAssembler
from recipebox.schemas import GroceryItemResponse, GroceryListResponse, PantryStaplesPayload
from recipebox.storage import RecipeBoxStorage

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/grocery-list", tags=["grocery-list"])


# =============================================================================
# Helper Functions
# =============================================================================


def to_item_response(item: AggregatedItem) -> GroceryItemResponse:
    return GroceryItemResponse(
        key=item.key,
        display=item.display_text,
        quantity=item.quantity,
        unit=item.unit,
        name=item.name,
        sources=list(item.sources),
        recipes=list(item.recipe_names),
        categories=list(item.categories),
        checked=item.checked,
    )


def to_list_response(grocery_list: GroceryList) -> GroceryListResponse:
    return GroceryListResponse(
        items=[to_item_response(item) for item in grocery_list.items],
        groups={
            label: [to_item_response(item) for item in items]
            for label, items in grocery_list.groups.items()
        },
        group_by_category=grocery_list.group_by_category,
        checked_count=grocery_list.checked_count,
        total_count=grocery_list.total_count,
    )


# =============================================================================
# Endpoints
# =============================================================================


@router.get("", response_model=GroceryListResponse)
def get_grocery_list(
    group_by_category: bool = Query(False, description="Group items by recipe category"),
    assembler: GroceryListAssembler = Depends(get_assembler),
) -> GroceryListResponse:
    """Build the grocery list from the current weekly meal plan."""
    return to_list_response(assembler.build(group_by_category=group_by_category))


@router.post("/items/{item_key:path}/toggle", response_model=dict[str, bool])
def toggle_grocery_item(
    item_key: str,
    assembler: GroceryListAssembler = Depends(get_assembler),
) -> dict[str, bool]:
    """Flip the check mark of one item and return all check marks."""
    return assembler.toggle_item(item_key)


@router.delete("/checked", response_model=dict[str, bool])
def clear_checked_items(
    assembler: GroceryListAssembler = Depends(get_assembler),
) -> dict[str, bool]:
    """Uncheck every item."""
    return assembler.clear_checked()


@router.get("/pantry-staples", response_model=PantryStaplesPayload)
def get_pantry_staples(
    storage: RecipeBoxStorage = Depends(get_storage),
) -> PantryStaplesPayload:
    """List ingredients treated as always on hand."""
    return PantryStaplesPayload(staples=storage.load_pantry_staples())


@router.put("/pantry-staples", response_model=GroceryListResponse)
def update_pantry_staples(
    payload: PantryStaplesPayload,
    group_by_category: bool = Query(False),
    assembler: GroceryListAssembler = Depends(get_assembler),
) -> GroceryListResponse:
    """Replace the pantry staples and return the recomputed grocery list."""
    logger.info(f"Replacing pantry staples with {len(payload.staples)} entries")
    grocery_list = assembler.update_pantry_staples(
        payload.staples,
        group_by_category=group_by_category,
    )
    return to_list_response(grocery_list)
