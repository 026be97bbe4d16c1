from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
import logging

from basket.api.dependencies import get_repository
from basket.infra.List_Repository import ListRepository
from basket.logic.catalog.lookup import find_catalog_by_name, resolve_category_for_name, suggest_catalog
from basket.utilities.constants import DEFAULT_CATEGORY, DEFAULT_UNIT
from basket.utilities.validators import ItemInput, ListInput, ToggleInput

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


def _list_or_404(repo: ListRepository, list_id: str):
    shopping_list = repo.get_list(list_id)
    if shopping_list is None:
        raise HTTPException(status_code=404, detail="List not found")
    return shopping_list


@router.get("/lists")
def get_lists(repo: ListRepository = Depends(get_repository)):
    lists = repo.get_lists()
    return {"lists": [l.to_dict() for l in lists], "count": len(lists)}


@router.post("/lists", status_code=201)
def create_list(data: ListInput, repo: ListRepository = Depends(get_repository)):
    return repo.create_list(data.name).to_dict()


@router.get("/lists/{list_id}")
def get_list(list_id: str, repo: ListRepository = Depends(get_repository)):
    shopping_list = _list_or_404(repo, list_id)
    items = repo.get_items_by_list(list_id)
    return {**shopping_list.to_dict(), "items": [i.to_dict() for i in items]}


@router.patch("/lists/{list_id}")
def rename_list(list_id: str, data: ListInput, repo: ListRepository = Depends(get_repository)):
    shopping_list = repo.rename_list(list_id, data.name)
    if shopping_list is None:
        raise HTTPException(status_code=404, detail="List not found")
    return shopping_list.to_dict()


@router.delete("/lists/{list_id}")
def delete_list(list_id: str, repo: ListRepository = Depends(get_repository)):
    if not repo.delete_list(list_id):
        raise HTTPException(status_code=404, detail="List not found")
    return {"status": "deleted", "id": list_id}


def _guess_category(repo: ListRepository, name: str) -> str:
    """Category name inferred from the catalog and keyword tables, "Other" when nothing matches."""
    category_id = resolve_category_for_name(name)
    names = {c.id: c.name for c in repo.get_categories()}
    return names.get(category_id) or DEFAULT_CATEGORY


def _guess_unit(repo: ListRepository, name: str) -> str:
    match = find_catalog_by_name(name)
    labels = {u.id: u.label for u in repo.get_units()}
    return (match and labels.get(match["unitId"])) or DEFAULT_UNIT


@router.get("/catalog/suggest")
def catalog_suggestions(q: str = ""):
    suggestions = suggest_catalog(q)
    return {"items": [{"id": p["id"], "name": p["name"], "category_id": p["categoryId"], "unit_id": p["unitId"]}
                      for p in suggestions], "count": len(suggestions)}


@router.post("/lists/{list_id}/items", status_code=201)
def add_item(list_id: str, data: ItemInput, repo: ListRepository = Depends(get_repository)):
    """Add an item, finding or creating its category, unit and product by name."""
    _list_or_404(repo, list_id)
    category = repo.ensure_category(data.category or _guess_category(repo, data.name))
    unit = repo.ensure_unit(data.unit or _guess_unit(repo, data.name))
    product = repo.ensure_product(data.name, category.id, unit.id)
    item = repo.create_item(list_id, {
        "product_id": product.id,
        "name": data.name,
        "quantity": data.quantity,
        "unit_id": unit.id,
        "category_id": category.id,
        "comment": data.comment,
        "scope": data.scope,
        "purchased": data.purchased,
    })
    return item.to_dict()


@router.post("/items/{item_id}/toggle")
def toggle_item(item_id: str, data: ToggleInput, repo: ListRepository = Depends(get_repository)):
    item = repo.toggle_item(item_id, data.purchased)
    if item is None:
        return JSONResponse(status_code=404, content={"error": "Item not found"})
    return item.to_dict()


@router.delete("/items/{item_id}")
def delete_item(item_id: str, repo: ListRepository = Depends(get_repository)):
    if not repo.delete_item(item_id):
        return JSONResponse(status_code=404, content={"error": "Item not found"})
    return {"status": "deleted", "id": item_id}
