from typing import List, Optional
from fastapi import APIRouter, Depends, status
from asset_attributes.api.deps import get_store
from asset_attributes.engine.store import AttributeStore
from asset_attributes.schemas.category import (
    AttributeOrder,
    Category,
    CategoryCreate,
    CategoryUpdate,
    InheritedAttributes,
)
from asset_attributes.schemas.view import AttributeView, CategoryAttributeView

router = APIRouter()

@router.get("/", response_model=List[Category])
async def get_categories(
    parent_id: Optional[str] = None,
    store: AttributeStore = Depends(get_store),
):
    """Retrieve categories, optionally only the children of parent_id"""
    categories = store.list_categories()
    if parent_id:
        categories = [c for c in categories if c.parent_id == parent_id]
    return categories

@router.get("/{category_id}", response_model=Category)
async def get_category(category_id: str, store: AttributeStore = Depends(get_store)):
    """
    Get a specific category by ID.
    """
    return store.get_category(category_id)

@router.post("/", response_model=Category, status_code=status.HTTP_201_CREATED)
async def create_category(category: CategoryCreate, store: AttributeStore = Depends(get_store)):
    """
    Create a category, optionally under a parent.
    """
    category_id = store.tree.add_category(category)
    return store.get_category(category_id)

@router.patch("/{category_id}", response_model=Category)
async def update_category(
    category_id: str,
    category: CategoryUpdate,
    store: AttributeStore = Depends(get_store),
):
    """
    Rename and/or move a category. Moves that would create a cycle are refused.
    """
    store.tree.edit_category(category_id, category)
    return store.get_category(category_id)

@router.delete("/{category_id}")
async def delete_category(category_id: str, store: AttributeStore = Depends(get_store)):
    """
    Delete a category without children.
    """
    store.tree.delete_category(category_id)
    return {"message": "Category deleted successfully"}

@router.get("/{category_id}/children", response_model=List[Category])
async def get_category_children(category_id: str, store: AttributeStore = Depends(get_store)):
    return store.tree.children(category_id)

@router.get("/{category_id}/path", response_model=List[Category])
async def get_category_path(category_id: str, store: AttributeStore = Depends(get_store)):
    """
    Categories from the root down to this one.
    """
    store.get_category(category_id)
    return store.resolver.get_path(category_id)

@router.get("/{category_id}/inherited", response_model=InheritedAttributes)
async def get_inherited_attributes(category_id: str, store: AttributeStore = Depends(get_store)):
    """
    Configuration entries contributed by ancestors, root first.
    """
    store.get_category(category_id)
    return store.resolver.get_inherited(category_id)

@router.get("/{category_id}/effective", response_model=List[CategoryAttributeView])
def get_effective_attributes(category_id: str, store: AttributeStore = Depends(get_store)):
    """
    Attribute rows for the category screen. Inherited rows are included
    only while parent inheritance is enabled.
    """
    return store.resolver.get_effective(category_id, store.enable_parent_inheritance)

@router.get("/{category_id}/form-fields", response_model=List[AttributeView])
def get_form_fields(category_id: str, store: AttributeStore = Depends(get_store)):
    """
    Enabled core and category attributes for an asset form.
    """
    return store.resolver.get_form_fields(category_id, store.enable_parent_inheritance)

@router.post("/{category_id}/attributes/{attribute_id}", response_model=Category)
async def apply_attribute(
    category_id: str,
    attribute_id: str,
    store: AttributeStore = Depends(get_store),
):
    """
    Apply a library attribute to the category. Applying twice changes nothing.
    """
    store.configurator.apply(attribute_id, category_id)
    return store.get_category(category_id)

@router.delete("/{category_id}/attributes/{attribute_id}", response_model=Category)
async def remove_attribute(
    category_id: str,
    attribute_id: str,
    store: AttributeStore = Depends(get_store),
):
    """
    Remove an attribute from the category.
    """
    store.configurator.remove(attribute_id, category_id)
    return store.get_category(category_id)

@router.post("/{category_id}/attributes/{attribute_id}/toggle", response_model=Category)
async def toggle_attribute(
    category_id: str,
    attribute_id: str,
    system: bool = False,
    store: AttributeStore = Depends(get_store),
):
    """
    Enable or disable an attribute on the category (system or custom list).
    """
    store.configurator.toggle(category_id, attribute_id, system)
    return store.get_category(category_id)

@router.put("/{category_id}/order", response_model=Category)
async def reorder_attributes(
    category_id: str,
    order: AttributeOrder,
    store: AttributeStore = Depends(get_store),
):
    """
    Reorder the category's custom attributes.
    """
    store.configurator.reorder(category_id, order.attribute_ids)
    return store.get_category(category_id)
