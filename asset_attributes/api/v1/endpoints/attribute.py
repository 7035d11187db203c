from typing import List
from fastapi import APIRouter, Depends, status
from asset_attributes.api.deps import get_store
from asset_attributes.engine.store import AttributeStore
from asset_attributes.schemas.attribute import Attribute, AttributeCreate, AttributeUpdate

router = APIRouter()

@router.get("/", response_model=List[Attribute])
async def get_attributes(store: AttributeStore = Depends(get_store)):
    """
    Retrieve the attribute library, system attributes included.
    """
    return store.list_attributes()

@router.get("/{attribute_id}", response_model=Attribute)
async def get_attribute(attribute_id: str, store: AttributeStore = Depends(get_store)):
    """
    Get a specific attribute by ID.
    """
    return store.get_attribute(attribute_id)

@router.post("/", response_model=Attribute, status_code=status.HTTP_201_CREATED)
async def create_attribute(attribute: AttributeCreate, store: AttributeStore = Depends(get_store)):
    """
    Create a custom attribute and bind it to every category in
    applied_to_categories.
    """
    attribute_id = store.library.add(attribute)
    return store.get_attribute(attribute_id)

@router.patch("/{attribute_id}", response_model=Attribute)
async def update_attribute(
    attribute_id: str,
    attribute: AttributeUpdate,
    store: AttributeStore = Depends(get_store),
):
    """
    Partially update an attribute. applied_to_categories, when sent,
    replaces the whole set and the category bindings follow it.
    """
    store.library.edit(attribute_id, attribute)
    return store.get_attribute(attribute_id)

@router.delete("/{attribute_id}")
async def delete_attribute(attribute_id: str, store: AttributeStore = Depends(get_store)):
    """
    Delete a custom attribute and every category binding to it.
    """
    store.library.delete(attribute_id)
    return {"message": "Attribute deleted successfully"}

@router.post("/{attribute_id}/preferred", response_model=Attribute)
async def toggle_preferred(attribute_id: str, store: AttributeStore = Depends(get_store)):
    """
    Flip the preferred flag of an attribute.
    """
    store.library.toggle_preferred(attribute_id)
    return store.get_attribute(attribute_id)
