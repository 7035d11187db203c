from typing import List, Optional
from fastapi import APIRouter, Depends, status
from asset_attributes.api.deps import get_store
from asset_attributes.engine.store import AttributeStore
from asset_attributes.schemas.category import AttributeOrder
from asset_attributes.schemas.core_attribute import (
    CoreAttribute,
    CoreAttributeCreate,
    CoreAttributeSection,
    CoreAttributeUpdate,
)

router = APIRouter()

@router.get("/", response_model=List[CoreAttribute])
async def get_core_attributes(
    section: Optional[CoreAttributeSection] = None,
    store: AttributeStore = Depends(get_store),
):
    """Retrieve core attributes, optionally for one section"""
    attributes = store.list_core_attributes()
    if section:
        attributes = [a for a in attributes if a.section == section]
    return attributes

@router.get("/{attribute_id}", response_model=CoreAttribute)
async def get_core_attribute(attribute_id: str, store: AttributeStore = Depends(get_store)):
    return store.get_core_attribute(attribute_id)

@router.post("/", response_model=CoreAttribute, status_code=status.HTTP_201_CREATED)
async def create_core_attribute(
    attribute: CoreAttributeCreate,
    section: Optional[CoreAttributeSection] = None,
    store: AttributeStore = Depends(get_store),
):
    """
    Create a core attribute. The section query parameter wins over the
    body's section; without either it lands in your-attributes.
    """
    attribute_id = store.core_attributes.add(attribute, section)
    return store.get_core_attribute(attribute_id)

@router.patch("/{attribute_id}", response_model=CoreAttribute)
async def update_core_attribute(
    attribute_id: str,
    attribute: CoreAttributeUpdate,
    store: AttributeStore = Depends(get_store),
):
    store.core_attributes.edit(attribute_id, attribute)
    return store.get_core_attribute(attribute_id)

@router.delete("/{attribute_id}")
async def delete_core_attribute(attribute_id: str, store: AttributeStore = Depends(get_store)):
    store.core_attributes.delete(attribute_id)
    return {"message": "Core attribute deleted successfully"}

@router.post("/{attribute_id}/toggle", response_model=CoreAttribute)
async def toggle_core_attribute(attribute_id: str, store: AttributeStore = Depends(get_store)):
    store.core_attributes.toggle(attribute_id)
    return store.get_core_attribute(attribute_id)

@router.put("/sections/{section}/order", response_model=List[CoreAttribute])
async def reorder_core_attributes(
    section: CoreAttributeSection,
    order: AttributeOrder,
    store: AttributeStore = Depends(get_store),
):
    """
    Reorder the attributes of one section.
    """
    store.core_attributes.reorder(section, order.attribute_ids)
    return [a for a in store.list_core_attributes() if a.section == section]
