from typing import List
from fastapi import APIRouter, Depends, status
from asset_attributes.api.deps import get_store
from asset_attributes.engine.store import AttributeStore
from asset_attributes.schemas.manufacturer import (
    Manufacturer,
    ManufacturerCreate,
    ManufacturerUpdate,
    Model,
    ModelCreate,
    ModelUpdate,
)

router = APIRouter()

@router.get("/", response_model=List[Manufacturer])
async def get_manufacturers(store: AttributeStore = Depends(get_store)):
    """
    Retrieve all manufacturers with their models.
    """
    return store.list_manufacturers()

@router.get("/{manufacturer_id}", response_model=Manufacturer)
async def get_manufacturer(manufacturer_id: str, store: AttributeStore = Depends(get_store)):
    return store.get_manufacturer(manufacturer_id)

@router.post("/", response_model=Manufacturer, status_code=status.HTTP_201_CREATED)
async def create_manufacturer(manufacturer: ManufacturerCreate, store: AttributeStore = Depends(get_store)):
    """
    Create a manufacturer with no models.
    """
    manufacturer_id = store.manufacturers.add_manufacturer(manufacturer.name)
    return store.get_manufacturer(manufacturer_id)

@router.put("/{manufacturer_id}", response_model=Manufacturer)
async def update_manufacturer(
    manufacturer_id: str,
    manufacturer: ManufacturerUpdate,
    store: AttributeStore = Depends(get_store),
):
    store.manufacturers.edit_manufacturer(manufacturer_id, manufacturer.name)
    return store.get_manufacturer(manufacturer_id)

@router.delete("/{manufacturer_id}")
async def delete_manufacturer(manufacturer_id: str, store: AttributeStore = Depends(get_store)):
    """
    Delete a manufacturer and its models. Refused while categories use it.
    """
    store.manufacturers.delete_manufacturer(manufacturer_id)
    return {"message": "Manufacturer deleted successfully"}

@router.post("/{manufacturer_id}/models", response_model=Model, status_code=status.HTTP_201_CREATED)
async def create_model(
    manufacturer_id: str,
    model: ModelCreate,
    store: AttributeStore = Depends(get_store),
):
    model_id = store.manufacturers.add_model(manufacturer_id, model.name)
    return next(m for m in store.get_manufacturer(manufacturer_id).models if m.id == model_id)

@router.put("/{manufacturer_id}/models/{model_id}", response_model=Model)
async def update_model(
    manufacturer_id: str,
    model_id: str,
    model: ModelUpdate,
    store: AttributeStore = Depends(get_store),
):
    store.manufacturers.edit_model(manufacturer_id, model_id, model.name)
    return next(m for m in store.get_manufacturer(manufacturer_id).models if m.id == model_id)

@router.delete("/{manufacturer_id}/models/{model_id}")
async def delete_model(
    manufacturer_id: str,
    model_id: str,
    store: AttributeStore = Depends(get_store),
):
    store.manufacturers.delete_model(manufacturer_id, model_id)
    return {"message": "Model deleted successfully"}
