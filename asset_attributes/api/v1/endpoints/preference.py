from fastapi import APIRouter, Depends
from asset_attributes.api.deps import get_store
from asset_attributes.engine.store import AttributeStore
from asset_attributes.schemas.preference import ParentInheritance

router = APIRouter()

@router.get("/parent-inheritance", response_model=ParentInheritance)
def get_parent_inheritance(store: AttributeStore = Depends(get_store)):
    return ParentInheritance(enabled=store.enable_parent_inheritance)

@router.post("/parent-inheritance/toggle", response_model=ParentInheritance)
def toggle_parent_inheritance(store: AttributeStore = Depends(get_store)):
    """
    Flip and persist the parent inheritance preference.
    """
    return ParentInheritance(enabled=store.toggle_parent_inheritance())
