from fastapi import APIRouter, Depends
from asset_attributes.api.deps import get_store
from asset_attributes.engine.store import AttributeStore

router = APIRouter()

@router.post("/reset")
async def reset_store(store: AttributeStore = Depends(get_store)):
    """
    Restore the library, categories, manufacturers and core attributes to
    the seed data. The parent inheritance preference is kept.
    """
    store.reset()
    return {"message": "Store reset to seed data"}
