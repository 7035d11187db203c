from fastapi import APIRouter
from asset_attributes.api.v1.endpoints import attribute, category, core_attribute, manufacturer, preference, store

api_router = APIRouter()

api_router.include_router(attribute.router, prefix="/attributes", tags=["attributes"])

api_router.include_router(category.router, prefix="/categories", tags=["categories"])

api_router.include_router(manufacturer.router, prefix="/manufacturers", tags=["manufacturers"])

api_router.include_router(core_attribute.router, prefix="/core-attributes", tags=["core attributes"])

api_router.include_router(preference.router, prefix="/preferences", tags=["preferences"])

api_router.include_router(store.router, prefix="/store", tags=["store"])
