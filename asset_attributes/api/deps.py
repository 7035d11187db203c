from typing import Optional
from fastapi import Request
from asset_attributes.db.init_db import init_db
from asset_attributes.db.session import SessionLocal
from asset_attributes.engine.preferences import PreferenceStore
from asset_attributes.engine.store import AttributeStore

_default_store: Optional[AttributeStore] = None

def default_store() -> AttributeStore:
    """Process-wide store, built on first use with the database-backed preferences."""
    global _default_store
    if _default_store is None:
        init_db()
        _default_store = AttributeStore(preferences=PreferenceStore(SessionLocal))
    return _default_store

def get_store(request: Request) -> AttributeStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        store = default_store()
        request.app.state.store = store
    return store
