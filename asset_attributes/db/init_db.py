from sqlalchemy.engine import Engine
from asset_attributes.db.session import engine as default_engine, Base

# Import all models here so they register on Base.metadata
from asset_attributes.models.preference import Preference  # noqa: F401

def init_db(bind: Engine = None) -> None:
    Base.metadata.create_all(bind=bind or default_engine)
