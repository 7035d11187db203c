import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from asset_attributes.db.init_db import init_db
from asset_attributes.db.session import make_engine
from asset_attributes.engine.preferences import PreferenceStore
from asset_attributes.engine.store import AttributeStore
from asset_attributes.main import create_app
from asset_attributes.schemas.category import CategoryCreate

@pytest.fixture
def store():
    return AttributeStore()

@pytest.fixture
def session_factory(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'preferences.db'}")
    init_db(engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()

@pytest.fixture
def preferences(session_factory):
    return PreferenceStore(session_factory)

@pytest.fixture
def client(preferences):
    app = create_app(AttributeStore(preferences=preferences))
    return TestClient(app)

@pytest.fixture
def chain(store):
    """root -> mid -> leaf, each with one system and one custom binding of its own."""
    root = store.tree.add_category(CategoryCreate(name="Plant"))
    mid = store.tree.add_category(CategoryCreate(name="Heating", parent_id=root))
    leaf = store.tree.add_category(CategoryCreate(name="Combi Boiler", parent_id=mid))

    store.configurator.apply("manufacturer", root)
    store.configurator.apply("inspection-frequency", root)
    store.configurator.apply("gas-pressure", mid)
    store.configurator.apply("height", mid)
    store.configurator.apply("flue-type", leaf)
    store.configurator.apply("safety-certificate", leaf)
    return root, mid, leaf
