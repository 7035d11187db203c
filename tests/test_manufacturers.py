import pytest
from asset_attributes.core.errors import InvalidInputError, NotFoundError, ReferentialGuardError

def test_add_manufacturer(store):
    manufacturer_id = store.manufacturers.add_manufacturer("Ideal")
    manufacturer = store.get_manufacturer(manufacturer_id)
    assert manufacturer.name == "Ideal"
    assert manufacturer.models == []
    assert manufacturer.used_by_categories == []

def test_blank_names_are_refused(store):
    before = store.snapshot()
    with pytest.raises(InvalidInputError):
        store.manufacturers.add_manufacturer("")
    with pytest.raises(InvalidInputError):
        store.manufacturers.edit_manufacturer("vaillant", "  ")
    with pytest.raises(InvalidInputError):
        store.manufacturers.add_model("vaillant", "")
    with pytest.raises(InvalidInputError):
        store.manufacturers.edit_model("vaillant", "ecotec-pro", "\t")
    assert store.snapshot() == before

def test_edit_manufacturer(store):
    store.manufacturers.edit_manufacturer("vaillant", "Vaillant Group")
    assert store.get_manufacturer("vaillant").name == "Vaillant Group"

def test_delete_used_manufacturer_is_refused(store):
    before = store.list_manufacturers()
    with pytest.raises(ReferentialGuardError):
        store.manufacturers.delete_manufacturer("vaillant")
    assert store.list_manufacturers() == before

def test_delete_unused_manufacturer_takes_models(store):
    manufacturer_id = store.manufacturers.add_manufacturer("Ideal")
    store.manufacturers.add_model(manufacturer_id, "Logic")

    store.manufacturers.delete_manufacturer(manufacturer_id)
    assert all(m.id != manufacturer_id for m in store.list_manufacturers())

def test_missing_ids(store):
    with pytest.raises(NotFoundError):
        store.manufacturers.edit_manufacturer("nope", "x")
    with pytest.raises(NotFoundError):
        store.manufacturers.delete_manufacturer("nope")
    with pytest.raises(NotFoundError):
        store.manufacturers.add_model("nope", "x")
    with pytest.raises(NotFoundError):
        store.manufacturers.edit_model("vaillant", "greenstar", "x")
    with pytest.raises(NotFoundError):
        store.manufacturers.delete_model("vaillant", "greenstar")

def test_model_crud_is_scoped_to_owner(store):
    model_id = store.manufacturers.add_model("vaillant", "ecoFIT")
    assert [m.name for m in store.get_manufacturer("vaillant").models][-1] == "ecoFIT"

    store.manufacturers.edit_model("vaillant", model_id, "ecoFIT Pure")
    assert store.get_manufacturer("vaillant").models[-1].name == "ecoFIT Pure"

    worcester_before = store.get_manufacturer("worcester-bosch")
    store.manufacturers.delete_model("vaillant", model_id)
    assert all(m.id != model_id for m in store.get_manufacturer("vaillant").models)
    assert store.get_manufacturer("worcester-bosch") == worcester_before
