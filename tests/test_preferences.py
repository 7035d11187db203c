from asset_attributes.engine.preferences import PARENT_INHERITANCE_KEY, PreferenceStore
from asset_attributes.engine.store import AttributeStore
from asset_attributes.models.preference import Preference

def write_raw(session_factory, value):
    db = session_factory()
    try:
        db.merge(Preference(key=PARENT_INHERITANCE_KEY, value=value))
        db.commit()
    finally:
        db.close()

def test_absent_value_defaults_to_true(preferences):
    assert preferences.get_parent_inheritance() is True

def test_toggle_persists(session_factory, preferences):
    assert preferences.toggle_parent_inheritance() is False

    # a fresh reader sees the stored value
    assert PreferenceStore(session_factory).get_parent_inheritance() is False

    assert preferences.toggle_parent_inheritance() is True
    assert PreferenceStore(session_factory).get_parent_inheritance() is True

def test_malformed_value_defaults_to_true(session_factory):
    write_raw(session_factory, "not json")
    assert PreferenceStore(session_factory).get_parent_inheritance() is True

    write_raw(session_factory, '"false"')
    assert PreferenceStore(session_factory).get_parent_inheritance() is True

    write_raw(session_factory, "false")
    assert PreferenceStore(session_factory).get_parent_inheritance() is False

def test_store_consults_preferences(preferences):
    store = AttributeStore(preferences=preferences)
    assert store.enable_parent_inheritance is True
    store.toggle_parent_inheritance()
    assert store.enable_parent_inheritance is False

def test_store_without_preferences_keeps_flag_in_memory():
    store = AttributeStore()
    assert store.enable_parent_inheritance is True
    assert store.toggle_parent_inheritance() is False
    assert store.enable_parent_inheritance is False

def test_reset_keeps_preference(preferences):
    store = AttributeStore(preferences=preferences)
    store.toggle_parent_inheritance()
    store.library.delete("height")

    store.reset()
    assert store.get_attribute("height").label == "Height (mm)"
    assert store.enable_parent_inheritance is False
