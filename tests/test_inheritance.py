from asset_attributes.engine.store import AttributeStore
from asset_attributes.schemas.category import CategoryCreate
from asset_attributes.schemas.view import CategoryAttributeView, CoreAttributeView

def ids(entries):
    return [e.attribute_id for e in entries]

def test_child_of_root_inherits_parent_lists(store):
    child = store.tree.add_category(CategoryCreate(name="Combi", parent_id="boiler"))
    boiler = store.get_category("boiler")

    inherited = store.resolver.get_inherited(child)
    assert inherited.system == boiler.system_attributes
    assert inherited.custom == boiler.custom_attributes

    root = store.resolver.get_inherited("boiler")
    assert root.system == []
    assert root.custom == []

def test_three_level_chain_is_root_first(store, chain):
    root, mid, leaf = chain

    inherited = store.resolver.get_inherited(leaf)
    assert ids(inherited.system) == ["manufacturer", "gas-pressure"]
    assert ids(inherited.custom) == ["inspection-frequency", "height"]
    # never the category's own entries
    assert "flue-type" not in ids(inherited.system)
    assert "safety-certificate" not in ids(inherited.custom)

    assert ids(store.resolver.get_inherited(mid).custom) == ["inspection-frequency"]

def test_unknown_category_and_unresolvable_parent(store):
    assert store.resolver.get_inherited("nope").system == []
    assert store.resolver.get_path("nope") == []

    seed = {
        "attributes": [],
        "categories": [{"id": "orphan", "name": "Orphan", "parent_id": "gone"}],
    }
    orphan_store = AttributeStore(seed=seed)
    inherited = orphan_store.resolver.get_inherited("orphan")
    assert inherited.system == [] and inherited.custom == []
    assert [c.id for c in orphan_store.resolver.get_path("orphan")] == ["orphan"]

def test_get_path_is_root_first(store, chain):
    root, mid, leaf = chain
    assert [c.id for c in store.resolver.get_path(leaf)] == [root, mid, leaf]
    assert [c.id for c in store.resolver.get_path(root)] == [root]

def test_cyclic_tree_terminates():
    seed = {
        "attributes": [
            {"id": "a1", "label": "A1", "is_system": False, "applied_to_categories": ["a"]},
            {"id": "b1", "label": "B1", "is_system": False, "applied_to_categories": ["b"]},
        ],
        "categories": [
            {"id": "a", "name": "A", "parent_id": "b",
             "custom_attributes": [{"attribute_id": "a1", "is_enabled": True, "order": 0}]},
            {"id": "b", "name": "B", "parent_id": "a",
             "custom_attributes": [{"attribute_id": "b1", "is_enabled": True, "order": 0}]},
        ],
    }
    cyclic = AttributeStore(seed=seed)

    assert [c.id for c in cyclic.resolver.get_path("a")] == ["b", "a"]
    assert ids(cyclic.resolver.get_inherited("a").custom) == ["b1"]
    assert len(cyclic.resolver.get_effective("a")) == 2

def test_resolution_does_not_mutate(store, chain):
    root, mid, leaf = chain
    before = store.snapshot()
    inherited = store.resolver.get_inherited(leaf)
    inherited.custom[0].is_enabled = False
    store.resolver.get_path(leaf)[0].name = "Changed"
    store.resolver.get_effective(leaf)
    assert store.snapshot() == before

def test_effective_rows(store, chain):
    root, mid, leaf = chain
    store.configurator.toggle(mid, "height", False)

    rows = store.resolver.get_effective(leaf)
    assert [(r.attribute_id, r.inherited, r.category_id) for r in rows] == [
        ("manufacturer", True, root),
        ("inspection-frequency", True, root),
        ("gas-pressure", True, mid),
        ("flue-type", False, leaf),
        ("safety-certificate", False, leaf),
    ]
    assert rows[0].source == "system"
    assert rows[0].category_name == "Plant"
    assert all(isinstance(r, CategoryAttributeView) and r.kind == "category" for r in rows)

def test_effective_without_inheritance(store, chain):
    root, mid, leaf = chain
    rows = store.resolver.get_effective(leaf, include_inherited=False)
    assert [r.attribute_id for r in rows] == ["flue-type", "safety-certificate"]

def test_form_fields_tag_each_kind(store):
    store.configurator.toggle("boiler", "height", False)
    fields = store.resolver.get_form_fields("boiler")

    core = [f for f in fields if f.kind == "core"]
    category = [f for f in fields if f.kind == "category"]
    assert all(isinstance(f, CoreAttributeView) for f in core)
    # global-end-of-life is disabled in the seed
    assert "global-end-of-life" not in [f.attribute_id for f in core]
    assert [f.attribute_id for f in category] == [
        "manufacturer", "model", "flue-type", "gas-pressure", "inspection-frequency",
    ]

def test_form_fields_without_category(store):
    fields = store.resolver.get_form_fields()
    assert fields and all(f.kind == "core" for f in fields)

def test_form_fields_list_each_attribute_once(store):
    child = store.tree.add_category(CategoryCreate(name="Combi", parent_id="boiler"))
    store.configurator.apply("manufacturer", child)
    store.configurator.apply("pressure-rating", child)

    fields = [f for f in store.resolver.get_form_fields(child) if f.kind == "category"]
    field_ids = [f.attribute_id for f in fields]
    assert field_ids.count("manufacturer") == 1
    # the inherited row wins
    assert fields[0].attribute_id == "manufacturer"
    assert fields[0].inherited is True
    assert field_ids[-1] == "pressure-rating"
