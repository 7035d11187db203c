"""
Attribute inheritance across the category tree.

A category inherits the configuration entries of its ancestors, root
first, never its own. All walks up the parent chain keep a visited set,
so a malformed (cyclic) tree still terminates. Nothing here mutates the
store.
"""
from typing import List, Optional
from asset_attributes.schemas.category import Category, CategoryAttributeConfig, InheritedAttributes
from asset_attributes.schemas.view import AttributeView, CategoryAttributeView, CoreAttributeView
from asset_attributes.engine.state import StoreState

class InheritanceResolver:
    def __init__(self, store):
        self.store = store

    def get_path(self, category_id: str) -> List[Category]:
        """Categories from the root down to category_id; empty if unknown."""
        return [c.model_copy(deep=True) for c in _walk_up(self.store.state, category_id)]

    def get_inherited(self, category_id: str) -> InheritedAttributes:
        ancestors = _walk_up(self.store.state, category_id)[:-1]
        inherited = InheritedAttributes()
        for ancestor in ancestors:
            inherited.system.extend(e.model_copy() for e in ancestor.system_attributes)
            inherited.custom.extend(e.model_copy() for e in ancestor.custom_attributes)
        return inherited

    def get_effective(self, category_id: str, include_inherited: bool = True) -> List[CategoryAttributeView]:
        """
        The attribute rows shown for a category: enabled entries inherited
        from ancestors (root first) when include_inherited is set, then the
        category's own system and custom entries sorted by order. Entries
        whose attribute is missing from the library are skipped.
        """
        state = self.store.state
        path = _walk_up(state, category_id)
        if not path:
            state.require_category(category_id)

        rows: List[CategoryAttributeView] = []
        if include_inherited:
            for ancestor in path[:-1]:
                rows.extend(
                    row for row in _rows(state, ancestor, inherited=True)
                    if row.is_enabled
                )
        rows.extend(_rows(state, path[-1], inherited=False))
        return rows

    def get_form_fields(
        self,
        category_id: Optional[str] = None,
        include_inherited: bool = True,
    ) -> List[AttributeView]:
        """
        Enabled core attributes followed by the enabled rows of the
        category. An attribute bound on both an ancestor and the category
        appears once, at its first (outermost) position.
        """
        state = self.store.state
        fields: List[AttributeView] = [
            CoreAttributeView(
                attribute_id=a.id,
                label=a.label,
                type=a.type,
                section=a.section,
                is_enabled=a.is_enabled,
                is_required=a.is_required,
                units=a.units,
            )
            for a in state.core_attributes
            if a.is_enabled
        ]
        if category_id is not None:
            seen = set()
            for row in self.get_effective(category_id, include_inherited):
                if row.is_enabled and row.attribute_id not in seen:
                    seen.add(row.attribute_id)
                    fields.append(row)
        return fields

def _walk_up(state: StoreState, category_id: Optional[str]) -> List[Category]:
    path: List[Category] = []
    visited = set()
    current = state.find_category(category_id)
    while current is not None and current.id not in visited:
        visited.add(current.id)
        path.append(current)
        current = state.find_category(current.parent_id)
    path.reverse()
    return path

def _rows(state: StoreState, category: Category, inherited: bool) -> List[CategoryAttributeView]:
    rows = []
    for source, entries in (("system", category.system_attributes), ("custom", category.custom_attributes)):
        if not inherited:
            entries = sorted(entries, key=lambda e: e.order)
        for entry in entries:
            attribute = state.find_attribute(entry.attribute_id)
            if attribute is None:
                continue
            rows.append(_view(entry, attribute, source, category, inherited))
    return rows

def _view(entry: CategoryAttributeConfig, attribute, source: str, category: Category, inherited: bool) -> CategoryAttributeView:
    return CategoryAttributeView(
        attribute_id=attribute.id,
        label=attribute.label,
        type=attribute.type,
        source=source,
        is_enabled=entry.is_enabled,
        is_preferred=attribute.is_required,
        order=entry.order,
        units=attribute.units,
        category_id=category.id,
        category_name=category.name,
        inherited=inherited,
    )
