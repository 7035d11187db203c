from typing import List, Optional
from loguru import logger
from asset_attributes.core.errors import CyclicHierarchyError, ReferentialGuardError
from asset_attributes.schemas.category import Category, CategoryCreate, CategoryUpdate
from asset_attributes.engine.bindings import bind, unbind
from asset_attributes.engine.state import StoreState, new_id, require_name

class CategoryAttributeConfigurator:
    """
    Per-category attribute configuration: enable toggles, custom list
    ordering and applying / removing library attributes.
    """

    def __init__(self, store):
        self.store = store

    def toggle(self, category_id: str, attribute_id: str, is_system_list: bool) -> None:
        category = self.store.state.find_category(category_id)
        if category is None or not any(
            entry.attribute_id == attribute_id for entry in _config_list(category, is_system_list)
        ):
            logger.debug(f"toggle: {attribute_id} not configured on {category_id}, nothing to do")
            return

        with self.store.transaction() as state:
            category = state.require_category(category_id)
            for entry in _config_list(category, is_system_list):
                if entry.attribute_id == attribute_id:
                    entry.is_enabled = not entry.is_enabled
                    enabled = entry.is_enabled

        logger.info(f"Category {category_id}: {attribute_id} enabled={enabled}")

    def reorder(self, category_id: str, attribute_ids: List[str]) -> None:
        """
        Re-sequence the custom list to follow attribute_ids. Ids that are
        not configured on the category are skipped; configured entries
        missing from attribute_ids keep their relative order after the
        listed ones. System attributes are never reordered.
        """
        if self.store.state.find_category(category_id) is None:
            logger.debug(f"reorder: category {category_id} not found, nothing to do")
            return

        with self.store.transaction() as state:
            category = state.require_category(category_id)
            remaining = {entry.attribute_id: entry for entry in category.custom_attributes}
            ordered = []
            for attribute_id in attribute_ids:
                entry = remaining.pop(attribute_id, None)
                if entry is not None:
                    ordered.append(entry)
            ordered.extend(e for e in category.custom_attributes if e.attribute_id in remaining)
            for position, entry in enumerate(ordered):
                entry.order = position
            category.custom_attributes = ordered

        logger.info(f"Category {category_id}: custom attributes reordered")

    def apply(self, attribute_id: str, category_id: str) -> None:
        with self.store.transaction() as state:
            attribute = state.require_attribute(attribute_id)
            category = state.require_category(category_id)
            added = bind(attribute, category)

        if added:
            logger.info(f"Attribute {attribute_id} applied to category {category_id}")
        else:
            logger.debug(f"Attribute {attribute_id} already applied to category {category_id}")

    def remove(self, attribute_id: str, category_id: str) -> None:
        state = self.store.state
        if state.find_attribute(attribute_id) is None or state.find_category(category_id) is None:
            logger.debug(f"remove: {attribute_id} / {category_id} not found, nothing to do")
            return

        with self.store.transaction() as state:
            unbind(state.require_attribute(attribute_id), state.require_category(category_id))

        logger.info(f"Attribute {attribute_id} removed from category {category_id}")

class CategoryTree:
    """Category CRUD. Keeps the parent relation an acyclic forest."""

    def __init__(self, store):
        self.store = store

    def add_category(self, data: CategoryCreate) -> str:
        name = require_name(data.name)
        with self.store.transaction() as state:
            if data.parent_id is not None:
                state.require_category(data.parent_id)
            category = Category(
                id=new_id("category", (c.id for c in state.categories)),
                name=name,
                parent_id=data.parent_id,
            )
            state.categories.append(category)

        logger.info(f"Category {category.id} '{name}' added under {data.parent_id or 'root'}")
        return category.id

    def edit_category(self, category_id: str, data: CategoryUpdate) -> None:
        updates = data.model_dump(exclude_unset=True)
        with self.store.transaction() as state:
            category = state.require_category(category_id)
            if "name" in updates:
                category.name = require_name(updates["name"])
            if "parent_id" in updates:
                _check_parent(state, category_id, updates["parent_id"])
                category.parent_id = updates["parent_id"]

        logger.info(f"Category {category_id} updated: {sorted(updates)}")

    def delete_category(self, category_id: str) -> None:
        with self.store.transaction() as state:
            state.require_category(category_id)
            children = [c.id for c in state.categories if c.parent_id == category_id]
            if children:
                logger.warning(f"Refused to delete category {category_id}: has children {children}")
                raise ReferentialGuardError(
                    f"Category {category_id} still has child categories: {', '.join(children)}"
                )

            state.categories = [c for c in state.categories if c.id != category_id]
            for attribute in state.attributes:
                if category_id in attribute.applied_to_categories:
                    attribute.applied_to_categories.remove(category_id)
            for manufacturer in state.manufacturers:
                if category_id in manufacturer.used_by_categories:
                    manufacturer.used_by_categories.remove(category_id)

        logger.info(f"Category {category_id} deleted")

    def children(self, category_id: str) -> List[Category]:
        self.store.state.require_category(category_id)
        return [
            c.model_copy(deep=True)
            for c in self.store.state.categories
            if c.parent_id == category_id
        ]

def _config_list(category: Category, is_system_list: bool):
    return category.system_attributes if is_system_list else category.custom_attributes

def _check_parent(state: StoreState, category_id: str, parent_id: Optional[str]) -> None:
    """Refuse a parent that is unknown or that has category_id among its ancestors."""
    if parent_id is None:
        return
    current = state.require_category(parent_id)
    visited = set()
    while current is not None and current.id not in visited:
        if current.id == category_id:
            raise CyclicHierarchyError(
                f"Category {parent_id} cannot be the parent of {category_id}: it would become its own ancestor"
            )
        visited.add(current.id)
        current = state.find_category(current.parent_id)
