from typing import List
from loguru import logger
from asset_attributes.core.errors import ImmutableEntityError
from asset_attributes.schemas.attribute import Attribute, AttributeCreate, AttributeType, AttributeUpdate
from asset_attributes.engine.bindings import bind, purge, unbind
from asset_attributes.engine.state import new_id, require_name

# Update fields that can't be cleared; a null for them is ignored
_NON_NULLABLE = ("type", "is_system", "is_required", "applied_to_categories")

def _unique(ids: List[str]) -> List[str]:
    return list(dict.fromkeys(ids))

class AttributeLibrary:
    """Catalog of attribute definitions, system and custom."""

    def __init__(self, store):
        self.store = store

    def add(self, data: AttributeCreate) -> str:
        label = require_name(data.label, "Label")
        with self.store.transaction() as state:
            category_ids = _unique(data.applied_to_categories)
            categories = [state.require_category(cid) for cid in category_ids]

            attribute = Attribute(
                **data.model_dump(exclude={"label", "applied_to_categories"}),
                id=new_id("custom", (a.id for a in state.attributes)),
                label=label,
                is_system=False,
                applied_to_categories=[],
            )
            if attribute.type != AttributeType.DROPDOWN:
                attribute.dropdown_options = None
            state.attributes.append(attribute)

            for category in categories:
                bind(attribute, category)

        logger.info(f"Attribute {attribute.id} '{attribute.label}' added to {len(categories)} categories")
        return attribute.id

    def edit(self, attribute_id: str, data: AttributeUpdate) -> None:
        updates = data.model_dump(exclude_unset=True)
        for key in _NON_NULLABLE:
            if key in updates and updates[key] is None:
                updates.pop(key)

        with self.store.transaction() as state:
            attribute = state.require_attribute(attribute_id)

            is_system = updates.pop("is_system", attribute.is_system)
            if is_system != attribute.is_system:
                raise ImmutableEntityError(f"Cannot change the system flag of attribute {attribute_id}")

            if "label" in updates:
                updates["label"] = require_name(updates["label"], "Label")

            new_category_ids = updates.pop("applied_to_categories", None)

            for key, value in updates.items():
                setattr(attribute, key, value)
            if attribute.type != AttributeType.DROPDOWN:
                attribute.dropdown_options = None

            if new_category_ids is not None:
                new_category_ids = _unique(new_category_ids)
                new_categories = [state.require_category(cid) for cid in new_category_ids]
                old_category_ids = list(attribute.applied_to_categories)

                for category_id in old_category_ids:
                    if category_id not in new_category_ids:
                        category = state.find_category(category_id)
                        if category is not None:
                            unbind(attribute, category)

                for category in new_categories:
                    if category.id not in old_category_ids:
                        bind(attribute, category)

                attribute.applied_to_categories = new_category_ids

        logger.info(f"Attribute {attribute_id} updated: {sorted(data.model_dump(exclude_unset=True))}")

    def delete(self, attribute_id: str) -> None:
        with self.store.transaction() as state:
            attribute = state.require_attribute(attribute_id)
            if attribute.is_system:
                logger.warning(f"Refused to delete system attribute {attribute_id}")
                raise ImmutableEntityError(f"System attribute {attribute_id} cannot be deleted")

            state.attributes = [a for a in state.attributes if a.id != attribute_id]
            removed = purge(state.categories, attribute_id)

        logger.info(f"Attribute {attribute_id} deleted, {removed} category bindings removed")

    def toggle_preferred(self, attribute_id: str) -> None:
        if self.store.state.find_attribute(attribute_id) is None:
            logger.debug(f"toggle_preferred: attribute {attribute_id} not found, nothing to do")
            return

        with self.store.transaction() as state:
            attribute = state.require_attribute(attribute_id)
            attribute.is_required = not attribute.is_required

        logger.info(f"Attribute {attribute_id} preferred={attribute.is_required}")
