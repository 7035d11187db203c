from typing import List, Optional
from loguru import logger
from asset_attributes.schemas.core_attribute import (
    CoreAttribute,
    CoreAttributeCreate,
    CoreAttributeSection,
    CoreAttributeType,
    CoreAttributeUpdate,
)
from asset_attributes.engine.state import new_id, require_name

class CoreAttributeRegistry:
    """Asset-level fields grouped into form sections."""

    def __init__(self, store):
        self.store = store

    def toggle(self, attribute_id: str) -> None:
        if self.store.state.find_core_attribute(attribute_id) is None:
            logger.debug(f"toggle: core attribute {attribute_id} not found, nothing to do")
            return

        with self.store.transaction() as state:
            attribute = state.require_core_attribute(attribute_id)
            attribute.is_enabled = not attribute.is_enabled

        logger.info(f"Core attribute {attribute_id} enabled={attribute.is_enabled}")

    def add(self, data: CoreAttributeCreate, section: Optional[CoreAttributeSection] = None) -> str:
        label = require_name(data.label, "Label")
        with self.store.transaction() as state:
            attribute = CoreAttribute(
                **data.model_dump(exclude={"label", "section"}),
                id=new_id("global", (a.id for a in state.core_attributes)),
                label=label,
                section=section or data.section or CoreAttributeSection.YOUR_ATTRIBUTES,
            )
            if attribute.type != CoreAttributeType.DROPDOWN:
                attribute.dropdown_options = None
            state.core_attributes.append(attribute)

        logger.info(f"Core attribute {attribute.id} '{label}' added to section {attribute.section.value}")
        return attribute.id

    def edit(self, attribute_id: str, data: CoreAttributeUpdate) -> None:
        updates = data.model_dump(exclude_unset=True)
        with self.store.transaction() as state:
            attribute = state.require_core_attribute(attribute_id)
            if "label" in updates:
                updates["label"] = require_name(updates["label"], "Label")
            for key, value in updates.items():
                if value is None and key in ("type", "section", "is_enabled", "is_required"):
                    continue
                setattr(attribute, key, value)
            if attribute.type != CoreAttributeType.DROPDOWN:
                attribute.dropdown_options = None

        logger.info(f"Core attribute {attribute_id} updated: {sorted(updates)}")

    def delete(self, attribute_id: str) -> None:
        with self.store.transaction() as state:
            state.require_core_attribute(attribute_id)
            state.core_attributes = [a for a in state.core_attributes if a.id != attribute_id]

        logger.info(f"Core attribute {attribute_id} deleted")

    def reorder(self, section: CoreAttributeSection, attribute_ids: List[str]) -> None:
        """
        Re-sequence one section. Attributes of other sections come first in
        their current order, then the section's attributes in the given
        order, then any of the section's attributes not listed.
        """
        section = CoreAttributeSection(section)
        with self.store.transaction() as state:
            others = [a for a in state.core_attributes if a.section != section]
            remaining = {a.id: a for a in state.core_attributes if a.section == section}
            ordered = [remaining.pop(aid) for aid in attribute_ids if aid in remaining]
            ordered.extend(a for a in state.core_attributes if a.id in remaining)
            state.core_attributes = others + ordered

        logger.info(f"Core attributes in section {section.value} reordered")
