"""
The attribute <-> category relationship.

A binding lives in two places: a CategoryAttributeConfig in the
category's list and the category id in attribute.applied_to_categories.
Both sides are only ever changed through bind() and unbind(), so no
caller can update one and forget the other.

System attributes bind into a category's system list, custom attributes
into its custom list.
"""
from typing import List
from asset_attributes.schemas.attribute import Attribute
from asset_attributes.schemas.category import Category, CategoryAttributeConfig

def binding_list(category: Category, attribute: Attribute) -> List[CategoryAttributeConfig]:
    return category.system_attributes if attribute.is_system else category.custom_attributes

def bind(attribute: Attribute, category: Category) -> bool:
    """
    Append an enabled binding at the end of the list and record the
    category on the attribute. Returns False when already bound.
    """
    entries = binding_list(category, attribute)
    added = False
    if not any(entry.attribute_id == attribute.id for entry in entries):
        entries.append(
            CategoryAttributeConfig(attribute_id=attribute.id, is_enabled=True, order=len(entries))
        )
        added = True
    if category.id not in attribute.applied_to_categories:
        attribute.applied_to_categories.append(category.id)
    return added

def unbind(attribute: Attribute, category: Category) -> bool:
    """Drop the binding from the category and the category from the attribute."""
    entries = binding_list(category, attribute)
    kept = [entry for entry in entries if entry.attribute_id != attribute.id]
    removed = len(kept) != len(entries)
    entries[:] = kept
    if category.id in attribute.applied_to_categories:
        attribute.applied_to_categories.remove(category.id)
    return removed

def purge(categories: List[Category], attribute_id: str) -> int:
    """Remove every binding to attribute_id from every category. Returns how many went."""
    removed = 0
    for category in categories:
        for entries in (category.system_attributes, category.custom_attributes):
            kept = [entry for entry in entries if entry.attribute_id != attribute_id]
            removed += len(entries) - len(kept)
            entries[:] = kept
    return removed
