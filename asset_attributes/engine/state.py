import uuid
from typing import Iterable, List, Optional
from pydantic import BaseModel
from asset_attributes.core.errors import InvalidInputError, NotFoundError
from asset_attributes.schemas.attribute import Attribute
from asset_attributes.schemas.category import Category
from asset_attributes.schemas.core_attribute import CoreAttribute
from asset_attributes.schemas.manufacturer import Manufacturer

class StoreState(BaseModel):
    attributes: List[Attribute] = []
    categories: List[Category] = []
    manufacturers: List[Manufacturer] = []
    core_attributes: List[CoreAttribute] = []

    def find_attribute(self, attribute_id: str) -> Optional[Attribute]:
        return next((a for a in self.attributes if a.id == attribute_id), None)

    def find_category(self, category_id: Optional[str]) -> Optional[Category]:
        if category_id is None:
            return None
        return next((c for c in self.categories if c.id == category_id), None)

    def find_manufacturer(self, manufacturer_id: str) -> Optional[Manufacturer]:
        return next((m for m in self.manufacturers if m.id == manufacturer_id), None)

    def find_core_attribute(self, attribute_id: str) -> Optional[CoreAttribute]:
        return next((a for a in self.core_attributes if a.id == attribute_id), None)

    def require_attribute(self, attribute_id: str) -> Attribute:
        attribute = self.find_attribute(attribute_id)
        if attribute is None:
            raise NotFoundError("attribute", attribute_id)
        return attribute

    def require_category(self, category_id: str) -> Category:
        category = self.find_category(category_id)
        if category is None:
            raise NotFoundError("category", category_id)
        return category

    def require_manufacturer(self, manufacturer_id: str) -> Manufacturer:
        manufacturer = self.find_manufacturer(manufacturer_id)
        if manufacturer is None:
            raise NotFoundError("manufacturer", manufacturer_id)
        return manufacturer

    def require_core_attribute(self, attribute_id: str) -> CoreAttribute:
        attribute = self.find_core_attribute(attribute_id)
        if attribute is None:
            raise NotFoundError("core attribute", attribute_id)
        return attribute

def new_id(prefix: str, taken: Iterable[str]) -> str:
    """Generate `<prefix>-<hex>` not present in `taken`."""
    taken = set(taken)
    while True:
        candidate = f"{prefix}-{uuid.uuid4().hex[:12]}"
        if candidate not in taken:
            return candidate

def require_name(value: Optional[str], what: str = "Name") -> str:
    """Strip a name or label and refuse it when blank."""
    name = (value or "").strip()
    if not name:
        raise InvalidInputError(f"{what} must not be empty")
    return name
