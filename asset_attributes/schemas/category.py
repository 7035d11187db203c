from typing import List, Optional
from pydantic import BaseModel, ConfigDict

class CategoryAttributeConfig(BaseModel):
    attribute_id: str
    is_enabled: bool = True
    order: int = 0

class CategoryBase(BaseModel):
    name: str
    parent_id: Optional[str] = None

class CategoryCreate(CategoryBase):
    pass

class CategoryUpdate(BaseModel):
    # parent_id=None in the request body moves the category to the root;
    # leaving the field out keeps the current parent.
    name: Optional[str] = None
    parent_id: Optional[str] = None

class Category(CategoryBase):
    id: str
    system_attributes: List[CategoryAttributeConfig] = []
    custom_attributes: List[CategoryAttributeConfig] = []

    model_config = ConfigDict(from_attributes=True)

class InheritedAttributes(BaseModel):
    system: List[CategoryAttributeConfig] = []
    custom: List[CategoryAttributeConfig] = []

class AttributeOrder(BaseModel):
    attribute_ids: List[str]
