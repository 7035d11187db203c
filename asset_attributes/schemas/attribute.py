from enum import Enum
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict

class AttributeType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    DROPDOWN = "dropdown"
    DATE = "date"
    BOOLEAN = "boolean"

DefaultValue = Union[bool, int, float, str]

class AttributeBase(BaseModel):
    label: str
    type: AttributeType = AttributeType.TEXT
    # "preferred" in the UI; display only, never enforced as a hard requirement
    is_required: bool = False
    applied_to_categories: List[str] = []
    description: Optional[str] = None
    dropdown_options: Optional[List[str]] = None
    order: Optional[int] = None
    default_value: Optional[DefaultValue] = None
    units: Optional[str] = None

class AttributeCreate(AttributeBase):
    pass

class AttributeUpdate(BaseModel):
    label: Optional[str] = None
    type: Optional[AttributeType] = None
    is_system: Optional[bool] = None
    is_required: Optional[bool] = None
    applied_to_categories: Optional[List[str]] = None
    description: Optional[str] = None
    dropdown_options: Optional[List[str]] = None
    order: Optional[int] = None
    default_value: Optional[DefaultValue] = None
    units: Optional[str] = None

class Attribute(AttributeBase):
    id: str
    is_system: bool = False

    model_config = ConfigDict(from_attributes=True)
