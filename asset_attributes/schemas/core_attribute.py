from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict

class CoreAttributeType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    DROPDOWN = "dropdown"
    DATE = "date"
    BOOLEAN = "boolean"
    SEARCH = "search"

class CoreAttributeSection(str, Enum):
    ASSET_INFO = "asset-info"
    STATUS = "status"
    CONTACT = "contact"
    DATES = "dates"
    WARRANTY = "warranty"
    CUSTOM = "custom"
    YOUR_ATTRIBUTES = "your-attributes"

class CoreAttributeBase(BaseModel):
    label: str
    type: CoreAttributeType = CoreAttributeType.TEXT
    section: Optional[CoreAttributeSection] = None
    is_enabled: bool = True
    is_required: bool = False
    description: Optional[str] = None
    detailed_description: Optional[str] = None
    dropdown_options: Optional[List[str]] = None
    units: Optional[str] = None

class CoreAttributeCreate(CoreAttributeBase):
    pass

class CoreAttributeUpdate(BaseModel):
    label: Optional[str] = None
    type: Optional[CoreAttributeType] = None
    section: Optional[CoreAttributeSection] = None
    is_enabled: Optional[bool] = None
    is_required: Optional[bool] = None
    description: Optional[str] = None
    detailed_description: Optional[str] = None
    dropdown_options: Optional[List[str]] = None
    units: Optional[str] = None

class CoreAttribute(CoreAttributeBase):
    id: str
    section: CoreAttributeSection = CoreAttributeSection.YOUR_ATTRIBUTES

    model_config = ConfigDict(from_attributes=True)
