from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field
from asset_attributes.schemas.attribute import AttributeType
from asset_attributes.schemas.core_attribute import CoreAttributeSection, CoreAttributeType

class CategoryAttributeView(BaseModel):
    """A category binding joined with its attribute definition."""
    kind: Literal["category"] = "category"
    attribute_id: str
    label: str
    type: AttributeType
    source: Literal["system", "custom"]
    is_enabled: bool
    is_preferred: bool
    order: int
    units: Optional[str] = None
    category_id: str
    category_name: str
    inherited: bool = False

class CoreAttributeView(BaseModel):
    """An asset-level field shown on every form regardless of category."""
    kind: Literal["core"] = "core"
    attribute_id: str
    label: str
    type: CoreAttributeType
    section: CoreAttributeSection
    is_enabled: bool
    is_required: bool
    units: Optional[str] = None

AttributeView = Annotated[
    Union[CategoryAttributeView, CoreAttributeView],
    Field(discriminator="kind"),
]
