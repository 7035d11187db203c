from typing import List
from pydantic import BaseModel, ConfigDict

class ModelBase(BaseModel):
    name: str

class ModelCreate(ModelBase):
    pass

class ModelUpdate(ModelBase):
    pass

class Model(ModelBase):
    id: str

    model_config = ConfigDict(from_attributes=True)

class ManufacturerBase(BaseModel):
    name: str

class ManufacturerCreate(ManufacturerBase):
    pass

class ManufacturerUpdate(ManufacturerBase):
    pass

class Manufacturer(ManufacturerBase):
    id: str
    models: List[Model] = []
    used_by_categories: List[str] = []

    model_config = ConfigDict(from_attributes=True)
