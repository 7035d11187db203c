from pydantic import BaseModel

class ParentInheritance(BaseModel):
    enabled: bool
