from typing import Optional
from pydantic import BaseModel, ConfigDict

from .models import OrganizationType

class OrganizationSchema(BaseModel):
    id: int
    name: str
    type: OrganizationType
    parent_id: Optional[int] = None
    model_config = ConfigDict(from_attributes=True)
