from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr

class PersonSummary(BaseModel):
    id: int
    display_name: str
    model_config = ConfigDict(from_attributes=True)

class PersonSchema(PersonSummary):
    first_name: str
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    preferred_name: Optional[str] = None
    suffix: Optional[str] = None
    email: EmailStr
    current_organization_id: Optional[int] = None
