from typing import Optional, List, Literal
from pydantic import BaseModel, ConfigDict, Field

from organization.models import OrganizationType

class PersonHit(BaseModel):
    id: int
    display_name: str
    email: str
    # link target inside the organization
    teammate_id: int

class OrganizationHit(BaseModel):
    id: int
    name: str
    type: OrganizationType
    model_config = ConfigDict(from_attributes=True)

class AssignmentHit(BaseModel):
    id: int
    title: str
    model_config = ConfigDict(from_attributes=True)

class AbilityHit(BaseModel):
    id: int
    name: str
    model_config = ConfigDict(from_attributes=True)

class SearchItem(BaseModel):
    kind: Literal["person", "organization", "assignment", "ability"]
    id: int
    label: str
    teammate_id: Optional[int] = None

class SearchResults(BaseModel):
    people: List[PersonHit] = Field(default_factory=list)
    organizations: List[OrganizationHit] = Field(default_factory=list)
    assignments: List[AssignmentHit] = Field(default_factory=list)
    abilities: List[AbilityHit] = Field(default_factory=list)
    # always empty; observations are not searchable here
    observations: List[dict] = Field(default_factory=list)
    items: List[SearchItem] = Field(default_factory=list)
    total_count: int = 0

class SearchPage(BaseModel):
    organization_id: int
    query: str = ""
    results: SearchResults = Field(default_factory=SearchResults)
