from __future__ import annotations
from datetime import date, datetime
from typing import Optional, List, Any, Dict
from pydantic import BaseModel, ConfigDict, Field, field_validator

from organization.schema import OrganizationSchema
from person.schema import PersonSummary
from employment.schema import EmploymentTenureSchema
from assignment.schema import AssignmentSchema, AssignmentTenureSchema, AssignmentCheckInSchema
from ability.schema import TeammateMilestoneSchema
from .models import ChangeType


class MaapSnapshotSchema(BaseModel):
    id: int
    employee_id: Optional[int] = None
    created_by_id: Optional[int] = None
    company_id: int
    change_type: ChangeType
    reason: str
    maap_data: Dict[str, Any] = Field(default_factory=dict)
    effective_date: Optional[date] = None
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)

    @field_validator("maap_data", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return v if isinstance(v, dict) else {}


class CurrentMaapData(BaseModel):
    employment: Optional[EmploymentTenureSchema] = None
    assignments: List[AssignmentTenureSchema] = Field(default_factory=list)
    milestones: List[TeammateMilestoneSchema] = Field(default_factory=list)
    check_ins: List[AssignmentCheckInSchema] = Field(default_factory=list)


class AssignmentRow(BaseModel):
    assignment: AssignmentSchema
    active_tenure: Optional[AssignmentTenureSchema] = None
    most_recent_tenure: Optional[AssignmentTenureSchema] = None
    open_check_in: Optional[AssignmentCheckInSchema] = None
    proposed: Optional[Dict[str, Any]] = None
    has_changes: bool = False


class ChangeCounts(BaseModel):
    employment: int = 0
    assignments: int = 0
    milestones: int = 0
    aspirations: int = 0


class ExecuteChangesView(BaseModel):
    organization: OrganizationSchema
    person: PersonSummary
    maap_snapshot: MaapSnapshotSchema
    current_maap_data: CurrentMaapData = Field(default_factory=CurrentMaapData)
    assignment_data: List[AssignmentRow] = Field(default_factory=list)
    employment_has_changes: bool = False
    change_counts: ChangeCounts = Field(default_factory=ChangeCounts)
    can_see_manager_private_data: bool = False
    can_see_employee_private_data: bool = False
