from __future__ import annotations
from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

class AssignmentSchema(BaseModel):
    id: int
    company_id: int
    title: str
    model_config = ConfigDict(from_attributes=True)

class AssignmentTenureSchema(BaseModel):
    id: int
    assignment_id: int
    anticipated_energy_percentage: Optional[int] = None
    started_at: date
    ended_at: Optional[date] = None
    model_config = ConfigDict(from_attributes=True)

class AssignmentCheckInSchema(BaseModel):
    id: int
    assignment_id: int
    check_in_started_on: date
    actual_energy_percentage: Optional[int] = None
    employee_rating: Optional[str] = None
    employee_private_notes: Optional[str] = None
    employee_personal_alignment: Optional[str] = None
    employee_completed_at: Optional[datetime] = None
    manager_rating: Optional[str] = None
    manager_private_notes: Optional[str] = None
    manager_completed_at: Optional[datetime] = None
    official_rating: Optional[str] = None
    shared_notes: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)
