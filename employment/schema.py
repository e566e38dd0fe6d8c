from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict

class EmploymentTenureSchema(BaseModel):
    id: int
    teammate_id: int
    company_id: int
    manager_teammate_id: Optional[int] = None
    position_id: Optional[int] = None
    seat_id: Optional[int] = None
    started_at: date
    ended_at: Optional[date] = None
    model_config = ConfigDict(from_attributes=True)
