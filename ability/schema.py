from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict

class TeammateMilestoneSchema(BaseModel):
    id: int
    ability_id: int
    milestone_level: int
    certified_by_id: Optional[int] = None
    attained_at: date
    model_config = ConfigDict(from_attributes=True)
