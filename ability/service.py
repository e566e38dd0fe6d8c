from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import select

from .models import Ability, TeammateMilestone

def get_milestones(db: Session, *, teammate_id: int, org_id: int) -> List[TeammateMilestone]:
    stmt = (
        select(TeammateMilestone)
        .join(Ability, Ability.id == TeammateMilestone.ability_id)
        .where(TeammateMilestone.teammate_id == teammate_id, Ability.organization_id == org_id)
        .order_by(TeammateMilestone.attained_at.desc())
    )
    return list(db.scalars(stmt))
