from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import select

from .models import Teammate

def get_teammate(db: Session, person_id: int, org_id: int) -> Optional[Teammate]:
    stmt = select(Teammate).where(Teammate.person_id == person_id, Teammate.organization_id == org_id)
    return db.scalars(stmt).first()
