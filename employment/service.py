from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import select

from .models import EmploymentTenure

def get_active_tenures(db: Session, *, teammate_id: int, company_id: int) -> List[EmploymentTenure]:
    stmt = (
        select(EmploymentTenure)
        .where(
            EmploymentTenure.teammate_id == teammate_id,
            EmploymentTenure.company_id == company_id,
            EmploymentTenure.ended_at.is_(None),
        )
        .order_by(EmploymentTenure.started_at.desc(), EmploymentTenure.id.desc())
    )
    return list(db.scalars(stmt))

def get_active_tenure(db: Session, *, teammate_id: int, company_id: int) -> Optional[EmploymentTenure]:
    tenures = get_active_tenures(db, teammate_id=teammate_id, company_id=company_id)
    return tenures[0] if tenures else None
