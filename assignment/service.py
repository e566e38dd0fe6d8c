from __future__ import annotations
from typing import Optional, List, Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import Assignment, AssignmentTenure, AssignmentCheckIn

def get_assignments_for_company(db: Session, *, company_id: int, ids: Iterable[int]) -> List[Assignment]:
    ids = set(ids)
    if not ids:
        return []
    stmt = select(Assignment).where(Assignment.company_id == company_id, Assignment.id.in_(ids))
    return list(db.scalars(stmt))

def get_tenures(db: Session, *, teammate_id: int, company_id: int) -> List[AssignmentTenure]:
    stmt = (
        select(AssignmentTenure)
        .join(Assignment, Assignment.id == AssignmentTenure.assignment_id)
        .where(AssignmentTenure.teammate_id == teammate_id, Assignment.company_id == company_id)
    )
    stmt = stmt.order_by(AssignmentTenure.started_at.asc(), AssignmentTenure.id.asc())
    return list(db.scalars(stmt))

def get_active_tenure(db: Session, *, teammate_id: int, assignment_id: int) -> Optional[AssignmentTenure]:
    stmt = (
        select(AssignmentTenure)
        .where(
            AssignmentTenure.teammate_id == teammate_id,
            AssignmentTenure.assignment_id == assignment_id,
            AssignmentTenure.ended_at.is_(None),
        )
        .order_by(AssignmentTenure.started_at.desc())
    )
    return db.scalars(stmt).first()

def get_open_check_ins(db: Session, *, teammate_id: int, company_id: int) -> List[AssignmentCheckIn]:
    stmt = (
        select(AssignmentCheckIn)
        .join(Assignment, Assignment.id == AssignmentCheckIn.assignment_id)
        .where(
            AssignmentCheckIn.teammate_id == teammate_id,
            Assignment.company_id == company_id,
            AssignmentCheckIn.official_check_in_completed_at.is_(None),
        )
        .order_by(AssignmentCheckIn.check_in_started_on.desc())
    )
    return list(db.scalars(stmt))

def get_open_check_in(db: Session, *, teammate_id: int, assignment_id: int) -> Optional[AssignmentCheckIn]:
    stmt = (
        select(AssignmentCheckIn)
        .where(
            AssignmentCheckIn.teammate_id == teammate_id,
            AssignmentCheckIn.assignment_id == assignment_id,
            AssignmentCheckIn.official_check_in_completed_at.is_(None),
        )
        .order_by(AssignmentCheckIn.check_in_started_on.desc())
    )
    return db.scalars(stmt).first()
