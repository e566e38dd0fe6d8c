"""Authorization rules for employment-change data inside one organization.

Every function here is a read-only predicate: missing teammate or tenure
records mean "not allowed", never an error.
"""
from __future__ import annotations
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from employment.models import EmploymentTenure
from organization.models import Organization
from person.models import Person
from teammate.models import Teammate
from teammate.service import get_teammate

logger = logging.getLogger(__name__)


def in_managerial_hierarchy_of(db: Session, manager: Teammate, teammate: Optional[Teammate]) -> bool:
    """True if `manager` sits anywhere above `teammate` in the reporting chain.

    The chain is followed through active employment tenures in the teammate's
    organization. Cycles in bad data terminate instead of looping.
    """
    if teammate is None or teammate.organization_id != manager.organization_id:
        return False

    company_id = teammate.organization_id
    visited: set[int] = set()
    frontier = [teammate.id]
    while frontier:
        current_id = frontier.pop()
        if current_id in visited:
            continue
        visited.add(current_id)

        stmt = select(EmploymentTenure.manager_teammate_id).where(
            EmploymentTenure.teammate_id == current_id,
            EmploymentTenure.company_id == company_id,
            EmploymentTenure.ended_at.is_(None),
            EmploymentTenure.manager_teammate_id.is_not(None),
        )
        for manager_id in db.scalars(stmt):
            if manager_id == manager.id:
                return True
            frontier.append(manager_id)
    return False


def can_manage_employee_changes(db: Session, actor: Person, target: Person, org: Organization) -> bool:
    if actor.og_admin:
        return True

    actor_teammate = get_teammate(db, actor.id, org.id)
    if actor_teammate is None:
        return False
    if actor_teammate.can_manage_employment:
        return True

    target_teammate = get_teammate(db, target.id, org.id)
    return in_managerial_hierarchy_of(db, actor_teammate, target_teammate)


def can_see_manager_private_data(db: Session, actor: Person, employee: Person, org: Organization) -> bool:
    # employees never see their own manager's notes
    if actor.id == employee.id:
        return False
    return can_manage_employee_changes(db, actor, employee, org)


def can_see_employee_private_data(actor: Person, employee: Person) -> bool:
    return actor.id == employee.id
