from __future__ import annotations
import logging
from typing import Optional

from sqlalchemy import select, or_, exists
from sqlalchemy.orm import Session

from core.config_loader import settings
from ability.models import Ability
from assignment.models import Assignment
from employment.models import EmploymentTenure
from organization.models import Organization
from person.models import Person
from teammate.models import Teammate

from .schema import (
    SearchPage,
    SearchResults,
    SearchItem,
    PersonHit,
    OrganizationHit,
    AssignmentHit,
    AbilityHit,
)

logger = logging.getLogger(__name__)

PERSON_SEARCH_COLUMNS = (
    Person.first_name,
    Person.middle_name,
    Person.last_name,
    Person.preferred_name,
    Person.suffix,
    Person.email,
    Person.unique_textable_phone_number,
)


def normalize_query(query: Optional[str]) -> str:
    return (query or "").strip()


def _like_pattern(query: str) -> str:
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def search_people(db: Session, *, org_id: int, pattern: str, limit: int) -> list[PersonHit]:
    employed_here = exists().where(
        EmploymentTenure.teammate_id == Teammate.id,
        EmploymentTenure.company_id == org_id,
        EmploymentTenure.ended_at.is_(None),
    )
    stmt = (
        select(Person, Teammate.id)
        .join(Teammate, Teammate.person_id == Person.id)
        .where(
            Teammate.organization_id == org_id,
            employed_here,
            or_(*[col.ilike(pattern, escape="\\") for col in PERSON_SEARCH_COLUMNS]),
        )
        .order_by(Person.last_name.asc(), Person.first_name.asc(), Person.id.asc())
        .limit(limit)
    )
    return [
        PersonHit(id=person.id, display_name=person.display_name, email=person.email, teammate_id=teammate_id)
        for person, teammate_id in db.execute(stmt)
    ]


def search_organizations(db: Session, *, org_id: int, pattern: str, limit: int) -> list[OrganizationHit]:
    stmt = (
        select(Organization)
        .where(
            or_(Organization.id == org_id, Organization.parent_id == org_id),
            Organization.name.ilike(pattern, escape="\\"),
        )
        .order_by(Organization.name.asc())
        .limit(limit)
    )
    return [OrganizationHit.model_validate(o) for o in db.scalars(stmt)]


def search_assignments(db: Session, *, org_id: int, pattern: str, limit: int) -> list[AssignmentHit]:
    stmt = (
        select(Assignment)
        .where(Assignment.company_id == org_id, Assignment.title.ilike(pattern, escape="\\"))
        .order_by(Assignment.title.asc())
        .limit(limit)
    )
    return [AssignmentHit.model_validate(a) for a in db.scalars(stmt)]


def search_abilities(db: Session, *, org_id: int, pattern: str, limit: int) -> list[AbilityHit]:
    stmt = (
        select(Ability)
        .where(Ability.organization_id == org_id, Ability.name.ilike(pattern, escape="\\"))
        .order_by(Ability.name.asc())
        .limit(limit)
    )
    return [AbilityHit.model_validate(a) for a in db.scalars(stmt)]


def search_directory(db: Session, org: Organization, query: Optional[str], *, limit: Optional[int] = None) -> SearchPage:
    """
    Organization-scoped directory search.
    A blank query returns an empty page without touching the database.
    """
    q = normalize_query(query)
    if not q:
        return SearchPage(organization_id=org.id, query="")

    limit = limit or settings.SEARCH_RESULT_LIMIT
    pattern = _like_pattern(q)

    people = search_people(db, org_id=org.id, pattern=pattern, limit=limit)
    organizations = search_organizations(db, org_id=org.id, pattern=pattern, limit=limit)
    assignments = search_assignments(db, org_id=org.id, pattern=pattern, limit=limit)
    abilities = search_abilities(db, org_id=org.id, pattern=pattern, limit=limit)

    items = (
        [SearchItem(kind="person", id=p.id, label=p.display_name, teammate_id=p.teammate_id) for p in people]
        + [SearchItem(kind="organization", id=o.id, label=o.name) for o in organizations]
        + [SearchItem(kind="assignment", id=a.id, label=a.title) for a in assignments]
        + [SearchItem(kind="ability", id=a.id, label=a.name) for a in abilities]
    )
    logger.debug("search in organization %s returned %d hits", org.id, len(items))

    return SearchPage(
        organization_id=org.id,
        query=q,
        results=SearchResults(
            people=people,
            organizations=organizations,
            assignments=assignments,
            abilities=abilities,
            items=items,
            total_count=len(items),
        ),
    )
