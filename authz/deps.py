import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from auth.services.auth_service import get_current_person
from core.database import get_db
from employment.service import get_active_tenure
from organization.models import Organization
from organization.service import get_organization
from person.models import Person
from teammate.models import Teammate
from teammate.service import get_teammate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Actor:
    """Who is acting, and in which organization."""
    person: Person
    organization: Organization
    # None for platform admins acting outside their own organizations
    teammate: Optional[Teammate] = None


def get_organization_or_404(org_id: int, db: Session = Depends(get_db)) -> Organization:
    org = get_organization(db, org_id)
    if not org:
        raise HTTPException(status_code=404, detail="organization not found")
    return org


def require_teammate(
    org: Organization = Depends(get_organization_or_404),
    person: Person = Depends(get_current_person),
    db: Session = Depends(get_db),
    ) -> Actor:
    teammate = get_teammate(db, person.id, org.id)
    if person.og_admin:
        return Actor(person=person, organization=org, teammate=teammate)

    if (
        teammate is None
        or not teammate.employed
        or get_active_tenure(db, teammate_id=teammate.id, company_id=org.id) is None
    ):
        logger.info("person %s denied access to organization %s", person.id, org.id)
        raise HTTPException(status_code=403, detail="forbidden: not a teammate of this organization")
    return Actor(person=person, organization=org, teammate=teammate)
