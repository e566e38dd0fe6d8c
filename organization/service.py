from typing import Optional
from sqlalchemy.orm import Session

from .models import Organization

def get_organization(db: Session, org_id: int) -> Optional[Organization]:
    return db.get(Organization, org_id)
