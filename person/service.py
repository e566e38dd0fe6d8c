from typing import Optional
from sqlalchemy.orm import Session

from .models import Person

def get_person(db: Session, person_id: int) -> Optional[Person]:
    return db.get(Person, person_id)
