from fastapi import APIRouter, Depends

from auth.services.auth_service import get_current_person
from .models import Person
from .schema import PersonSchema

person_router = APIRouter(prefix="/people", tags=["People"])

# Get current person
@person_router.get("/me", response_model=PersonSchema)
def person_me(current_person: Person = Depends(get_current_person)):
    return current_person
