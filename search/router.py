from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.database import get_db
from authz.deps import Actor, require_teammate

from .schema import SearchPage
from . import service

search_router = APIRouter(prefix="/organizations/{org_id}/search", tags=["Search"])

@search_router.get("", response_model=SearchPage)
def search(
    q: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_teammate),
    ):
    return service.search_directory(db, actor.organization, q)
