from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.database import get_db
from authz.deps import Actor, require_teammate

from .schema import ExecuteChangesView
from . import service

maap_router = APIRouter(prefix="/organizations/{org_id}/people", tags=["MAAP"])

# Review a proposed set of changes for one employee
@maap_router.get("/{employee_id}/execute_changes", response_model=ExecuteChangesView)
def execute_changes(
    employee_id: int,
    maap_snapshot_id: int = Query(...),
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_teammate),
    ):
    return service.execute_changes_view(db, actor=actor, employee_id=employee_id, snapshot_id=maap_snapshot_id)
