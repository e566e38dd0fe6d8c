from __future__ import annotations
import logging
from typing import Optional, List

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from ability.service import get_milestones
from assignment import service as assignment_service
from assignment.models import AssignmentCheckIn
from assignment.schema import AssignmentCheckInSchema
from authz.deps import Actor
from authz.policy import (
    can_manage_employee_changes,
    can_see_manager_private_data,
    can_see_employee_private_data,
)
from employment.service import get_active_tenure as get_active_employment
from person.models import Person
from person.service import get_person
from teammate.service import get_teammate

from .change_detection import MaapChangeDetector
from .models import MaapSnapshot
from .schema import ExecuteChangesView, CurrentMaapData, AssignmentRow, ChangeCounts

logger = logging.getLogger(__name__)

NOT_SET = "<not set>"


def format_private_field_value(value: Optional[str], can_see: bool, employee_name: str, field_type: str) -> str:
    if can_see:
        return value if value and value.strip() else NOT_SET
    if field_type == "manager":
        return f"<only visible to {employee_name}'s managers>"
    return f"<only visible to {employee_name}>"


def get_snapshot_for_employee(db: Session, *, snapshot_id: int, org_id: int, employee_id: int) -> Optional[MaapSnapshot]:
    stmt = select(MaapSnapshot).where(
        MaapSnapshot.id == snapshot_id,
        MaapSnapshot.company_id == org_id,
        MaapSnapshot.employee_id == employee_id,
    )
    return db.scalars(stmt).first()


def _masked_check_in(
    check_in: AssignmentCheckIn,
    *,
    employee_name: str,
    see_manager: bool,
    see_employee: bool,
    ) -> AssignmentCheckInSchema:
    view = AssignmentCheckInSchema.model_validate(check_in)
    return view.model_copy(update={
        "employee_private_notes": format_private_field_value(
            check_in.employee_private_notes, see_employee, employee_name, "employee"
        ),
        "manager_private_notes": format_private_field_value(
            check_in.manager_private_notes, see_manager, employee_name, "manager"
        ),
    })


def build_execute_changes_view(
    db: Session,
    *,
    actor: Actor,
    employee: Person,
    snapshot: MaapSnapshot,
    ) -> ExecuteChangesView:
    """
    Assemble the read-only execute-changes page for one snapshot.
    An employee without a teammate record, tenures or check-ins still gets a
    complete view; the derived parts are simply empty.
    """
    org = actor.organization
    teammate = get_teammate(db, employee.id, org.id)
    see_manager = can_see_manager_private_data(db, actor.person, employee, org)
    see_employee = can_see_employee_private_data(actor.person, employee)
    mask = dict(employee_name=employee.display_name, see_manager=see_manager, see_employee=see_employee)

    current = CurrentMaapData()
    tenures = []
    check_ins: List[AssignmentCheckIn] = []
    milestones = []
    if teammate is not None:
        tenures = assignment_service.get_tenures(db, teammate_id=teammate.id, company_id=org.id)
        check_ins = assignment_service.get_open_check_ins(db, teammate_id=teammate.id, company_id=org.id)
        milestones = get_milestones(db, teammate_id=teammate.id, org_id=org.id)
        current = CurrentMaapData(
            employment=get_active_employment(db, teammate_id=teammate.id, company_id=org.id),
            assignments=[t for t in tenures if t.ended_at is None],
            milestones=milestones,
            check_ins=[_masked_check_in(c, **mask) for c in check_ins],
        )

    detector = MaapChangeDetector(db, snapshot=snapshot, teammate=teammate, company_id=org.id)

    assignment_ids = {t.assignment_id for t in tenures}
    for entry in detector.proposed_assignments():
        try:
            assignment_ids.add(int(entry.get("id")))
        except (TypeError, ValueError):
            continue

    rows = []
    for assignment in assignment_service.get_assignments_for_company(db, company_id=org.id, ids=assignment_ids):
        held = [t for t in tenures if t.assignment_id == assignment.id]
        active = next((t for t in reversed(held) if t.ended_at is None), None)
        open_check_in = next((c for c in check_ins if c.assignment_id == assignment.id), None)
        rows.append(AssignmentRow(
            assignment=assignment,
            active_tenure=active,
            most_recent_tenure=held[-1] if held else None,
            open_check_in=_masked_check_in(open_check_in, **mask) if open_check_in else None,
            proposed=detector.proposed_assignment(assignment.id),
            has_changes=detector.assignment_has_changes(assignment.id),
        ))
    rows.sort(key=lambda r: (-((r.active_tenure and r.active_tenure.anticipated_energy_percentage) or 0), r.assignment.title))

    counts = ChangeCounts(**detector.change_counts([r.assignment.id for r in rows], milestones))

    return ExecuteChangesView(
        organization=org,
        person=employee,
        maap_snapshot=snapshot,
        current_maap_data=current,
        assignment_data=rows,
        employment_has_changes=bool(counts.employment),
        change_counts=counts,
        can_see_manager_private_data=see_manager,
        can_see_employee_private_data=see_employee,
    )


def execute_changes_view(db: Session, *, actor: Actor, employee_id: int, snapshot_id: int) -> ExecuteChangesView:
    """
    Load and render a pending snapshot for review.
    - 404 if the employee does not exist
    - 403 if the actor may not manage the employee's changes (snapshot is not read)
    - 404 if the snapshot is missing or belongs to another org/employee
    """
    org = actor.organization
    employee = get_person(db, employee_id)
    if not employee:
        raise HTTPException(status_code=404, detail="employee not found")

    if not can_manage_employee_changes(db, actor.person, employee, org):
        logger.info(
            "person %s denied execute_changes for employee %s in organization %s",
            actor.person.id, employee.id, org.id,
        )
        raise HTTPException(status_code=403, detail="forbidden: cannot manage employee changes")

    snapshot = get_snapshot_for_employee(db, snapshot_id=snapshot_id, org_id=org.id, employee_id=employee.id)
    if not snapshot:
        raise HTTPException(status_code=404, detail="maap snapshot not found")

    return build_execute_changes_view(db, actor=actor, employee=employee, snapshot=snapshot)
