"""Compare a MAAP snapshot's proposed data against what is currently stored."""
from __future__ import annotations
from datetime import date, datetime
from typing import Any, Iterable, Optional

from sqlalchemy.orm import Session

from assignment.models import AssignmentCheckIn
from assignment import service as assignment_service
from ability.models import TeammateMilestone
from employment.service import get_active_tenure as get_active_employment
from teammate.models import Teammate
from .models import MaapSnapshot

EMPLOYEE_CHECK_IN_FIELDS = (
    "actual_energy_percentage",
    "employee_rating",
    "employee_private_notes",
    "employee_personal_alignment",
)
MANAGER_CHECK_IN_FIELDS = ("manager_rating", "manager_private_notes")
OFFICIAL_CHECK_IN_FIELDS = ("official_rating", "shared_notes")

# proposed block key -> (compared fields, completion timestamp attribute)
CHECK_IN_BLOCKS = {
    "employee_check_in": (EMPLOYEE_CHECK_IN_FIELDS, "employee_completed_at"),
    "manager_check_in": (MANAGER_CHECK_IN_FIELDS, "manager_completed_at"),
    "official_check_in": (OFFICIAL_CHECK_IN_FIELDS, "official_check_in_completed_at"),
}


def is_present(value: Any) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, dict)):
        return bool(value)
    return True


def parse_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def id_str(value: Any) -> str:
    return "" if value is None else str(value)


def energy_value(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def snapshot_section(snapshot: MaapSnapshot, key: str) -> Any:
    data = snapshot.maap_data
    if not isinstance(data, dict):
        return None
    return data.get(key)


class MaapChangeDetector:
    def __init__(self, db: Session, *, snapshot: MaapSnapshot, teammate: Optional[Teammate], company_id: int):
        self.db = db
        self.snapshot = snapshot
        self.teammate = teammate
        self.company_id = company_id

    # --- proposed data lookups ---

    def proposed_assignments(self) -> list[dict]:
        return [a for a in (snapshot_section(self.snapshot, "assignments") or []) if isinstance(a, dict)]

    def proposed_assignment(self, assignment_id: int) -> Optional[dict]:
        for entry in self.proposed_assignments():
            if id_str(entry.get("id")) == str(assignment_id):
                return entry
        return None

    def proposed_milestone(self, ability_id: int) -> Optional[dict]:
        for entry in snapshot_section(self.snapshot, "milestones") or []:
            if isinstance(entry, dict) and id_str(entry.get("ability_id")) == str(ability_id):
                return entry
        return None

    # --- employment ---

    def employment_has_changes(self) -> bool:
        proposed = snapshot_section(self.snapshot, "employment_tenure")
        if not isinstance(proposed, dict) or not proposed:
            return False

        current = None
        if self.teammate is not None:
            current = get_active_employment(self.db, teammate_id=self.teammate.id, company_id=self.company_id)
        if current is None:
            return True

        return (
            id_str(current.position_id) != id_str(proposed.get("position_id"))
            or id_str(current.manager_teammate_id) != id_str(proposed.get("manager_teammate_id", proposed.get("manager_id")))
            or current.started_at != parse_date(proposed.get("started_at"))
            or id_str(current.seat_id) != id_str(proposed.get("seat_id"))
        )

    # --- assignments ---

    def assignment_has_changes(self, assignment_id: int) -> bool:
        proposed = self.proposed_assignment(assignment_id)
        if proposed is None:
            return False

        current_tenure = None
        open_check_in = None
        if self.teammate is not None:
            current_tenure = assignment_service.get_active_tenure(
                self.db, teammate_id=self.teammate.id, assignment_id=assignment_id
            )
            open_check_in = assignment_service.get_open_check_in(
                self.db, teammate_id=self.teammate.id, assignment_id=assignment_id
            )

        proposed_tenure = proposed.get("tenure")
        if not isinstance(proposed_tenure, dict):
            proposed_tenure = {}
        return self._tenure_changed(current_tenure, proposed_tenure) or self.check_in_has_changes(
            open_check_in, proposed
        )

    def _tenure_changed(self, current_tenure, proposed_tenure: dict) -> bool:
        proposed_energy = energy_value(proposed_tenure.get("anticipated_energy_percentage"))
        if current_tenure is None:
            # proposing 0% with nothing active just confirms the ended state
            return proposed_energy > 0
        return (
            energy_value(current_tenure.anticipated_energy_percentage) != proposed_energy
            or current_tenure.started_at != parse_date(proposed_tenure.get("started_at"))
        )

    def check_in_has_changes(self, current: Optional[AssignmentCheckIn], proposed: dict) -> bool:
        for key, (fields, completed_attr) in CHECK_IN_BLOCKS.items():
            block = proposed.get(key)
            if not isinstance(block, dict):
                continue
            if current is None:
                if any(is_present(v) for v in block.values()):
                    return True
                continue
            if any(getattr(current, f) != block.get(f) for f in fields):
                return True
            if (getattr(current, completed_attr) is not None) != is_present(block.get(completed_attr)):
                return True
        return False

    # --- milestones ---

    def milestone_has_changes(self, milestone: TeammateMilestone) -> bool:
        proposed = self.proposed_milestone(milestone.ability_id)
        if proposed is None:
            return False
        return (
            id_str(milestone.milestone_level) != id_str(proposed.get("milestone_level"))
            or id_str(milestone.certified_by_id) != id_str(proposed.get("certified_by_id"))
            or milestone.attained_at != parse_date(proposed.get("attained_at"))
        )

    def change_counts(self, assignment_ids: Iterable[int], milestones: Iterable[TeammateMilestone]) -> dict:
        return {
            "employment": 1 if self.employment_has_changes() else 0,
            "assignments": sum(1 for a_id in assignment_ids if self.assignment_has_changes(a_id)),
            "milestones": sum(1 for m in milestones if self.milestone_has_changes(m)),
            "aspirations": 0,
        }
