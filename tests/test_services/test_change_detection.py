import unittest
from datetime import date, datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.database import Base
import models_bootstrap  # noqa: F401
from organization.models import Organization
from person.models import Person
from teammate.models import Teammate
from employment.models import EmploymentTenure
from assignment.models import Assignment, AssignmentTenure, AssignmentCheckIn
from ability.models import Ability, TeammateMilestone
from maap.models import MaapSnapshot, ChangeType
from maap.change_detection import MaapChangeDetector, is_present, parse_date


class ChangeDetectionTests(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine("sqlite:///:memory:", future=True)
        Base.metadata.create_all(self.engine)
        TestingSession = sessionmaker(bind=self.engine, future=True)
        self.db = TestingSession()

        self.org = Organization(name="Acme")
        self.db.add(self.org)
        self.db.flush()

        self.person = Person(first_name="Eddie", email="eddie@example.com")
        self.db.add(self.person)
        self.db.flush()
        self.teammate = Teammate(person_id=self.person.id, organization_id=self.org.id,
                                 first_employed_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
        self.db.add(self.teammate)
        self.db.flush()

        self.db.add(EmploymentTenure(teammate_id=self.teammate.id, company_id=self.org.id, position_id=1,
                                     seat_id=2, started_at=date(2024, 1, 1)))

        self.held = Assignment(company_id=self.org.id, title="Held")
        self.checked = Assignment(company_id=self.org.id, title="Checked")
        self.unheld = Assignment(company_id=self.org.id, title="Unheld")
        self.db.add_all([self.held, self.checked, self.unheld])
        self.db.flush()

        self.db.add_all([
            AssignmentTenure(teammate_id=self.teammate.id, assignment_id=self.held.id,
                             anticipated_energy_percentage=50, started_at=date(2024, 1, 1)),
            AssignmentTenure(teammate_id=self.teammate.id, assignment_id=self.checked.id,
                             anticipated_energy_percentage=20, started_at=date(2024, 1, 1)),
            AssignmentCheckIn(teammate_id=self.teammate.id, assignment_id=self.checked.id,
                              check_in_started_on=date(2024, 5, 1), employee_rating="meeting",
                              manager_rating="meeting"),
        ])

        self.ability = Ability(organization_id=self.org.id, name="Python")
        self.db.add(self.ability)
        self.db.flush()
        self.milestone = TeammateMilestone(teammate_id=self.teammate.id, ability_id=self.ability.id,
                                           milestone_level=2, attained_at=date(2024, 3, 1))
        self.db.add(self.milestone)
        self.db.commit()

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def _detector(self, maap_data, teammate="default"):
        snap = MaapSnapshot(employee_id=self.person.id, company_id=self.org.id,
                            change_type=ChangeType.bulk_update, reason="test", maap_data=maap_data)
        self.db.add(snap)
        self.db.commit()
        return MaapChangeDetector(self.db, snapshot=snap,
                                  teammate=self.teammate if teammate == "default" else teammate,
                                  company_id=self.org.id)

    def _assignment(self, assignment, energy, started_at="2024-01-01", **blocks):
        entry = {"id": assignment.id, "tenure": {"anticipated_energy_percentage": energy, "started_at": started_at}}
        entry.update(blocks)
        return entry

    # ---- assignments ----
    def test_no_proposal_means_no_change(self):
        detector = self._detector({"assignments": []})
        self.assertFalse(detector.assignment_has_changes(self.held.id))

    def test_missing_maap_data(self):
        detector = self._detector(None)
        self.assertFalse(detector.assignment_has_changes(self.held.id))
        self.assertFalse(detector.employment_has_changes())

    def test_identical_tenure_is_not_a_change(self):
        detector = self._detector({"assignments": [self._assignment(self.held, 50)]})
        self.assertFalse(detector.assignment_has_changes(self.held.id))

    def test_energy_change(self):
        detector = self._detector({"assignments": [self._assignment(self.held, 60)]})
        self.assertTrue(detector.assignment_has_changes(self.held.id))

    def test_start_date_change(self):
        detector = self._detector({"assignments": [self._assignment(self.held, 50, started_at="2024-02-01")]})
        self.assertTrue(detector.assignment_has_changes(self.held.id))

    def test_zero_energy_without_active_tenure_is_not_a_change(self):
        detector = self._detector({"assignments": [self._assignment(self.unheld, 0)]})
        self.assertFalse(detector.assignment_has_changes(self.unheld.id))

    def test_new_tenure_is_a_change(self):
        detector = self._detector({"assignments": [self._assignment(self.unheld, 10)]})
        self.assertTrue(detector.assignment_has_changes(self.unheld.id))

    def test_matching_open_check_in_is_not_a_change(self):
        detector = self._detector({"assignments": [
            self._assignment(self.checked, 20, employee_check_in={"employee_rating": "meeting"})
        ]})
        self.assertFalse(detector.assignment_has_changes(self.checked.id))

    def test_differing_open_check_in_is_a_change(self):
        detector = self._detector({"assignments": [
            self._assignment(self.checked, 20, manager_check_in={"manager_rating": "exceeding"})
        ]})
        self.assertTrue(detector.assignment_has_changes(self.checked.id))

    def test_completion_flag_mismatch_is_a_change(self):
        detector = self._detector({"assignments": [
            self._assignment(self.checked, 20, employee_check_in={
                "employee_rating": "meeting", "employee_completed_at": "2024-05-02T10:00:00Z",
            })
        ]})
        self.assertTrue(detector.assignment_has_changes(self.checked.id))

    def test_blank_check_in_without_open_check_in_is_not_a_change(self):
        detector = self._detector({"assignments": [
            self._assignment(self.held, 50, employee_check_in={"employee_rating": None, "employee_private_notes": "  "})
        ]})
        self.assertFalse(detector.assignment_has_changes(self.held.id))

    def test_new_check_in_values_are_a_change(self):
        detector = self._detector({"assignments": [
            self._assignment(self.held, 50, official_check_in={"official_rating": "exceeding"})
        ]})
        self.assertTrue(detector.assignment_has_changes(self.held.id))

    def test_check_in_field_left_out_of_proposal_is_a_change(self):
        detector = self._detector({"assignments": [
            self._assignment(self.checked, 20, manager_check_in={"manager_private_notes": None})
        ]})
        self.assertTrue(detector.assignment_has_changes(self.checked.id))

    def test_string_energy_is_read_as_a_number(self):
        detector = self._detector({"assignments": [self._assignment(self.held, "50")]})
        self.assertFalse(detector.assignment_has_changes(self.held.id))
        detector = self._detector({"assignments": [self._assignment(self.unheld, "15")]})
        self.assertTrue(detector.assignment_has_changes(self.unheld.id))

    def test_unreadable_energy_counts_as_zero(self):
        detector = self._detector({"assignments": [self._assignment(self.unheld, "lots")]})
        self.assertFalse(detector.assignment_has_changes(self.unheld.id))

    def test_tenure_that_is_not_a_mapping(self):
        detector = self._detector({"assignments": [{"id": self.unheld.id, "tenure": "n/a"}]})
        self.assertFalse(detector.assignment_has_changes(self.unheld.id))
        detector = self._detector({"assignments": [{"id": self.held.id, "tenure": ["50"]}]})
        self.assertTrue(detector.assignment_has_changes(self.held.id))

    def test_maap_data_that_is_not_a_mapping(self):
        detector = self._detector(["not", "a", "mapping"])
        self.assertFalse(detector.assignment_has_changes(self.held.id))
        self.assertFalse(detector.employment_has_changes())

    def test_without_teammate_everything_proposed_is_new(self):
        detector = self._detector({"assignments": [self._assignment(self.held, 50)]}, teammate=None)
        self.assertTrue(detector.assignment_has_changes(self.held.id))

    # ---- employment ----
    def test_employment_unchanged(self):
        detector = self._detector({"employment_tenure": {"position_id": 1, "seat_id": 2, "manager_teammate_id": None,
                                                         "started_at": "2024-01-01"}})
        self.assertFalse(detector.employment_has_changes())

    def test_employment_seat_changed(self):
        detector = self._detector({"employment_tenure": {"position_id": 1, "seat_id": 3, "started_at": "2024-01-01"}})
        self.assertTrue(detector.employment_has_changes())

    def test_employment_ids_compared_as_strings(self):
        detector = self._detector({"employment_tenure": {"position_id": "1", "seat_id": "2", "started_at": "2024-01-01"}})
        self.assertFalse(detector.employment_has_changes())

    # ---- milestones ----
    def test_milestone_unchanged(self):
        detector = self._detector({"milestones": [
            {"ability_id": self.ability.id, "milestone_level": 2, "certified_by_id": None, "attained_at": "2024-03-01"}
        ]})
        self.assertFalse(detector.milestone_has_changes(self.milestone))

    def test_milestone_level_changed(self):
        detector = self._detector({"milestones": [
            {"ability_id": self.ability.id, "milestone_level": 3, "attained_at": "2024-03-01"}
        ]})
        self.assertTrue(detector.milestone_has_changes(self.milestone))
        counts = detector.change_counts([self.held.id], [self.milestone])
        self.assertEqual(counts, {"employment": 0, "assignments": 0, "milestones": 1, "aspirations": 0})

    # ---- helpers ----
    def test_is_present(self):
        self.assertFalse(is_present(None))
        self.assertFalse(is_present(False))
        self.assertFalse(is_present(" "))
        self.assertFalse(is_present([]))
        self.assertTrue(is_present(0))
        self.assertTrue(is_present("x"))

    def test_parse_date(self):
        self.assertEqual(parse_date("2024-03-01T12:00:00Z"), date(2024, 3, 1))
        self.assertEqual(parse_date(date(2024, 3, 1)), date(2024, 3, 1))
        self.assertIsNone(parse_date("not a date"))
        self.assertIsNone(parse_date(None))


if __name__ == "__main__":
    unittest.main()
