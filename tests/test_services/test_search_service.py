import unittest
from datetime import date, datetime, timezone
from unittest.mock import MagicMock

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.database import Base
import models_bootstrap  # noqa: F401
from organization.models import Organization, OrganizationType
from person.models import Person
from teammate.models import Teammate
from employment.models import EmploymentTenure
from assignment.models import Assignment
from ability.models import Ability
from search import service


class SearchServiceTests(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine("sqlite:///:memory:", future=True)
        Base.metadata.create_all(self.engine)
        TestingSession = sessionmaker(bind=self.engine, future=True)
        self.db = TestingSession()

        # --- seed orgs ---
        self.org = Organization(name="Acme Testing Co")
        self.other_org = Organization(name="Other Testing Co")
        self.db.add_all([self.org, self.other_org])
        self.db.flush()
        self.team = Organization(name="Test Squad", type=OrganizationType.team, parent_id=self.org.id)
        self.db.add(self.team)
        self.db.flush()

        # --- seed people ---
        employed = datetime(2024, 1, 1, tzinfo=timezone.utc)

        def employee(org, ended_at=None, **kw):
            p = Person(**kw)
            self.db.add(p)
            self.db.flush()
            t = Teammate(person_id=p.id, organization_id=org.id, first_employed_at=employed)
            self.db.add(t)
            self.db.flush()
            self.db.add(EmploymentTenure(teammate_id=t.id, company_id=org.id, started_at=date(2024, 1, 1),
                                         ended_at=ended_at))
            return p, t

        self.john, self.john_t = employee(self.org, first_name="John", last_name="Doe",
                                          preferred_name="Johnny", email="john.doe@example.com")
        self.jane, _ = employee(self.org, first_name="Jane", middle_name="Michael", last_name="Smith",
                                suffix="Jr.", email="jane@example.com", unique_textable_phone_number="+1234567890")
        # left the company
        self.gone, _ = employee(self.org, ended_at=date(2024, 6, 1), first_name="Johann", last_name="Gone",
                                email="johann@example.com")
        # employed elsewhere only
        self.elsewhere, _ = employee(self.other_org, first_name="Johnathan", last_name="Elsewhere",
                                     email="johnathan@example.com")

        # --- seed assignments / abilities ---
        self.db.add_all([
            Assignment(company_id=self.org.id, title="Test Automation"),
            Assignment(company_id=self.other_org.id, title="Test Planning"),
            Ability(organization_id=self.org.id, name="Testing"),
            Ability(organization_id=self.org.id, name="100% Coverage"),
        ])
        self.db.commit()

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    # ---- blank queries ----
    def test_absent_query_returns_empty_page(self):
        page = service.search_directory(self.db, self.org, None)
        self.assertEqual(page.query, "")
        self.assertEqual(page.results.total_count, 0)
        self.assertEqual(page.results.items, [])
        self.assertEqual(page.results.people, [])
        self.assertEqual(page.organization_id, self.org.id)

    def test_blank_query_runs_no_sql(self):
        db = MagicMock()
        page = service.search_directory(db, self.org, "   ")
        self.assertEqual(page.query, "")
        self.assertEqual(page.results.total_count, 0)
        db.execute.assert_not_called()
        db.scalars.assert_not_called()

    # ---- people ----
    def test_people_by_preferred_name(self):
        page = service.search_directory(self.db, self.org, "Johnny")
        self.assertEqual([p.id for p in page.results.people], [self.john.id])
        self.assertEqual(page.results.people[0].teammate_id, self.john_t.id)
        self.assertEqual(page.results.people[0].display_name, "Johnny Doe")

    def test_people_by_middle_name_suffix_phone_and_email(self):
        for q in ("Michael", "Jr", "1234567890", "jane@example"):
            page = service.search_directory(self.db, self.org, q)
            self.assertEqual([p.id for p in page.results.people], [self.jane.id], q)

    def test_people_scoped_to_active_employment_in_org(self):
        page = service.search_directory(self.db, self.org, "joh")
        ids = {p.id for p in page.results.people}
        self.assertEqual(ids, {self.john.id})

    def test_case_insensitive_and_stripped(self):
        page = service.search_directory(self.db, self.org, "  DOE  ")
        self.assertEqual(page.query, "DOE")
        self.assertEqual([p.id for p in page.results.people], [self.john.id])

    # ---- other categories ----
    def test_categories_scoped_to_org(self):
        page = service.search_directory(self.db, self.org, "test")
        self.assertEqual({o.name for o in page.results.organizations}, {"Acme Testing Co", "Test Squad"})
        self.assertEqual([a.title for a in page.results.assignments], ["Test Automation"])
        self.assertEqual([a.name for a in page.results.abilities], ["Testing"])

    def test_items_and_total_count(self):
        page = service.search_directory(self.db, self.org, "test")
        self.assertEqual(page.results.total_count, len(page.results.items))
        self.assertEqual(page.results.total_count, 4)
        self.assertEqual(page.results.observations, [])
        self.assertEqual([i.kind for i in page.results.items],
                         ["organization", "organization", "assignment", "ability"])

    def test_like_wildcards_are_literal(self):
        page = service.search_directory(self.db, self.org, "100%")
        self.assertEqual([a.name for a in page.results.abilities], ["100% Coverage"])
        page = service.search_directory(self.db, self.org, "%")
        self.assertEqual([a.name for a in page.results.abilities], ["100% Coverage"])
        self.assertEqual(page.results.people, [])

    def test_limit_applies_per_category(self):
        page = service.search_directory(self.db, self.org, "test", limit=1)
        self.assertEqual(len(page.results.organizations), 1)
        self.assertEqual(page.results.total_count, 3)

    def test_idempotent(self):
        first = service.search_directory(self.db, self.org, "test")
        second = service.search_directory(self.db, self.org, "test")
        self.assertEqual(first.model_dump(), second.model_dump())


if __name__ == "__main__":
    unittest.main()
