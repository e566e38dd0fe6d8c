"""initial: organizations, people, teammates, tenures, check-ins, milestones, maap snapshots

Revision ID: 3a1c9e7d52f0
Revises: 
Create Date: 2026-10-18 10:12:41.508211

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a1c9e7d52f0'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CHANGE_TYPES = (
    "assignment_management",
    "position_tenure",
    "milestone_management",
    "aspiration_management",
    "exploration",
    "bulk_update",
    "bulk_check_in_finalization",
)


def upgrade():
    op.create_table(
        "organizations",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("type", sa.Enum("company", "team", name="organization_type"), nullable=False),
        sa.Column("parent_id", sa.Integer(), sa.ForeignKey("organizations.id", ondelete="CASCADE"), nullable=True),
    )
    op.create_index("ix_organizations_parent_id", "organizations", ["parent_id"])

    op.create_table(
        "people",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("first_name", sa.String(64), nullable=False),
        sa.Column("middle_name", sa.String(64), nullable=True),
        sa.Column("last_name", sa.String(64), nullable=True),
        sa.Column("preferred_name", sa.String(64), nullable=True),
        sa.Column("suffix", sa.String(16), nullable=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("unique_textable_phone_number", sa.String(32), nullable=True, unique=True),
        sa.Column("og_admin", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("current_organization_id", sa.Integer(),
                  sa.ForeignKey("organizations.id", ondelete="SET NULL"), nullable=True),
    )
    op.create_index("ix_people_current_organization_id", "people", ["current_organization_id"])

    op.create_table(
        "teammates",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("person_id", sa.Integer(), sa.ForeignKey("people.id", ondelete="CASCADE"), nullable=False),
        sa.Column("organization_id", sa.Integer(), sa.ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False),
        sa.Column("can_manage_employment", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("can_manage_maap", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("first_employed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_terminated_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("person_id", "organization_id", name="uq_teammates_person_org"),
    )
    op.create_index("ix_teammates_person_id", "teammates", ["person_id"])
    op.create_index("ix_teammates_organization_id", "teammates", ["organization_id"])

    op.create_table(
        "employment_tenures",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("teammate_id", sa.Integer(), sa.ForeignKey("teammates.id", ondelete="CASCADE"), nullable=False),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False),
        sa.Column("manager_teammate_id", sa.Integer(), sa.ForeignKey("teammates.id", ondelete="SET NULL"), nullable=True),
        sa.Column("position_id", sa.Integer(), nullable=True),
        sa.Column("seat_id", sa.Integer(), nullable=True),
        sa.Column("started_at", sa.Date(), nullable=False),
        sa.Column("ended_at", sa.Date(), nullable=True),
    )
    op.create_index("ix_employment_tenures_teammate_id", "employment_tenures", ["teammate_id"])
    op.create_index("ix_employment_tenures_company_id", "employment_tenures", ["company_id"])
    op.create_index("ix_employment_tenures_manager_teammate_id", "employment_tenures", ["manager_teammate_id"])

    op.create_table(
        "assignments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
    )
    op.create_index("ix_assignments_company_id", "assignments", ["company_id"])

    op.create_table(
        "assignment_tenures",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("teammate_id", sa.Integer(), sa.ForeignKey("teammates.id", ondelete="CASCADE"), nullable=False),
        sa.Column("assignment_id", sa.Integer(), sa.ForeignKey("assignments.id", ondelete="CASCADE"), nullable=False),
        sa.Column("anticipated_energy_percentage", sa.Integer(), nullable=True),
        sa.Column("started_at", sa.Date(), nullable=False),
        sa.Column("ended_at", sa.Date(), nullable=True),
    )
    op.create_index("ix_assignment_tenures_teammate_id", "assignment_tenures", ["teammate_id"])
    op.create_index("ix_assignment_tenures_assignment_id", "assignment_tenures", ["assignment_id"])

    op.create_table(
        "assignment_check_ins",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("teammate_id", sa.Integer(), sa.ForeignKey("teammates.id", ondelete="CASCADE"), nullable=False),
        sa.Column("assignment_id", sa.Integer(), sa.ForeignKey("assignments.id", ondelete="CASCADE"), nullable=False),
        sa.Column("check_in_started_on", sa.Date(), nullable=False),
        sa.Column("actual_energy_percentage", sa.Integer(), nullable=True),
        sa.Column("employee_rating", sa.String(32), nullable=True),
        sa.Column("employee_private_notes", sa.Text(), nullable=True),
        sa.Column("employee_personal_alignment", sa.String(32), nullable=True),
        sa.Column("employee_completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("manager_rating", sa.String(32), nullable=True),
        sa.Column("manager_private_notes", sa.Text(), nullable=True),
        sa.Column("manager_completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("official_rating", sa.String(32), nullable=True),
        sa.Column("shared_notes", sa.Text(), nullable=True),
        sa.Column("official_check_in_completed_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_assignment_check_ins_teammate_id", "assignment_check_ins", ["teammate_id"])
    op.create_index("ix_assignment_check_ins_assignment_id", "assignment_check_ins", ["assignment_id"])

    op.create_table(
        "abilities",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("organization_id", sa.Integer(), sa.ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
    )
    op.create_index("ix_abilities_organization_id", "abilities", ["organization_id"])

    op.create_table(
        "teammate_milestones",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("teammate_id", sa.Integer(), sa.ForeignKey("teammates.id", ondelete="CASCADE"), nullable=False),
        sa.Column("ability_id", sa.Integer(), sa.ForeignKey("abilities.id", ondelete="CASCADE"), nullable=False),
        sa.Column("milestone_level", sa.Integer(), nullable=False),
        sa.Column("certified_by_id", sa.Integer(), sa.ForeignKey("people.id", ondelete="SET NULL"), nullable=True),
        sa.Column("attained_at", sa.Date(), nullable=False),
    )
    op.create_index("ix_teammate_milestones_teammate_id", "teammate_milestones", ["teammate_id"])
    op.create_index("ix_teammate_milestones_ability_id", "teammate_milestones", ["ability_id"])

    op.create_table(
        "maap_snapshots",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("employee_id", sa.Integer(), sa.ForeignKey("people.id", ondelete="CASCADE"), nullable=True),
        sa.Column("created_by_id", sa.Integer(), sa.ForeignKey("people.id", ondelete="SET NULL"), nullable=True),
        sa.Column("company_id", sa.Integer(), sa.ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False),
        sa.Column("change_type", sa.Enum(*CHANGE_TYPES, name="maap_change_type"), nullable=False),
        sa.Column("reason", sa.Text(), nullable=False),
        sa.Column("maap_data", sa.JSON(), nullable=True),
        sa.Column("form_params", sa.JSON(), nullable=True),
        sa.Column("effective_date", sa.Date(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_maap_snapshots_employee_id", "maap_snapshots", ["employee_id"])
    op.create_index("ix_maap_snapshots_company_id", "maap_snapshots", ["company_id"])


def downgrade():
    op.drop_table("maap_snapshots")
    op.drop_table("teammate_milestones")
    op.drop_table("abilities")
    op.drop_table("assignment_check_ins")
    op.drop_table("assignment_tenures")
    op.drop_table("assignments")
    op.drop_table("employment_tenures")
    op.drop_table("teammates")
    op.drop_table("people")
    op.drop_table("organizations")
    # enum types outlive their tables on Postgres
    sa.Enum(name="maap_change_type").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="organization_type").drop(op.get_bind(), checkfirst=True)
