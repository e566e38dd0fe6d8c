from __future__ import annotations
from enum import Enum
from datetime import date, datetime
from sqlalchemy import ForeignKey, String, Text, Date, DateTime, JSON, Enum as SAEnum
from sqlalchemy.sql import func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

class ChangeType(str, Enum):
    assignment_management = "assignment_management"
    position_tenure = "position_tenure"
    milestone_management = "milestone_management"
    aspiration_management = "aspiration_management"
    exploration = "exploration"
    bulk_update = "bulk_update"
    bulk_check_in_finalization = "bulk_check_in_finalization"

class MaapSnapshot(Base):
    __tablename__ = "maap_snapshots"

    id: Mapped[int] = mapped_column(primary_key=True)
    # exploration snapshots have no employee
    employee_id: Mapped[int | None] = mapped_column(ForeignKey("people.id", ondelete="CASCADE"), nullable=True, index=True)
    created_by_id: Mapped[int | None] = mapped_column(ForeignKey("people.id", ondelete="SET NULL"), nullable=True)
    company_id: Mapped[int] = mapped_column(ForeignKey("organizations.id", ondelete="CASCADE"), index=True)

    change_type: Mapped[ChangeType] = mapped_column(SAEnum(ChangeType, name="maap_change_type"), nullable=False)
    reason: Mapped[str] = mapped_column(Text, nullable=False)

    # employment_tenure, assignments, milestones, aspirations
    maap_data: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    form_params: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    # NULL until executed
    effective_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    employee = relationship("Person", foreign_keys=[employee_id])
    created_by = relationship("Person", foreign_keys=[created_by_id])
    company = relationship("Organization")

    @property
    def executed(self) -> bool:
        return self.effective_date is not None
