from __future__ import annotations
from datetime import date, datetime
from sqlalchemy import ForeignKey, String, Integer, Date, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

class Assignment(Base):
    __tablename__ = "assignments"

    id: Mapped[int] = mapped_column(primary_key=True)
    company_id: Mapped[int] = mapped_column(ForeignKey("organizations.id", ondelete="CASCADE"), index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)

    company = relationship("Organization", back_populates="assignments")


class AssignmentTenure(Base):
    __tablename__ = "assignment_tenures"

    id: Mapped[int] = mapped_column(primary_key=True)
    teammate_id: Mapped[int] = mapped_column(ForeignKey("teammates.id", ondelete="CASCADE"), index=True)
    assignment_id: Mapped[int] = mapped_column(ForeignKey("assignments.id", ondelete="CASCADE"), index=True)
    anticipated_energy_percentage: Mapped[int | None] = mapped_column(Integer, nullable=True)
    started_at: Mapped[date] = mapped_column(Date, nullable=False)
    # NULL = still active
    ended_at: Mapped[date | None] = mapped_column(Date, nullable=True)

    assignment = relationship("Assignment")
    teammate = relationship("Teammate")


class AssignmentCheckIn(Base):
    __tablename__ = "assignment_check_ins"

    id: Mapped[int] = mapped_column(primary_key=True)
    teammate_id: Mapped[int] = mapped_column(ForeignKey("teammates.id", ondelete="CASCADE"), index=True)
    assignment_id: Mapped[int] = mapped_column(ForeignKey("assignments.id", ondelete="CASCADE"), index=True)
    check_in_started_on: Mapped[date] = mapped_column(Date, nullable=False)

    # employee side
    actual_energy_percentage: Mapped[int | None] = mapped_column(Integer, nullable=True)
    employee_rating: Mapped[str | None] = mapped_column(String(32), nullable=True)
    employee_private_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    employee_personal_alignment: Mapped[str | None] = mapped_column(String(32), nullable=True)
    employee_completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # manager side
    manager_rating: Mapped[str | None] = mapped_column(String(32), nullable=True)
    manager_private_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    manager_completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # official / finalized
    official_rating: Mapped[str | None] = mapped_column(String(32), nullable=True)
    shared_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    official_check_in_completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    assignment = relationship("Assignment")
    teammate = relationship("Teammate")

    @property
    def is_open(self) -> bool:
        return self.official_check_in_completed_at is None
