from __future__ import annotations
from datetime import date
from sqlalchemy import ForeignKey, Date, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

class EmploymentTenure(Base):
    __tablename__ = "employment_tenures"

    id: Mapped[int] = mapped_column(primary_key=True)
    teammate_id: Mapped[int] = mapped_column(ForeignKey("teammates.id", ondelete="CASCADE"), index=True)
    company_id: Mapped[int] = mapped_column(ForeignKey("organizations.id", ondelete="CASCADE"), index=True)
    manager_teammate_id: Mapped[int | None] = mapped_column(
        ForeignKey("teammates.id", ondelete="SET NULL"), nullable=True, index=True
    )

    position_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    seat_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    started_at: Mapped[date] = mapped_column(Date, nullable=False)
    # NULL = still active
    ended_at: Mapped[date | None] = mapped_column(Date, nullable=True)

    # relationships
    teammate = relationship("Teammate", back_populates="employment_tenures", foreign_keys=[teammate_id])
    manager_teammate = relationship("Teammate", foreign_keys=[manager_teammate_id])
    company = relationship("Organization")
