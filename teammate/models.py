from __future__ import annotations
from datetime import datetime
from sqlalchemy import ForeignKey, UniqueConstraint, Boolean, DateTime, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

class Teammate(Base):
    __tablename__ = "teammates"
    __table_args__ = (UniqueConstraint("person_id", "organization_id", name="uq_teammates_person_org"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    person_id: Mapped[int] = mapped_column(ForeignKey("people.id", ondelete="CASCADE"), index=True)
    organization_id: Mapped[int] = mapped_column(
        ForeignKey("organizations.id", ondelete="CASCADE"),
        index=True,  # common filter: WHERE organization_id=...
    )

    # capability flags
    can_manage_employment: Mapped[bool] = mapped_column(Boolean, server_default=text("false"), default=False, nullable=False)
    can_manage_maap: Mapped[bool] = mapped_column(Boolean, server_default=text("false"), default=False, nullable=False)

    first_employed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    last_terminated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # relationships
    person = relationship("Person", back_populates="teammates")
    organization = relationship("Organization", back_populates="teammates")
    employment_tenures = relationship(
        "EmploymentTenure",
        back_populates="teammate",
        foreign_keys="EmploymentTenure.teammate_id",
        cascade="all, delete-orphan",
    )

    @property
    def terminated(self) -> bool:
        return self.last_terminated_at is not None

    @property
    def employed(self) -> bool:
        return self.first_employed_at is not None and self.last_terminated_at is None
