from __future__ import annotations
from datetime import date
from sqlalchemy import ForeignKey, String, Integer, Date
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

class Ability(Base):
    __tablename__ = "abilities"

    id: Mapped[int] = mapped_column(primary_key=True)
    organization_id: Mapped[int] = mapped_column(ForeignKey("organizations.id", ondelete="CASCADE"), index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    organization = relationship("Organization", back_populates="abilities")


class TeammateMilestone(Base):
    __tablename__ = "teammate_milestones"

    id: Mapped[int] = mapped_column(primary_key=True)
    teammate_id: Mapped[int] = mapped_column(ForeignKey("teammates.id", ondelete="CASCADE"), index=True)
    ability_id: Mapped[int] = mapped_column(ForeignKey("abilities.id", ondelete="CASCADE"), index=True)
    milestone_level: Mapped[int] = mapped_column(Integer, nullable=False)
    certified_by_id: Mapped[int | None] = mapped_column(ForeignKey("people.id", ondelete="SET NULL"), nullable=True)
    attained_at: Mapped[date] = mapped_column(Date, nullable=False)

    ability = relationship("Ability")
    teammate = relationship("Teammate")
