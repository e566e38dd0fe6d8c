from __future__ import annotations
from enum import Enum
from sqlalchemy import String, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.database import Base

class OrganizationType(str, Enum):
    company = "company"
    team = "team"

class Organization(Base):
    __tablename__ = "organizations"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    type: Mapped[OrganizationType] = mapped_column(
        SAEnum(OrganizationType, name="organization_type"),
        nullable=False,
        default=OrganizationType.company,
    )
    # teams hang off their company
    parent_id: Mapped[int | None] = mapped_column(
        ForeignKey("organizations.id", ondelete="CASCADE"), nullable=True, index=True
    )

    # relationships
    parent = relationship("Organization", remote_side=[id], back_populates="children")
    children = relationship("Organization", back_populates="parent")
    teammates = relationship("Teammate", back_populates="organization", cascade="all, delete-orphan")
    assignments = relationship("Assignment", back_populates="company", cascade="all, delete-orphan")
    abilities = relationship("Ability", back_populates="organization", cascade="all, delete-orphan")
