from __future__ import annotations
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, Boolean, ForeignKey, text
from core.database import Base

class Person(Base):
    __tablename__ = "people"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(64), nullable=False)
    middle_name: Mapped[str | None] = mapped_column(String(64), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(64), nullable=True)
    preferred_name: Mapped[str | None] = mapped_column(String(64), nullable=True)
    suffix: Mapped[str | None] = mapped_column(String(16), nullable=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    unique_textable_phone_number: Mapped[str | None] = mapped_column(String(32), unique=True, nullable=True)

    # platform admin, bypasses organization checks
    og_admin: Mapped[bool] = mapped_column(Boolean, server_default=text("false"), default=False, nullable=False)

    current_organization_id: Mapped[int | None] = mapped_column(
        ForeignKey("organizations.id", ondelete="SET NULL"), index=True, nullable=True
    )

    # relationships
    current_organization = relationship("Organization")
    teammates = relationship("Teammate", back_populates="person", cascade="all, delete-orphan")

    @property
    def display_name(self) -> str:
        parts = [self.preferred_name or self.first_name, self.last_name, self.suffix]
        return " ".join(p for p in parts if p)
