"""Recruiter ORM — persists the aggregate root of a recruiter profile.

Invariants:
    - (first_name, last_name, identity_card) is unique: uq_recruiters_identity
    - jobs, studies and client_links are loaded ordered by position
    - jobs and studies are owned: delete-orphan cascade removes them with the recruiter
    - client_links are owned, the companies they point to are not

Design Decisions:
    - lazy="selectin" on every collection: the aggregate loads in one round of queries
      and never lazy-loads inside an async session
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from joboffer.db.base import Base


class RecruiterRecord(Base):
    """Recruiter aggregate root row."""
    __tablename__ = "recruiters"
    __table_args__ = (
        UniqueConstraint(
            "first_name", "last_name", "identity_card",
            name="uq_recruiters_identity",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    identity_card: Mapped[str] = mapped_column(String(32), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    # Relationships
    jobs: Mapped[list["JobRecord"]] = relationship(
        "JobRecord", back_populates="recruiter", order_by="JobRecord.position",
        cascade="all, delete-orphan", lazy="selectin",
    )
    studies: Mapped[list["StudyRecord"]] = relationship(
        "StudyRecord", back_populates="recruiter", order_by="StudyRecord.position",
        cascade="all, delete-orphan", lazy="selectin",
    )
    client_links: Mapped[list["ClientCompanyLink"]] = relationship(
        "ClientCompanyLink", back_populates="recruiter",
        order_by="ClientCompanyLink.position",
        cascade="all, delete-orphan", lazy="selectin",
    )
