"""Job ORM — one job history entry of a recruiter.

Invariants:
    - Always belongs to a Recruiter (recruiter_id FK, cascade delete)
    - (recruiter_id, company_name, start_date) is unique: uq_jobs_reconciliation_key
    - end_date is NULL iff is_current
"""

import uuid
from datetime import date

from sqlalchemy import String, Integer, Boolean, Date, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from joboffer.db.base import Base


class JobRecord(Base):
    """Job history row."""
    __tablename__ = "jobs"
    __table_args__ = (
        UniqueConstraint(
            "recruiter_id", "company_name", "start_date",
            name="uq_jobs_reconciliation_key",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    recruiter_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("recruiters.id", ondelete="CASCADE"),
        nullable=False,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    company_name: Mapped[str] = mapped_column(String(200), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    is_current: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    recruiter: Mapped["RecruiterRecord"] = relationship(
        "RecruiterRecord", back_populates="jobs",
    )
