"""Study ORM — educational background entry of a recruiter.

Invariants:
    - Always belongs to a Recruiter (recruiter_id FK, cascade delete)
    - status holds a StudyStatus value
"""

import uuid

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from joboffer.db.base import Base


class StudyRecord(Base):
    """Study row."""
    __tablename__ = "studies"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    recruiter_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("recruiters.id", ondelete="CASCADE"),
        nullable=False,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    institution: Mapped[str] = mapped_column(String(200), nullable=False)
    program: Mapped[str] = mapped_column(String(200), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)

    recruiter: Mapped["RecruiterRecord"] = relationship(
        "RecruiterRecord", back_populates="studies",
    )
