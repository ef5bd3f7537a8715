"""Company ORM — persists client companies shared between recruiters.

Invariants:
    - (name, activity) is unique: uq_companies_name_activity
    - Rows are never updated after insert
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from joboffer.db.base import Base


class CompanyRecord(Base):
    """Company row, referenced (not owned) by recruiters."""
    __tablename__ = "companies"
    __table_args__ = (
        UniqueConstraint("name", "activity", name="uq_companies_name_activity"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    activity: Mapped[str] = mapped_column(String(200), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
