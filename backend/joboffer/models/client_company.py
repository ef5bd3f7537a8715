"""ClientCompanyLink ORM — ordered association between a recruiter and a company.

Invariants:
    - (recruiter_id, company_id) is unique: a company is linked once per recruiter
    - Deleting a recruiter deletes its links, never the companies
"""

import uuid

from sqlalchemy import Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from joboffer.db.base import Base


class ClientCompanyLink(Base):
    """Association object carrying the order of a recruiter's client companies."""
    __tablename__ = "recruiter_client_companies"
    __table_args__ = (
        UniqueConstraint(
            "recruiter_id", "company_id", name="uq_client_companies_link",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    recruiter_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("recruiters.id", ondelete="CASCADE"),
        nullable=False,
    )
    company_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("companies.id"), nullable=False,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    recruiter: Mapped["RecruiterRecord"] = relationship(
        "RecruiterRecord", back_populates="client_links",
    )
    company: Mapped["CompanyRecord"] = relationship(
        "CompanyRecord", lazy="selectin",
    )
