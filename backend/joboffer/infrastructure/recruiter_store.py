"""Recruiter Store — SQLAlchemy implementation of RecruiterStore.

Invariants:
    - insert() and update() each end in exactly one commit or one rollback
    - insert() raises RecruiterAlreadyExistsError only when the recruiter identity is
      stored after the rollback; any other rejected constraint is a DatabaseError
    - update() replaces jobs, studies and client links as a whole; old child rows
      are flushed away before the new ones are added so per-recruiter unique keys
      can be reused
    - Client companies are linked by (name, activity); missing ones are inserted
      in the same transaction
    - find() re-reads from the database (populate_existing), never from stale identity-map state
    - SQLAlchemy failures in reads and writes roll back and surface as DatabaseError

Design Decisions:
    - The identity conflict is confirmed by re-reading rather than parsing the driver
      message: SQLite reports column lists, PostgreSQL reports constraint names
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from joboffer.core.entities import Company, Recruiter
from joboffer.core.errors import (
    DatabaseError, RecruiterAlreadyExistsError, ResourceNotFoundError,
)
from joboffer.infrastructure.company_store import find_company_record
from joboffer.infrastructure.record_mapping import (
    job_records, recruiter_from_record, study_records,
)
from joboffer.models.client_company import ClientCompanyLink
from joboffer.models.company import CompanyRecord
from joboffer.models.recruiter import RecruiterRecord

logger = logging.getLogger(__name__)


class SqlRecruiterStore:
    """Recruiter aggregate persistence on an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find(
        self, first_name: str, last_name: str, identity_card: str,
    ) -> Recruiter | None:
        record = await self._find_record(first_name, last_name, identity_card)
        return recruiter_from_record(record) if record else None

    async def insert(self, recruiter: Recruiter) -> Recruiter:
        links = await self._client_links(recruiter.client_companies)
        record = RecruiterRecord(
            first_name=recruiter.first_name,
            last_name=recruiter.last_name,
            identity_card=recruiter.identity_card,
            jobs=job_records(recruiter.job_history),
            studies=study_records(recruiter.studies),
            client_links=links,
        )
        self.db.add(record)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Unique constraint rejected recruiter: {e.orig}",
                extra={"recruiter": str(recruiter.identity), "operation": "insert"},
            )
            if await self._find_record(*recruiter.identity) is not None:
                raise RecruiterAlreadyExistsError(str(recruiter.identity)) from e
            raise DatabaseError("Integrity constraint violated", "insert") from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Recruiter insert rolled back: {e}",
                extra={"recruiter": str(recruiter.identity), "operation": "insert"},
            )
            raise DatabaseError("Recruiter aggregate insert failed", "insert") from e
        return recruiter_from_record(record)

    async def update(self, recruiter: Recruiter) -> Recruiter:
        record = await self._find_record(*recruiter.identity)
        if record is None:
            raise ResourceNotFoundError("Recruiter", str(recruiter.identity))

        links = await self._client_links(recruiter.client_companies)
        try:
            record.jobs.clear()
            record.studies.clear()
            record.client_links.clear()
            await self.db.flush()

            record.jobs.extend(job_records(recruiter.job_history))
            record.studies.extend(study_records(recruiter.studies))
            record.client_links.extend(links)
            record.updated_at = datetime.now(timezone.utc)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Recruiter update rolled back: {e}",
                extra={"recruiter": str(recruiter.identity), "operation": "update"},
            )
            raise DatabaseError("Recruiter aggregate replace failed", "update") from e
        return recruiter_from_record(record)

    async def _find_record(
        self, first_name: str, last_name: str, identity_card: str,
    ) -> RecruiterRecord | None:
        try:
            result = await self.db.execute(
                select(RecruiterRecord)
                .where(RecruiterRecord.first_name == first_name)
                .where(RecruiterRecord.last_name == last_name)
                .where(RecruiterRecord.identity_card == identity_card)
                .execution_options(populate_existing=True)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Recruiter lookup failed: {e}",
                extra={
                    "recruiter": f"{first_name} {last_name} ({identity_card})",
                    "operation": "find",
                },
            )
            raise DatabaseError("Recruiter lookup failed", "query") from e

    async def _client_links(
        self, companies: list[Company],
    ) -> list[ClientCompanyLink]:
        links = []
        for position, company in enumerate(companies):
            record = await find_company_record(
                self.db, company.name, company.activity,
            )
            if record is None:
                record = CompanyRecord(name=company.name, activity=company.activity)
            links.append(ClientCompanyLink(company=record, position=position))
        return links
