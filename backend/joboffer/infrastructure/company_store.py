"""Company Store — SQLAlchemy implementation of CompanyStore.

Invariants:
    - insert() commits one row; uq_companies_name_activity violations become
      CompanyAlreadyExistsError after rollback
    - find() is a pure lookup, no writes
    - Any other SQLAlchemy failure rolls back and surfaces as DatabaseError
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from joboffer.core.entities import Company
from joboffer.core.errors import CompanyAlreadyExistsError, DatabaseError
from joboffer.infrastructure.record_mapping import company_from_record
from joboffer.models.company import CompanyRecord

logger = logging.getLogger(__name__)


async def find_company_record(
    db: AsyncSession, name: str, activity: str,
) -> CompanyRecord | None:
    try:
        result = await db.execute(
            select(CompanyRecord)
            .where(CompanyRecord.name == name)
            .where(CompanyRecord.activity == activity)
        )
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"Company lookup failed: {e}",
            extra={"company": f"{name} ({activity})", "operation": "find"},
        )
        raise DatabaseError("Company lookup failed", "query") from e
    return result.scalar_one_or_none()


class SqlCompanyStore:
    """Company persistence on an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find(self, name: str, activity: str) -> Company | None:
        record = await find_company_record(self.db, name, activity)
        return company_from_record(record) if record else None

    async def insert(self, company: Company) -> Company:
        record = CompanyRecord(name=company.name, activity=company.activity)
        self.db.add(record)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Unique constraint rejected company: {e.orig}",
                extra={"company": str(company), "operation": "insert"},
            )
            raise CompanyAlreadyExistsError(str(company)) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Company insert rolled back: {e}",
                extra={"company": str(company), "operation": "insert"},
            )
            raise DatabaseError("Company insert failed", "insert") from e
        return company_from_record(record)
