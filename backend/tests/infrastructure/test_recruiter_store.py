"""Recruiter Store — SQL contract tests for the aggregate round-trip and replace.

Tests cover:
    - insert/find keep collection order and every field
    - insert links existing companies and stores missing ones in the same commit
    - duplicate identity insert rejected by the unique constraint
    - update replaces nested collections as a whole, no orphans left behind
    - update of an unknown identity raises ResourceNotFoundError
    - only an identity clash is reported as RecruiterAlreadyExistsError
    - read failures surface as DatabaseError
"""

from datetime import date

import pytest
from sqlalchemy import func, select

from joboffer.core.domain_types import StudyStatus
from joboffer.core.entities import Company, Job, Recruiter, Study
from joboffer.core.errors import (
    DatabaseError, RecruiterAlreadyExistsError, ResourceNotFoundError,
)
from joboffer.infrastructure.company_store import SqlCompanyStore
from joboffer.infrastructure.recruiter_store import SqlRecruiterStore
from joboffer.models.client_company import ClientCompanyLink
from joboffer.models.company import CompanyRecord
from joboffer.models.job import JobRecord
from joboffer.models.recruiter import RecruiterRecord
from joboffer.models.study import StudyRecord


def _recruiter() -> Recruiter:
    return Recruiter(
        "Patricia", "Maidana", "28123456",
        job_history=[
            Job("Accenture", "Sr. Talent Acquisition", date(2015, 5, 1), True),
            Job("Accenture", "Talent Acquisition", date(2014, 1, 1), False, date(2015, 4, 30)),
            Job("Randstad", "Recruiter", date(2011, 3, 1), False, date(2013, 12, 20)),
        ],
        studies=[
            Study("UBA", "Lic. Relaciones del Trabajo", StudyStatus.COMPLETED),
            Study("UTN", "Posgrado RRHH", StudyStatus.IN_PROGRESS),
        ],
        client_companies=[Company("Initech", "Banking"), Company("Acme", "Software")],
    )


async def _count(db, model) -> int:
    return await db.scalar(select(func.count()).select_from(model))


async def test_find_unknown_recruiter_returns_none(test_db):
    assert await SqlRecruiterStore(test_db).find("No", "Body", "0") is None


async def test_insert_then_find_round_trips_in_order(test_db):
    store = SqlRecruiterStore(test_db)
    recruiter = _recruiter()

    await store.insert(recruiter)
    found = await store.find("Patricia", "Maidana", "28123456")

    assert found == recruiter
    assert [j.start_date for j in found.job_history] == [
        date(2015, 5, 1), date(2014, 1, 1), date(2011, 3, 1),
    ]
    assert found.client_companies[0] == Company("Initech", "Banking")


async def test_insert_links_existing_and_stores_missing_companies(test_db):
    await SqlCompanyStore(test_db).insert(Company("Acme", "Software"))

    await SqlRecruiterStore(test_db).insert(_recruiter())

    assert await _count(test_db, CompanyRecord) == 2
    assert await _count(test_db, ClientCompanyLink) == 2


async def test_duplicate_identity_rejected_by_constraint(test_db):
    store = SqlRecruiterStore(test_db)
    await store.insert(_recruiter())

    with pytest.raises(RecruiterAlreadyExistsError):
        await store.insert(Recruiter("Patricia", "Maidana", "28123456"))

    assert await _count(test_db, JobRecord) == 3


async def test_update_replaces_collections(test_db):
    store = SqlRecruiterStore(test_db)
    await store.insert(_recruiter())
    replacement = Recruiter(
        "Patricia", "Maidana", "28123456",
        job_history=[Job("Globant", "Head of Talent", date(2015, 5, 1), True)],
        studies=[],
        client_companies=[Company("Acme", "Software")],
    )

    returned = await store.update(replacement)
    found = await store.find("Patricia", "Maidana", "28123456")

    assert returned == replacement
    assert found == replacement
    assert await _count(test_db, JobRecord) == 1
    assert await _count(test_db, StudyRecord) == 0
    assert await _count(test_db, ClientCompanyLink) == 1
    assert await _count(test_db, CompanyRecord) == 2


async def test_update_can_reuse_job_keys(test_db):
    store = SqlRecruiterStore(test_db)
    recruiter = _recruiter()
    await store.insert(recruiter)

    await store.update(recruiter)

    assert await store.find(*recruiter.identity) == recruiter
    assert await _count(test_db, JobRecord) == 3


async def test_update_unknown_recruiter_raises_not_found(test_db):
    with pytest.raises(ResourceNotFoundError):
        await SqlRecruiterStore(test_db).update(_recruiter())


async def test_other_constraint_failures_are_not_identity_conflicts(test_db):
    await SqlCompanyStore(test_db).insert(Company("Acme", "Software"))
    recruiter = Recruiter("Patricia", "Maidana", "28123456")
    recruiter.client_companies.extend([Company("Acme", "Software"), Company("Acme", "Software")])

    with pytest.raises(DatabaseError) as exc:
        await SqlRecruiterStore(test_db).insert(recruiter)

    assert not isinstance(exc.value, RecruiterAlreadyExistsError)
    assert await _count(test_db, RecruiterRecord) == 0


async def test_read_failures_become_database_errors(bare_db):
    store = SqlRecruiterStore(bare_db)

    with pytest.raises(DatabaseError) as exc:
        await store.find("Patricia", "Maidana", "28123456")
    assert exc.value.operation == "query"

    with pytest.raises(DatabaseError):
        await store.update(_recruiter())
