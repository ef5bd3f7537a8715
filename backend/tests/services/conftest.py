"""Service test fixtures — RecruiterService over real SQL stores on the test DB.

Invariants:
    - Both stores share the per-test AsyncSession
    - patricia is a fresh aggregate per test (see recruiter_factory.py)
"""

import pytest

from joboffer.core.entities import Company
from joboffer.infrastructure.company_store import SqlCompanyStore
from joboffer.infrastructure.recruiter_store import SqlRecruiterStore
from joboffer.services.recruiter_service import RecruiterService

from tests.services.recruiter_factory import build_patricia


@pytest.fixture
def patricia():
    return build_patricia()


@pytest.fixture
def company_store(test_db):
    return SqlCompanyStore(test_db)


@pytest.fixture
def recruiter_store(test_db):
    return SqlRecruiterStore(test_db)


@pytest.fixture
def service(company_store, recruiter_store):
    return RecruiterService(company_store, recruiter_store)


@pytest.fixture
async def service_with_acme(service):
    await service.create_company(Company("Acme", "Software"))
    return service
