"""Composition Root — the service scope wires a working RecruiterService."""

import logging

import pytest

from joboffer.bootstrap import recruiter_service_scope
from joboffer.config import Settings
from joboffer.core.entities import Company
from joboffer.core.errors import MissingReferenceError
from joboffer.services.recruiter_service import RecruiterService

from tests.services.recruiter_factory import build_patricia


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'joboffer.db'}",
        log_format="text",
    )


@pytest.fixture(autouse=True)
def restore_root_logger():
    handlers, level = list(logging.root.handlers), logging.root.level
    yield
    for handler in list(logging.root.handlers):
        if handler not in handlers:
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)


async def test_scope_yields_service(settings):
    async with recruiter_service_scope(settings) as service:
        assert isinstance(service, RecruiterService)
        assert service.create_missing_companies is False


async def test_data_survives_between_scopes(settings):
    async with recruiter_service_scope(settings) as service:
        await service.create_company(Company("Acme", "Software"))
        await service.create_recruiter(build_patricia())

    async with recruiter_service_scope(settings) as service:
        assert await service.get_recruiter(build_patricia()) == build_patricia()


async def test_scope_applies_reference_policy(settings):
    async with recruiter_service_scope(settings) as service:
        with pytest.raises(MissingReferenceError):
            await service.create_recruiter(build_patricia())

    lenient = settings.model_copy(update={"create_missing_companies": True})
    async with recruiter_service_scope(lenient) as service:
        await service.create_recruiter(build_patricia())
        assert await service.get_company("Acme", "Software") == Company("Acme", "Software")
