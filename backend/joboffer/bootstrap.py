"""Composition Root — wires settings, logging, database and stores into a RecruiterService.

Invariants:
    - One session per scope; both stores share it
    - The engine is disposed when the scope exits, also on error
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from joboffer.config import Settings, get_settings
from joboffer.infrastructure.company_store import SqlCompanyStore
from joboffer.infrastructure.database import DatabaseSessionManager
from joboffer.infrastructure.observability import setup_logging
from joboffer.infrastructure.recruiter_store import SqlRecruiterStore
from joboffer.services.recruiter_service import RecruiterService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def recruiter_service_scope(
    settings: Settings | None = None,
) -> AsyncGenerator[RecruiterService, None]:
    """Yield a ready RecruiterService backed by the configured database."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    try:
        await manager.create_schema()
        async with manager.session() as db:
            logger.info("Recruiter service ready")
            yield RecruiterService(
                SqlCompanyStore(db),
                SqlRecruiterStore(db),
                create_missing_companies=settings.create_missing_companies,
            )
    finally:
        await manager.dispose()
