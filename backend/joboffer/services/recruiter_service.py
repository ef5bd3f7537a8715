"""Recruiter Service — create/get/update orchestration for companies and recruiters.

Invariants:
    - Validation, reference and conflict checks all complete before any store write
    - update_recruiter persists only a fully reconciled and validated snapshot
    - Pending job marks on the caller's recruiter are cleared only after the store accepted
      the update (Unmodified -> MarkedForUpdate -> Reconciled)
    - Every JobOfferError is logged once at WARNING with its code and re-raised unchanged

Design Decisions:
    - Existence checks give descriptive errors; the store's unique constraints still decide
      races between concurrent creations (insert raises ConflictError)
    - Impureim sandwich: load (IO) -> reconcile_job_history (pure) -> update (IO)
"""

import functools
import logging

from joboffer.core.domain_types import RecruiterIdentity
from joboffer.core.entities import Company, Recruiter
from joboffer.core.enforce_invariants import (
    company_identity, recruiter_identity, validate_recruiter,
)
from joboffer.core.errors import (
    CompanyAlreadyExistsError, JobOfferError, MissingReferenceError,
    RecruiterAlreadyExistsError, ResourceNotFoundError,
)
from joboffer.core.reconcile import reconcile_job_history
from joboffer.core.repository_protocols import CompanyStore, RecruiterStore

logger = logging.getLogger(__name__)


def _logs_rejections(operation: str):
    """Tag JobOfferErrors with ``operation`` and log them before they propagate."""
    def decorator(method):
        @functools.wraps(method)
        async def wrapper(self, *args, **kwargs):
            try:
                return await method(self, *args, **kwargs)
            except JobOfferError as e:
                e.context.operation = e.context.operation or operation
                logger.warning(
                    f"{operation} rejected: {e.message}",
                    extra={
                        "operation": operation,
                        "error_code": e.code,
                        "recruiter": e.context.recruiter,
                        "company": e.context.company,
                    },
                )
                raise
        return wrapper
    return decorator


def _identity_of(descriptor: Recruiter | RecruiterIdentity | tuple) -> RecruiterIdentity:
    """Normalized lookup key; a Recruiter contributes only its identity fields."""
    if isinstance(descriptor, Recruiter):
        descriptor = descriptor.identity
    return recruiter_identity(*descriptor)


class RecruiterService:
    """Coordinates company and recruiter operations over injected stores."""

    def __init__(
        self,
        company_store: CompanyStore,
        recruiter_store: RecruiterStore,
        *,
        create_missing_companies: bool = False,
    ):
        self.companies = company_store
        self.recruiters = recruiter_store
        self.create_missing_companies = create_missing_companies

    # ─── Companies ──────────────────────────────────────────────

    @_logs_rejections("create_company")
    async def create_company(self, company: Company) -> Company:
        """Store a new company; ConflictError if (name, activity) is taken."""
        if await self.companies.find(company.name, company.activity) is not None:
            raise CompanyAlreadyExistsError(str(company))
        saved = await self.companies.insert(company)
        logger.info(
            "Company created",
            extra={"company": str(saved), "operation": "create_company"},
        )
        return saved

    @_logs_rejections("get_company")
    async def get_company(self, name: str, activity: str) -> Company:
        identity = company_identity(name, activity)
        company = await self.companies.find(*identity)
        if company is None:
            raise ResourceNotFoundError("Company", str(identity))
        return company

    # ─── Recruiters ─────────────────────────────────────────────

    @_logs_rejections("create_recruiter")
    async def create_recruiter(self, recruiter: Recruiter) -> Recruiter:
        """Store a new recruiter aggregate with its jobs, studies and client links.

        Raises:
            AggregateValidationError: missing field, broken job history invariant
                or a client company listed twice.
            MissingReferenceError: a client company is not stored and
                create_missing_companies is off.
            ConflictError: the recruiter identity is already stored.
        """
        validate_recruiter(recruiter)

        missing = [
            str(company) for company in recruiter.client_companies
            if await self.companies.find(company.name, company.activity) is None
        ]
        if missing and not self.create_missing_companies:
            raise MissingReferenceError(missing)

        identity = recruiter.identity
        if await self.recruiters.find(*identity) is not None:
            raise RecruiterAlreadyExistsError(str(identity))

        saved = await self.recruiters.insert(recruiter)
        logger.info(
            "Recruiter created",
            extra={"recruiter": str(identity), "operation": "create_recruiter"},
        )
        return saved

    @_logs_rejections("get_recruiter")
    async def get_recruiter(
        self, descriptor: Recruiter | RecruiterIdentity | tuple,
    ) -> Recruiter:
        """Load the full aggregate by identity.

        ``descriptor`` may be a Recruiter, used only for its identity fields.
        """
        identity = _identity_of(descriptor)
        recruiter = await self.recruiters.find(*identity)
        if recruiter is None:
            raise ResourceNotFoundError("Recruiter", str(identity))
        return recruiter

    @_logs_rejections("update_recruiter")
    async def update_recruiter(self, recruiter: Recruiter) -> Recruiter:
        """Apply the recruiter's marked job updates onto its persisted state."""
        identity = recruiter.identity
        persisted = await self.recruiters.find(*identity)
        if persisted is None:
            raise ResourceNotFoundError("Recruiter", str(identity))

        merged = reconcile_job_history(persisted, recruiter.pending_job_updates)
        saved = await self.recruiters.update(merged)

        jobs_updated = len(recruiter.pending_job_updates)
        recruiter.clear_pending_updates()
        logger.info(
            "Recruiter updated",
            extra={
                "recruiter": str(identity),
                "operation": "update_recruiter",
                "jobs_updated": jobs_updated,
            },
        )
        return saved
