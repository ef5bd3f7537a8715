"""Aggregate Invariants — pure checks for required fields, lookup keys, jobs and client companies.

Invariants:
    - Every check raises AggregateValidationError on the first violation, else returns
    - Checks never mutate their arguments
    - MAX_CURRENT_JOBS (1) is the single source of truth for current-job cardinality

Design Decisions:
    - Separated from entities.py: the same checks run at construction time, on
      add_job_history, before create_recruiter and on the merged snapshot of an update
"""

from collections.abc import Iterable
from datetime import date
from typing import TYPE_CHECKING

from joboffer.core.domain_types import CompanyIdentity, JobKey, RecruiterIdentity
from joboffer.core.errors import AggregateValidationError

if TYPE_CHECKING:
    from joboffer.core.entities import Company, Job, Recruiter


MAX_CURRENT_JOBS: int = 1


def require_text(value: object, field: str) -> str:
    """Return ``value`` stripped; reject non-strings and blanks."""
    if not isinstance(value, str) or not value.strip():
        raise AggregateValidationError(f"{field} is required", field=field)
    return value.strip()


def validate_job_dates(
    start_date: object, is_current: bool, end_date: object,
) -> None:
    """A current job has no end date; a past job ends on or after it starts."""
    if not isinstance(start_date, date):
        raise AggregateValidationError(
            "job.start_date must be a date", field="job.start_date",
        )
    if is_current:
        if end_date is not None:
            raise AggregateValidationError(
                "A current job cannot have an end date", field="job.end_date",
            )
        return
    if not isinstance(end_date, date):
        raise AggregateValidationError(
            "A job that is not current requires an end date", field="job.end_date",
        )
    if end_date < start_date:
        raise AggregateValidationError(
            f"job.end_date {end_date.isoformat()} is before "
            f"job.start_date {start_date.isoformat()}",
            field="job.end_date",
        )


def validate_job_history(jobs: Iterable["Job"]) -> None:
    """Unique JobKey per entry, at most MAX_CURRENT_JOBS current entries."""
    seen: set[JobKey] = set()
    current = 0
    for job in jobs:
        if job.key in seen:
            raise AggregateValidationError(
                f"Duplicate job history entry: {job.key}", field="job_history",
            )
        seen.add(job.key)
        if job.is_current:
            current += 1
    if current > MAX_CURRENT_JOBS:
        raise AggregateValidationError(
            f"Job history has {current} current jobs (max {MAX_CURRENT_JOBS})",
            field="job_history",
        )


def company_identity(name: object, activity: object) -> CompanyIdentity:
    """Lookup key normalized the same way Company normalizes its fields."""
    return CompanyIdentity(
        require_text(name, "company.name"),
        require_text(activity, "company.activity"),
    )


def recruiter_identity(
    first_name: object, last_name: object, identity_card: object,
) -> RecruiterIdentity:
    """Lookup key normalized the same way Recruiter normalizes its fields."""
    return RecruiterIdentity(
        require_text(first_name, "recruiter.first_name"),
        require_text(last_name, "recruiter.last_name"),
        require_text(identity_card, "recruiter.identity_card"),
    )


def validate_client_companies(companies: Iterable["Company"]) -> None:
    """Each client company is linked at most once."""
    seen: set[CompanyIdentity] = set()
    for company in companies:
        if company.identity in seen:
            raise AggregateValidationError(
                f"Duplicate client company: {company.identity}",
                field="client_companies",
            )
        seen.add(company.identity)


def validate_recruiter(recruiter: "Recruiter") -> None:
    """Full aggregate check, run before any write."""
    require_text(recruiter.first_name, "recruiter.first_name")
    require_text(recruiter.last_name, "recruiter.last_name")
    require_text(recruiter.identity_card, "recruiter.identity_card")
    validate_job_history(recruiter.job_history)
    validate_client_companies(recruiter.client_companies)
