"""Recruiter Aggregate — Company, Job, Study and the Recruiter aggregate root.

Invariants:
    - Company, Job and Study are immutable once built (frozen dataclasses)
    - Job dates follow validate_job_dates on construction
    - Recruiter.job_history never holds two jobs with the same JobKey nor two current jobs
    - Equality is structural: every owned field and collection member, in order
    - Pending job updates are bookkeeping only and take no part in equality

Design Decisions:
    - Plain dataclasses with no ORM coupling: stores map rows to these types
    - Job.revise() remembers the key it was revised from (origin_key), so a job whose
      company_name changed still matches its persisted counterpart on update
    - start_date is not revisable: it is the identity field preserved by reconciliation
"""

from dataclasses import dataclass, field, replace
from datetime import date

from joboffer.core.domain_types import (
    CompanyIdentity, JobKey, RecruiterIdentity, StudyStatus,
)
from joboffer.core.enforce_invariants import (
    require_text, validate_job_dates, validate_job_history,
)
from joboffer.core.errors import AggregateValidationError

REVISABLE_JOB_FIELDS: frozenset[str] = frozenset(
    {"company_name", "title", "is_current", "end_date"},
)


@dataclass(frozen=True)
class Company:
    """Client company, shared between recruiters."""
    name: str
    activity: str

    def __post_init__(self):
        object.__setattr__(self, "name", require_text(self.name, "company.name"))
        object.__setattr__(
            self, "activity", require_text(self.activity, "company.activity"),
        )

    @property
    def identity(self) -> CompanyIdentity:
        return CompanyIdentity(self.name, self.activity)

    def __str__(self) -> str:
        return str(self.identity)


@dataclass(frozen=True)
class Job:
    """One entry of a recruiter's job history."""
    company_name: str
    title: str
    start_date: date
    is_current: bool = False
    end_date: date | None = None
    origin_key: JobKey | None = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(
            self, "company_name", require_text(self.company_name, "job.company_name"),
        )
        object.__setattr__(self, "title", require_text(self.title, "job.title"))
        validate_job_dates(self.start_date, self.is_current, self.end_date)

    @property
    def key(self) -> JobKey:
        return JobKey(self.company_name, self.start_date)

    @property
    def matched_key(self) -> JobKey:
        """Key that locates this job's persisted counterpart."""
        return self.origin_key or self.key

    def revise(self, **changes) -> "Job":
        """Return a copy with ``changes`` applied, still matched by the original key.

        Switching to is_current=True drops the end date unless one is given.
        """
        frozen = sorted(set(changes) - REVISABLE_JOB_FIELDS)
        if frozen:
            raise AggregateValidationError(
                f"Job fields cannot be revised: {', '.join(frozen)}",
                field=f"job.{frozen[0]}",
            )
        if changes.get("is_current") and "end_date" not in changes:
            changes["end_date"] = None
        return replace(self, origin_key=self.matched_key, **changes)


@dataclass(frozen=True)
class Study:
    """Educational background entry owned by one recruiter."""
    institution: str
    program: str
    status: StudyStatus = StudyStatus.IN_PROGRESS

    def __post_init__(self):
        object.__setattr__(
            self, "institution", require_text(self.institution, "study.institution"),
        )
        object.__setattr__(self, "program", require_text(self.program, "study.program"))
        try:
            object.__setattr__(self, "status", StudyStatus(self.status))
        except ValueError:
            raise AggregateValidationError(
                f"Unknown study status: {self.status!r}", field="study.status",
            ) from None


@dataclass
class Recruiter:
    """Aggregate root: job history, studies and client companies of one recruiter."""
    first_name: str
    last_name: str
    identity_card: str
    job_history: list[Job] = field(default_factory=list)
    studies: list[Study] = field(default_factory=list)
    client_companies: list[Company] = field(default_factory=list)
    pending_job_updates: dict[JobKey, Job] = field(
        default_factory=dict, compare=False, repr=False,
    )

    def __post_init__(self):
        self.first_name = require_text(self.first_name, "recruiter.first_name")
        self.last_name = require_text(self.last_name, "recruiter.last_name")
        self.identity_card = require_text(
            self.identity_card, "recruiter.identity_card",
        )
        self.job_history = list(self.job_history)
        validate_job_history(self.job_history)
        self.studies = list(self.studies)
        self.client_companies = list(dict.fromkeys(self.client_companies))
        self.pending_job_updates = dict(self.pending_job_updates)

    @property
    def identity(self) -> RecruiterIdentity:
        return RecruiterIdentity(self.first_name, self.last_name, self.identity_card)

    def add_job_history(self, job: Job) -> None:
        validate_job_history([*self.job_history, job])
        self.job_history.append(job)

    def add_study(self, study: Study) -> None:
        self.studies.append(study)

    def add_client_company(self, company: Company) -> None:
        if company not in self.client_companies:
            self.client_companies.append(company)

    def find_job(self, company_name: str, start_date: date) -> Job | None:
        key = JobKey(company_name, start_date)
        return next((job for job in self.job_history if job.key == key), None)

    def update_job_history(self, job: Job) -> None:
        """Mark ``job`` as the pending replacement for the job it was revised from.

        Nothing is persisted until the recruiter goes through update_recruiter.
        A second mark for the same job replaces the first.
        """
        self.pending_job_updates[job.matched_key] = job

    @property
    def has_pending_updates(self) -> bool:
        return bool(self.pending_job_updates)

    def clear_pending_updates(self) -> None:
        self.pending_job_updates.clear()
