"""Job History Reconciliation — merges marked job updates onto the persisted aggregate.

Invariants:
    - reconcile_job_history is PURE: neither the snapshot nor the pending map is mutated
    - Matching uses the key each pending job was revised from (old identity)
    - start_date of a matched job is preserved; company_name, title, is_current and
      end_date come from the replacement
    - A pending key without a persisted counterpart is rejected, never dropped
    - The merged job history passes validate_job_history before it is returned
    - Studies and client companies are carried over unchanged

Design Decisions:
    - Returns a new Recruiter: the shell persists the result only after the whole
      merge validated, so a failed merge never reaches the store
    - Study/ClientCompany reconciliation would slot in here as sibling merge steps
"""

from collections.abc import Mapping

from joboffer.core.domain_types import JobKey
from joboffer.core.entities import Job, Recruiter
from joboffer.core.enforce_invariants import validate_job_history
from joboffer.core.errors import AggregateValidationError


def merge_job(persisted: Job, replacement: Job) -> Job:
    """Apply the revisable fields of ``replacement`` onto ``persisted``."""
    return Job(
        company_name=replacement.company_name,
        title=replacement.title,
        start_date=persisted.start_date,
        is_current=replacement.is_current,
        end_date=replacement.end_date,
    )


def reconcile_job_history(
    persisted: Recruiter, pending: Mapping[JobKey, Job],
) -> Recruiter:
    """Build the validated post-update snapshot of ``persisted``."""
    known = {job.key for job in persisted.job_history}
    unmatched = [key for key in pending if key not in known]
    if unmatched:
        raise AggregateValidationError(
            "No persisted job matches: " + "; ".join(str(k) for k in unmatched),
            field="job_history",
        )

    merged = [
        merge_job(job, pending[job.key]) if job.key in pending else job
        for job in persisted.job_history
    ]
    validate_job_history(merged)

    return Recruiter(
        first_name=persisted.first_name,
        last_name=persisted.last_name,
        identity_card=persisted.identity_card,
        job_history=merged,
        studies=list(persisted.studies),
        client_companies=list(persisted.client_companies),
    )
