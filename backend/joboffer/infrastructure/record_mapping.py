"""Record Mapping — conversions between ORM rows and core aggregate types.

Invariants:
    - *_from_record functions build validated core objects (constructors re-check invariants)
    - *_records functions assign position from list order, starting at 0
"""

from joboffer.core.domain_types import StudyStatus
from joboffer.core.entities import Company, Job, Recruiter, Study
from joboffer.models.company import CompanyRecord
from joboffer.models.job import JobRecord
from joboffer.models.recruiter import RecruiterRecord
from joboffer.models.study import StudyRecord


def company_from_record(record: CompanyRecord) -> Company:
    return Company(name=record.name, activity=record.activity)


def job_from_record(record: JobRecord) -> Job:
    return Job(
        company_name=record.company_name,
        title=record.title,
        start_date=record.start_date,
        is_current=record.is_current,
        end_date=record.end_date,
    )


def study_from_record(record: StudyRecord) -> Study:
    return Study(
        institution=record.institution,
        program=record.program,
        status=StudyStatus(record.status),
    )


def recruiter_from_record(record: RecruiterRecord) -> Recruiter:
    """Rebuild the full aggregate from a row with its collections loaded."""
    return Recruiter(
        first_name=record.first_name,
        last_name=record.last_name,
        identity_card=record.identity_card,
        job_history=[job_from_record(j) for j in record.jobs],
        studies=[study_from_record(s) for s in record.studies],
        client_companies=[
            company_from_record(link.company) for link in record.client_links
        ],
    )


def job_records(jobs: list[Job]) -> list[JobRecord]:
    return [
        JobRecord(
            position=position,
            company_name=job.company_name,
            title=job.title,
            start_date=job.start_date,
            is_current=job.is_current,
            end_date=job.end_date,
        )
        for position, job in enumerate(jobs)
    ]


def study_records(studies: list[Study]) -> list[StudyRecord]:
    return [
        StudyRecord(
            position=position,
            institution=study.institution,
            program=study.program,
            status=study.status.value,
        )
        for position, study in enumerate(studies)
    ]
