"""Recruiter factory — builds the reference aggregate used across service tests."""

from datetime import date

from joboffer.core.domain_types import StudyStatus
from joboffer.core.entities import Company, Job, Recruiter, Study


def build_patricia() -> Recruiter:
    """Patricia Maidana: one client company, a current and a past job, one study."""
    recruiter = Recruiter(
        first_name="Patricia", last_name="Maidana", identity_card="28123456",
    )
    recruiter.add_client_company(Company("Acme", "Software"))
    recruiter.add_job_history(
        Job("Accenture", "Sr. Talent Acquisition", date(2015, 5, 1), True),
    )
    recruiter.add_job_history(
        Job(
            "Accenture", "Sr. Talent Acquisition", date(2014, 1, 1), False,
            date(2015, 4, 30),
        ),
    )
    recruiter.add_study(
        Study("UBA", "Lic. Relaciones del Trabajo", StudyStatus.COMPLETED),
    )
    return recruiter
