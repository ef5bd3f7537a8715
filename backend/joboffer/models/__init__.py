"""ORM Models — SQLAlchemy declarative models for companies and recruiter aggregates.

Invariants:
    - All models inherit from Base (db/base.py)
    - RecruiterRecord is the aggregate root; jobs, studies and client links are scoped by recruiter_id

Design Decisions:
    - One file per table
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from joboffer.models.company import CompanyRecord  # noqa: F401
from joboffer.models.recruiter import RecruiterRecord  # noqa: F401
from joboffer.models.job import JobRecord  # noqa: F401
from joboffer.models.study import StudyRecord  # noqa: F401
from joboffer.models.client_company import ClientCompanyLink  # noqa: F401
