"""Domain Types — natural keys and enums shared across the recruiter aggregate.

Invariants:
    - JobKey is the reconciliation identity of a Job: (company_name, start_date)
    - RecruiterIdentity and CompanyIdentity are the natural keys the stores keep unique
    - StudyStatus values are the strings persisted in studies.status

Design Decisions:
    - NamedTuple keys: hashable, unpackable into store lookups, readable in logs
    - str Enum for StudyStatus: serializes without custom encoders
"""

from datetime import date
from enum import Enum
from typing import NamedTuple


# ─── Identity Keys ───────────────────────────────────────────────

class JobKey(NamedTuple):
    """Reconciliation identity of a Job."""
    company_name: str
    start_date: date

    def __str__(self) -> str:
        return f"{self.company_name} since {self.start_date.isoformat()}"


class RecruiterIdentity(NamedTuple):
    """Natural identity of a Recruiter."""
    first_name: str
    last_name: str
    identity_card: str

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} ({self.identity_card})"


class CompanyIdentity(NamedTuple):
    """Natural identity of a Company."""
    name: str
    activity: str

    def __str__(self) -> str:
        return f"{self.name} ({self.activity})"


# ─── Enums ───────────────────────────────────────────────────────

class StudyStatus(str, Enum):
    """Progress of a recruiter's study program."""
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    INTERRUPTED = "interrupted"
