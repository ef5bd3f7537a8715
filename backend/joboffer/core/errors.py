"""Error Hierarchy — typed, categorized exceptions for recruiter and company operations.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are raised before any write reaches a store
    - Infrastructure errors (500-level) come from the store layer after rollback
    - to_response() produces a uniform envelope for whatever transport wraps the service

Design Decisions:
    - Single hierarchy with JobOfferError base: callers catch one type to surface all failures
    - Class names avoid the builtin ReferenceError and pydantic's ValidationError
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

COMPANY_ALREADY_EXISTS = "The company already exists"
RECRUITER_ALREADY_EXISTS = "The recruiter already exists"


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    REFERENCE = "reference"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    recruiter: str | None = None
    company: str | None = None
    debug_info: dict[str, Any] | None = None


class JobOfferError(Exception):
    """Base exception for all recruiter/company errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "recruiter": self.context.recruiter,
                    "company": self.context.company,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class AggregateValidationError(JobOfferError):
    """Missing or malformed field, or a broken aggregate invariant."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ConflictError(JobOfferError):
    """An entity with the same natural identity is already stored."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class CompanyAlreadyExistsError(ConflictError):
    """Company (name, activity) is already stored."""
    def __init__(self, company: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.company = company
        super().__init__(COMPANY_ALREADY_EXISTS, "COMPANY_ALREADY_EXISTS", ctx)


class RecruiterAlreadyExistsError(ConflictError):
    """Recruiter (first name, last name, identity card) is already stored."""
    def __init__(self, recruiter: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.recruiter = recruiter
        super().__init__(RECRUITER_ALREADY_EXISTS, "RECRUITER_ALREADY_EXISTS", ctx)


class MissingReferenceError(JobOfferError):
    """Recruiter references companies that are not stored."""
    def __init__(self, companies: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Client companies are not registered: {', '.join(companies)}",
            "COMPANY_NOT_REGISTERED", ErrorCategory.REFERENCE,
            ErrorSeverity.ERROR, context, 422,
        )
        self.companies = companies


class ResourceNotFoundError(JobOfferError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(JobOfferError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
