"""Error Hierarchy — typed, categorized exceptions for fuel mixture failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the flat {"error": message} envelope
    - log_message is the operator-facing text; message is what clients see
    - Validation messages are fixed text, never parameterized by offending values

Design Decisions:
    - Single hierarchy with FuelMixError base: one FastAPI handler catches all
    - http_status carried on the error so handlers stay generic
"""

from enum import Enum


PERCENTAGE_SUM_MESSAGE = "Persentase Shell Nitro+ dan M5 harus berjumlah 100%."


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


class FuelMixError(Exception):
    """Base exception for all fuel mixture errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
        log_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.log_message = log_message or message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(FuelMixError):
    """Mixture input violates a domain rule."""
    def __init__(
        self, message: str, code: str = "VALIDATION_ERROR",
        log_message: str | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 400, log_message,
        )


class PercentageSumError(ValidationError):
    """Nitro+ and M5 shares do not add up to 100%."""
    def __init__(self, percentage_sum: float):
        super().__init__(
            PERCENTAGE_SUM_MESSAGE, "PERCENTAGE_SUM_INVALID",
            log_message="percentages must sum to 100%",
        )
        self.percentage_sum = percentage_sum
