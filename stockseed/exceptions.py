"""
Exception hierarchy for the seeding pipeline.

Every stage wraps the errors of the library it drives (httpx, csv,
SQLAlchemy) in one of these so the runner can log a single, uniform
failure before exiting non-zero.
"""

from typing import Any, Optional


class SeedError(Exception):
    """
    Base exception for all seeding errors.

    Attributes:
        code: Stable error code (e.g., "PARSE_ERROR")
        message: Human-readable message
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NetworkError(SeedError):
    """Fetching the source CSV failed (transport error or non-2xx status)."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        details: dict[str, Any] = {"url": url}
        if status_code is not None:
            details["status"] = status_code
        super().__init__(code="NETWORK_ERROR", message=message, details=details)
        self.url = url
        self.status_code = status_code


class ParseError(SeedError):
    """Source CSV is malformed."""

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(
            code="PARSE_ERROR",
            message=message,
            details={"line": line} if line is not None else None,
        )
        self.line = line


class SchemaError(SeedError):
    """Source CSV header lacks required columns."""

    def __init__(self, missing: list[str]):
        super().__init__(
            code="SCHEMA_ERROR",
            message=f"CSV is missing required columns: {', '.join(missing)}",
            details={"missing": missing},
        )
        self.missing = missing


class DatabaseError(SeedError):
    """A delete or insert against the target database failed."""

    def __init__(self, operation: str, message: str):
        super().__init__(
            code="DATABASE_ERROR",
            message=message,
            details={"operation": operation},
        )
        self.operation = operation
