"""Error Hierarchy — typed HTTP-facing exceptions for every API failure mode.

Invariants:
    - Every error has a status_code (int), error label (str), code (str), category
    - to_response() produces the {statusCode, message, error} envelope clients parse
    - NotFoundError message names the lookup key and value as compact JSON
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ApiError base: one global handler catches all
    - Envelope shape matches what the admin UI data provider already parses
"""

import json
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """High-level error categories for routing and observability."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


class ApiError(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str | list[str],
        code: str,
        category: ErrorCategory,
        status_code: int = 500,
        error: str | None = "Internal Server Error",
        headers: dict[str, str] | None = None,
    ):
        super().__init__(message if isinstance(message, str) else "; ".join(message))
        self.message = message
        self.code = code
        self.category = category
        self.status_code = status_code
        self.error = error
        self.headers = headers
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self) -> dict[str, Any]:
        """Convert to the standard REST error envelope."""
        body: dict[str, Any] = {
            "statusCode": self.status_code,
            "message": self.message,
        }
        if self.error is not None:
            body["error"] = self.error
        return body


# ─── Client Errors (400-level) ──────────────────────────────────

def format_where(where: dict[str, Any]) -> str:
    """Render a lookup key as compact JSON, e.g. {"id":"abc"}."""
    return json.dumps(where, separators=(",", ":"), ensure_ascii=False, default=str)


class NotFoundError(ApiError):
    """No record matches the given unique lookup."""
    def __init__(self, where: dict[str, Any]):
        super().__init__(
            f"No resource was found for {format_where(where)}",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            404, "Not Found",
        )
        self.where = where


class BadRequestError(ApiError):
    """Request data failed validation."""
    def __init__(self, message: str | list[str]):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            400, "Bad Request",
        )


class UnauthorizedError(ApiError):
    """Missing or invalid credentials."""
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            401, None, headers={"WWW-Authenticate": "Basic"},
        )


class ForbiddenError(ApiError):
    """Authenticated identity lacks the grant for this action."""
    def __init__(self, resource: str, action: str):
        super().__init__(
            f"providing the role for {action} on {resource} is required",
            "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            403, "Forbidden",
        )
        self.resource = resource
        self.action = action


class ConflictError(ApiError):
    """Write rejected by a database constraint."""
    def __init__(self, message: str = "Integrity constraint violated"):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            409, "Conflict",
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            503, "Service Unavailable",
        )
        self.operation = operation


def internal_error_response() -> dict[str, Any]:
    """Catch-all envelope — never carries exception details."""
    return {"statusCode": 500, "message": "Internal server error"}
