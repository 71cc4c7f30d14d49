"""Error Hierarchy — typed, categorized exceptions for media association and visibility failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are distinguishable by class, callers never match on text
    - InternalError keeps the underlying cause on `.cause`; its message never carries driver text
    - to_response() produces the REST envelope used by the API error handlers

Design Decisions:
    - Single hierarchy with CatalogMediaError base: FastAPI global handler catches all
    - ErrorContext as dataclass: owner/media identifiers travel with the error for logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Identifiers attached to an error for observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    owner_type: str | None = None
    owner_id: str | None = None
    media_service_id: str | None = None
    debug_info: dict[str, Any] | None = None


class CatalogMediaError(Exception):
    """Base exception for all catalog media errors."""

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
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "owner_type": self.context.owner_type,
                    "owner_id": self.context.owner_id,
                    "media_service_id": self.context.media_service_id,
                },
            }
        }


# ─── Validation Errors (400) ─────────────────────────────────────

class InvalidArgumentError(CatalogMediaError):
    """Malformed identifier or payload."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None, code: str = "INVALID_ARGUMENT",
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class HeterogeneousBatchError(InvalidArgumentError):
    """Batch field update items do not all carry the same single field."""
    def __init__(self, field_name: str, owner_ids: list[str]):
        super().__init__(
            f"Batch update for '{field_name}' contains items that do not populate "
            f"exactly that field: {', '.join(owner_ids)}",
            field=field_name, code="HETEROGENEOUS_BATCH",
        )
        self.owner_ids = owner_ids


class UnknownBatchFieldError(InvalidArgumentError):
    """Batch field selector is not one of the supported fields."""
    def __init__(self, selector: object):
        super().__init__(
            f"Unknown batch update field: {selector!r}",
            field="field", code="UNKNOWN_BATCH_FIELD",
        )


class UnknownOwnerTypeError(CatalogMediaError):
    """Owner type tag has no registered adapter for the requested media kind."""
    def __init__(self, owner_type: str, media_kind: str):
        super().__init__(
            f"Unknown {media_kind} owner type: '{owner_type}'",
            "UNKNOWN_OWNER_TYPE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ErrorContext(owner_type=owner_type), 400,
        )
        self.owner_type = owner_type


# ─── Business Rule Errors (400 / 409) ────────────────────────────

class ImageLimitExceededError(CatalogMediaError):
    """Owner already holds the maximum number of images."""
    def __init__(self, limit: int, context: ErrorContext | None = None):
        super().__init__(
            f"Maximum number of uploaded images is {limit} per item",
            "IMAGE_LIMIT_EXCEEDED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )
        self.limit = limit


class ParentNotPublishedError(CatalogMediaError):
    """Course part cannot be published while its course is unpublished."""
    def __init__(self, parent_type: str, parent_id: str):
        super().__init__(
            f"Cannot publish: parent {parent_type} '{parent_id}' is not published",
            "PARENT_NOT_PUBLISHED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, None, 400,
        )


class ImageAlreadyAttachedError(CatalogMediaError):
    """The owner is already associated with this image."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Image is already associated with this owner",
            "IMAGE_ALREADY_ATTACHED", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


class VideoAlreadyAttachedError(CatalogMediaError):
    """The owner already references this video."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Video is already associated with this owner",
            "VIDEO_ALREADY_ATTACHED", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


# ─── Not Found Errors (404) ──────────────────────────────────────

class OwnerNotFoundError(CatalogMediaError):
    """Single owner does not exist (or is soft-deleted)."""
    def __init__(self, owner_type: str, owner_id: str):
        super().__init__(
            f"{owner_type} '{owner_id}' not found",
            "OWNER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR,
            ErrorContext(owner_type=owner_type, owner_id=owner_id), 404,
        )


class OwnersNotFoundError(CatalogMediaError):
    """None of the requested owners exist."""
    def __init__(self, owner_type: str, requested: int):
        super().__init__(
            f"None of the {requested} requested {owner_type} owners were found",
            "OWNERS_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ErrorContext(owner_type=owner_type), 404,
        )


class ImageNotFoundOnOwnerError(CatalogMediaError):
    """Owner exists but holds no association with the image."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Image not found on owner",
            "IMAGE_NOT_FOUND_ON_OWNER", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class AssociationsNotFoundError(CatalogMediaError):
    """None of the found owners are associated with the image."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "None of the owners are associated with the image",
            "ASSOCIATIONS_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class VideoNotFoundOnOwnerError(CatalogMediaError):
    """Owner does not reference the video."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Video not found on owner",
            "VIDEO_NOT_FOUND_ON_OWNER", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class EntityNotFoundError(CatalogMediaError):
    """Catalog entity does not exist in the requested visibility scope."""
    def __init__(self, entity_type: str, entity_id: str):
        super().__init__(
            f"{entity_type} '{entity_id}' not found",
            "ENTITY_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ErrorContext(owner_type=entity_type, owner_id=entity_id), 404,
        )


# ─── Infrastructure Errors (500) ─────────────────────────────────

class InternalError(CatalogMediaError):
    """Unclassified storage failure. Cause kept for diagnostics only."""
    def __init__(
        self, operation: str, cause: BaseException | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Internal storage failure during {operation}",
            "INTERNAL", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
        self.cause = cause
