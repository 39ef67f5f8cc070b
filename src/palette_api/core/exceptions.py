"""Custom exceptions for the Palette API."""

from typing import Any


class PaletteApiException(Exception):
    """Base exception for Palette API."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class AuthError(PaletteApiException):
    """Caller-supplied key is missing or wrong."""

    def __init__(
        self,
        message: str = "權限拒絕 (Permission Denied)",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, "FORBIDDEN", details)


class ValidationError(PaletteApiException):
    """Request failed validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class PayloadTooLargeError(ValidationError):
    """Upload exceeds the configured size cap."""

    def __init__(self, limit: int, field: str | None = "image") -> None:
        super().__init__(
            f"檔案過大 (File exceeds the {limit // (1024 * 1024)} MiB limit)",
            field,
        )
        self.details["limit"] = limit


class ExtractionError(PaletteApiException):
    """Color extraction failed on the uploaded image."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "EXTRACTION_ERROR", details)


class InternalError(PaletteApiException):
    """Anything unexpected during analysis."""

    def __init__(self, message: str = "Unexpected error", details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "INTERNAL_ERROR", details)
