from typing import Any, Dict, Optional


class AppError(Exception):
    """Base error surfaced to the caller as ``{"ok": false, "error": message}``."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed request fields."""
    status_code = 400


class ConfigurationError(AppError):
    """Missing credential or unreadable static resource."""
    status_code = 500


class NotFoundError(ConfigurationError):
    status_code = 404


class SchemaError(AppError):
    """The rubric does not describe any answer fields."""
    status_code = 500


class UpstreamError(AppError):
    """The generation service could not be reached or returned an error status."""
    status_code = 502


class UpstreamFormatError(AppError):
    """The generation service answered with non-JSON or incomplete JSON."""
    status_code = 502


class RenderError(AppError):
    status_code = 500


class StorageError(AppError):
    status_code = 500
