"""Base exceptions for the file uploader library.

All library errors inherit from FileUploaderError and carry an error code
and a details mapping so callers can render them consistently.
"""

from typing import Any, Dict, Optional


class FileUploaderError(Exception):
    """Base exception for all file uploader errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: FileUploaderError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The file uploader exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
