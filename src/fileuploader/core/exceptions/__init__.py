"""File uploader exceptions."""

from .base import FileUploaderError, create_error_response
from .handlers import HandlerActionError, HandlerNotFoundError

__all__ = [
    "FileUploaderError",
    "HandlerActionError",
    "HandlerNotFoundError",
    "create_error_response",
]
