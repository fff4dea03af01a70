"""Handler related exceptions."""

from typing import Any, Dict, Optional

from .base import FileUploaderError


class HandlerNotFoundError(FileUploaderError):
    """Raised when a handler name is not registered in a delegate."""

    def __init__(self, handler_name: str, delegate_name: Optional[str] = None):
        details: Dict[str, Any] = {"handler_name": handler_name}
        if delegate_name:
            details["delegate_name"] = delegate_name

        super().__init__(
            message=f"Handler '{handler_name}' is not registered",
            error_code="HANDLER_NOT_FOUND",
            details=details,
        )
        self.handler_name = handler_name


class HandlerActionError(FileUploaderError):
    """Raised when a handler fails to acquire a file."""

    def __init__(
        self,
        message: str,
        handler_name: str,
        cause: Optional[Exception] = None,
        **kwargs
    ):
        details: Dict[str, Any] = {"handler_name": handler_name, **kwargs}
        if cause is not None:
            details["cause"] = type(cause).__name__

        super().__init__(
            message=message,
            error_code="HANDLER_ACTION_FAILED",
            details=details,
        )
        self.handler_name = handler_name
        self.cause = cause
