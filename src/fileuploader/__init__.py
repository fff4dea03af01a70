"""File uploader handler delegate.

A registry where file picker handlers (camera, album, audio, video, file
browser, remote URL...) register themselves, and where the picker asks which
of them apply to the mimetypes it accepts.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__
from .config import FileUploaderSettings, get_settings
from .core.exceptions import (
    FileUploaderError,
    HandlerActionError,
    HandlerNotFoundError,
    create_error_response,
)
from .core.protocols import DelegateHandler, FileUploaderHandler, SupportsAllMimetypes
from .core.value_objects import ActionResult, HandlerData, HandlerDataToReturn
from .delegates import FileUploaderDelegate, HandlerDelegate, get_file_uploader_delegate
from .events import EventsProvider, SessionEvent, get_events_provider
from .picker import get_picker_options, sort_handlers_by_priority
from .sites import Site, SitesProvider

__all__ = [
    "__version__",
    # Configuration
    "FileUploaderSettings",
    "get_settings",
    # Exceptions
    "FileUploaderError",
    "HandlerActionError",
    "HandlerNotFoundError",
    "create_error_response",
    # Handler contract
    "DelegateHandler",
    "FileUploaderHandler",
    "SupportsAllMimetypes",
    # Value objects
    "ActionResult",
    "HandlerData",
    "HandlerDataToReturn",
    # Delegates
    "FileUploaderDelegate",
    "HandlerDelegate",
    "get_file_uploader_delegate",
    # Session
    "EventsProvider",
    "SessionEvent",
    "get_events_provider",
    "Site",
    "SitesProvider",
    # Picker
    "get_picker_options",
    "sort_handlers_by_priority",
]
