"""Handler delegates."""

from .file_uploader_delegate import FileUploaderDelegate, get_file_uploader_delegate
from .handler_delegate import HandlerDelegate

__all__ = [
    "FileUploaderDelegate",
    "HandlerDelegate",
    "get_file_uploader_delegate",
]
