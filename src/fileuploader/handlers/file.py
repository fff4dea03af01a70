"""Handler to browse the file system."""

from ..core.protocols import SupportsAllMimetypes
from .base import PickerHandler


class FileHandler(SupportsAllMimetypes, PickerHandler):
    name = "CoreFileUploaderFile"
    priority = 1200
    title = "core.fileuploader.file"
    icon = "folder"
    css_class = "core-fileuploader-file-handler"
