"""Handler to take a picture with the camera."""

from typing import List

from ..utils import filter_mimetypes
from .base import PickerHandler


class CameraHandler(PickerHandler):
    name = "CoreFileUploaderCamera"
    priority = 1800
    title = "core.fileuploader.camera"
    icon = "camera"
    css_class = "core-fileuploader-camera-handler"

    def __init__(self, picker=None):
        # Captures are temporary files.
        super().__init__(picker, delete_after_use=True)

    def get_supported_mimetypes(self, mimetypes: List[str]) -> List[str]:
        return filter_mimetypes(mimetypes, "image")
