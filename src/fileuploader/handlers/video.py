"""Handler to record a video."""

from typing import List

from ..utils import filter_mimetypes
from .base import PickerHandler


class VideoHandler(PickerHandler):
    name = "CoreFileUploaderVideo"
    priority = 1400
    title = "core.fileuploader.video"
    icon = "videocam"
    css_class = "core-fileuploader-video-handler"

    def __init__(self, picker=None):
        super().__init__(picker, delete_after_use=True)

    def get_supported_mimetypes(self, mimetypes: List[str]) -> List[str]:
        return filter_mimetypes(mimetypes, "video")
