"""Handler to record audio."""

from typing import List

from ..utils import filter_mimetypes
from .base import PickerHandler


class AudioHandler(PickerHandler):
    name = "CoreFileUploaderAudio"
    priority = 1600
    title = "core.fileuploader.audio"
    icon = "microphone"
    css_class = "core-fileuploader-audio-handler"

    def __init__(self, picker=None):
        super().__init__(picker, delete_after_use=True)

    def get_supported_mimetypes(self, mimetypes: List[str]) -> List[str]:
        return filter_mimetypes(mimetypes, "audio")
