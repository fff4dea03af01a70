"""Handler to pick images and videos from the device gallery."""

from typing import List

from ..utils import get_mimetype_group
from .base import PickerHandler


class AlbumHandler(PickerHandler):
    name = "CoreFileUploaderAlbum"
    priority = 2000
    title = "core.fileuploader.photoalbums"
    icon = "images"
    css_class = "core-fileuploader-album-handler"

    def get_supported_mimetypes(self, mimetypes: List[str]) -> List[str]:
        # The gallery holds images and videos.
        return [
            mimetype for mimetype in mimetypes
            if get_mimetype_group(mimetype) in ("image", "video", "*")
        ]
