"""Bundled file picker handlers."""

from .album import AlbumHandler
from .audio import AudioHandler
from .base import PickerHandler
from .camera import CameraHandler
from .file import FileHandler
from .remote_url import RemoteUrlHandler
from .video import VideoHandler

__all__ = [
    "AlbumHandler",
    "AudioHandler",
    "CameraHandler",
    "FileHandler",
    "PickerHandler",
    "RemoteUrlHandler",
    "VideoHandler",
]
