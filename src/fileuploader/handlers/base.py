"""Base class for handlers backed by an injected picker."""

import logging
import os
from typing import Any, Awaitable, Callable, List, Optional, Union

from ..config import get_settings
from ..core.exceptions import HandlerActionError
from ..core.protocols import FileUploaderHandler
from ..core.value_objects import ActionResult, HandlerData

# Called as picker(max_size, upload, allow_offline, mimetypes). Returns the
# picked file path or a ready ActionResult.
Picker = Callable[
    [int, bool, bool, Optional[List[str]]],
    Awaitable[Union[str, "os.PathLike[str]", ActionResult]],
]


class PickerHandler(FileUploaderHandler):
    """
    File picker handler that delegates acquisition to a picker callable.

    The picker wraps the platform code (camera, gallery, recorder...). The
    handler is disabled while no picker is attached.
    """

    title: str = ""
    icon: Optional[str] = None
    css_class: Optional[str] = None

    def __init__(self, picker: Optional[Picker] = None, delete_after_use: bool = False):
        self.picker = picker
        self.delete_after_use = delete_after_use
        self._logger = logging.getLogger(__name__)

    def is_enabled(self) -> bool:
        return self.picker is not None

    def get_data(self) -> HandlerData:
        return HandlerData(
            title=self.title,
            icon=self.icon,
            css_class=self.css_class,
            action=self.action,
        )

    async def action(
        self,
        max_size: Optional[int] = None,
        upload: Optional[bool] = None,
        allow_offline: Optional[bool] = None,
        mimetypes: Optional[List[str]] = None,
    ) -> ActionResult:
        """
        Pick a file.

        Args:
            max_size: Max size of the file. None or -1 means no max size
            upload: Whether the file should be uploaded
            allow_offline: True to allow picking while offline
            mimetypes: Supported mimetypes. None means all mimetypes

        Returns:
            Result of picking the file

        Raises:
            HandlerActionError: If there is no picker or it fails
        """
        if self.picker is None:
            raise HandlerActionError(f"Handler '{self.name}' has no picker", handler_name=self.name)

        settings = get_settings()
        max_size = settings.default_max_size if max_size is None else max_size
        allow_offline = settings.allow_offline if allow_offline is None else allow_offline

        try:
            picked = await self.picker(max_size, bool(upload), allow_offline, mimetypes)
        except HandlerActionError:
            raise
        except Exception as e:
            raise HandlerActionError(
                f"Handler '{self.name}' failed to pick a file: {e}",
                handler_name=self.name,
                cause=e,
            ) from e

        return self._to_result(picked)

    def _to_result(self, picked: Any) -> ActionResult:
        if isinstance(picked, ActionResult):
            return picked

        if picked is None:
            raise HandlerActionError(f"Handler '{self.name}' returned no file", handler_name=self.name)

        self._logger.debug(f"Handler '{self.name}' picked {picked}")
        return ActionResult.from_path(os.fspath(picked), delete=self.delete_after_use)
