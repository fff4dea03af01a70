"""Helpers for file picker components consuming the delegate."""

from typing import Iterable, List, Optional, Sequence

from .core.value_objects import HandlerDataToReturn
from .delegates import FileUploaderDelegate


def sort_handlers_by_priority(handlers: Iterable[HandlerDataToReturn]) -> List[HandlerDataToReturn]:
    """
    Order handler records for display, highest priority first.

    Records without priority go last. Equal priorities keep their order.
    """
    return sorted(
        handlers,
        key=lambda handler: (handler.priority is None, -(handler.priority or 0)),
    )


def get_picker_options(
    delegate: FileUploaderDelegate,
    mimetypes: Optional[Sequence[str]] = None,
) -> List[HandlerDataToReturn]:
    """Get the handlers to show in the picker, in display order."""
    return sort_handlers_by_priority(delegate.get_handlers(mimetypes))
