"""Presentation data exchanged between handlers, the delegate and the picker."""

from dataclasses import dataclass, fields
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple

from .action_result import ActionResult

# (max_size, upload, allow_offline, mimetypes)
HandlerAction = Callable[
    [Optional[int], Optional[bool], Optional[bool], Optional[List[str]]],
    Awaitable[ActionResult],
]
AfterRenderHook = Callable[[Optional[int], Optional[bool], Optional[bool], Optional[List[str]]], None]


@dataclass(frozen=True)
class HandlerData:
    """Data needed to render a handler in the file picker.

    Returned by each handler's ``get_data``.
    """

    title: str
    icon: Optional[str] = None
    css_class: Optional[str] = None
    action: Optional[HandlerAction] = None
    after_render: Optional[AfterRenderHook] = None

    def __post_init__(self):
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError("Handler title cannot be empty")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, using ``class`` for the CSS class key."""
        data = {}
        for item in fields(self):
            key = "class" if item.name == "css_class" else item.name
            data[key] = getattr(self, item.name)
        return data


@dataclass(frozen=True)
class HandlerDataToReturn(HandlerData):
    """Data returned by the delegate for each applicable handler.

    ``mimetypes`` is None when the query did not filter by mimetype.
    """

    priority: Optional[int] = None
    mimetypes: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_handler_data(
        cls,
        data: HandlerData,
        priority: Optional[int] = None,
        mimetypes: Optional[Sequence[str]] = None,
    ) -> "HandlerDataToReturn":
        """Combine a handler's data with its resolved priority and mimetypes."""
        values = {item.name: getattr(data, item.name) for item in fields(HandlerData)}
        return cls(
            **values,
            priority=priority,
            mimetypes=tuple(mimetypes) if mimetypes is not None else None,
        )
