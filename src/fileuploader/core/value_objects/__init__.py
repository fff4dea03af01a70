"""Value objects for the file uploader."""

from .action_result import ActionResult
from .handler_data import AfterRenderHook, HandlerAction, HandlerData, HandlerDataToReturn

__all__ = [
    "ActionResult",
    "AfterRenderHook",
    "HandlerAction",
    "HandlerData",
    "HandlerDataToReturn",
]
