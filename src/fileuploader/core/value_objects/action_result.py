"""Action result value object.

Describes the outcome of clicking a handler in the file picker.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ActionResult:
    """Immutable result of a handler action.

    A treated result means the handler already dealt with the file (for
    example it uploaded it) and ``result`` carries the outcome. An untreated
    result hands the picked file back to the caller, either as a filesystem
    ``path`` or as a ``file_entry`` handle, never both.
    """

    treated: bool
    path: Optional[str] = None
    file_entry: Optional[Any] = None
    delete: bool = False  # Ignored if treated
    result: Optional[Any] = None  # Ignored if not treated

    def __post_init__(self):
        """Post-initialization validation."""
        if self.treated:
            return

        has_path = self.path is not None
        has_entry = self.file_entry is not None
        if has_path == has_entry:
            raise ValueError("Untreated action result needs exactly one of path or file_entry")

        if has_path and not str(self.path).strip():
            raise ValueError("Path cannot be empty")

    @classmethod
    def treated_with(cls, result: Any = None) -> "ActionResult":
        """Create a result for a file the handler already processed."""
        return cls(treated=True, result=result)

    @classmethod
    def from_path(cls, path: str, delete: bool = False) -> "ActionResult":
        """Create a result pointing at a picked file on disk."""
        return cls(treated=False, path=path, delete=delete)

    @classmethod
    def from_file_entry(cls, file_entry: Any, delete: bool = False) -> "ActionResult":
        """Create a result wrapping a picked file handle."""
        return cls(treated=False, file_entry=file_entry, delete=delete)

    @property
    def should_delete(self) -> bool:
        """Whether the caller must delete the source file once used."""
        return not self.treated and self.delete
