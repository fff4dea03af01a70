"""Mimetype helpers used by the bundled handlers."""

from typing import Iterable, List, Optional


def get_mimetype_group(mimetype: str) -> Optional[str]:
    """
    Get the top-level type of a mimetype.

    Args:
        mimetype: Mimetype such as ``image/png``

    Returns:
        Lowercase top-level type (``image``), or None if malformed
    """
    if not isinstance(mimetype, str) or "/" not in mimetype:
        return None

    group = mimetype.split("/", 1)[0].strip().lower()
    return group or None


def filter_mimetypes(mimetypes: Iterable[str], type_prefix: str) -> List[str]:
    """
    Keep the mimetypes whose top-level type is ``type_prefix``.

    ``*/*`` and ``<type>/*`` wildcards match. Order and duplicates of the
    input are preserved.

    Args:
        mimetypes: Requested mimetypes
        type_prefix: Top-level type, e.g. ``image``

    Returns:
        Matching mimetypes
    """
    wanted = type_prefix.lower()
    return [
        mimetype for mimetype in mimetypes
        if get_mimetype_group(mimetype) in (wanted, "*")
    ]
