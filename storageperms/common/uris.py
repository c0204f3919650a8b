# storageperms/common/uris.py
from __future__ import annotations


def with_appended_id(base_uri: str, item_id: int) -> str:
    """
    Append a row id as the last path segment of a content URI:

        with_appended_id("content://media/external/file", 42)
        -> "content://media/external/file/42"
    """
    if not base_uri:
        raise ValueError("base_uri must be non-empty")
    if int(item_id) < 0:
        raise ValueError("item_id must be >= 0")
    return f"{base_uri.rstrip('/')}/{int(item_id)}"


def sqlite_url(path) -> str:
    return f"sqlite:///{path}"
