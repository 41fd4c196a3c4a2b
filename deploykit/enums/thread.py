"""Chat thread kinds, derived from the page a thread was opened on."""

from __future__ import annotations

from enum import IntEnum

from bson import ObjectId

__all__ = ["ThreadType", "thread_from_page_context"]

_SERVICE_PREFIX = "service/"


class ThreadType(IntEnum):
    """What a chat thread is about."""

    SERVICE = 1

    def is_service(self) -> bool:
        return self is ThreadType.SERVICE


def thread_from_page_context(page_context: str) -> tuple[ObjectId | None, ThreadType | None]:
    """Return the object id and thread type named by a page context.

    ``service/<hex id>`` yields the deployment id and ``ThreadType.SERVICE``;
    any other context yields ``(None, None)``. A malformed id raises ValueError.
    """
    if not page_context.startswith(_SERVICE_PREFIX):
        return None, None
    id_hex = page_context[len(_SERVICE_PREFIX):]
    if not ObjectId.is_valid(id_hex) or not isinstance(id_hex, str) or len(id_hex) != 24:
        raise ValueError(f"invalid object id: {id_hex!r}")
    return ObjectId(id_hex), ThreadType.SERVICE