from __future__ import annotations

from typing import Union

StrOrBytes = Union[str, bytes]


def as_bytes(value: StrOrBytes) -> bytes:
    return value.encode("utf8") if isinstance(value, str) else value


def as_str(value: StrOrBytes) -> str:
    return value.decode("utf8") if isinstance(value, bytes) else value


def try_as_str(value: StrOrBytes) -> str | None:
    """
    Like :func:`as_str`, but returns None for bytes that aren't utf8
    and for values that are neither str nor bytes.
    """
    if not isinstance(value, (str, bytes)):
        return None
    try:
        return as_str(value)
    except UnicodeDecodeError:
        return None
