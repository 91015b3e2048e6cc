from __future__ import annotations

import enum

from libdigest._utils.bytes import StrOrBytes, try_as_str
from libdigest._utils.const import (
    MD5_HEX_LENGTH,
    PBKDF2_PREFIX,
    PREFIX_LENGTH,
    SALTED_SHA1_PREFIX,
    SHA1_HEX_LENGTH,
)

__all__ = ["Variant", "classify"]


class Variant(enum.Enum):
    """
    Encoding families a stored hash can be in.

    Each member carries its ``tag`` (empty for the raw hex digests),
    its fixed ``length`` (``None`` when variable) and whether the
    encoding embeds a salt.
    """

    PBKDF2_V1 = (PBKDF2_PREFIX, None, True)
    SALTED_SHA1_V1 = (SALTED_SHA1_PREFIX, None, True)
    LEGACY_SHA1_RAW = ("", SHA1_HEX_LENGTH, False)
    LEGACY_MD5_RAW = ("", MD5_HEX_LENGTH, False)

    def __init__(self, tag: str, length: int | None, salted: bool) -> None:
        self.tag = tag
        self.length = length
        self.salted = salted


def classify(hash: StrOrBytes) -> Variant | None:
    """
    Tells which variant produced ``hash``, or ``None`` if no variant did.

    Tags are checked before lengths, and nothing past the first
    eight characters is looked at. Never raises: bytes that aren't utf8
    and values that are neither str nor bytes classify as ``None``.
    """
    text = try_as_str(hash)
    if text is None:
        return None

    prefix = text[:PREFIX_LENGTH]
    if prefix == Variant.PBKDF2_V1.tag:
        return Variant.PBKDF2_V1
    if prefix == Variant.SALTED_SHA1_V1.tag:
        return Variant.SALTED_SHA1_V1
    if len(text) == Variant.LEGACY_SHA1_RAW.length:
        return Variant.LEGACY_SHA1_RAW
    if len(text) == Variant.LEGACY_MD5_RAW.length:
        return Variant.LEGACY_MD5_RAW
    return None
