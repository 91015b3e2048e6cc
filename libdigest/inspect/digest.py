from __future__ import annotations

import dataclasses
import re
from typing import ClassVar, TypeVar

from libdigest.inspect.variant import Variant

__all__ = ["HexDigestInfo", "MD5HashInfo", "SHA1HashInfo", "inspect_hex_digest"]

_HEX_REGEX = re.compile(r"^[0-9a-fA-F]+$")


@dataclasses.dataclass(frozen=True)
class HexDigestInfo:
    """Unsalted digest stored as bare hex, with no tag."""

    VARIANT: ClassVar[Variant]

    hash: str

    def as_str(self) -> str:
        return self.hash


class SHA1HashInfo(HexDigestInfo):
    VARIANT = Variant.LEGACY_SHA1_RAW


class MD5HashInfo(HexDigestInfo):
    VARIANT = Variant.LEGACY_MD5_RAW


_THexDigestInfo = TypeVar("_THexDigestInfo", bound=HexDigestInfo)


def inspect_hex_digest(
    hash: str, cls: type[_THexDigestInfo]
) -> _THexDigestInfo | None:
    if len(hash) != cls.VARIANT.length or _HEX_REGEX.fullmatch(hash) is None:
        return None
    return cls(hash=hash)
