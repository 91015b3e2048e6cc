from __future__ import annotations

import dataclasses
import re
from typing import ClassVar

from libdigest.inspect.variant import Variant

__all__ = ["SaltedSHA1HashInfo", "inspect_salted_sha1_hash"]


@dataclasses.dataclass(frozen=True)
class SaltedSHA1HashInfo:
    VARIANT: ClassVar[Variant] = Variant.SALTED_SHA1_V1
    REGEX: ClassVar[re.Pattern[str]] = re.compile(
        r"^SSHA1Xv1\|(?P<salt>[^|]+)\|(?P<hash>[0-9a-fA-F]{40})$"
    )

    salt: str
    hash: str

    def as_str(self) -> str:
        return f"{self.VARIANT.tag}|{self.salt}|{self.hash}"


def inspect_salted_sha1_hash(hash: str) -> SaltedSHA1HashInfo | None:
    match = SaltedSHA1HashInfo.REGEX.fullmatch(hash)
    if match is None:
        return None

    return SaltedSHA1HashInfo(salt=match.group("salt"), hash=match.group("hash"))
