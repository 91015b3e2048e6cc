from __future__ import annotations

import dataclasses
import re
from typing import ClassVar

from libdigest.inspect.variant import Variant

__all__ = ["PBKDF2HashInfo", "inspect_pbkdf2_hash"]


@dataclasses.dataclass(frozen=True)
class PBKDF2HashInfo:
    VARIANT: ClassVar[Variant] = Variant.PBKDF2_V1
    REGEX: ClassVar[re.Pattern[str]] = re.compile(
        r"^PBKDF2v1"
        r"\|(?P<rounds>[1-9][0-9]*)"
        r"\|(?P<salt>[^|]+)"
        r"\|(?P<hash>[A-Za-z0-9+/]+={0,2})$"
    )

    rounds: int
    salt: str
    hash: str

    def as_str(self) -> str:
        return f"{self.VARIANT.tag}|{self.rounds}|{self.salt}|{self.hash}"


def inspect_pbkdf2_hash(hash: str) -> PBKDF2HashInfo | None:
    match = PBKDF2HashInfo.REGEX.fullmatch(hash)
    if match is None:
        return None

    return PBKDF2HashInfo(
        rounds=int(match.group("rounds")),
        salt=match.group("salt"),
        hash=match.group("hash"),
    )
