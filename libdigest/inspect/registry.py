from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Union

from libdigest._utils.bytes import StrOrBytes, as_str
from libdigest.inspect.digest import MD5HashInfo, SHA1HashInfo, inspect_hex_digest
from libdigest.inspect.pbkdf2 import PBKDF2HashInfo, inspect_pbkdf2_hash
from libdigest.inspect.ssha1 import SaltedSHA1HashInfo, inspect_salted_sha1_hash
from libdigest.inspect.variant import Variant, classify

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["HashInfo", "inspect_hash"]

HashInfo = Union[PBKDF2HashInfo, SaltedSHA1HashInfo, SHA1HashInfo, MD5HashInfo]

_INSPECTORS: Mapping[Variant, Callable[[str], HashInfo | None]] = {
    Variant.PBKDF2_V1: inspect_pbkdf2_hash,
    Variant.SALTED_SHA1_V1: inspect_salted_sha1_hash,
    Variant.LEGACY_SHA1_RAW: lambda hash: inspect_hex_digest(hash, SHA1HashInfo),
    Variant.LEGACY_MD5_RAW: lambda hash: inspect_hex_digest(hash, MD5HashInfo),
}


def inspect_hash(hash: StrOrBytes) -> HashInfo | None:
    """
    Classifies ``hash`` and parses it into the record for its variant.

    Returns ``None`` both for unrecognised strings and for strings that
    carry a variant's tag or length but don't parse as that variant.
    """
    variant = classify(hash)
    if variant is None:
        return None
    return _INSPECTORS[variant](as_str(hash))
