from __future__ import annotations

import hashlib
import hmac
from typing import TYPE_CHECKING

from libdigest._utils.bytes import StrOrBytes, as_bytes, as_str
from libdigest.errors import MalformedHashError
from libdigest.hashers.abc import PasswordHasher
from libdigest.inspect.digest import (
    HexDigestInfo,
    MD5HashInfo,
    SHA1HashInfo,
    inspect_hex_digest,
)
from libdigest.inspect.variant import classify

if TYPE_CHECKING:
    from libdigest._utils.protocols import DigestFunc

__all__ = ["MD5Hasher", "SHA1Hasher"]


class _HexDigestHasher(PasswordHasher):
    """Unsalted single-pass digests. Kept only so old hashes still verify."""

    _digest_func: DigestFunc
    _info_cls: type[HexDigestInfo]

    def hash(self, secret: StrOrBytes) -> str:
        return self._info_cls(hash=self._hexdigest(secret)).as_str()

    def verify(self, hash: StrOrBytes, secret: StrOrBytes) -> bool:
        hash = as_str(hash)
        if classify(hash) is not self._info_cls.VARIANT:
            return False

        info = inspect_hex_digest(hash, cls=self._info_cls)
        if info is None:
            raise MalformedHashError(self._info_cls.VARIANT.name)
        return hmac.compare_digest(info.hash.lower(), self._hexdigest(secret))

    def identify(self, hash: StrOrBytes) -> bool:
        return inspect_hex_digest(as_str(hash), cls=self._info_cls) is not None

    def needs_update(self, hash: StrOrBytes) -> bool:
        return True

    def _hexdigest(self, secret: StrOrBytes) -> str:
        return self._digest_func(as_bytes(secret)).hexdigest()


class SHA1Hasher(_HexDigestHasher):
    _digest_func = hashlib.sha1
    _info_cls = SHA1HashInfo


class MD5Hasher(_HexDigestHasher):
    _digest_func = hashlib.md5
    _info_cls = MD5HashInfo
