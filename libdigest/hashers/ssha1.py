from __future__ import annotations

import hashlib
import hmac
from typing import TYPE_CHECKING

from libdigest._salt import generate_salt
from libdigest._utils.bytes import StrOrBytes, as_bytes, as_str
from libdigest._utils.const import SALTED_SHA1_DEFAULT_SALT_LENGTH
from libdigest._utils.validation import validate_salt, validate_salt_length
from libdigest.errors import MalformedHashError
from libdigest.hashers.abc import PasswordHasher
from libdigest.inspect.ssha1 import SaltedSHA1HashInfo, inspect_salted_sha1_hash
from libdigest.inspect.variant import Variant, classify

if TYPE_CHECKING:
    from libdigest._utils.protocols import RandomSource

__all__ = ["SaltedSHA1Hasher"]


class SaltedSHA1Hasher(PasswordHasher):
    """
    ``sha1(salt + secret)``, stored as ``SSHA1Xv1|<salt>|<hex digest>``.

    Superseded by PBKDF2, hashes in this format always need an update.
    """

    def __init__(
        self,
        salt_length: int = SALTED_SHA1_DEFAULT_SALT_LENGTH,
        random: RandomSource | None = None,
    ) -> None:
        validate_salt_length(salt_length)
        self._salt_length = salt_length
        self._random = random

    def hash(self, secret: StrOrBytes, *, salt: str | None = None) -> str:
        if salt is None:
            salt = generate_salt(self._salt_length, random=self._random)
        validate_salt(salt)

        digest = self._hexdigest(secret, salt)
        return SaltedSHA1HashInfo(salt=salt, hash=digest).as_str()

    def verify(self, hash: StrOrBytes, secret: StrOrBytes) -> bool:
        hash = as_str(hash)
        if classify(hash) is not Variant.SALTED_SHA1_V1:
            return False

        info = inspect_salted_sha1_hash(hash)
        if info is None:
            raise MalformedHashError(Variant.SALTED_SHA1_V1.name)
        return hmac.compare_digest(
            info.hash.lower(), self._hexdigest(secret, info.salt)
        )

    def identify(self, hash: StrOrBytes) -> bool:
        return inspect_salted_sha1_hash(as_str(hash)) is not None

    def needs_update(self, hash: StrOrBytes) -> bool:
        return True

    @staticmethod
    def _hexdigest(secret: StrOrBytes, salt: str) -> str:
        return hashlib.sha1(as_bytes(salt) + as_bytes(secret)).hexdigest()
