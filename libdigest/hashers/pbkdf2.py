from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
from hashlib import pbkdf2_hmac
from typing import TYPE_CHECKING

from libdigest._salt import generate_salt
from libdigest._utils.bytes import as_bytes, as_str
from libdigest._utils.const import (
    PBKDF2_DEFAULT_KEY_LENGTH,
    PBKDF2_DEFAULT_ROUNDS,
    PBKDF2_MAX_ROUNDS,
    PBKDF2_DEFAULT_SALT_LENGTH,
)
from libdigest._utils.validation import (
    validate_key_length,
    validate_rounds,
    validate_salt,
    validate_salt_length,
)
from libdigest.errors import MalformedHashError
from libdigest.hashers.abc import PasswordHasher
from libdigest.inspect.pbkdf2 import PBKDF2HashInfo, inspect_pbkdf2_hash
from libdigest.inspect.variant import Variant, classify

if TYPE_CHECKING:
    from libdigest._utils.bytes import StrOrBytes
    from libdigest._utils.protocols import RandomSource

__all__ = ["PBKDF2Hasher"]


def _decode_key(value: str) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as err:
        raise MalformedHashError(Variant.PBKDF2_V1.name) from err


class PBKDF2Hasher(PasswordHasher):
    """
    PBKDF2-HMAC-SHA256, stored as ``PBKDF2v1|<rounds>|<salt>|<base64 key>``.

    The salt is a hex string and is fed to the KDF as its ascii text.
    A hash needs an update when its rounds, salt length or key length
    differ from the ones this hasher was configured with. Stored hashes
    with more than ``MAX_ROUNDS`` rounds are treated as malformed.
    """

    HASH_NAME = hashlib.sha256().name
    DEFAULT_ROUNDS = PBKDF2_DEFAULT_ROUNDS
    MAX_ROUNDS = PBKDF2_MAX_ROUNDS

    def __init__(
        self,
        rounds: int | None = None,
        salt_length: int = PBKDF2_DEFAULT_SALT_LENGTH,
        dklen: int = PBKDF2_DEFAULT_KEY_LENGTH,
        random: RandomSource | None = None,
    ) -> None:
        self._rounds = rounds or self.DEFAULT_ROUNDS
        validate_rounds(self._rounds, min=1, max=self.MAX_ROUNDS)
        validate_salt_length(salt_length)
        validate_key_length(dklen)
        self._salt_length = salt_length
        self._dklen = dklen
        self._random = random

    def hash(
        self,
        secret: StrOrBytes,
        *,
        salt: str | None = None,
        rounds: int | None = None,
        dklen: int | None = None,
    ) -> str:
        if salt is None:
            salt = generate_salt(self._salt_length, random=self._random)
        validate_salt(salt)
        rounds = rounds or self._rounds
        validate_rounds(rounds, min=1, max=self.MAX_ROUNDS)
        dklen = dklen or self._dklen

        key = self._derive(secret, salt=salt, rounds=rounds, dklen=dklen)
        return PBKDF2HashInfo(
            rounds=rounds,
            salt=salt,
            hash=base64.b64encode(key).decode("ascii"),
        ).as_str()

    def identify(self, hash: StrOrBytes) -> bool:
        return inspect_pbkdf2_hash(as_str(hash)) is not None

    def verify(self, hash: StrOrBytes, secret: StrOrBytes) -> bool:
        hash = as_str(hash)
        if classify(hash) is not Variant.PBKDF2_V1:
            return False

        hash_info = inspect_pbkdf2_hash(hash)
        if not hash_info or hash_info.rounds > self.MAX_ROUNDS:
            raise MalformedHashError(Variant.PBKDF2_V1.name)

        expected = _decode_key(hash_info.hash)
        derived = self._derive(
            secret,
            salt=hash_info.salt,
            rounds=hash_info.rounds,
            dklen=len(expected),
        )
        return hmac.compare_digest(expected, derived)

    def needs_update(self, hash: StrOrBytes) -> bool:
        hash_info = inspect_pbkdf2_hash(as_str(hash))
        if not hash_info or hash_info.rounds > self.MAX_ROUNDS:
            return True
        try:
            key = _decode_key(hash_info.hash)
        except MalformedHashError:
            return True

        return not (
            hash_info.rounds == self._rounds
            and len(hash_info.salt) == self._salt_length
            and len(key) == self._dklen
        )

    def _derive(self, secret: StrOrBytes, salt: str, rounds: int, dklen: int) -> bytes:
        return pbkdf2_hmac(
            self.HASH_NAME,
            password=as_bytes(secret),
            salt=as_bytes(salt),
            iterations=rounds,
            dklen=dklen,
        )
