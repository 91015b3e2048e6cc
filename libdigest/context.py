from __future__ import annotations

import enum
import logging
import secrets
import warnings
from typing import TYPE_CHECKING

import typing_extensions

from libdigest._salt import SynchronizedRandom, generate_salt
from libdigest.hashers.digest import MD5Hasher, SHA1Hasher
from libdigest.hashers.pbkdf2 import PBKDF2Hasher
from libdigest.hashers.ssha1 import SaltedSHA1Hasher
from libdigest.inspect.variant import Variant, classify

if TYPE_CHECKING:
    from collections.abc import Mapping

    from libdigest._utils.bytes import StrOrBytes
    from libdigest._utils.protocols import RandomSource
    from libdigest.hashers.abc import PasswordHasher

__all__ = ["Algorithm", "HashDispatcher"]

log = logging.getLogger(__name__)


class Algorithm(str, enum.Enum):
    """Names accepted by the legacy :meth:`HashDispatcher.create`."""

    MD5 = "md5"
    SHA1 = "sha1"
    SALTED_SHA1 = "ssha1"
    PBKDF2 = "pbkdf2"


class HashDispatcher:
    """
    Routes hashes to the hasher for their variant.

    New hashes are always PBKDF2. Stored hashes are verified by whichever
    hasher matches their tag or length, and everything that isn't PBKDF2
    with current parameters is reported as needing an update.

    :param pbkdf2: hasher for new hashes and ``PBKDF2v1`` ones
    :param salted_sha1: hasher for ``SSHA1Xv1`` hashes
    :param sha1: hasher for bare 40 character hex digests
    :param md5: hasher for bare 32 character hex digests
    :param random: source for salts, defaults to ``secrets.SystemRandom()``
    """

    def __init__(
        self,
        *,
        pbkdf2: PBKDF2Hasher | None = None,
        salted_sha1: SaltedSHA1Hasher | None = None,
        sha1: SHA1Hasher | None = None,
        md5: MD5Hasher | None = None,
        random: RandomSource | None = None,
    ) -> None:
        self._random = SynchronizedRandom(
            random if random is not None else secrets.SystemRandom()
        )
        self._pbkdf2 = pbkdf2 or PBKDF2Hasher(random=self._random)
        self._salted_sha1 = salted_sha1 or SaltedSHA1Hasher(random=self._random)
        self._sha1 = sha1 or SHA1Hasher()
        self._md5 = md5 or MD5Hasher()

        self._hashers: Mapping[Variant, PasswordHasher] = {
            Variant.PBKDF2_V1: self._pbkdf2,
            Variant.SALTED_SHA1_V1: self._salted_sha1,
            Variant.LEGACY_SHA1_RAW: self._sha1,
            Variant.LEGACY_MD5_RAW: self._md5,
        }

    def hash(self, secret: StrOrBytes) -> str:
        return self._pbkdf2.hash(secret)

    def create(
        self,
        secret: StrOrBytes,
        algorithm: Algorithm | str | None = None,
    ) -> str:
        """
        Hashes ``secret`` with a hasher picked by name.

        ``"md5"``, ``"sha1"`` and ``"ssha1"`` select those hashers, every
        other value (including unknown names) selects PBKDF2.

        .. deprecated::
            Passing ``algorithm`` is deprecated. Use :meth:`hash`, or call
            the hasher from :mod:`libdigest.hashers` directly.
        """
        if algorithm is not None:
            warnings.warn(
                "selecting a hash algorithm by name is deprecated, "
                "use HashDispatcher.hash() or the hasher classes instead",
                DeprecationWarning,
                stacklevel=2,
            )
        return self._hasher_for(algorithm).hash(secret)

    def verify(self, secret: StrOrBytes, hash: StrOrBytes) -> bool:
        variant = classify(hash)
        if variant is None:
            log.debug("hash doesn't match any known variant")
            return False

        try:
            return self._hashers[variant].verify(hash=hash, secret=secret)
        except Exception:
            # a stored hash must only ever fail to authenticate
            log.debug("error verifying %s hash", variant.name, exc_info=True)
            return False

    def needs_update(self, hash: StrOrBytes) -> bool:
        if classify(hash) is not Variant.PBKDF2_V1:
            return True

        try:
            return self._pbkdf2.needs_update(hash)
        except Exception:
            log.debug(
                "error inspecting %s hash", Variant.PBKDF2_V1.name, exc_info=True
            )
            return True

    def verify_and_update(
        self, secret: StrOrBytes, hash: StrOrBytes
    ) -> tuple[bool, str | None]:
        """
        Verifies ``secret`` and, if it matches a stale hash, rehashes it.

        :returns: ``(verified, replacement)``, where ``replacement`` is
            None unless the secret matched and the hash needs an update.
        """
        if not self.verify(secret=secret, hash=hash):
            return False, None
        if self.needs_update(hash):
            return True, self.hash(secret)
        return True, None

    def identify(self, hash: StrOrBytes) -> Variant | None:
        return classify(hash)

    def generate_salt(self, length: int) -> str:
        return generate_salt(length, random=self._random)

    def _hasher_for(self, algorithm: Algorithm | str | None) -> PasswordHasher:
        try:
            algorithm = Algorithm(algorithm)
        except ValueError:
            if algorithm is not None:
                log.debug("unknown algorithm %r, using pbkdf2", algorithm)
            return self._pbkdf2

        if algorithm is Algorithm.MD5:
            return self._md5
        if algorithm is Algorithm.SHA1:
            return self._sha1
        if algorithm is Algorithm.SALTED_SHA1:
            return self._salted_sha1
        if algorithm is Algorithm.PBKDF2:
            return self._pbkdf2
        typing_extensions.assert_never(algorithm)
