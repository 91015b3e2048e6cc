from __future__ import annotations

import secrets
import threading
from typing import TYPE_CHECKING, TypeVar

from libdigest._utils.const import HEX_CHARS
from libdigest._utils.validation import validate_salt_length

if TYPE_CHECKING:
    from collections.abc import Sequence

    from libdigest._utils.protocols import RandomSource

__all__ = ["SynchronizedRandom", "generate_salt"]

_T = TypeVar("_T")

_system_random = secrets.SystemRandom()


class SynchronizedRandom:
    """
    Wraps a random source so draws from several threads are serialized.

    ``secrets.SystemRandom`` doesn't need this, but seeded sources such as
    ``random.Random`` share internal state between callers.
    """

    def __init__(self, random: RandomSource) -> None:
        self._random = random
        self._lock = threading.Lock()

    def choice(self, seq: Sequence[_T]) -> _T:
        with self._lock:
            return self._random.choice(seq)


def generate_salt(length: int, random: RandomSource | None = None) -> str:
    """
    Returns ``length`` lowercase hex characters.

    :param length: number of characters, between 1 and 40
    :param random: source to draw from, defaults to the OS CSPRNG
    :raises InvalidArgumentError: if ``length`` is out of range
    """
    validate_salt_length(length)
    if random is None:
        random = _system_random
    return "".join(random.choice(HEX_CHARS) for _ in range(length))
