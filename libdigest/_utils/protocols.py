from __future__ import annotations

from collections.abc import Sequence
from typing import Callable, Protocol, TypeVar

from typing_extensions import Buffer, Self

_T = TypeVar("_T")


class HashLike(Protocol):
    """Lifted from hashlib.pyi"""

    @property
    def digest_size(self) -> int: ...

    @property
    def name(self) -> str: ...

    def copy(self) -> Self: ...

    def digest(self) -> bytes: ...

    def hexdigest(self) -> str: ...

    def update(self, data: Buffer, /) -> None: ...


DigestFunc = Callable[[bytes], HashLike]


class RandomSource(Protocol):
    """Anything with ``random.Random.choice``, e.g. ``secrets.SystemRandom()``."""

    def choice(self, seq: Sequence[_T]) -> _T: ...
