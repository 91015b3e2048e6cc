from __future__ import annotations

__all__ = [
    "InvalidArgumentError",
    "LibdigestError",
    "MalformedHashError",
]


class LibdigestError(Exception):
    pass


class InvalidArgumentError(LibdigestError, ValueError):
    """Raised for out-of-range salt lengths, rounds and similar settings."""


class MalformedHashError(LibdigestError, ValueError):
    """
    Raised by a hasher when a hash carries its format tag (or length)
    but the remainder can't be parsed.
    """

    def __init__(self, variant_name: str | None = None) -> None:
        msg = "malformed hash"
        if variant_name is not None:
            msg = f"malformed {variant_name} hash"
        super().__init__(msg)
        self.variant_name = variant_name
