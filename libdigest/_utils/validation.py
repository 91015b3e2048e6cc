from __future__ import annotations

from libdigest._utils.const import MAX_SALT_LENGTH
from libdigest.errors import InvalidArgumentError


def validate_rounds(rounds: int, min: int, max: int | None = None) -> None:
    if rounds < min:
        msg = f"rounds must be at least {min}"
        raise InvalidArgumentError(msg)
    if max is not None and rounds > max:
        msg = f"rounds must be between {min} - {max}"
        raise InvalidArgumentError(msg)


def validate_salt_length(length: int) -> None:
    if isinstance(length, bool) or not isinstance(length, int):
        msg = f"salt length must be an integer, got {type(length).__name__}"
        raise InvalidArgumentError(msg)
    if length <= 0 or length > MAX_SALT_LENGTH:
        msg = f"salt length must be between 1 - {MAX_SALT_LENGTH}"
        raise InvalidArgumentError(msg)


def validate_salt(salt: str) -> None:
    # "|" separates fields in the tagged formats
    if not salt or "|" in salt:
        msg = "salt must be non-empty and must not contain '|'"
        raise InvalidArgumentError(msg)


def validate_key_length(dklen: int) -> None:
    if dklen < 1:
        msg = "key length must be at least 1"
        raise InvalidArgumentError(msg)
