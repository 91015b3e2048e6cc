import base64
import random

import pytest

from libdigest.errors import InvalidArgumentError, MalformedHashError
from libdigest.hashers.pbkdf2 import PBKDF2Hasher
from libdigest.inspect.pbkdf2 import inspect_pbkdf2_hash

# RFC 7914, section 11: PBKDF2-HMAC-SHA256, P="passwd", S="salt", c=1
RFC_7914_KEY = bytes.fromhex(
    "55ac046e56e3089fec1691c22544b605f94185216dde0465e68b9d57c20dacbc"
    "49ca9cccf179b645991664b39d77ef317c71b845b1e30bd509112041d3a19783"
)


def test_known_key() -> None:
    hasher = PBKDF2Hasher(rounds=1)
    hash = hasher.hash("passwd", salt="salt")

    info = inspect_pbkdf2_hash(hash)
    assert info
    assert info.rounds == 1
    assert info.salt == "salt"
    assert base64.b64decode(info.hash) == RFC_7914_KEY[:40]
    assert hash == f"PBKDF2v1|1|salt|{base64.b64encode(RFC_7914_KEY[:40]).decode()}"


def test_verify() -> None:
    hasher = PBKDF2Hasher(rounds=1_000)
    hash = hasher.hash("password")

    assert hasher.verify(hash=hash, secret="password")
    assert hasher.verify(hash=hash.encode(), secret=b"password")
    assert not hasher.verify(hash=hash, secret="passwOrd")
    assert not hasher.verify(hash=hash, secret="")


def test_verify_uses_stored_parameters() -> None:
    hash = PBKDF2Hasher(rounds=1_001, salt_length=8, dklen=20).hash("password")
    assert PBKDF2Hasher(rounds=1_000).verify(hash=hash, secret="password")


def test_verify_other_variant() -> None:
    hasher = PBKDF2Hasher(rounds=1_000)
    assert not hasher.verify(
        hash="5f4dcc3b5aa765d61d8327deb882cf99", secret="password"
    )


@pytest.mark.parametrize(
    "hash",
    [
        "PBKDF2v1$10000$abc123$Zm9v",
        "PBKDF2v1|1000|salt|Zm9vY",
        "PBKDF2v1|0|salt|Zm9v",
        "PBKDF2v1|20000000|salt|AAAA",
        "PBKDF2v1|4294967296|salt|AAAA",
        "PBKDF2v1|99999999999999999999|salt|AAAA",
        "PBKDF2v1",
    ],
)
def test_verify_malformed(hash: str) -> None:
    with pytest.raises(MalformedHashError):
        PBKDF2Hasher(rounds=1_000).verify(hash=hash, secret="password")


def test_salt() -> None:
    hasher = PBKDF2Hasher(rounds=1_000, salt_length=16)
    first = inspect_pbkdf2_hash(hasher.hash("password"))
    second = inspect_pbkdf2_hash(hasher.hash("password"))
    assert first
    assert second
    assert len(first.salt) == 16
    assert first.salt != second.salt
    assert first.hash != second.hash


def test_seeded_random() -> None:
    first = PBKDF2Hasher(rounds=1_000, random=random.Random(1)).hash("password")
    second = PBKDF2Hasher(rounds=1_000, random=random.Random(1)).hash("password")
    assert first == second


def test_needs_update() -> None:
    rounds = 1_000
    hasher = PBKDF2Hasher(rounds=rounds)

    assert not hasher.needs_update(hasher.hash("password"))
    assert hasher.needs_update(hasher.hash("password", rounds=rounds + 1))
    assert hasher.needs_update(hasher.hash("password", rounds=rounds - 1))
    assert hasher.needs_update(hasher.hash("password", dklen=20))
    assert hasher.needs_update(hasher.hash("password", salt="abcd"))
    assert hasher.needs_update("PBKDF2v1$10000$abc123")
    assert hasher.needs_update("PBKDF2v1|1000|salt|Zm9vY")
    assert hasher.needs_update("PBKDF2v1|20000000|salt|AAAA")
    assert hasher.needs_update("PBKDF2v1|99999999999999999999|salt|AAAA")
    assert hasher.needs_update("5f4dcc3b5aa765d61d8327deb882cf99")


def test_identify() -> None:
    hasher = PBKDF2Hasher(rounds=1_000)
    assert hasher.identify(hasher.hash("password"))
    assert not hasher.identify("PBKDF2v1$10000$abc123")
    assert not hasher.identify("5f4dcc3b5aa765d61d8327deb882cf99")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"rounds": -1},
        {"rounds": PBKDF2Hasher.MAX_ROUNDS + 1},
        {"salt_length": 0},
        {"salt_length": 41},
        {"dklen": 0},
    ],
)
def test_invalid_settings(kwargs: dict) -> None:
    with pytest.raises(InvalidArgumentError):
        PBKDF2Hasher(**kwargs)


def test_invalid_salt() -> None:
    with pytest.raises(InvalidArgumentError):
        PBKDF2Hasher(rounds=1_000).hash("password", salt="a|b")


def test_max_rounds() -> None:
    hasher = PBKDF2Hasher(rounds=1_000)
    with pytest.raises(InvalidArgumentError):
        hasher.hash("password", rounds=PBKDF2Hasher.MAX_ROUNDS + 1)

    hash = f"PBKDF2v1|{PBKDF2Hasher.MAX_ROUNDS + 1}|salt|AAAA"
    assert hasher.identify(hash)
    with pytest.raises(MalformedHashError):
        hasher.verify(hash=hash, secret="password")
    assert hasher.needs_update(hash)
