import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from libdigest._salt import SynchronizedRandom, generate_salt
from libdigest.errors import InvalidArgumentError


@pytest.mark.parametrize("length", [1, 16, 20, 40])
def test_generate_salt(length: int) -> None:
    salt = generate_salt(length)
    assert len(salt) == length
    assert salt == salt.lower()
    int(salt, 16)


def test_salts_differ() -> None:
    assert generate_salt(16) != generate_salt(16)


@pytest.mark.parametrize("length", [0, -1, 41, 1.5, True])
def test_invalid_length(length: int) -> None:
    with pytest.raises(InvalidArgumentError):
        generate_salt(length)


def test_invalid_length_is_value_error() -> None:
    with pytest.raises(ValueError, match="salt length must be between 1 - 40"):
        generate_salt(0)


def test_seeded_random() -> None:
    assert generate_salt(32, random=random.Random(7)) == generate_salt(
        32, random=random.Random(7)
    )


def test_synchronized_random_threads() -> None:
    source = SynchronizedRandom(random.Random(0))

    with ThreadPoolExecutor(max_workers=8) as executor:
        salts = list(executor.map(lambda _: generate_salt(16, source), range(200)))

    assert len(salts) == 200
    assert all(len(salt) == 16 for salt in salts)
    assert len(set(salts)) == 200
