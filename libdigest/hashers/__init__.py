from libdigest.hashers.abc import PasswordHasher
from libdigest.hashers.digest import MD5Hasher, SHA1Hasher
from libdigest.hashers.pbkdf2 import PBKDF2Hasher
from libdigest.hashers.ssha1 import SaltedSHA1Hasher

__all__ = [
    "MD5Hasher",
    "PBKDF2Hasher",
    "PasswordHasher",
    "SHA1Hasher",
    "SaltedSHA1Hasher",
]
