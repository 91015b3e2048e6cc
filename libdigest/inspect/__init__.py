from libdigest.inspect.digest import MD5HashInfo, SHA1HashInfo, inspect_hex_digest
from libdigest.inspect.pbkdf2 import PBKDF2HashInfo, inspect_pbkdf2_hash
from libdigest.inspect.registry import HashInfo, inspect_hash
from libdigest.inspect.ssha1 import SaltedSHA1HashInfo, inspect_salted_sha1_hash
from libdigest.inspect.variant import Variant, classify

__all__ = [
    "HashInfo",
    "MD5HashInfo",
    "PBKDF2HashInfo",
    "SHA1HashInfo",
    "SaltedSHA1HashInfo",
    "Variant",
    "classify",
    "inspect_hash",
    "inspect_hex_digest",
    "inspect_pbkdf2_hash",
    "inspect_salted_sha1_hash",
]
