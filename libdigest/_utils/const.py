PREFIX_LENGTH = 8
PBKDF2_PREFIX = "PBKDF2v1"
SALTED_SHA1_PREFIX = "SSHA1Xv1"

SHA1_HEX_LENGTH = 40
MD5_HEX_LENGTH = 32

HEX_CHARS = "0123456789abcdef"

# Salts used to be cut from a sha1 hexdigest, stored hashes never exceed this.
MAX_SALT_LENGTH = 40

# PBKDF2 Recommended rounds:
# https://cheatsheetseries.owasp.org/cheatsheets/Password_Storage_Cheat_Sheet.html#pbkdf2
PBKDF2_DEFAULT_ROUNDS = 600_000
# stored hashes above this are treated as malformed, it bounds verify() time
PBKDF2_MAX_ROUNDS = 10_000_000
PBKDF2_DEFAULT_SALT_LENGTH = 20
PBKDF2_DEFAULT_KEY_LENGTH = 40

SALTED_SHA1_DEFAULT_SALT_LENGTH = 10
