"""versioned password hashing with migration of legacy digests"""

from libdigest.context import Algorithm, HashDispatcher
from libdigest.errors import InvalidArgumentError, LibdigestError, MalformedHashError
from libdigest.inspect import Variant, classify

__version__ = "1.0.0"

__all__ = [
    "Algorithm",
    "HashDispatcher",
    "InvalidArgumentError",
    "LibdigestError",
    "MalformedHashError",
    "Variant",
    "classify",
]
