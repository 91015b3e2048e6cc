"""
libdigest setup script
"""
#=============================================================================
# init script env -- ensure cwd = root of source dir
#=============================================================================
import os
root_dir = os.path.abspath(os.path.join(__file__, ".."))
os.chdir(root_dir)

#=============================================================================
# imports
#=============================================================================
import re
from setuptools import setup, find_packages

#=============================================================================
# version string
#=============================================================================

# pull version string from libdigest without importing it,
# since its dependencies may not be installed yet.
with open(os.path.join(root_dir, "libdigest", "__init__.py")) as fh:
    version = re.search(r'^__version__ = "([^"]+)"', fh.read(), re.M).group(1)

#=============================================================================
# static text
#=============================================================================
SUMMARY = "versioned password hashing with migration of legacy digests"

DESCRIPTION = """\
libdigest verifies passwords stored in any of several historical formats
(raw md5 / sha1 hex digests, salted sha1, PBKDF2), detects which format a
stored hash is in, and tells the caller when a hash should be replaced by
a fresh PBKDF2 hash.
"""

KEYWORDS = """\
password secret hash security
md5 sha1 pbkdf2
migration
"""

CLASSIFIERS = """\
Intended Audience :: Developers
License :: OSI Approved :: BSD License
Natural Language :: English
Operating System :: OS Independent
Programming Language :: Python :: 3
Programming Language :: Python :: Implementation :: CPython
Programming Language :: Python :: Implementation :: PyPy
Topic :: Security :: Cryptography
Topic :: Software Development :: Libraries
""".splitlines()

if '.dev' in version:
    CLASSIFIERS.append("Development Status :: 3 - Alpha")
else:
    CLASSIFIERS.append("Development Status :: 5 - Production/Stable")

#=============================================================================
# run setup
#=============================================================================
setup(
    # package info
    packages=find_packages(root_dir, exclude=["tests", "tests.*"]),
    zip_safe=True,
    python_requires=">=3.9",

    # metadata
    name="libdigest",
    version=version,
    license="BSD",

    description=SUMMARY,
    long_description=DESCRIPTION,
    keywords=KEYWORDS,
    classifiers=CLASSIFIERS,

    install_requires=[
        "typing_extensions>=4.6",
    ],

    extras_require={
        "test": ["pytest>=7", "pytest-archon"],
    },
)

#=============================================================================
# eof
#=============================================================================
