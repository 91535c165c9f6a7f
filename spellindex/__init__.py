# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .dictionary import Dictionary, Error, InvariantViolation  # noqa: F401
from .permutations import build_error_map, deletions, variants  # noqa: F401
from .word import Word  # noqa: F401

try:
    from .version import __version__  # noqa: F401
except ImportError:
    __version__ = "UNKNOWN"
