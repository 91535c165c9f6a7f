# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

USER_HOME = os.path.expanduser("~")

SPELLINDEX_CONFIG_DIR = os.environ.get("SPELLINDEX_CONFIG_DIR", os.path.join(USER_HOME, ".config", "spellindex"))

SPELLINDEX_CONFIG = os.environ.get("SPELLINDEX_CONFIG", os.path.join(SPELLINDEX_CONFIG_DIR, "spellindex.json"))
SPELLINDEX_DICTIONARY = os.environ.get("SPELLINDEX_DICTIONARY")
