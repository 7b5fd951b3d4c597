#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading ROM binaries for later writing into RAM.  A ROM is a flat
stream of bytes with no header, so the only thing which can be checked here is
that the whole file could be read.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Loader:
    def load_binary(self, filename):
        # Read everything up front, so a failed read never leaves a partial ROM behind
        with open(filename, "rb") as f:
            return f.read()
