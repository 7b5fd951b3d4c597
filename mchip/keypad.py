#!/usr/bin/env python3

"""
Keypad Latch

Holds the pressed/released state of the 16 hexadecimal keys.  Input plugins
write to it between instructions, and the CPU only ever reads it.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import NUM_KEYS


class KeypadError(ValueError):
    pass


class Keypad:
    def __init__(self):
        self.key_down = [False] * NUM_KEYS

    def set_key_state(self, key, pressed):
        if not 0 <= key < NUM_KEYS:
            raise KeypadError("Key 0x{:x} does not exist on the keypad".format(key))

        self.key_down[key] = bool(pressed)

    def is_key_down(self, key):
        # Registers can hold values above 0xF, so only the low nibble selects a key
        return self.key_down[key & 0xF]

    def get_keypress(self):
        # Lowest numbered key held down, or None
        for key, down in enumerate(self.key_down):
            if down:
                return key

        return None

    def release_all(self):
        for key in range(NUM_KEYS):
            self.key_down[key] = False
