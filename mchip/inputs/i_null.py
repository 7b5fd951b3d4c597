#!/usr/bin/env python3

"""
Null Input Plugin

Base class for the other Input plugins, and usable on its own when a machine
needs no input at all.

Input plugins turn host keys into keypad latch writes, using the keymap to
translate host key codes into the 16 hexadecimal keys.  They also handle the
emulator's own hotkeys: pause, single-step while paused, and palette cycling.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import NUM_KEYS


class InputsError(Exception):
    pass


class Inputs:
    def __init__(self, keymap, renderer, keypad, force_lowercase=False):
        self.keymap_dict = {}
        self.renderer = renderer
        self.keypad = keypad
        self.paused = False
        self.step_requested = False
        keymap_split = keymap.split(",")

        if len(keymap_split) != NUM_KEYS:
            raise InputsError("Incorrect number of keys defined -- 16 required.  Use commas to split numbers")

        for key_num, key_defined in enumerate(keymap_split):
            try:
                key_defined_ord = int(key_defined)
            except ValueError:
                raise InputsError("Defined keys are not all integer values") from None

            if force_lowercase:
                # If we are working with characters rather than keyscan codes, we should convert to lowercase
                key_defined_ord = ord(chr(key_defined_ord).lower())

            if key_defined_ord in self.keymap_dict:
                raise InputsError("Duplicate keys defined")

            self.keymap_dict[key_defined_ord] = key_num

    def process_messages(self):
        return False  # Don't exit the program

    def toggle_pause(self):
        self.paused = not self.paused

    def request_step(self):
        if self.paused:
            self.step_requested = True

    def take_step_request(self):
        # Returns True once for every single-step requested
        step_requested = self.step_requested
        self.step_requested = False
        return step_requested

    def shutdown(self):
        pass
