#!/usr/bin/env python3

"""
Timer Emulator

Two 8-bit countdown timers.  Programs write them with Fx15 / Fx18 and read the
delay timer back with Fx07.  Both count down by one on every tick, which the
driving loop issues at a fixed rate (normally 60Hz) regardless of how many
instructions are executed in between.

The buzzer sounds for every tick where the sound timer was still running
before it was decremented.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class Timers:
    def __init__(self):
        self.reset()

    def reset(self):
        self.dt = 0  # Delay timer
        self.st = 0  # Sound timer
        self.buzzer = False

    def set_delay(self, value):
        self.dt = value & 0xFF

    def set_sound(self, value):
        self.st = value & 0xFF

    def tick(self):
        if self.dt > 0:
            self.dt -= 1

        self.buzzer = self.st > 0

        if self.buzzer:
            self.st -= 1

        return self.buzzer

    def sound_active(self):
        return self.buzzer
