#!/usr/bin/env python3

"""
PyGame Audio Plugin

Plays the buzzer within PyGame / SDL.  The buzzer only has an 'on' or 'off'
status, so a short square wave sample is looped for as long as it is on.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .a_null import Audio as AudioBase

PLAYBACK_FREQUENCY = 44100
BUZZER_FREQUENCY = 440
DEFAULT_VOLUME = 0.1


class Audio(AudioBase):
    def __init__(self):
        pygame.mixer.pre_init(PLAYBACK_FREQUENCY, size=8, channels=1, buffer=512, allowedchanges=0)
        pygame.mixer.init()

        # One full cycle of an unsigned 8-bit square wave, high for the first half
        cycle_size = PLAYBACK_FREQUENCY // BUZZER_FREQUENCY
        half_cycle = cycle_size // 2
        wave = bytearray(cycle_size)

        for sample in range(half_cycle):
            wave[sample] = 0xFF

        self.sound = pygame.mixer.Sound(buffer=bytes(wave))
        self.sound.set_volume(DEFAULT_VOLUME)
        super().__init__()

    def enable_buzzer(self, enabled):
        # Enable or disable the buzzer, i.e. play or stop looping the sample.  If the sample is already playing, it
        # won't be restarted.
        if enabled and not self.buzzer_enabled:
            self.sound.play(-1)
        elif not enabled and self.buzzer_enabled:
            self.sound.stop()

        super().enable_buzzer(enabled)

    def shutdown(self):
        self.sound.stop()
        pygame.mixer.quit()
        super().shutdown()
