#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.timers import Timers


class TestTimers(unittest.TestCase):
    def setUp(self):
        self.timers = Timers()

    def test_timers_init(self):
        self.assertEqual(0, self.timers.dt)
        self.assertEqual(0, self.timers.st)
        self.assertFalse(self.timers.sound_active())

    def test_timers_delay_counts_down(self):
        self.timers.set_delay(2)
        self.timers.tick()
        self.assertEqual(1, self.timers.dt)
        self.timers.tick()
        self.timers.tick()
        self.assertEqual(0, self.timers.dt)  # Never goes below zero

    def test_timers_sound(self):
        self.timers.set_sound(2)
        self.assertTrue(self.timers.tick())
        self.assertTrue(self.timers.sound_active())
        self.assertTrue(self.timers.tick())
        self.assertEqual(0, self.timers.st)
        self.assertFalse(self.timers.tick())
        self.assertFalse(self.timers.sound_active())

    def test_timers_sound_of_one_still_beeps(self):
        self.timers.set_sound(1)
        self.assertTrue(self.timers.tick())
        self.assertFalse(self.timers.tick())

    def test_timers_reset(self):
        self.timers.set_delay(9)
        self.timers.set_sound(9)
        self.timers.tick()
        self.timers.reset()
        self.assertEqual(0, self.timers.dt)
        self.assertEqual(0, self.timers.st)
        self.assertFalse(self.timers.sound_active())
