#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.framebuffer import Framebuffer


class TestFrameBuffer(unittest.TestCase):
    def setUp(self):
        self.framebuffer = Framebuffer(4, 5)

    def test_framebuffer_init(self):
        fb = Framebuffer()
        self.assertEqual((64, 32), fb.get_vid_size())
        self.assertEqual(64 * 32, len(fb.get_pixels()))
        self.assertTrue(fb.is_dirty())

    def test_framebuffer_xor_pixel(self):
        fb = self.framebuffer
        self.assertFalse(fb.xor_pixel(0, 0))
        self.assertEqual("0100000000000000000000000000000000000000", fb.pixels.hex())
        self.assertFalse(fb.xor_pixel(1, 1))
        self.assertEqual("0100000000010000000000000000000000000000", fb.pixels.hex())
        self.assertTrue(fb.xor_pixel(4, 5))  # Wraps around to 0, 0
        self.assertEqual("0000000000010000000000000000000000000000", fb.pixels.hex())

    def test_framebuffer_clear(self):
        fb = self.framebuffer
        fb.xor_pixel(2, 3)
        fb.acknowledge()
        self.assertFalse(fb.is_dirty())
        fb.clear()
        self.assertEqual("0000000000000000000000000000000000000000", fb.pixels.hex())
        self.assertTrue(fb.is_dirty())

    def test_framebuffer_draw_sprite(self):
        fb = self.framebuffer
        fb.acknowledge()
        self.assertFalse(fb.draw_sprite(1, 1, [0b11000000]))
        self.assertEqual(1, fb.get_pixel(1, 1))
        self.assertEqual(1, fb.get_pixel(2, 1))
        self.assertEqual(0, fb.get_pixel(3, 1))
        self.assertTrue(fb.is_dirty())

    def test_framebuffer_draw_sprite_wraps(self):
        fb = self.framebuffer
        fb.draw_sprite(3, 4, [0b11000000, 0b10000000])
        self.assertEqual(1, fb.get_pixel(3, 4))
        self.assertEqual(1, fb.get_pixel(0, 4))
        self.assertEqual(1, fb.get_pixel(3, 0))
        self.assertEqual(3, sum(fb.get_pixels()))

    def test_framebuffer_draw_sprite_collision(self):
        fb = self.framebuffer
        fb.draw_sprite(0, 0, [0b10000000, 0b00000000])
        # Only the first row collides, but the whole sprite is still drawn and reported
        self.assertTrue(fb.draw_sprite(0, 0, [0b10000000, 0b01000000]))
        self.assertEqual(0, fb.get_pixel(0, 0))
        self.assertEqual(1, fb.get_pixel(1, 1))

    def test_framebuffer_pixels_only_zero_or_one(self):
        fb = self.framebuffer

        for _ in range(3):
            fb.draw_sprite(0, 0, [0xFF] * 5)

        self.assertTrue(all(pixel in (0, 1) for pixel in fb.get_pixels()))
