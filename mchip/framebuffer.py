#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here, and are only drawn to the actual display (the host
rendering system) when the driving loop notices the draw flag.  Renderers are
handed a read-only view of the pixels, one byte per pixel, row by row.  Every
byte is either 0 or 1.

Programs cannot write directly into video memory.  Instead, sprites are drawn
to the screen using an XOR method, and any pixel that was set but is unset by
the XOR counts as a collision.

Sprites wrap around both edges of the screen.  Each pixel's position is taken
modulo the screen size on its own, so part of a sprite can appear on the
opposite edge.

The draw flag is set by every clear or sprite draw, and stays set until the
renderer acknowledges it.  It starts off set, so the first frame is always
drawn.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import VID_WIDTH, VID_HEIGHT


class Framebuffer:
    def __init__(self, vid_width=VID_WIDTH, vid_height=VID_HEIGHT):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.pixels = memoryview(bytearray(self.vid_size))
        self.draw_flag = True

    def clear(self):
        self.pixels[:] = bytes(self.vid_size)
        self.draw_flag = True

    def get_pixel(self, x, y):
        return self.pixels[(y % self.vid_height) * self.vid_width + (x % self.vid_width)]

    def xor_pixel(self, x, y):
        # Returns True if the pixel was switched off (a collision)
        vram_loc = (y % self.vid_height) * self.vid_width + (x % self.vid_width)
        pixel = self.pixels[vram_loc]
        self.pixels[vram_loc] = pixel ^ 1
        return pixel == 1

    def draw_sprite(self, x, y, rows):
        # Draws 8-pixel wide rows, most significant bit on the left.  Collisions accumulate over the whole sprite.
        x %= self.vid_width
        y %= self.vid_height
        collided = False

        for row_num, spr_data in enumerate(rows):
            for bit in range(8):
                if spr_data & (0x80 >> bit) and self.xor_pixel(x + bit, y + row_num):
                    # Don't stop drawing, just remember the collision
                    collided = True

        self.draw_flag = True
        return collided

    def get_pixels(self):
        return self.pixels.toreadonly()

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def is_dirty(self):
        return self.draw_flag

    def acknowledge(self):
        self.draw_flag = False
