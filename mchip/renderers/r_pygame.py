#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws the framebuffer onto an SDL window surface via PyGame.  The image is
built at the emulated resolution and then stretched (in the correct aspect
ratio using 'Nearest Neighbour' translation) to fit the window itself, so each
emulated pixel is only written once.

Only two colours are ever shown: the background and foreground of the current
palette.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import Renderer as RendererBase
from ..constants import APP_NAME


class Renderer(RendererBase):
    def __init__(self, scale=None, palette=None, **kwargs):
        if scale is None:
            scale = 640  # Default window width if not supplied, or set to default

        pygame.display.init()
        self.set_title(APP_NAME)
        self.rgb_buffer = None
        self.scaled_size = (scale, scale // 2)
        self.display_surface = pygame.display.set_mode(self.scaled_size)
        self.rgb_map = None
        super().__init__(scale, palette)

    def set_palette(self, palette):
        super().set_palette(palette)

        # Split compound RGB values for faster byte-based lookup later
        self.rgb_map = [
            bytes((colour >> 16, (colour >> 8) & 0xFF, colour & 0xFF)) for colour in (self.background, self.foreground)
        ]

    def draw_frame(self, pixels, width, height):
        total_pixels = width * height

        if self.rgb_buffer is None or len(self.rgb_buffer) != total_pixels * 3:
            self.rgb_buffer = memoryview(bytearray(total_pixels * 3))  # 24-bit

        # Update RGB buffer in-place to minimise allocations and PyGame calls
        rgb_buffer = self.rgb_buffer
        rgb_map = self.rgb_map

        for location in range(total_pixels):
            rgb_location = location * 3
            rgb_buffer[rgb_location:rgb_location + 3] = rgb_map[pixels[location]]

        # Blit the bytearray straight to the surface, rather than setting each pixel through PyGame
        render_surface = pygame.image.frombuffer(rgb_buffer, (width, height), "RGB")
        scaled_win = pygame.transform.scale(render_surface, self.scaled_size)
        self.display_surface.blit(scaled_win, (0, 0))
        pygame.display.flip()
        super().draw_frame(pixels, width, height)

    def set_title(self, title):
        pygame.display.set_caption(title)

    def shutdown(self):
        # PyGame currently segfaults if display.quit is called via __del__
        pygame.display.quit()
        super().shutdown()
