#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if you only want to see
debug output, or to run a machine with no display at all.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import PALETTES


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, scale=None, palette=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.width = 0
        self.height = 0
        self.frames_drawn = 0
        self.set_palette(0 if palette is None else palette)

    def set_palette(self, palette):
        if not 0 <= palette < len(PALETTES):
            raise RendererError("Palette {} does not exist.  Choose 0 to {}".format(palette, len(PALETTES) - 1))

        self.palette = palette
        self.background, self.foreground = PALETTES[palette]

    def cycle_palette(self):
        self.set_palette((self.palette + 1) % len(PALETTES))

    def draw_frame(self, pixels, width, height):  # pylint: disable=unused-argument
        self.width = width
        self.height = height
        self.frames_drawn += 1

    def set_title(self, title):
        pass

    def shutdown(self):
        pass
