#!/usr/bin/env python3

"""
Curses Renderer Plugin

Draws the framebuffer in a standard Linux-style TTY Terminal, the Windows
Command Prompt, or PowerShell.  Each set pixel is drawn as inverted spaces, so
palettes have no effect here.

The top line of the terminal is used for the title.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import curses
import _curses
from .r_null import Renderer as RendererBase


class Renderer(RendererBase):
    def __init__(self, scale=None, palette=None, cursor_mode=0, **kwargs):
        if scale is None:
            scale = 2  # Default horizontal stretch if not supplied, or set to default

        self.pixel_char = " " * scale
        self.pad = None
        self.title = ""
        self.cursor_mode = cursor_mode
        self.screen = curses.initscr()
        curses.curs_set(self.cursor_mode)
        curses.noecho()
        curses.cbreak()
        super().__init__(scale, palette)

    def _resize_pad(self, width, height):
        # We have to allow one extra character, presumably for the cursor, otherwise we can't write the furthest
        # bottom-right pixel.
        self.pad = curses.newpad(height + 2, width * self.scale + 1)

    def draw_frame(self, pixels, width, height):
        if self.pad is None or width != self.width or height != self.height:
            self._resize_pad(width, height)

        pad = self.pad
        pad.addstr(0, 0, self.title[:width * self.scale], curses.A_REVERSE)

        for y in range(height):
            row = y * width

            for x in range(width):
                attr = curses.A_REVERSE if pixels[row + x] else curses.A_NORMAL
                pad.addstr(y + 1, x * self.scale, self.pixel_char, attr)

        screen_height, screen_width = self.screen.getmaxyx()
        pad.refresh(0, 0, 0, 0, screen_height - 1, screen_width - 1)
        super().draw_frame(pixels, width, height)

    def set_title(self, title):
        self.title = title

    def get_curses_screen(self):
        return self.screen

    def shutdown(self):
        curses.nocbreak()
        curses.echo()

        if self.cursor_mode != 1:
            try:
                curses.curs_set(1)
            except _curses.error:
                pass

        curses.endwin()
        super().shutdown()
