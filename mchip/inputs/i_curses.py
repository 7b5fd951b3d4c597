#!/usr/bin/env python3

"""
Curses Terminal Input Plugin

A background thread reads characters from the terminal and queues them for the
driving loop.  Terminals only ever report characters, never separate press and
release events, so every mapped character holds its key down for a short
while.  Keyboard auto-repeat keeps a held key pressed, and a key that stops
repeating is released on the keypad once its timer runs out.

ESC (char 27) and CTRL+C (char 3) quit.  'p' pauses, 'n' runs one frame while
paused, and TAB (char 9) switches palette.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import queue
from threading import Thread
from time import time
from .i_null import Inputs as InputsBase
from ..constants import NUM_KEYS

KEY_HOLD_TIME = 0.2  # Seconds a key stays down after its character was last seen
QUIT_CHARS = (27, 3)
HOTKEY_CHARS = (ord("p"), ord("n"), 9)


def read_terminal(stop_queue, char_queue, keymap_dict, curses_screen):
    # Runs on its own thread.  Only queues cross between threads.
    while stop_queue.empty():
        # getch() blocks, so a stop request is only noticed after the next character
        char = ord(chr(curses_screen.getch()).lower())

        if char in QUIT_CHARS:
            char_queue.put(None, block=True)
            return

        hex_key = keymap_dict.get(char)

        if hex_key is None and char in HOTKEY_CHARS:
            hex_key = -char  # Negative, so hotkeys never clash with keypad keys

        if hex_key is None:
            continue

        try:
            char_queue.put(hex_key, block=False)
        except queue.Full:
            pass  # Repeats arrive faster than frames, so dropping one is harmless


class Inputs(InputsBase):
    def __init__(self, keymap, renderer, keypad):
        self.release_times = [0.0] * NUM_KEYS
        super().__init__(keymap, renderer, keypad, force_lowercase=True)

        self.hotkeys = {
            -ord("p"): self.toggle_pause,
            -ord("n"): self.request_step,
            -9:        renderer.cycle_palette
        }

        self.stop_queue = queue.Queue(1)
        self.char_queue = queue.Queue(NUM_KEYS)
        self.reader = Thread(
            target=read_terminal,
            args=(self.stop_queue, self.char_queue, self.keymap_dict, renderer.get_curses_screen()),
            daemon=True  # Don't hold the process open while getch() is waiting
        )
        self.reader.start()

    def process_messages(self):
        now = time()

        while True:
            try:
                hex_key = self.char_queue.get(block=False)
            except queue.Empty:
                break

            if hex_key is None:
                return True

            if hex_key < 0:
                self.hotkeys[hex_key]()
            else:
                self.release_times[hex_key] = now + KEY_HOLD_TIME

        for key_num, release_time in enumerate(self.release_times):
            self.keypad.set_key_state(key_num, release_time > now)

        return False

    def shutdown(self):
        try:
            self.stop_queue.put(None, block=False)
        except queue.Full:
            pass  # Already asked to stop

        super().shutdown()
