#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.debugger import Debugger


class TestDebugger(unittest.TestCase):
    def setUp(self):
        self.debugger = Debugger()

    def test_debugger_live(self):
        self.assertFalse(self.debugger.is_live())
        self.debugger.set_live(True)
        self.assertTrue(self.debugger.is_live())

    def test_hexdump_line(self):
        dump = self.debugger.hexdump(b"\x60\x0aHello, World!\x00\xff", 0x200)
        self.assertEqual(
            "00000200  60 0a 48 65 6c 6c 6f 2c  20 57 6f 72 6c 64 21 00  |`.Hello, World!.|\n"
            "00000210  ff                                                |.|\n"
            "00000211",
            dump
        )

    def test_hexdump_collapses_repeats(self):
        dump = self.debugger.hexdump(bytes(64) + b"\x01")
        lines = dump.split("\n")
        self.assertEqual(
            ["00000000  00 00 00 00 00 00 00 00  00 00 00 00 00 00 00 00  |................|", "*"],
            lines[:2]
        )
        self.assertTrue(lines[2].startswith("00000040  01 "))
        self.assertEqual("00000041", lines[3])
        self.assertEqual(4, len(lines))

    def test_hexdump_empty(self):
        self.assertEqual("00000000", self.debugger.hexdump(b""))
