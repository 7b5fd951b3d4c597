#!/usr/bin/env python3

"""
RAM Emulator

A flat 4K block of bytes.  The system font sits at the bottom of memory, and
programs are loaded from 0x200 upwards.  Everything above the font is free for
programs to use as scratch space (BCD results, register dumps, sprites).

Instructions never index memory directly with the I register.  The CPU wraps
every computed address into range first, so an overflow here means something
outside the instruction set has misbehaved.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MEM_SIZE, FONT_LOC, PROGRAM_LOC, SYSTEM_FONT
from .errors import MachineError


class RAMError(MachineError):
    pass


class RomTooLargeError(RAMError):
    pass


class RAM:
    def __init__(self, mem_size=MEM_SIZE):
        self.mem = memoryview(bytearray(mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size

    def read(self, location):
        self.check_overflow(location)
        return self.mem[location]

    def read_block(self, location, size=1):
        return self.mem[location:location + size]

    def write(self, location, byte):
        self.check_overflow(location)
        self.mem[location] = byte

    def write_block(self, location, block):
        block_size = len(block)
        block_top = location + block_size
        self.check_overflow(block_top - 1)
        self.mem[location:block_top] = block

    def check_overflow(self, location):
        if location < 0 or location > self.mem_top:
            raise RAMError("Memory address 0x{:04x} is out of range".format(location))

    def clear(self):
        self.mem[:] = bytes(self.mem_size)

    def load_font(self):
        self.write_block(FONT_LOC, SYSTEM_FONT)

    def load_program(self, data):
        # Check the size first, so an oversized ROM never ends up partially loaded
        max_size = self.mem_size - PROGRAM_LOC

        if len(data) > max_size:
            raise RomTooLargeError(
                "Program is {} bytes, but only {} bytes are available from 0x{:03x}".format(
                    len(data), max_size, PROGRAM_LOC
                )
            )

        self.write_block(PROGRAM_LOC, data)
