#!/usr/bin/env python3

"""
CPU Debugger

If enabled, this will output information after each instruction is decoded:
    * All 16 of the [V] registers, starting with most significant (Vf) and
      reducing to least significant (V0)
    * I  - Index register
    * DT - Delay timer
    * ST - Sound timer
    * PC - Program counter (address the instruction was fetched from)
    * OP - OpCode number
    * IN - Decoded instruction

If a crash occurs, all of the above will be outputted, with the addition of
the stack contents.

Memory can also be dumped in the classic 'hexdump -C' style, with runs of
identical lines collapsed into a single '*'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

HEXDUMP_LINE_SIZE = 16


class Debugger:
    def __init__(self):
        self.live = False

    def debug(self, cpu, instruction, verbose=False):
        debug_str = (
            "V: 0x" + ("{:02x}" * 16) + " I: 0x{:03x} DT: 0x{:02x} ST: 0x{:02x} PC: 0x{:03x} OP: 0x{:04x} IN: {}"
        ).format(
            *[cpu.v[reg_num] for reg_num in range(15, -1, -1)] +
            [cpu.i, cpu.timers.dt, cpu.timers.st, cpu.debug_pc, cpu.opcode, instruction]
        )

        if verbose:
            stack_items = cpu.stack.get_items()
            stack_str = (" 0x{:03x}" * len(stack_items)).format(*stack_items)
            debug_str += ("\nStack:{}").format(stack_str or " (Empty)")

        return debug_str

    def set_live(self, enabled):
        self.live = enabled

    def is_live(self):
        return self.live

    def output(self, cpu, instruction):
        print(self.debug(cpu, instruction))

    def hexdump(self, data, base_address=0):
        lines = []
        last_chunk = None
        collapsed = False

        for offset in range(0, len(data), HEXDUMP_LINE_SIZE):
            chunk = bytes(data[offset:offset + HEXDUMP_LINE_SIZE])

            if chunk == last_chunk:
                if not collapsed:
                    lines.append("*")
                    collapsed = True

                continue

            last_chunk = chunk
            collapsed = False
            hex_left = " ".join("{:02x}".format(byte) for byte in chunk[:8])
            hex_right = " ".join("{:02x}".format(byte) for byte in chunk[8:])
            text = "".join(chr(byte) if 0x20 <= byte < 0x7F else "." for byte in chunk)
            lines.append("{:08x}  {:<23}  {:<23}  |{}|".format(base_address + offset, hex_left, hex_right, text))

        lines.append("{:08x}".format(base_address + len(data)))
        return "\n".join(lines)
