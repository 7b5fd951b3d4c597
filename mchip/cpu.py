#!/usr/bin/env python3

"""
CPU Emulator (CHIP-8)

Like a real computer, this is where most of the processing happens.  Each call
to step() fetches one instruction, decodes it, moves the program counter on,
and executes it.  Nothing here waits or sleeps: timing is entirely up to the
driving loop, which calls step() several times for every call to tick().

The instruction table is built for each CPU from its own bound methods, so
several machines can run side by side without sharing anything.

Every fault is raised before the machine state is changed, so after a fault
the program counter still points at the instruction which caused it.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import Random
from .constants import MEM_MASK, FONT_LOC, FONT_GLYPH_SIZE, NUM_REGISTERS, PROGRAM_LOC
from .decoder import INSTRUCTION_NAMES, decode, disassemble, disassemble_opcode
from .errors import MachineError
from .quirks import Quirks

CPU_ENDIAN = "big"  # CHIP-8 is big-endian


class CPU:
    def __init__(self, ram, stack, framebuffer, keypad, timers, debugger, quirks=None, seed=None):
        self.ram = ram
        self.stack = stack
        self.framebuffer = framebuffer
        self.keypad = keypad
        self.timers = timers
        self.debugger = debugger
        self.quirks = Quirks() if quirks is None else quirks
        self.rng = Random(seed)

        # Link each instruction family to its handler, e.g. '8xy4' to self._8xy4
        self.instructions = {name: getattr(self, "_" + name) for name in INSTRUCTION_NAMES}

        self.v = memoryview(bytearray(NUM_REGISTERS))
        self.reset()

    def reset(self):
        # Power-on state.  The font is reloaded, but any program has to be loaded again afterwards.
        self.ram.clear()
        self.ram.load_font()
        self.v[:] = bytes(NUM_REGISTERS)
        self.i = 0  # Index register
        self.pc = PROGRAM_LOC
        self.debug_pc = PROGRAM_LOC
        self.opcode = 0
        self.stack.clear()
        self.timers.reset()
        self.keypad.release_all()
        self.framebuffer.clear()  # Leaves the draw flag set so the first frame is shown

    def load_program(self, data):
        self.ram.load_program(data)

    @property
    def sp(self):
        return self.stack.sp

    def fetch(self):
        pc = self.pc
        return int.from_bytes(
            bytes((self.ram.read(pc & MEM_MASK), self.ram.read((pc + 1) & MEM_MASK))), CPU_ENDIAN, signed=False
        )

    def step(self, trace=False):
        # Keep track of the program counter before altering it in any way for debugging purposes
        self.debug_pc = self.pc
        self.opcode = self.fetch()
        instruction = decode(self.opcode)

        if trace:
            self.debugger.output(self, disassemble(instruction))

        self.inc_pc()  # Program counter updates after fetch, but before execute

        try:
            self.instructions[instruction.name](instruction)
        except MachineError:
            self.pc = self.debug_pc
            raise

    def skip_instruction(self):
        # Used by the driving loop to carry on past a faulting instruction
        self.inc_pc()

    def tick(self):
        return self.timers.tick()

    def draw_flag_set(self):
        return self.framebuffer.is_dirty()

    def acknowledge_draw(self):
        self.framebuffer.acknowledge()

    def get_framebuffer(self):
        return self.framebuffer.get_pixels()

    def sound_active(self):
        return self.timers.sound_active()

    def set_key_state(self, key, pressed):
        self.keypad.set_key_state(key, pressed)

    def dump_memory(self, from_offset=0):
        return self.debugger.hexdump(self.ram.read_block(from_offset, self.ram.mem_size - from_offset), from_offset)

    def crash_report(self):
        return self.debugger.debug(self, disassemble_opcode(self.opcode), verbose=True)

    def inc_pc(self):
        self.pc = (self.pc + 2) & MEM_MASK

    def dec_pc(self):
        # Only used to re-run instructions (e.g. keypress wait)
        self.pc = (self.pc - 2) & MEM_MASK

    def _post_skip(self):
        self.inc_pc()

    def _00E0(self, ins):  # CLS
        self.framebuffer.clear()

    def _00EE(self, ins):  # RET
        self.pc = self.stack.pop()

    def _1nnn(self, ins):  # JP addr
        self.pc = ins.nnn

    def _2nnn(self, ins):  # CALL addr
        # The program counter already points at the next instruction
        self.stack.push(self.pc)
        self.pc = ins.nnn

    def _3xkk(self, ins):  # SE Vx, byte
        if self.v[ins.x] == ins.kk:
            self._post_skip()

    def _4xkk(self, ins):  # SNE Vx, byte
        if self.v[ins.x] != ins.kk:
            self._post_skip()

    def _5xy0(self, ins):  # SE Vx, Vy
        if self.v[ins.x] == self.v[ins.y]:
            self._post_skip()

    def _6xkk(self, ins):  # LD Vx, byte
        self.v[ins.x] = ins.kk

    def _7xkk(self, ins):  # ADD Vx, byte
        # No carry flag for this one
        self.v[ins.x] = (self.v[ins.x] + ins.kk) & 0xFF

    def _post_8xy1_8xy2_8xy3(self):
        if self.quirks.logic_ops_reset_vf:
            self.v[0xF] = 0

    def _8xy0(self, ins):  # LD Vx, Vy
        self.v[ins.x] = self.v[ins.y]

    def _8xy1(self, ins):  # OR Vx, Vy
        self.v[ins.x] |= self.v[ins.y]
        self._post_8xy1_8xy2_8xy3()

    def _8xy2(self, ins):  # AND Vx, Vy
        self.v[ins.x] &= self.v[ins.y]
        self._post_8xy1_8xy2_8xy3()

    def _8xy3(self, ins):  # XOR Vx, Vy
        self.v[ins.x] ^= self.v[ins.y]
        self._post_8xy1_8xy2_8xy3()

    def _8xy4(self, ins):  # ADD Vx, Vy
        val = self.v[ins.x] + self.v[ins.y]
        self.v[ins.x] = val & 0xFF
        self.v[0xF] = int(val > 0xFF)  # Vf is set when carrying

    def _post_8xy5_8xy7(self, x, val):  # Post-SUB/SUBN
        self.v[x] = val & 0xFF
        # Vf is set when NOT borrowing, and this must happen AFTER Vx is set, in case Vf is also the destination
        self.v[0xF] = int(val >= 0)

    def _8xy5(self, ins):  # SUB Vx, Vy
        self._post_8xy5_8xy7(ins.x, self.v[ins.x] - self.v[ins.y])

    def _shift_source(self, ins):
        return self.v[ins.y if self.quirks.shift_uses_vy else ins.x]

    def _8xy6(self, ins):  # SHR Vx {, Vy}
        val = self._shift_source(ins)
        self.v[ins.x] = val >> 1
        self.v[0xF] = val & 1

    def _8xy7(self, ins):  # SUBN Vx, Vy
        self._post_8xy5_8xy7(ins.x, self.v[ins.y] - self.v[ins.x])

    def _8xyE(self, ins):  # SHL Vx {, Vy}
        val = self._shift_source(ins)
        self.v[ins.x] = (val << 1) & 0xFF
        self.v[0xF] = val >> 7

    def _9xy0(self, ins):  # SNE Vx, Vy
        if self.v[ins.x] != self.v[ins.y]:
            self._post_skip()

    def _Annn(self, ins):  # LD I, addr
        self.i = ins.nnn

    def _Bnnn(self, ins):  # JP V0, addr
        # Some interpreters index the register by the top nibble of the address instead of always using V0
        vr = ins.x if self.quirks.jump_with_offset_uses_vx else 0
        self.pc = (self.v[vr] + ins.nnn) & MEM_MASK

    def _Cxkk(self, ins):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.v[ins.x] = self.rng.randint(0, 0xFF) & ins.kk

    def _Dxyn(self, ins):  # DRW Vx, Vy, nibble
        i = self.i
        rows = [self.ram.read((i + row) & MEM_MASK) for row in range(ins.n)]
        collided = self.framebuffer.draw_sprite(self.v[ins.x], self.v[ins.y], rows)
        self.v[0xF] = int(collided)

    def _Ex9E(self, ins):  # SKP Vx
        if self.keypad.is_key_down(self.v[ins.x]):
            self._post_skip()

    def _ExA1(self, ins):  # SKNP Vx
        if not self.keypad.is_key_down(self.v[ins.x]):
            self._post_skip()

    def _Fx07(self, ins):  # LD Vx, DT
        self.v[ins.x] = self.timers.dt

    def _Fx0A(self, ins):  # LD Vx, K
        # Never blocks.  Come back to this instruction on the next step until a key is held.
        key = self.keypad.get_keypress()

        if key is None:
            self.dec_pc()
        else:
            self.v[ins.x] = key

    def _Fx15(self, ins):  # LD DT, Vx
        self.timers.set_delay(self.v[ins.x])

    def _Fx18(self, ins):  # LD ST, Vx
        self.timers.set_sound(self.v[ins.x])

    def _Fx1E(self, ins):  # ADD I, Vx
        val = self.i + self.v[ins.x]
        self.i = val & MEM_MASK

        # Allow for Amiga CHIP-8 interpreter behaviour
        if self.quirks.add_to_i_overflow_sets_vf:
            self.v[0xF] = int(val > MEM_MASK)

    def _Fx29(self, ins):  # LD F, Vx
        self.i = FONT_LOC + FONT_GLYPH_SIZE * (self.v[ins.x] & 0xF)

    def _Fx33(self, ins):  # LD B, Vx
        val = self.v[ins.x]
        i = self.i
        self.ram.write(i & MEM_MASK, val // 100)               # Most-significant digit
        self.ram.write((i + 1) & MEM_MASK, (val // 10) % 10)  # Middle digit
        self.ram.write((i + 2) & MEM_MASK, val % 10)          # Least-significant digit

    def _post_Fx55_Fx65(self, ins):
        if self.quirks.load_store_increments_i:
            self.i = (self.i + ins.x + 1) & MEM_MASK

    def _Fx55(self, ins):  # LD [I], Vx
        i = self.i

        for reg in range(ins.x + 1):
            self.ram.write((i + reg) & MEM_MASK, self.v[reg])

        self._post_Fx55_Fx65(ins)

    def _Fx65(self, ins):  # LD Vx, [I]
        i = self.i

        for reg in range(ins.x + 1):
            self.v[reg] = self.ram.read((i + reg) & MEM_MASK)

        self._post_Fx55_Fx65(ins)
