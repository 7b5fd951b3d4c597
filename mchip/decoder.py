#!/usr/bin/env python3

"""
Instruction Decoder

Turns a 16-bit instruction word into an Instruction: the name of the
instruction family (written as the usual opcode pattern, e.g. '8xy4') plus all
of the operand fields.  Decoding has no side effects and touches no machine
state, so it can be tested (and used for disassembly) without a CPU.

The first nibble picks the family.  Families 0x0, 0x5, 0x8, 0x9, 0xE and 0xF
need more of the word to pick a single instruction, so they are looked up again
with a wider bitmask.

Operand fields are always in the same position in the word:
    n   = lowest nibble
    kk  = lowest byte
    nnn = address (lowest 12 bits)
    x/y = register numbers (second and third nibbles)
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple
from .errors import MachineError

Instruction = namedtuple("Instruction", ["opcode", "name", "x", "y", "n", "kk", "nnn"])


class DecodeError(MachineError):
    pass


class UnknownOpcodeError(DecodeError):
    def __init__(self, opcode):
        self.opcode = opcode
        super().__init__("Opcode 0x{:04x} is not a CHIP-8 instruction".format(opcode))


# Families decoded from the first nibble alone
FAMILY_NAMES = {
    0x1: "1nnn",
    0x2: "2nnn",
    0x3: "3xkk",
    0x4: "4xkk",
    0x6: "6xkk",
    0x7: "7xkk",
    0xA: "Annn",
    0xB: "Bnnn",
    0xC: "Cxkk",
    0xD: "Dxyn"
}

# Families needing a second lookup, with the bitmask to apply first
SUB_FAMILY_MASKS = {
    0x0: 0xFFFF,
    0x5: 0xF00F,
    0x8: 0xF00F,
    0x9: 0xF00F,
    0xE: 0xF0FF,
    0xF: 0xF0FF
}

SUB_FAMILY_NAMES = {
    # Exact match
    0x00E0: "00E0",
    0x00EE: "00EE",
    # Bitmask 0xF00F
    0x5000: "5xy0",
    0x8000: "8xy0",
    0x8001: "8xy1",
    0x8002: "8xy2",
    0x8003: "8xy3",
    0x8004: "8xy4",
    0x8005: "8xy5",
    0x8006: "8xy6",
    0x8007: "8xy7",
    0x800E: "8xyE",
    0x9000: "9xy0",
    # Bitmask 0xF0FF
    0xE09E: "Ex9E",
    0xE0A1: "ExA1",
    0xF007: "Fx07",
    0xF00A: "Fx0A",
    0xF015: "Fx15",
    0xF018: "Fx18",
    0xF01E: "Fx1E",
    0xF029: "Fx29",
    0xF033: "Fx33",
    0xF055: "Fx55",
    0xF065: "Fx65"
}

# Every instruction family the CPU has to implement
INSTRUCTION_NAMES = tuple(FAMILY_NAMES.values()) + tuple(SUB_FAMILY_NAMES.values())

# Assembly-style mnemonics, formatted with the Instruction's fields
MNEMONICS = {
    "00E0": "CLS",
    "00EE": "RET",
    "1nnn": "JP 0x{nnn:03x}",
    "2nnn": "CALL 0x{nnn:03x}",
    "3xkk": "SE V{x:01x}, 0x{kk:02x}",
    "4xkk": "SNE V{x:01x}, 0x{kk:02x}",
    "5xy0": "SE V{x:01x}, V{y:01x}",
    "6xkk": "LD V{x:01x}, 0x{kk:02x}",
    "7xkk": "ADD V{x:01x}, 0x{kk:02x}",
    "8xy0": "LD V{x:01x}, V{y:01x}",
    "8xy1": "OR V{x:01x}, V{y:01x}",
    "8xy2": "AND V{x:01x}, V{y:01x}",
    "8xy3": "XOR V{x:01x}, V{y:01x}",
    "8xy4": "ADD V{x:01x}, V{y:01x}",
    "8xy5": "SUB V{x:01x}, V{y:01x}",
    "8xy6": "SHR V{x:01x} {{, V{y:01x}}}",
    "8xy7": "SUBN V{x:01x}, V{y:01x}",
    "8xyE": "SHL V{x:01x} {{, V{y:01x}}}",
    "9xy0": "SNE V{x:01x}, V{y:01x}",
    "Annn": "LD I, 0x{nnn:03x}",
    "Bnnn": "JP V0, 0x{nnn:03x}",
    "Cxkk": "RND V{x:01x}, 0x{kk:02x}",
    "Dxyn": "DRW V{x:01x}, V{y:01x}, 0x{n:01x}",
    "Ex9E": "SKP V{x:01x}",
    "ExA1": "SKNP V{x:01x}",
    "Fx07": "LD V{x:01x}, DT",
    "Fx0A": "LD V{x:01x}, K",
    "Fx15": "LD DT, V{x:01x}",
    "Fx18": "LD ST, V{x:01x}",
    "Fx1E": "ADD I, V{x:01x}",
    "Fx29": "LD F, V{x:01x}",
    "Fx33": "LD B, V{x:01x}",
    "Fx55": "LD [I], V{x:01x}",
    "Fx65": "LD V{x:01x}, [I]"
}


def decode(opcode):
    family = (opcode & 0xF000) >> 12
    name = FAMILY_NAMES.get(family)

    if name is None:
        mask = SUB_FAMILY_MASKS.get(family)

        if mask is not None:
            name = SUB_FAMILY_NAMES.get(opcode & mask)

        if name is None:
            raise UnknownOpcodeError(opcode)

    return Instruction(
        opcode=opcode,
        name=name,
        x=(opcode & 0xF00) >> 8,
        y=(opcode & 0xF0) >> 4,
        n=opcode & 0xF,
        kk=opcode & 0xFF,
        nnn=opcode & 0xFFF
    )


def disassemble(instruction):
    return MNEMONICS[instruction.name].format(**instruction._asdict())


def disassemble_opcode(opcode):
    # Never raises, so it is safe to use when reporting a crash
    try:
        return disassemble(decode(opcode))
    except UnknownOpcodeError:
        return "???"
