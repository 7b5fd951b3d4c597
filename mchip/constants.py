#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "MonoChip Emulator"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory map
MEM_SIZE = 0x1000
MEM_MASK = 0xFFF
FONT_LOC = 0x000
PROGRAM_LOC = 0x200
PROGRAM_MAX_SIZE = MEM_SIZE - PROGRAM_LOC  # 0xE00

# Machine dimensions
NUM_REGISTERS = 0x10
NUM_KEYS = 0x10
STACK_SIZE = 16
VID_WIDTH = 64
VID_HEIGHT = 32

# Built-in hexadecimal font, glyph k lives at FONT_LOC + 5 * k
FONT_GLYPH_SIZE = 5
SYSTEM_FONT = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
))

# Default mappings for keys 0-F, later populated into a dictionary.  Note that the keyscans (on a UK QWERTY keyboard)
# and ASCII characters for these are the same code
DEFAULT_KEYMAP = "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118"

# Driving loop defaults
DEFAULT_CYCLES_PER_FRAME = 20
DEFAULT_FRAMERATE = 60

# Quirk flags, in the order they are shown on the command line
QUIRKS = [
    "shift_uses_vy",
    "logic_ops_reset_vf",
    "add_to_i_overflow_sets_vf",
    "load_store_increments_i",
    "jump_with_offset_uses_vx"
]

# Quirk presets for each emulated platform.  Values follow the order of QUIRKS.
PLATFORM_CHIP8 = "chip8"
QUIRK_PRESETS = {
    "chip8":  (True, True, False, True, False),     # COSMAC VIP interpreter
    "chip48": (False, False, False, False, True),   # HP-48 calculators
    "schip":  (False, False, False, False, True),   # Super-CHIP running CHIP-8 programs
    "amiga":  (True, True, True, True, False)       # Amiga interpreter, ADD I sets Vf on overflow
}

# Two-colour palettes as (background RGB, foreground RGB)
PALETTES = [
    (0x222323, 0xF0F6F0),  # 1bit monitor glow
    (0x382B26, 0xB8C2B9),  # Paperback 2
    (0x1E1C32, 0xC6BAAC),  # Noire truth
    (0x3E232C, 0xEDF6D6),  # Pixel ink
    (0x2E3037, 0xEBE5CE),  # Obra Dinn IBM 8503
    (0x212C28, 0x72A488),  # Knockia 3310
    (0x222A3D, 0xEDF2E2),  # Note 2C
    (0x0A2E44, 0xFCFFCC)   # Gato Roboto starboard
]
