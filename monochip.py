#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

from argparse import ArgumentParser
from mchip import main
from mchip.constants import (
    DEFAULT_CYCLES_PER_FRAME, DEFAULT_FRAMERATE, DEFAULT_KEYMAP, PALETTES, PLATFORM_CHIP8, QUIRK_PRESETS, QUIRKS
)


def parse_args(argv=None):
    parser = ArgumentParser()
    parser.add_argument("filename", help="ROM to execute (normally ending in .ch8 or .c8)")
    parser.add_argument(
        "-a", "--arch", choices=list(QUIRK_PRESETS.keys()), default=PLATFORM_CHIP8,
        help="set CPU quirks automatically for the original CHIP-8, CHIP-48, Super-CHIP, or the Amiga interpreter"
    )
    parser.add_argument(
        "-c", "--cycles_per_frame", type=int, default=DEFAULT_CYCLES_PER_FRAME,
        help="number of instructions executed per frame (default {})".format(DEFAULT_CYCLES_PER_FRAME)
    )
    parser.add_argument(
        "-f", "--framerate", type=int, default=DEFAULT_FRAMERATE,
        help="frames per second, which is also the timer rate (default {})".format(DEFAULT_FRAMERATE)
    )
    parser.add_argument(
        "-r", "--renderer", choices=["pygame", "curses", "null"],
        help="set the rendering, input, and audio systems (pygame by default if available, otherwise curses)"
    )
    parser.add_argument(
        "-s", "--scale", type=int,
        help="set the window width in PyGame mode (default 640), and scale in Curses mode (default 2)"
    )
    parser.add_argument(
        "-p", "--palette", type=int, choices=range(len(PALETTES)), default=0,
        help="choose one of the {} built-in colour palettes (PyGame only, TAB cycles them)".format(len(PALETTES))
    )
    parser.add_argument(
        "-m", "--mute", type=int, choices=[0, 1],
        help="mute the emulated audio.  0 = unmuted (default for PyGame), 1 = muted (default for Curses)"
    )
    parser.add_argument(
        "-k", "--keymap", default=DEFAULT_KEYMAP,
        help="redefine the 16 keyscan codes (PyGame) or character numbers (Curses).  Separate each decimal with a comma"
    )
    parser.add_argument(
        "--seed", type=int,
        help="seed the random number generator, so random numbers repeat from run to run"
    )

    for quirk in QUIRKS:
        parser.add_argument(
            "--{}".format(quirk), type=int, choices=[0, 1],
            help="manually disable or enable the '{}' quirk".format(quirk.replace("_", " "))
        )

    parser.add_argument(
        "-x", "--hexdump", choices=["program", "all"],
        help="print a hex dump of the program area, or all of memory, after loading the ROM"
    )
    parser.add_argument(
        "--ignore_faults", action="store_true", default=False,
        help="report machine faults and skip the faulting instruction, rather than halting"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="print registers and each instruction as it is executed.  Slows CPU execution"
    )
    return parser.parse_args(argv)  # Can call sys.exit(2) if args are incorrect


if __name__ == "__main__":
    args = vars(parse_args())
    # It is possible to start the emulator from a GUI by calling this with a dictionary
    main(args)
