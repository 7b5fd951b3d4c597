#!/usr/bin/env python3

"""
Startup

main(args) starts the emulator from a dictionary of options, whether those
came from the command line or from another front end.  Every option has to be
present, with None meaning "use the default".

create_cpu() builds a bare machine with no host plugins, for tests or for
driving it from other code.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import APP_INTRO, APP_COPYRIGHT, PLATFORM_CHIP8, PROGRAM_LOC, QUIRKS
from .cpu import CPU
from .debugger import Debugger
from .errors import MachineError
from .framebuffer import Framebuffer
from .hostio import Loader
from .inputs.i_null import InputsError
from .keypad import Keypad
from .quirks import Quirks, QuirksError
from .ram import RAM
from .renderers.r_null import RendererError
from .runner import Runner
from .stack import Stack
from .timers import Timers


class StartupError(Exception):
    pass


def create_cpu(quirks=None, seed=None, debugger=None):
    # Plug a fresh set of components into a new CPU.  Nothing is shared between machines.
    return CPU(
        RAM(), Stack(), Framebuffer(), Keypad(), Timers(), Debugger() if debugger is None else debugger,
        quirks=quirks, seed=seed
    )


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))

    try:
        quirks = Quirks(args["arch"] or PLATFORM_CHIP8, **{quirk: args[quirk] for quirk in QUIRKS})
    except QuirksError as error:
        raise StartupError(str(error)) from None

    # Read the ROM before anything else is set up, so a bad filename doesn't leave a window or terminal behind
    try:
        rom = Loader().load_binary(args["filename"])
    except OSError as error:
        raise StartupError("Unable to read ROM '{}': {}".format(args["filename"], error.strerror)) from None

    debugger = Debugger()
    debugger.set_live(args["debug"])
    cpu = create_cpu(quirks=quirks, seed=args["seed"], debugger=debugger)

    try:
        cpu.load_program(rom)
    except MachineError as error:
        raise StartupError(str(error)) from None

    print("Loaded {} bytes from '{}' with {!r}".format(len(rom), args["filename"], quirks))

    hexdump = args["hexdump"]

    if hexdump is not None:
        print(cpu.dump_memory(PROGRAM_LOC if hexdump == "program" else 0))

    opt_renderer = args["renderer"]
    auto_select_renderer = opt_renderer is None  # If necessary, try PyGame first, then Curses.
    mute_audio = args["mute"]

    # flake8: noqa: F401
    if auto_select_renderer or opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame
        except ImportError:
            if auto_select_renderer:
                opt_renderer = "curses"
            else:
                raise StartupError(
                    "PyGame does not appear to be installed."
                )
        else:
            opt_renderer = "pygame"
            from .inputs.i_pygame import Inputs
            from .renderers.r_pygame import Renderer

            if mute_audio:
                from .audio.a_null import Audio
            else:
                from .audio.a_pygame import Audio

    if opt_renderer == "curses":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import curses
        except ImportError:
            if auto_select_renderer:
                raise StartupError(
                    "Neither PyGame nor Curses (or Windows-Curses) appear to be installed."
                )

            raise StartupError(
                "Curses (or Windows-Curses) does not appear to be installed."
            )
        else:
            from .inputs.i_curses import Inputs
            from .renderers.r_curses import Renderer

            # Terminal beeps are noisy, so only use them if asked to
            if mute_audio or mute_audio is None:
                from .audio.a_null import Audio
            else:
                from .audio.a_curses import Audio

    if opt_renderer == "null":
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer
        from .audio.a_null import Audio

    try:
        renderer = Renderer(scale=args["scale"], palette=args["palette"])
    except RendererError as error:
        raise StartupError(str(error)) from None

    inputs = None
    audio = None

    try:
        try:
            inputs = Inputs(args["keymap"], renderer, cpu.keypad)
        except InputsError as error:
            raise StartupError(str(error)) from None

        audio = Audio()
        runner = Runner(
            cpu, renderer, inputs, audio, cycles_per_frame=args["cycles_per_frame"], framerate=args["framerate"],
            trace=debugger.is_live(), ignore_faults=args["ignore_faults"]
        )
        runner.run()
    finally:
        # The machine has quit, so shut down the rendering framework.  __del__ cannot be relied upon when using PyPy
        if audio is not None:
            audio.shutdown()

        if inputs is not None:
            inputs.shutdown()

        renderer.shutdown()
