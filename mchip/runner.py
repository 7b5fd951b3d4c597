#!/usr/bin/env python3

"""
Driving Loop

Runs a machine in real time.  Every frame, host inputs are processed, a fixed
number of instructions are executed, the timers tick once, the buzzer is
updated, and the display is redrawn if anything was drawn.  Any time left over
in the frame is slept away.

Machine faults never escape the loop.  By default, the crash report is shown
and the machine halts, but the window stays open until the user quits.  If
faults are ignored, the report is shown and the faulting instruction is
skipped.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter, sleep
from .constants import APP_INTRO, APP_NAME, DEFAULT_CYCLES_PER_FRAME, DEFAULT_FRAMERATE
from .errors import MachineError


class Runner:
    def __init__(self, cpu, renderer, inputs, audio, cycles_per_frame=None, framerate=None, trace=False,
                 ignore_faults=False):
        self.cpu = cpu
        self.renderer = renderer
        self.inputs = inputs
        self.audio = audio
        self.cycles_per_frame = DEFAULT_CYCLES_PER_FRAME if cycles_per_frame is None else cycles_per_frame
        framerate = DEFAULT_FRAMERATE if framerate is None else framerate

        if self.cycles_per_frame < 1 or framerate < 1:
            raise ValueError("Cycles per frame and frame rate must both be at least 1")

        self.frame_interval = 1.0 / framerate
        self.trace = trace
        self.ignore_faults = ignore_faults
        self.halted = False
        self.faults = 0

    def run(self):
        while True:
            frame_start = perf_counter()

            if self.inputs.process_messages():
                return

            self.run_frame()
            remaining = self.frame_interval - (perf_counter() - frame_start)

            if remaining > 0:
                sleep(remaining)

    def run_frame(self):
        inputs = self.inputs

        if not self.halted and (not inputs.paused or inputs.take_step_request()):
            self._run_cycles()
            self.audio.enable_buzzer(self.cpu.tick())

        self.refresh_display()

    def _run_cycles(self):
        cpu = self.cpu

        for _ in range(self.cycles_per_frame):
            try:
                cpu.step(self.trace)
            except MachineError as error:
                self._report_fault(error)

                if not self.ignore_faults:
                    self.halted = True
                    self.audio.enable_buzzer(False)
                    return

                cpu.skip_instruction()

    def _report_fault(self, error):
        self.faults += 1
        print("{}{}: {}\n{}".format(APP_INTRO, type(error).__name__, error, self.cpu.crash_report()))
        self.renderer.set_title("{} - {}".format(APP_NAME, "faults ignored" if self.ignore_faults else "halted"))

    def refresh_display(self):
        cpu = self.cpu

        if cpu.draw_flag_set():
            width, height = cpu.framebuffer.get_vid_size()
            self.renderer.draw_frame(cpu.get_framebuffer(), width, height)
            cpu.acknowledge_draw()
