#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import io
import unittest
from contextlib import redirect_stdout
from mchip import create_cpu
from mchip.audio.a_null import Audio
from mchip.constants import DEFAULT_KEYMAP
from mchip.inputs.i_null import Inputs
from mchip.renderers.r_null import Renderer
from mchip.runner import Runner


class QuitAfterInputs(Inputs):
    def __init__(self, *args, frames=1, **kwargs):
        super().__init__(*args, **kwargs)
        self.frames_left = frames

    def process_messages(self):
        self.frames_left -= 1
        return self.frames_left < 0


class TestRunner(unittest.TestCase):
    def _make_runner(self, program, inputs_class=Inputs, cycles_per_frame=10, ignore_faults=False, **inputs_kwargs):
        self.cpu = create_cpu(seed=1)
        self.cpu.load_program(program)
        self.renderer = Renderer()
        self.inputs = inputs_class(DEFAULT_KEYMAP, self.renderer, self.cpu.keypad, **inputs_kwargs)
        self.audio = Audio()
        self.runner = Runner(
            self.cpu, self.renderer, self.inputs, self.audio, cycles_per_frame=cycles_per_frame, framerate=1000,
            ignore_faults=ignore_faults
        )

    def test_runner_invalid_rates(self):
        cpu = create_cpu()
        renderer = Renderer()
        inputs = Inputs(DEFAULT_KEYMAP, renderer, cpu.keypad)
        self.assertRaises(ValueError, Runner, cpu, renderer, inputs, Audio(), cycles_per_frame=0)
        self.assertRaises(ValueError, Runner, cpu, renderer, inputs, Audio(), framerate=0)

    def test_runner_cycles_per_frame(self):
        self._make_runner(b"\x70\x01\x12\x00")  # ADD V0, 0x01 / JP 0x200
        self.runner.run_frame()
        self.assertEqual(5, self.cpu.v[0])
        self.runner.run_frame()
        self.assertEqual(10, self.cpu.v[0])

    def test_runner_timers_tick_once_per_frame(self):
        self._make_runner(b"\x60\x05\xF0\x15\x12\x04")  # LD V0, 0x05 / LD DT, V0 / JP 0x204
        self.runner.run_frame()
        self.assertEqual(4, self.cpu.timers.dt)
        self.runner.run_frame()
        self.assertEqual(3, self.cpu.timers.dt)

    def test_runner_redraws_only_when_drawn(self):
        self._make_runner(b"\x12\x00")  # JP 0x200
        self.runner.run_frame()
        self.assertEqual(1, self.renderer.frames_drawn)  # Screen starts dirty
        self.assertEqual((64, 32), (self.renderer.width, self.renderer.height))
        self.assertFalse(self.cpu.draw_flag_set())
        self.runner.run_frame()
        self.assertEqual(1, self.renderer.frames_drawn)

    def test_runner_redraws_after_clear(self):
        self._make_runner(b"\x00\xE0\x12\x02", cycles_per_frame=1)  # CLS / JP 0x202
        self.runner.run_frame()
        self.runner.run_frame()
        self.assertEqual(1, self.renderer.frames_drawn)
        self.cpu.pc = 0x200
        self.runner.run_frame()
        self.assertEqual(2, self.renderer.frames_drawn)

    def test_runner_buzzer(self):
        self._make_runner(b"\x60\x03\xF0\x18\x12\x04", cycles_per_frame=3)  # LD V0, 0x03 / LD ST, V0 / JP 0x204
        buzzer = []

        for _ in range(5):
            self.runner.run_frame()
            buzzer.append(self.audio.buzzer_enabled)

        self.assertEqual([True, True, True, False, False], buzzer)

    def test_runner_fault_halts(self):
        self._make_runner(b"\x70\x01\xFF\xFF")  # ADD V0, 0x01 / Unknown opcode
        output = io.StringIO()

        with redirect_stdout(output):
            self.runner.run_frame()

        self.assertTrue(self.runner.halted)
        self.assertEqual(1, self.runner.faults)
        self.assertEqual(0x202, self.cpu.pc)
        self.assertEqual(1, self.cpu.v[0])
        self.assertIn("UnknownOpcodeError", output.getvalue())
        self.assertIn("PC: 0x202 OP: 0xffff IN: ???", output.getvalue())
        self.assertFalse(self.audio.buzzer_enabled)
        self.runner.run_frame()
        self.assertEqual(0x202, self.cpu.pc)  # Nothing more is executed
        self.assertEqual(1, self.runner.faults)

    def test_runner_ignore_faults(self):
        # Unknown opcode / ADD V0, 0x01 / JP 0x200
        self._make_runner(b"\xFF\xFF\x70\x01\x12\x00", cycles_per_frame=4, ignore_faults=True)

        with redirect_stdout(io.StringIO()):
            self.runner.run_frame()

        self.assertFalse(self.runner.halted)
        self.assertEqual(2, self.runner.faults)
        self.assertEqual(1, self.cpu.v[0])
        self.assertEqual(0x202, self.cpu.pc)

    def test_runner_pause_and_step(self):
        self._make_runner(b"\x70\x01\x12\x00", cycles_per_frame=2)
        self.inputs.toggle_pause()
        self.runner.run_frame()
        self.assertEqual(0, self.cpu.v[0])
        self.inputs.request_step()
        self.runner.run_frame()
        self.assertEqual(1, self.cpu.v[0])
        self.runner.run_frame()
        self.assertEqual(1, self.cpu.v[0])  # Only one frame per step request
        self.inputs.toggle_pause()
        self.runner.run_frame()
        self.assertEqual(2, self.cpu.v[0])

    def test_runner_step_ignored_when_running(self):
        self._make_runner(b"\x12\x00")
        self.inputs.request_step()
        self.assertFalse(self.inputs.take_step_request())

    def test_runner_run_until_quit(self):
        self._make_runner(b"\x70\x01\x12\x00", inputs_class=QuitAfterInputs, frames=3)
        self.runner.run()
        self.assertEqual(15, self.cpu.v[0])
