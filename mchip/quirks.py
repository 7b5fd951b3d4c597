#!/usr/bin/env python3

"""
CPU Quirks

Historical CHIP-8 interpreters disagree on a handful of instructions.  Rather
than picking one behaviour silently, each disagreement is a named flag which is
fixed when the machine is built.

- shift_uses_vy             : 8xy6/8xyE shift Vy into Vx.  Otherwise Vx is
                              shifted in place.
- logic_ops_reset_vf        : 8xy1/8xy2/8xy3 clear Vf afterwards.  Otherwise Vf
                              is left alone.
- add_to_i_overflow_sets_vf : Fx1E sets Vf to 1 when I passes 0xFFF, and to 0
                              otherwise.  Otherwise Vf is left alone.
- load_store_increments_i   : Fx55/Fx65 leave I pointing just past the last
                              register copied.  Otherwise I is unchanged.
- jump_with_offset_uses_vx  : Bnnn jumps to nnn + Vx, where x is the top nibble
                              of nnn.  Otherwise V0 is used.

Defaults come from a platform preset (the COSMAC VIP CHIP-8 interpreter unless
told otherwise), and any flag can be overridden individually.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import QUIRKS, QUIRK_PRESETS, PLATFORM_CHIP8


class QuirksError(ValueError):
    pass


class Quirks:
    __slots__ = tuple("_" + quirk for quirk in QUIRKS) + ("_platform",)

    def __init__(self, platform=PLATFORM_CHIP8, **overrides):
        preset = QUIRK_PRESETS.get(platform)

        if preset is None:
            raise QuirksError("Unknown platform '{}'".format(platform))

        unknown = set(overrides) - set(QUIRKS)

        if unknown:
            raise QuirksError("Unknown quirks: {}".format(", ".join(sorted(unknown))))

        object.__setattr__(self, "_platform", platform)

        for quirk, preset_value in zip(QUIRKS, preset):
            override = overrides.get(quirk)
            object.__setattr__(self, "_" + quirk, preset_value if override is None else bool(override))

    def __setattr__(self, name, value):
        raise AttributeError("Quirks cannot be changed once a machine is built")

    def __getattr__(self, name):
        if name in QUIRKS:
            return object.__getattribute__(self, "_" + name)

        raise AttributeError(name)

    @property
    def platform(self):
        return self._platform

    def as_dict(self):
        return {quirk: getattr(self, quirk) for quirk in QUIRKS}

    def __repr__(self):
        return "Quirks({!r}, {})".format(
            self.platform, ", ".join("{}={}".format(quirk, value) for quirk, value in self.as_dict().items())
        )
