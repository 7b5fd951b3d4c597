#!/usr/bin/env python3

"""
Machine Faults

Every fault raised while a machine is being set up or executed derives from
MachineError, so the driving loop can decide in one place whether a fault
halts the machine or is reported and skipped.  Faults are raised before any
machine state is changed.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class MachineError(Exception):
    pass
