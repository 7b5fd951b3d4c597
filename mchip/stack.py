#!/usr/bin/env python3

"""
Stack Emulator

The call stack is kept outside of RAM, as programs have no way to address it.
Only return addresses are ever stored here, and the stack pointer is simply the
number of addresses currently held.

Going beyond the last level, or returning with nothing on the stack, is a
machine fault rather than a silent wrap.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import STACK_SIZE
from .errors import MachineError


class StackError(MachineError):
    pass


class StackOverflowError(StackError):
    pass


class StackUnderflowError(StackError):
    pass


class Stack:
    def __init__(self, size=STACK_SIZE):
        self.items = []
        self.size = size

    @property
    def sp(self):
        return len(self.items)

    def push(self, item):
        if len(self.items) >= self.size:
            raise StackOverflowError("Stack overflow: more than {} nested calls".format(self.size))

        self.items.append(item)

    def pop(self):
        try:
            return self.items.pop()
        except IndexError:
            raise StackUnderflowError("Stack underflow: return with no call in progress") from None

    def clear(self):
        self.items.clear()

    def get_items(self):
        # For debugging
        return tuple(self.items)
