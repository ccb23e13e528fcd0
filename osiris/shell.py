"""Shell helpers: the line calculator and the command history."""

from __future__ import annotations

import re
from collections import deque

HISTORY_SIZE = 20

_EXPRESSION = re.compile(r"([0-9]*)([-+*/]?)([0-9]*)")


class CalculatorError(ValueError):
    """Raised when a calculator expression cannot be evaluated."""


def calculate(expression):
    """Evaluate '<digits><op><digits>' with op one of + - * /.

    Missing numbers count as zero and text after the second number is
    ignored. Division truncates.
    """
    left, op, right = _EXPRESSION.match(expression).groups()
    if not op:
        raise CalculatorError("Invalid operator")
    a = int(left) if left else 0
    b = int(right) if right else 0
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if b == 0:
        raise CalculatorError("Division by zero")
    return a // b


class CommandHistory:
    """A bounded list of past commands with a browsing cursor."""

    def __init__(self, size=HISTORY_SIZE):
        if size < 1:
            raise ValueError("history size must be positive")
        self._entries = deque(maxlen=size)
        self._position = 0

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    @property
    def position(self):
        """Index of the entry the cursor points at."""
        return self._position

    def add(self, command):
        """Record a command, skipping empty ones and repeats of the last."""
        if not command or (self._entries and self._entries[-1] == command):
            return
        self._entries.append(command)
        self._position = len(self._entries)

    def previous(self):
        """Step back; None when there is nothing earlier."""
        if not self._entries or self._position <= 0:
            return None
        self._position -= 1
        return self._entries[self._position]

    def next(self):
        """Step forward; "" past the newest entry, None beyond that."""
        if not self._entries or self._position >= len(self._entries):
            return None
        self._position += 1
        if self._position == len(self._entries):
            return ""
        return self._entries[self._position]