"""String, number and simulated-time helpers used throughout the system."""

from __future__ import annotations

import re
from dataclasses import dataclass

_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWER = "abcdefghijklmnopqrstuvwxyz"
_TO_LOWER = str.maketrans(_UPPER, _LOWER)
_TO_UPPER = str.maketrans(_LOWER, _UPPER)
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_WHITESPACE = " \t\n\r"
_UINT32 = 0xFFFFFFFF
_ATOI = re.compile(r"[ \t]*([+-]?)([0-9]*)")


def itoa(num, base=10):
    """Render an integer in the given base (2-36) with lower-case digits.

    Negative numbers carry a sign only in base 10; in other bases they are
    rendered as their unsigned 32-bit value.
    """
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")
    if num == 0:
        return "0"
    negative = num < 0 and base == 10
    if negative:
        num = -num
    elif num < 0:
        num &= _UINT32
    digits = []
    while num:
        num, rem = divmod(num, base)
        digits.append(_DIGITS[rem])
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def atoi(text):
    """Parse a leading decimal integer, skipping spaces and tabs; 0 if none."""
    match = _ATOI.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def to_lower(text):
    """Lower-case ASCII letters only."""
    return text.translate(_TO_LOWER)


def to_upper(text):
    """Upper-case ASCII letters only."""
    return text.translate(_TO_UPPER)


def strcasecmp(a, b):
    """Compare two strings ignoring ASCII case.

    Returns zero when equal, otherwise the difference of the first
    differing (lower-cased) characters.
    """
    for c1, c2 in zip(to_lower(a) + "\0", to_lower(b) + "\0"):
        if c1 != c2:
            return ord(c1) - ord(c2)
        if c1 == "\0":
            return 0
    return 0


def hex_to_int(text):
    """Parse leading hexadecimal digits, stopping at the first other character."""
    result = 0
    for c in text:
        if "0" <= c <= "9":
            value = ord(c) - ord("0")
        elif "A" <= c <= "F":
            value = ord(c) - ord("A") + 10
        elif "a" <= c <= "f":
            value = ord(c) - ord("a") + 10
        else:
            break
        result = result * 16 + value
    return result


def is_digit(c):
    """True for a single ASCII decimal digit."""
    return len(c) == 1 and "0" <= c <= "9"


def is_alpha(c):
    """True for a single ASCII letter."""
    return len(c) == 1 and ("A" <= c <= "Z" or "a" <= c <= "z")


def is_alnum(c):
    """True for a single ASCII letter or digit."""
    return is_digit(c) or is_alpha(c)


def is_space(c):
    """True for space, tab, newline or carriage return."""
    return len(c) == 1 and c in _WHITESPACE


def hash_string(text):
    """The djb2 hash (hash * 33 + c) as an unsigned 32-bit value."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    value = 5381
    for byte in data:
        if byte == 0:
            break
        if byte >= 0x80:
            byte -= 0x100
        value = (value * 33 + byte) & _UINT32
    return value


def encrypt_string(text, key):
    """XOR every character with a one-byte key."""
    if not 0 <= key <= 0xFF:
        raise ValueError(f"key must fit in one byte, got {key}")
    return "".join(chr(ord(c) ^ key) for c in text)


def decrypt_string(text, key):
    """Undo encrypt_string; XOR is its own inverse."""
    return encrypt_string(text, key)


def strcasestr(haystack, needle):
    """Index of the first case-insensitive match of needle, or -1."""
    return to_lower(haystack).find(to_lower(needle))


def trim(text):
    """Strip spaces, tabs, newlines and carriage returns from both ends."""
    return text.strip(_WHITESPACE)


def split_string(text, delimiter, max_tokens):
    """Split on a single-character delimiter into at most max_tokens tokens.

    Tokens between delimiters are kept even when empty; a trailing empty
    token is dropped.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    if max_tokens <= 0 or not text:
        return []
    *inner, last = text.split(delimiter)
    tokens = inner[:max_tokens]
    if last and len(tokens) < max_tokens:
        tokens.append(last)
    return tokens


def format_time(seconds):
    """Format a number of seconds as hh:mm:ss."""
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_date(year, month, day):
    """Format a date as yyyy-mm-dd."""
    return f"{year:04d}-{month:02d}-{day:02d}"


class Random:
    """A small linear congruential generator yielding values in 0..32767."""

    def __init__(self, seed=12345):
        self._seed = seed & _UINT32

    def srand(self, seed):
        """Reset the generator to a new seed."""
        self._seed = seed & _UINT32

    def rand(self):
        """Return the next pseudo-random number."""
        self._seed = (self._seed * 1103515245 + 12345) & _UINT32
        return (self._seed // 65536) % 32768


@dataclass
class SimClock:
    """A simulated wall clock advanced only by delay()."""

    year: int = 2025
    month: int = 5
    day: int = 15
    hour: int = 12
    minute: int = 0
    second: int = 0
    ticks: int = 0
    start_time: int = 0

    def delay(self, milliseconds):
        """Advance the clock by the given number of milliseconds."""
        if milliseconds < 0:
            raise ValueError("milliseconds must not be negative")
        self.ticks += milliseconds
        if self.ticks < 1000:
            return
        self.second += self.ticks // 1000
        self.ticks %= 1000
        if self.second < 60:
            return
        self.minute += self.second // 60
        self.second %= 60
        if self.minute < 60:
            return
        self.hour += self.minute // 60
        self.minute %= 60
        if self.hour < 24:
            return
        self.day += self.hour // 24
        self.hour %= 24
        if self.day <= 30:
            return
        self.month += self.day // 30
        self.day = self.day % 30 + 1
        if self.month <= 12:
            return
        self.year += self.month // 12
        self.month = self.month % 12 + 1

    def uptime(self):
        """Seconds counted from the pending tick counter since start."""
        return (self.ticks - self.start_time) // 1000

    def now(self):
        """The current simulated (year, month, day, hour, minute, second)."""
        return (self.year, self.month, self.day, self.hour, self.minute, self.second)