"""A simulated 80x25 VGA text-mode screen with drawing helpers."""

from __future__ import annotations

from contextlib import contextmanager
from enum import IntEnum

WIDTH = 80
HEIGHT = 25


class Color(IntEnum):
    """The text-mode palette."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    LIGHT_GREY = 7
    DARK_GREY = 8
    LIGHT_BLUE = 9
    LIGHT_GREEN = 10
    LIGHT_CYAN = 11
    LIGHT_RED = 12
    LIGHT_MAGENTA = 13
    LIGHT_BROWN = 14
    WHITE = 15
    YELLOW = 16


def entry_color(fg, bg):
    """Pack a foreground and background colour into one attribute byte."""
    return (int(fg) | int(bg) << 4) & 0xFF


def entry(char, color):
    """Pack a character and an attribute byte into one 16-bit cell."""
    return (ord(char) & 0xFF) | (int(color) & 0xFF) << 8


DEFAULT_COLOR = entry_color(Color.WHITE, Color.BLACK)

_LOGO_TOP = "    ____   _____  _____  _____  _____  _____   "
_LOGO_LINES = (
    ("   / __ \\ ", "/ ____||_   _||  __ \\|_   _|/ ____|  "),
    ("  | |  | |", " (___    | |  | |__) | | | | (___    "),
    ("  | |  | |", "\\___ \\   | |  |  _  /  | |  \\___ \\   "),
    ("  | |__| |", "____) | _| |_ | | \\ \\ _| |_ ____) |  "),
    ("   \\____/", "|_____/ |_____||_|  \\_\\_____|\\_____/  "),
)
_LOGO_BLANK = " " * 47
_VERSION_TEXT = "    Operating System Interface v2.0    "
_TAGLINE = "Research, Integration & Security Information System"


class Screen:
    """A text buffer with a cursor and a current colour."""

    def __init__(self, width=WIDTH, height=HEIGHT):
        self.width = width
        self.height = height
        self.row = 0
        self.column = 0
        self.color = DEFAULT_COLOR
        self._cells = []
        self.clear()

    def _index(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position ({x}, {y}) is off the screen")
        return y * self.width + x

    @contextmanager
    def _using(self, color):
        saved = self.color
        self.color = color
        try:
            yield
        finally:
            self.color = saved

    def clear(self):
        """Reset cursor and colour and blank the whole screen."""
        self.row = 0
        self.column = 0
        self.color = DEFAULT_COLOR
        self._cells = [entry(" ", self.color)] * (self.width * self.height)

    def put_entry_at(self, char, color, x, y):
        """Store a character with a colour at a position."""
        self._cells[self._index(x, y)] = entry(char, color)

    def scroll(self):
        """Move every line up by one and blank the bottom line."""
        blank = [entry(" ", self.color)] * self.width
        self._cells = self._cells[self.width:] + blank

    def _newline(self):
        self.row += 1
        if self.row >= self.height:
            self.scroll()
            self.row = self.height - 1

    def putchar(self, char):
        """Write one character at the cursor, handling control characters."""
        if char == "\n":
            self.column = 0
            self._newline()
        elif char == "\r":
            self.column = 0
        elif char == "\t":
            self.column = (self.column + 4) & ~3
            if self.column >= self.width:
                self.column = 0
                self._newline()
        elif char == "\b":
            if self.column > 0:
                self.column -= 1
                self.put_entry_at(" ", self.color, self.column, self.row)
        else:
            self.put_entry_at(char, self.color, self.column, self.row)
            self.column += 1
            if self.column >= self.width:
                self.column = 0
                self._newline()

    def write(self, text):
        """Write a string at the cursor."""
        for char in text:
            self.putchar(char)

    def write_colored(self, text, color):
        """Write a string in a colour, keeping the current colour afterwards."""
        with self._using(color):
            self.write(text)

    def clear_line(self, line):
        """Blank one line in the current colour."""
        for x in range(self.width):
            self.put_entry_at(" ", self.color, x, line)

    def clear_region(self, x1, y1, x2, y2):
        """Blank an inclusive rectangle in the current colour."""
        for y in range(y1, y2 + 1):
            for x in range(x1, x2 + 1):
                self.put_entry_at(" ", self.color, x, y)

    def progress_bar(self, progress, total, width):
        """Draw '[====    ] NN%' at the cursor."""
        if total <= 0:
            raise ValueError("total must be positive")
        filled = width * progress // total
        self.write("[" + "".join("=" if i < filled else " " for i in range(width)) + "]")
        self.write(f" {progress * 100 // total}%")

    def draw_box(self, x1, y1, x2, y2, color):
        """Draw a rectangle outline with '-', '|' and '+' corners."""
        for x in range(x1, x2 + 1):
            self.put_entry_at("-", color, x, y1)
            self.put_entry_at("-", color, x, y2)
        for y in range(y1 + 1, y2):
            self.put_entry_at("|", color, x1, y)
            self.put_entry_at("|", color, x2, y)
        for x, y in ((x1, y1), (x2, y1), (x1, y2), (x2, y2)):
            self.put_entry_at("+", color, x, y)

    def print_centered(self, text, row, color):
        """Write text centred on a row in a colour."""
        with self._using(color):
            self.column = max(0, (self.width - len(text)) // 2)
            self.row = row
            self.write(text)

    def fancy_header(self, title):
        """Draw a three-line banner with the title between '=' borders."""
        padding = max(0, (self.width - len(title) - 4) // 2)
        header_color = entry_color(Color.LIGHT_CYAN, Color.BLUE)
        with self._using(header_color):
            for x in range(self.width):
                self.put_entry_at("=", header_color, x, self.row)
            self.row += 1
            for x in range(padding):
                self.put_entry_at(" ", header_color, x, self.row)
            self.column = padding
            self.write(f"[ {title} ]")
            for x in range(padding + len(title) + 4, self.width):
                self.put_entry_at(" ", header_color, x, self.row)
            self.row += 1
            for x in range(self.width):
                self.put_entry_at("=", header_color, x, self.row)
            self.row += 1
            self.column = 0

    def draw_logo(self):
        """Clear the screen and draw the boxed system logo."""
        logo_color = entry_color(Color.CYAN, Color.BLACK)
        highlight_color = entry_color(Color.LIGHT_CYAN, Color.BLACK)
        saved = self.color
        self.clear()
        self.draw_box(15, 4, 65, 14, entry_color(Color.LIGHT_BLUE, Color.BLACK))
        self.row = 5
        self.color = logo_color
        self.column = 20
        self.write(_LOGO_TOP)
        self.row += 1
        for highlight, rest in _LOGO_LINES:
            self.column = 20
            self.color = highlight_color
            self.write(highlight)
            self.color = logo_color
            self.write(rest)
            self.row += 1
        self.column = 20
        self.write(_LOGO_BLANK)
        self.row += 1
        gradient = (
            entry_color(Color.CYAN, Color.BLACK),
            entry_color(Color.LIGHT_CYAN, Color.BLACK),
            entry_color(Color.WHITE, Color.BLACK),
        )
        self.column = 20
        for i, char in enumerate(_VERSION_TEXT):
            self.color = gradient[i % 3]
            self.putchar(char)
        self.row += 2
        self.column = 17
        self.color = entry_color(Color.LIGHT_GREY, Color.BLACK)
        self.write(_TAGLINE)
        self.color = saved

    def char_at(self, x, y):
        """The character stored at a position."""
        return chr(self._cells[self._index(x, y)] & 0xFF)

    def color_at(self, x, y):
        """The attribute byte stored at a position."""
        return self._cells[self._index(x, y)] >> 8

    def row_text(self, y):
        """The full-width text of one line."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is off the screen")
        return "".join(self.char_at(x, y) for x in range(self.width))

    def render(self):
        """All lines, trailing spaces removed, joined by newlines."""
        return "\n".join(self.row_text(y).rstrip() for y in range(self.height))