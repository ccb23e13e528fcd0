"""A small modal text editor working on files of the in-memory file system."""

from __future__ import annotations

from contextlib import suppress
from enum import IntEnum

from .fs import FsError
from .utils import itoa
from .vga import Color, Screen, entry_color

MAX_CONTENT = 2047
MAX_FILENAME = 63
START_ROW = 2
VISIBLE_ROWS = 20
GUTTER = 5
NUMBER_WIDTH = 4

ESC = "\x1b"
BACKSPACE = "\b"
CTRL_Q = "\x11"
CTRL_S = "\x13"

_HELP_HINT = " | Press ESC for normal mode, i for insert mode"
_MOVES = {"h": "move_left", "l": "move_right", "j": "move_down", "k": "move_up"}


class Mode(IntEnum):
    """Editing modes."""

    NORMAL = 0
    INSERT = 1


class Editor:
    """A text buffer with a cursor, a mode and a view onto a screen."""

    def __init__(self, fs, screen=None, owner="guest"):
        self.fs = fs
        self.screen = screen if screen is not None else Screen()
        self.owner = owner
        self.start_row = START_ROW
        self.visible_rows = VISIBLE_ROWS
        self.reset()

    def reset(self):
        """Empty the buffer and forget the file name."""
        self.content = ""
        self.cursor = 0
        self.filename = ""
        self.modified = False
        self.scroll_offset = 0
        self.mode = Mode.NORMAL

    def load_file(self, filename):
        """Replace the buffer with a file's content."""
        if not self.fs.exists(filename):
            raise FsError(f"no such file: {filename}")
        text = self.fs.read_file(filename)
        self.content = text[:MAX_CONTENT]
        self.cursor = 0
        self.filename = filename[:MAX_FILENAME]
        self.modified = False
        self.scroll_offset = 0

    def save_file(self):
        """Write the buffer to its file, creating the file when needed."""
        if not self.filename:
            raise FsError("no file name to save to")
        if not self.fs.exists(self.filename):
            self.fs.create_file(self.filename, self.owner)
        self.fs.write_file(self.filename, self.content)
        self.modified = False

    def save_as(self, filename):
        """Change the file name and save."""
        self.filename = filename[:MAX_FILENAME]
        self.save_file()

    def insert_char(self, c):
        """Insert a character at the cursor; ignored when the buffer is full."""
        if len(self.content) >= MAX_CONTENT:
            return
        self.content = self.content[: self.cursor] + c + self.content[self.cursor :]
        self.cursor += 1
        self.modified = True

    def delete_char(self):
        """Delete the character before the cursor."""
        if self.cursor <= 0:
            return
        self.content = self.content[: self.cursor - 1] + self.content[self.cursor :]
        self.cursor -= 1
        self.modified = True

    def move_left(self):
        """Move the cursor one character back."""
        if self.cursor > 0:
            self.cursor -= 1

    def move_right(self):
        """Move the cursor one character forward."""
        if self.cursor < len(self.content):
            self.cursor += 1

    def _line_start(self, pos):
        return self.content.rfind("\n", 0, pos) + 1

    def move_up(self):
        """Move to the same column of the previous line, or to the start."""
        line_start = self._line_start(self.cursor)
        if line_start == 0:
            self.cursor = 0
            return
        column = self.cursor - line_start
        prev_start = self.content.rfind("\n", 0, line_start - 1) + 1
        prev_length = line_start - prev_start - 1
        self.cursor = prev_start + min(column, prev_length)

    def move_down(self):
        """Move to the same column of the next line, or to the end."""
        column = self.cursor - self._line_start(self.cursor)
        newline = self.content.find("\n", self.cursor)
        if newline < 0:
            self.cursor = len(self.content)
            return
        next_start = newline + 1
        next_end = self.content.find("\n", next_start)
        if next_end < 0:
            next_end = len(self.content)
        self.cursor = next_start + min(column, next_end - next_start)

    def handle_input(self, c):
        """Apply one key in the current mode."""
        if c == ESC:
            self.mode = Mode.NORMAL
        elif c == "i" and self.mode == Mode.NORMAL:
            self.mode = Mode.INSERT
        elif c == BACKSPACE:
            if self.mode == Mode.INSERT:
                self.delete_char()
        elif self.mode == Mode.INSERT:
            self.insert_char(c)
        elif c in _MOVES:
            getattr(self, _MOVES[c])()

    def _scroll_start(self):
        if self.scroll_offset <= 0:
            return 0
        pos = -1
        for _ in range(self.scroll_offset):
            pos = self.content.find("\n", pos + 1)
            if pos < 0:
                return 0
        return pos + 1

    def _draw_line(self, row, line_num, line, number_color, text_color):
        screen = self.screen
        number = itoa(line_num)[:NUMBER_WIDTH].ljust(NUMBER_WIDTH)
        for x, ch in enumerate(number):
            screen.put_entry_at(ch, number_color, x, row)
        screen.put_entry_at("|", number_color, NUMBER_WIDTH, row)
        for x, ch in zip(range(GUTTER, screen.width), line):
            screen.put_entry_at(ch, text_color, x, row)

    def display(self):
        """Draw header, numbered lines and status line; keep the cursor in view."""
        screen = self.screen
        screen.clear()
        bar_color = entry_color(Color.BLACK, Color.LIGHT_GREY)
        text_color = entry_color(Color.LIGHT_GREY, Color.BLACK)
        number_color = entry_color(Color.CYAN, Color.BLACK)

        screen.color = bar_color
        for x in range(screen.width):
            screen.put_entry_at(" ", bar_color, x, 0)
        header = f" File: {self.filename}" if self.filename else " [New File]"
        if self.modified:
            header += " [modified]"
        screen.row = 0
        screen.column = 0
        screen.write(header[: screen.width - 1])
        mode_text = "NORMAL" if self.mode == Mode.NORMAL else "INSERT"
        screen.row = 0
        screen.column = screen.width - len(mode_text) - 2
        screen.write(mode_text)

        screen.color = text_color
        pos = self._scroll_start()
        line_num = self.scroll_offset + 1
        for row in range(self.start_row, self.start_row + self.visible_rows):
            if pos >= len(self.content):
                break
            end = self.content.find("\n", pos)
            if end < 0:
                end = len(self.content)
            self._draw_line(row, line_num, self.content[pos:end], number_color, text_color)
            pos = end + 1
            line_num += 1

        status_row = screen.height - 1
        screen.color = bar_color
        for x in range(screen.width):
            screen.put_entry_at(" ", bar_color, x, status_row)
        line_index = self.content.count("\n", 0, self.cursor)
        column = self.cursor - self._line_start(self.cursor)
        status = f" Ln {line_index + 1}, Col {column + 1}{_HELP_HINT}"
        screen.row = status_row
        screen.column = 0
        screen.write(status[: screen.width - 1])

        display_row = self.start_row + line_index - self.scroll_offset
        last_row = self.start_row + self.visible_rows
        if display_row < self.start_row:
            self.scroll_offset = line_index
        elif display_row >= last_row:
            self.scroll_offset = line_index - self.visible_rows + 1
        if self.start_row <= display_row < last_row:
            screen.row = display_row
            screen.column = min(GUTTER + column, screen.width - 1)

    def run(self, keys, filename=None, confirm=None):
        """Edit with a sequence of keys; True if the user quit with Ctrl+Q."""
        self.reset()
        if filename:
            with suppress(FsError):
                self.load_file(filename)
        ask = confirm if confirm is not None else (lambda prompt: False)
        self.display()
        quit_requested = False
        for key in keys:
            if key == "\0":
                continue
            if key == CTRL_S:
                with suppress(FsError):
                    self.save_file()
            elif key == CTRL_Q:
                if not self.modified or ask("Quit without saving?"):
                    quit_requested = True
            else:
                self.handle_input(key)
            self.display()
            if quit_requested:
                break
        self.screen.clear()
        return quit_requested

    def search(self, query):
        """Count matches, moving the cursor and view to the first one."""
        if not query:
            raise ValueError("search query must not be empty")
        first = self.content.find(query)
        count = 0
        pos = first
        while pos >= 0:
            count += 1
            pos = self.content.find(query, pos + 1)
        if first >= 0:
            self.cursor = first
            line = self.content.count("\n", 0, first)
            self.scroll_offset = line - 5 if line > 5 else 0
        return count

    def set_scroll(self, offset):
        """Set the first visible line; negative offsets are ignored."""
        if offset >= 0:
            self.scroll_offset = offset