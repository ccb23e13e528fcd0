import re

from osiris.commands import (
    display_about,
    display_help,
    display_welcome_message,
    show_ascii_table,
    show_calendar,
    show_clock,
)
from osiris.vga import Color, Screen, entry_color


def test_help_lists_commands_in_colour():
    screen = Screen()
    display_help(screen)
    text = screen.render()
    assert text.startswith("Available commands:")
    for name in ("help", "clear, cls", "screensaver", "title [text]", "manual [cmd]"):
        assert name in text
    assert "- Display disk usage" in text
    assert screen.color_at(0, 0) == entry_color(Color.LIGHT_CYAN, Color.BLACK)
    assert screen.color == entry_color(Color.WHITE, Color.BLACK)


def test_welcome_message_layout():
    screen = Screen()
    display_welcome_message(screen)
    assert screen.row_text(0).strip() == ""
    assert "Welcome to O.S.I.R.I.S - Operating System Interface v2.0" in screen.row_text(1)
    assert "Type 'help' for a list of available commands." in screen.row_text(2)
    assert screen.color_at(0, 1) == entry_color(Color.LIGHT_GREEN, Color.BLACK)


def test_about_mentions_version_and_build():
    screen = Screen()
    display_about(screen)
    text = screen.render()
    assert "About OSIRIS OS" in text
    assert "Version: 2.0" in text
    assert "Build Date: May 15, 2025" in text
    assert "- Integrated text editor" in text


def test_calendar_highlights_current_day():
    screen = Screen()
    show_calendar(screen)
    rows = [screen.row_text(y) for y in range(screen.height)]
    assert "May 2025" in rows[0]
    y = next(i for i, row in enumerate(rows) if " 15 " in row)
    x = rows[y].index("15")
    assert screen.color_at(x, y) == entry_color(Color.BLACK, Color.LIGHT_CYAN)
    x14 = rows[y].index("14")
    assert screen.color_at(x14, y) == entry_color(Color.WHITE, Color.BLACK)
    assert " 25 26 27 28 29 30 31" in screen.render()


def test_clock_shows_fixed_time():
    screen = Screen()
    show_clock(screen)
    text = screen.render()
    assert "Current Time: 10:45:22" in text
    assert "Date: May 15, 2025" in text


def test_ascii_table_covers_printable_range():
    screen = Screen()
    show_ascii_table(screen)
    text = screen.render()
    codes = {int(code) for code in re.findall(r"(\d+): ", text)}
    assert codes == set(range(32, 128))
    assert "32: SP" in text
    assert "65: A" in text
    assert "ASCII Table (32-127)" in text