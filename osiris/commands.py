"""Informational shell commands that only write to the screen."""

from __future__ import annotations

from .utils import itoa
from .vga import Color, entry_color

_HELP_ENTRIES = (
    ("  help        ", "- Display this help information\n"),
    ("  clear, cls  ", "- Clear the screen\n"),
    ("  about       ", "- Display information about OSIRIS OS\n"),
    ("  info        ", "- Display system information\n"),
    ("  reboot      ", "- Reboot the system\n"),
    ("  shutdown    ", "- Shut down the system\n"),
    ("  calendar    ", "- Display a calendar\n"),
    ("  time, clock ", "- Display the current time\n"),
    ("  ascii       ", "- Display ASCII table\n"),
    ("  calc        ", "- Run a simple calculator\n"),
    ("  echo [text] ", "- Display text\n"),
    ("  manual [cmd]", "- Display manual for a command\n"),
    ("  disk        ", "- Display disk usage\n"),
    ("  screensaver ", "- Run a simple screensaver\n"),
    ("  title [text]", "- Set terminal title\n"),
)

_ABOUT_BODY = (
    "OSIRIS (Operating System Interface Research Integration & Security)\n",
    "Version: 2.0\n",
    "Build Date: May 15, 2025\n",
    "\nOSIRIS is a lightweight, terminal-based operating system designed\n",
    "for research, education, and specialized applications. It provides\n",
    "a simple but powerful command interface for system operations.\n",
    "\nFeatures:\n",
    "- Minimal resource footprint\n",
    "- Text-mode interface\n",
    "- Basic file system operations\n",
    "- System monitoring tools\n",
    "- Integrated text editor\n",
)


def display_help(screen):
    """List the available commands."""
    header_color = entry_color(Color.LIGHT_CYAN, Color.BLACK)
    cmd_color = entry_color(Color.WHITE, Color.BLACK)
    desc_color = entry_color(Color.LIGHT_GREY, Color.BLACK)
    screen.write_colored("Available commands:\n", header_color)
    for command, description in _HELP_ENTRIES:
        screen.write_colored(command, cmd_color)
        screen.write_colored(description, desc_color)


def display_welcome_message(screen):
    """Greet the user and point at 'help'."""
    screen.write_colored(
        "\nWelcome to O.S.I.R.I.S - Operating System Interface v2.0\n",
        entry_color(Color.LIGHT_GREEN, Color.BLACK),
    )
    screen.write("Type 'help' for a list of available commands.\n\n")


def display_about(screen):
    """Describe the system."""
    title_color = entry_color(Color.LIGHT_CYAN, Color.BLACK)
    text_color = entry_color(Color.WHITE, Color.BLACK)
    screen.write_colored("About OSIRIS OS\n", title_color)
    screen.write_colored("---------------\n", title_color)
    for line in _ABOUT_BODY:
        screen.write_colored(line, text_color)


def show_calendar(screen):
    """Show the fixed May 2025 calendar with the current day highlighted."""
    title_color = entry_color(Color.LIGHT_CYAN, Color.BLACK)
    header_color = entry_color(Color.LIGHT_GREEN, Color.BLACK)
    day_color = entry_color(Color.WHITE, Color.BLACK)
    current_color = entry_color(Color.BLACK, Color.LIGHT_CYAN)

    screen.write_colored("      May 2025      \n", title_color)
    screen.write_colored(" Su Mo Tu We Th Fr Sa\n", header_color)
    screen.write_colored("             1  2  3\n", day_color)
    screen.write_colored("  4  5  6  7  8  9 10\n", day_color)
    screen.write_colored(" 11 12 13 14 ", day_color)
    screen.write_colored("15", current_color)
    screen.write_colored(" 16 17\n", day_color)
    screen.write_colored(" 18 19 20 21 22 23 24\n", day_color)
    screen.write_colored(" 25 26 27 28 29 30 31\n", day_color)


def show_clock(screen):
    """Show the fixed simulated time and date."""
    clock_color = entry_color(Color.LIGHT_GREEN, Color.BLACK)
    screen.write_colored("Current Time: 10:45:22\n", clock_color)
    screen.write_colored("Date: May 15, 2025\n", clock_color)


def show_ascii_table(screen):
    """Print codes 32 to 127 eight to a row."""
    title_color = entry_color(Color.LIGHT_CYAN, Color.BLACK)
    screen.write_colored("ASCII Table (32-127)\n", title_color)
    screen.write_colored("------------------\n", title_color)
    for row_start in range(32, 128, 8):
        for code in range(row_start, min(row_start + 8, 128)):
            screen.write(itoa(code) + ": ")
            if code == 32:
                screen.write("SP")
            else:
                screen.putchar(chr(code))
            screen.write("  ")
        screen.putchar("\n")