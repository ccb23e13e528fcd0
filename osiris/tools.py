"""Interactive shell tools: calculator, manual pages, disk and system reports."""

from __future__ import annotations

from .shell import CalculatorError, calculate
from .system import SystemInfo
from .utils import format_time, itoa
from .vga import Color, entry_color

CALC_MAX_INPUT = 63
DISK_BAR_LENGTH = 50
DISK_WARNING_PERCENT = 70

_PARTITIONS = (
    ("System (C:)", 4096, 2048),
    ("Data (D:)", 8192, 1024),
    ("Backup (E:)", 2048, 1536),
)

_CALC_ERRORS = {
    "Invalid operator": "Invalid operator\n",
    "Division by zero": "Error: Division by zero\n",
}

_MANUALS = (
    (
        ("help",),
        "MANUAL: help\n",
        "-------------\n",
        (
            "Displays a list of available commands with brief descriptions.\n",
            "Usage: help\n",
        ),
    ),
    (
        ("clear", "cls"),
        "MANUAL: clear/cls\n",
        "-----------------\n",
        (
            "Clears the terminal screen and resets cursor position.\n",
            "Usage: clear\n",
            "   or: cls\n",
        ),
    ),
    (
        ("about",),
        "MANUAL: about\n",
        "-------------\n",
        (
            "Displays information about the operating system.\n",
            "Usage: about\n",
        ),
    ),
    (
        ("info", "sysinfo"),
        "MANUAL: info/sysinfo\n",
        "-------------------\n",
        (
            "Displays detailed system information including memory usage,\n",
            "uptime, and other system statistics.\n",
            "Usage: info\n",
            "   or: sysinfo\n",
        ),
    ),
)


def run_calculator(screen, line):
    """Evaluate an entered expression and show the result; None on error."""
    red = entry_color(Color.LIGHT_RED, Color.BLACK)
    screen.write_colored("Simple Calculator\n", entry_color(Color.LIGHT_CYAN, Color.BLACK))
    screen.write("Enter expression (e.g., 5+3, 10-2, 4*3, 8/2): ")
    text = line[:CALC_MAX_INPUT]
    screen.write(text + "\n")
    try:
        result = calculate(text)
    except CalculatorError as exc:
        screen.write_colored(_CALC_ERRORS.get(str(exc), f"Error: {exc}\n"), red)
        return None
    screen.write("Result: ")
    screen.write_colored(itoa(result), entry_color(Color.LIGHT_GREEN, Color.BLACK))
    screen.putchar("\n")
    return result


def display_manual(screen, command):
    """Show the manual page for a command."""
    title_color = entry_color(Color.LIGHT_CYAN, Color.BLACK)
    text_color = entry_color(Color.WHITE, Color.BLACK)
    for names, title, rule, body in _MANUALS:
        if command in names:
            screen.write_colored(title, title_color)
            screen.write_colored(rule, title_color)
            for text in body:
                screen.write_colored(text, text_color)
            return
    screen.write_colored("No manual entry for '", text_color)
    screen.write(command)
    screen.write_colored("'\n", text_color)


def display_disk_usage(screen):
    """Show the simulated partitions with usage bars."""
    title_color = entry_color(Color.LIGHT_CYAN, Color.BLACK)
    text_color = entry_color(Color.WHITE, Color.BLACK)
    bar_color = entry_color(Color.LIGHT_GREEN, Color.BLACK)
    warning_color = entry_color(Color.LIGHT_RED, Color.BLACK)

    screen.write_colored("Disk Usage\n", title_color)
    screen.write_colored("----------\n", title_color)

    for name, total_mb, used_mb in _PARTITIONS:
        percent = used_mb * 100 // total_mb
        level_color = bar_color if percent < DISK_WARNING_PERCENT else warning_color
        screen.write_colored(name, text_color)
        screen.write(f": {itoa(used_mb)} MB / {itoa(total_mb)} MB (")
        screen.write_colored(itoa(percent), level_color)
        screen.write("%)")
        screen.putchar("\n")

        filled = percent * DISK_BAR_LENGTH // 100
        screen.write("[")
        screen.write_colored("|" * filled, level_color)
        screen.write(" " * (DISK_BAR_LENGTH - filled))
        screen.write("]\n\n")

    screen.write_colored("Total Storage: ", text_color)
    screen.write_colored("14336 MB\n", bar_color)
    screen.write_colored("Used Storage: ", text_color)
    screen.write_colored("4608 MB\n", bar_color)
    screen.write_colored("Available: ", text_color)
    screen.write_colored("9728 MB\n", bar_color)


def default_system_info():
    """The simulated figures the shell reports."""
    return SystemInfo(
        os_name="OSIRIS OS",
        os_version="2.0",
        build_date="May 15, 2025",
        kernel_version="0.8.5",
        current_user="admin",
        uptime_seconds=3600,
        memory_total=16 * 1024 * 1024,
        memory_used=4 * 1024 * 1024,
        num_processes=12,
        num_files=216,
    )


def display_system_info(screen, info=None):
    """Show a labelled table of system figures."""
    if info is None:
        info = default_system_info()
    title_color = entry_color(Color.LIGHT_CYAN, Color.BLACK)
    label_color = entry_color(Color.WHITE, Color.BLACK)
    value_color = entry_color(Color.LIGHT_GREEN, Color.BLACK)

    screen.write_colored("System Information\n", title_color)
    screen.write_colored("------------------\n", title_color)

    rows = (
        ("OS Name: ", info.os_name),
        ("Version: ", info.os_version),
        ("Build Date: ", info.build_date),
        ("Kernel Version: ", info.kernel_version),
        ("Uptime: ", format_time(info.uptime_seconds)),
        ("Memory Total: ", itoa(info.memory_total // 1024) + " KB"),
        ("Memory Used: ", itoa(info.memory_used // 1024) + " KB"),
        ("Current User: ", info.current_user),
        ("Active Processes: ", itoa(info.num_processes)),
        ("Files: ", itoa(info.num_files)),
    )
    for label, value in rows:
        screen.write_colored(label, label_color)
        screen.write_colored(value, value_color)
        screen.putchar("\n")