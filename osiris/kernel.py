"""The kernel entry point: formatted output, timing and the boot screens."""

from __future__ import annotations

import argparse
import re
import time

from .utils import itoa
from .vga import Color, Screen, entry_color

SECRET_MESSAGE = (
    "The key to enlightenment is found in the year the temple was built: osiris1371"
)

BOOT_MESSAGES = (
    "Initializing hardware detection...",
    "Loading kernel components...",
    "Setting up memory management...",
    "Configuring virtual device drivers...",
    "Starting system services...",
    "Initializing virtual file system...",
    "Loading user interface components...",
    "Preparing terminal interface...",
    "Setting up command interpreter...",
    "Performing security checks...",
)

BOOT_TITLE = "O.S.I.R.I.S Boot Sequence v2.0"
BOOT_COMPLETE = "Boot sequence complete! Starting O.S.I.R.I.S..."

_DIRECTIVE = re.compile(r"%(.?)", re.DOTALL)


def kformat(fmt, *args):
    """Format with the kernel's directives: %d %x %c %s %%.

    Unknown directives are copied through unchanged; a lone trailing '%'
    stays as it is.
    """
    values = iter(args)

    def take():
        try:
            return next(values)
        except StopIteration:
            raise ValueError(f"not enough arguments for format {fmt!r}") from None

    def replace(match):
        kind = match.group(1)
        if kind == "":
            return "%"
        if kind == "d":
            return itoa(int(take()))
        if kind == "x":
            return itoa(int(take()), 16)
        if kind == "c":
            value = take()
            return chr(value) if isinstance(value, int) else str(value)[:1]
        if kind == "s":
            value = take()
            return "(null)" if value is None else str(value)
        if kind == "%":
            return "%"
        return "%" + kind

    return _DIRECTIVE.sub(replace, fmt)


class Kernel:
    """Owns the screen and the simulated uptime counters."""

    def __init__(self, screen=None, sleep=None):
        self.screen = screen if screen is not None else Screen()
        self.ticks = 0
        self.uptime_seconds = 0
        self._sleep = sleep

    def delay(self, milliseconds):
        """Advance the simulated time, optionally pausing for real."""
        if milliseconds < 0:
            raise ValueError("milliseconds must not be negative")
        if self._sleep is not None:
            self._sleep(milliseconds / 1000)
        self.ticks += milliseconds
        if self.ticks >= 1000:
            self.uptime_seconds += self.ticks // 1000
            self.ticks %= 1000

    def printf(self, fmt, *args):
        """Write formatted text to the screen."""
        self.screen.write(kformat(fmt, *args))

    def show_boot_sequence(self):
        """Draw the banner and the step-by-step boot progress."""
        screen = self.screen
        screen.clear()
        text_color = entry_color(Color.WHITE, Color.BLACK)
        status_color = entry_color(Color.LIGHT_GREEN, Color.BLACK)
        old_color = screen.color

        screen.fancy_header(BOOT_TITLE)
        screen.row += 1

        total = len(BOOT_MESSAGES)
        for step, message in enumerate(BOOT_MESSAGES, start=1):
            screen.color = text_color
            screen.column = 2
            for char in message:
                screen.putchar(char)
                self.delay(10)
            self.delay(100)
            screen.column = 40
            screen.progress_bar(step, total, 20)
            screen.column = 70
            screen.color = status_color
            screen.write("[OK]")
            screen.putchar("\n")
            self.delay(150)

        screen.color = old_color
        screen.row += 1
        screen.print_centered(
            BOOT_COMPLETE, screen.row, entry_color(Color.LIGHT_GREEN, Color.BLACK)
        )
        screen.row += 1
        self.delay(1000)

    def boot(self):
        """Run the boot sequence and leave the welcome screen showing."""
        screen = self.screen
        screen.clear()
        self.show_boot_sequence()
        screen.draw_logo()

        screen.row = 16
        screen.column = 0
        welcome_color = entry_color(Color.GREEN, Color.BLACK)
        screen.color = welcome_color
        screen.print_centered("Welcome to OSIRIS OS!", screen.row, welcome_color)
        screen.row += 2

        text_color = entry_color(Color.WHITE, Color.BLACK)
        screen.color = text_color
        screen.print_centered("System loaded successfully.", screen.row, text_color)
        screen.row += 1
        screen.print_centered("Press any key to continue...", screen.row, text_color)


def main(argv=None):
    """Boot the kernel and print the final screen."""
    parser = argparse.ArgumentParser(prog="osiris-kernel", description="Boot the system.")
    parser.add_argument(
        "--animate", action="store_true", help="pause for real during the boot delays"
    )
    args = parser.parse_args(argv)
    kernel = Kernel(sleep=time.sleep if args.animate else None)
    kernel.boot()
    print(kernel.screen.render())
    return 0