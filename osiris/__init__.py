"""A simulated text-mode operating system: VGA screen, kernel boot, shell helpers, file system, processes and editor."""

__version__ = "2.0.0"

__all__ = [
    "commands",
    "editor",
    "fs",
    "kernel",
    "shell",
    "system",
    "tools",
    "utils",
    "vga",
]