# osiris

OSIRIS is a small text-mode operating system simulated in Python. It has
an 80x25 VGA-style screen held in memory, a boot sequence, shell command
helpers with a command history and a calculator, a flat in-memory file
system, a simulated process table and memory allocator with a system log,
and a modal (normal/insert) text editor.

Everything draws into a `Screen` object whose contents can be read back
from code, so each part is easy to script and to test.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running

Show the kernel boot sequence and the welcome screen, then print the
final screen:

```
osiris-boot
```

With `--animate` the boot delays pause for real instead of only
advancing the simulated clock:

```
osiris-boot --animate
```

## Modules

| Module            | What it holds                                                        |
|-------------------|----------------------------------------------------------------------|
| `osiris.vga`      | `Screen`, the `Color` palette, `entry_color`, `entry`                |
| `osiris.kernel`   | `Kernel` (boot sequence, `printf`, delays), `kformat`, `main`        |
| `osiris.commands` | help, welcome, about, calendar, clock and ASCII-table output         |
| `osiris.tools`    | calculator, manual pages, disk usage and system information output  |
| `osiris.shell`    | `calculate`, `CalculatorError`, `CommandHistory`                     |
| `osiris.fs`       | `FileSystem`, `FileEntry`, `FileType`, `Permission`, `FsError`       |
| `osiris.system`   | `System`, `SystemState`, `SystemInfo`, `Process`, `format_size`      |
| `osiris.editor`   | `Editor` and its `Mode`                                              |
| `osiris.utils`    | string and number helpers, `Random`, `SimClock`                      |

## Using it as a library

The screen:

```python
from osiris.vga import Screen, Color, entry_color

screen = Screen()
screen.write_colored("Hello", entry_color(Color.LIGHT_GREEN, Color.BLACK))
print(screen.row_text(0))
print(screen.render())          # all 25 lines, trailing spaces removed
```

Command output goes to a screen too:

```python
from osiris.commands import display_help, show_calendar
from osiris.tools import display_manual, run_calculator

display_help(screen)
display_manual(screen, "cls")
run_calculator(screen, "4*3")   # writes the result and returns 12
```

The kernel and its formatter (`%d`, `%x`, `%c`, `%s`, `%%`):

```python
from osiris.kernel import Kernel, kformat

kformat("%d items, %x hex", 5, 255)   # '5 items, ff hex'
kernel = Kernel()
kernel.boot()
print(kernel.screen.render())
```

The file system:

```python
from osiris.fs import FileSystem

fs = FileSystem()
fs.format()                      # creates "/", system.cfg, welcome.txt and a hidden file
print(fs.read_file("welcome.txt"))
fs.create_file("notes.txt", "guest")
fs.write_file("notes.txt", "remember the milk")
print(fs.search("milk"))
print(fs.list_files())
```

The editor, driven by a sequence of keys (`i` enters insert mode, ESC
returns to normal mode, `h`/`j`/`k`/`l` move, Ctrl+S saves, Ctrl+Q quits):

```python
from osiris.editor import Editor

editor = Editor(fs)
editor.run("ihello\x1b")
editor.save_as("hello.txt")
fs.read_file("hello.txt")        # 'hello'
```

Processes, memory and the system log:

```python
from osiris.system import System, format_size

system = System()
pid = system.add_process("worker")
print(system.process_status(pid), format_size(system.used_memory()))
system.end_process(pid)
print(system.logs)
```

Helpers for strings and numbers:

```python
from osiris.utils import itoa, atoi, trim, split_string, hash_string

itoa(255, 16)                  # 'ff'
atoi("  -42")                  # -42
trim("  padded  ")             # 'padded'
split_string("a,b,c", ",", 8)  # ['a', 'b', 'c']
```

The calculator and the command history:

```python
from osiris.shell import calculate, CalculatorError, CommandHistory

calculate("8/2")               # 4
history = CommandHistory()
history.add("help")
history.previous()             # 'help'
```

Operations that the system refuses, such as dividing by zero in the
calculator, deleting a system file or ending the kernel process, raise
an exception instead of returning an error code.

## What it does not do

There is no interactive shell: the package has no prompt loop that reads
keys and dispatches typed commands, so `echo`, `title`, `screensaver`,
`reboot` and `shutdown` exist only as far as the pieces above provide
them. The editor takes its keys as a sequence rather than from a
keyboard. Users, logins and passwords are not modelled, and the file
system lives only in memory.