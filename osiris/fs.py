"""An in-memory flat file system with a fixed number of slots."""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag

MAX_FILES = 32
MAX_FILENAME = 32
MAX_CONTENT = 2048
MAX_PATH = 64

FIXED_DATE = "2025-05-15"

_SYSTEM_CFG = "OS: OSIRIS\nVersion: 2.0\nBuild: 2025-05-15\n"
_WELCOME = "Welcome to OSIRIS Operating System!\n\nType 'help' to see available commands.\n"
_SECRET_TEXT = (
    "The key to enlightenment is found in the year the temple was built: osiris1371"
)

_LIST_RULE = "-------------------------------------------------------------------"
_SEARCH_RULE = "---------------------------------------------"


class FsError(Exception):
    """Raised when a file-system operation cannot be carried out."""


class FileType(IntEnum):
    """Kinds of file-system entries."""

    REGULAR = 0
    DIRECTORY = 1
    SYSTEM = 2
    HIDDEN = 3


class Permission(IntFlag):
    """Permission bits of an entry."""

    READ = 0x01
    WRITE = 0x02
    EXEC = 0x04
    ADMIN = 0x08


@dataclass
class FileEntry:
    """One file or directory."""

    filename: str
    owner: str
    content: str = ""
    size: int = 0
    created_date: str = FIXED_DATE
    modified_date: str = FIXED_DATE
    type: FileType = FileType.REGULAR
    permissions: Permission = field(default=Permission.READ | Permission.WRITE)

    @property
    def type_char(self):
        """'D' for directories, 'S' for system files, 'F' otherwise."""
        if self.type == FileType.DIRECTORY:
            return "D"
        if self.type == FileType.SYSTEM:
            return "S"
        return "F"


class FileSystem:
    """A table of MAX_FILES slots holding files and directories."""

    def __init__(self):
        self._slots = []
        self.current_directory = "/"
        self.reset()

    def reset(self):
        """Remove every entry and return to the root directory."""
        self._slots = [None] * MAX_FILES
        self.current_directory = "/"

    def __len__(self):
        return sum(1 for entry in self._slots if entry is not None)

    def __iter__(self):
        return (entry for entry in self._slots if entry is not None)

    def _find(self, filename):
        return next((e for e in self if e.filename == filename), None)

    def _require(self, filename):
        entry = self._find(filename)
        if entry is None:
            raise FsError(f"no such file: {filename}")
        return entry

    def _place(self, entry):
        if len(self) >= MAX_FILES:
            raise FsError("file table is full")
        if self.exists(entry.filename):
            raise FsError(f"file already exists: {entry.filename}")
        for index, slot in enumerate(self._slots):
            if slot is None:
                self._slots[index] = entry
                return entry
        raise FsError("file table is full")

    def create_file(self, filename, owner):
        """Create an empty regular file."""
        return self._place(FileEntry(filename=filename, owner=owner))

    def delete_file(self, filename):
        """Remove a file; system files cannot be removed."""
        for index, entry in enumerate(self._slots):
            if entry is not None and entry.filename == filename:
                if entry.type == FileType.SYSTEM:
                    raise FsError(f"cannot delete system file: {filename}")
                self._slots[index] = None
                return
        raise FsError(f"no such file: {filename}")

    def write_file(self, filename, content):
        """Replace a file's content."""
        entry = self._require(filename)
        if not entry.permissions & Permission.WRITE:
            raise FsError(f"write permission denied: {filename}")
        if len(content) >= MAX_CONTENT:
            raise FsError(f"content too long for {filename}")
        entry.content = content
        entry.size = len(content)
        entry.modified_date = FIXED_DATE

    def read_file(self, filename):
        """Return a file's content."""
        entry = self._require(filename)
        if not entry.permissions & Permission.READ:
            raise FsError("Permission denied")
        return entry.content

    def exists(self, filename):
        """True if an entry with this name exists."""
        return self._find(filename) is not None

    def file_info(self, filename):
        """The entry with this name."""
        return self._require(filename)

    def _visible(self):
        return [e for e in self if e.type != FileType.HIDDEN]

    def list_files(self):
        """A table of all non-hidden entries."""
        visible = self._visible()
        if not visible:
            return f"No files found in directory {self.current_directory}\n"
        lines = [
            f"Files in directory {self.current_directory}:",
            f"{'Filename':<20} {'Size':<6} {'Created':<12} {'Modified':<12} {'Type':<5}",
            _LIST_RULE,
        ]
        lines.extend(
            f"{e.filename:<20} {e.size:<6} {e.created_date:<12} "
            f"{e.modified_date:<12} {e.type_char}"
            for e in visible
        )
        return "\n".join(lines) + "\n"

    def create_system_files(self):
        """Create the root directory and the initial system files."""
        for index, slot in enumerate(self._slots):
            if slot is None:
                self._slots[index] = FileEntry(
                    filename="/",
                    owner="system",
                    type=FileType.DIRECTORY,
                    permissions=Permission.READ,
                )
                break

        self._seed("system.cfg", _SYSTEM_CFG)
        entry = self._find("system.cfg")
        if entry is not None:
            entry.type = FileType.SYSTEM
            entry.permissions = Permission.READ | Permission.ADMIN

        self._seed("welcome.txt", _WELCOME)

        self._seed(".secret", _SECRET_TEXT)
        entry = self._find(".secret")
        if entry is not None:
            entry.type = FileType.HIDDEN
            entry.permissions = Permission.READ | Permission.ADMIN

    def _seed(self, filename, content):
        with suppress(FsError):
            self.create_file(filename, "system")
        with suppress(FsError):
            self.write_file(filename, content)

    def format(self):
        """Wipe everything and recreate the system files."""
        self.reset()
        self.create_system_files()

    def create_directory(self, dirname):
        """Create a directory entry."""
        return self._place(
            FileEntry(filename=dirname, owner="system", type=FileType.DIRECTORY)
        )

    def set_directory(self, dirname):
        """Make an existing directory the current one."""
        entry = self._find(dirname)
        if entry is None or entry.type != FileType.DIRECTORY:
            raise FsError(f"no such directory: {dirname}")
        self.current_directory = dirname

    def check_permission(self, filename, permission):
        """True if the entry exists and has any of the given bits."""
        entry = self._find(filename)
        return entry is not None and (entry.permissions & permission) != 0

    def set_permission(self, filename, permission):
        """Replace an entry's permission bits."""
        self._require(filename).permissions = Permission(permission)

    def file_size(self, filename):
        """Size in characters of a file's content."""
        return self._require(filename).size

    def browser_text(self):
        """The file browser screen as text."""
        return (
            "===== OSIRIS File Browser =====\n"
            f"Current Directory: {self.current_directory}\n\n"
            + self.list_files()
            + "\nCommands: [O]pen, [E]dit, [D]elete, [C]reate, [B]ack, [Q]uit\n"
        )

    def search(self, query):
        """Report non-hidden entries matching by name, or regular files by content."""
        lines = [
            f'Search results for "{query}":',
            f"{'Filename':<20} {'Size':<6} {'Modified':<12} {'Type':<5}",
            _SEARCH_RULE,
        ]
        found = False
        for e in self._visible():
            if query in e.filename:
                lines.append(f"{e.filename:<20} {e.size:<6} {e.modified_date:<12} {e.type_char}")
                found = True
            elif e.type == FileType.REGULAR and query in e.content:
                lines.append(
                    f"{e.filename:<20} {e.size:<6} {e.modified_date:<12} F (content match)"
                )
                found = True
        if not found:
            lines.append(f'No files found matching "{query}"')
        return "\n".join(lines) + "\n"