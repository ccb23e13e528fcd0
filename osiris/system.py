"""System bookkeeping: state, process table, simulated memory and the log."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, replace
from enum import IntEnum

MAX_LOG_ENTRIES = 100
MAX_PROCESSES = 16
MAX_MEMORY_BLOCKS = 100

KERNEL_MEMORY = 512 * 1024
KERNEL_CPU = 5
PROCESS_MEMORY = 64 * 1024
PROCESS_CPU = 10

BLOCK_BASE_ADDRESS = 0x100000
BLOCK_SPACING = 4096


class SystemState(IntEnum):
    """Overall run state of the machine."""

    RUNNING = 0
    HALTED = 1
    REBOOT = 2
    SHUTDOWN = 3


@dataclass
class SystemInfo:
    """A snapshot of system-wide figures."""

    os_name: str = "O.S.I.R.I.S"
    os_version: str = "2.0"
    build_date: str = "2025-05-15"
    kernel_version: str = "1.7.3"
    uptime_seconds: int = 0
    memory_total: int = 1024 * 1024
    memory_used: int = 0
    system_ticks: int = 0
    current_user: str = "guest"
    num_processes: int = 1
    num_files: int = 0


@dataclass
class Process:
    """One entry of the process table."""

    pid: int
    name: str
    active: bool = True
    memory_usage: int = PROCESS_MEMORY
    cpu_usage: int = PROCESS_CPU


@dataclass
class _Block:
    address: int
    size: int


class System:
    """The process table, simulated allocator, state and log of one machine."""

    def __init__(self):
        self._info = SystemInfo()
        self._state = SystemState.RUNNING
        self._logs = deque(maxlen=MAX_LOG_ENTRIES)
        self._processes = [None] * MAX_PROCESSES
        self._next_pid = 1
        self._blocks = [None] * MAX_MEMORY_BLOCKS

        self._processes[0] = Process(
            pid=0, name="kernel", memory_usage=KERNEL_MEMORY, cpu_usage=KERNEL_CPU
        )
        self._info.memory_used = KERNEL_MEMORY
        self.log_message("System initialized successfully")

    @property
    def state(self):
        """The current run state."""
        return self._state

    @property
    def logs(self):
        """The log entries, oldest first."""
        return list(self._logs)

    def _kernel(self):
        return self._processes[0]

    def change_state(self, state):
        """Set the run state and log the change."""
        try:
            state = SystemState(state)
            label = state.name
        except ValueError:
            label = "UNKNOWN"
        self._state = state
        self.log_message(f"System state changed to {label}")

    def info(self):
        """A copy of the current system information."""
        return replace(self._info)

    def _end_user_processes(self):
        for process in list(self._processes):
            if process is not None and process.active and process.pid != 0:
                self.end_process(process.pid)

    def perform_shutdown(self):
        """Terminate every user process and enter the shutdown state."""
        self.log_message("Initiating system shutdown sequence")
        self._end_user_processes()
        self.log_message("System shutdown complete")
        self.change_state(SystemState.SHUTDOWN)

    def simulate_reboot(self):
        """Terminate user processes, reset counters and enter the reboot state."""
        self.log_message("Initiating system reboot sequence")
        self._end_user_processes()
        self._info.uptime_seconds = 0
        self._info.system_ticks = 0
        self._info.memory_used = self._kernel().memory_usage
        self._info.current_user = "guest"
        self.change_state(SystemState.REBOOT)
        self.log_message("System reboot complete")

    def run_diagnostics(self):
        """Check memory and the process table, logging each result."""
        self.log_message("Running system diagnostics")
        all_passed = True

        if self.check_integrity():
            self.log_message("Memory integrity check passed")
        else:
            self.log_message("ERROR: Memory integrity check failed")
            all_passed = False

        table_ok = not any(
            p is not None and p.active and not 0 <= p.pid < MAX_PROCESSES
            for p in self._processes
        )
        if table_ok:
            self.log_message("Process table integrity check passed")
        else:
            self.log_message("ERROR: Process table integrity check failed")
            all_passed = False

        if all_passed:
            self.log_message("All diagnostics passed successfully")
        else:
            self.log_message("Some diagnostics failed - system may be unstable")
        return all_passed

    def check_integrity(self):
        """True while used memory does not exceed total memory."""
        return self._info.memory_used <= self._info.memory_total

    def set_time(self, hour, minute, second):
        """Record a new time of day in the log."""
        self.log_message(f"System time set to {hour:02d}:{minute:02d}:{second:02d}")

    def set_date(self, year, month, day):
        """Record a new date in the log."""
        self.log_message(f"System date set to {year:04d}-{month:02d}-{day:02d}")

    def init_memory(self):
        """Release every block so only the kernel uses memory."""
        self._blocks = [None] * MAX_MEMORY_BLOCKS
        self._info.memory_used = self._kernel().memory_usage
        self.log_message("Memory management initialized")

    def free_memory(self):
        """Bytes not in use."""
        return self._info.memory_total - self._info.memory_used

    def used_memory(self):
        """Bytes in use."""
        return self._info.memory_used

    def malloc(self, size):
        """Reserve a block and return its simulated address."""
        if size <= 0:
            raise ValueError("allocation size must be positive")
        if size > self.free_memory():
            raise MemoryError(f"not enough free memory for {size} bytes")
        for index, block in enumerate(self._blocks):
            if block is None:
                address = BLOCK_BASE_ADDRESS + index * BLOCK_SPACING
                self._blocks[index] = _Block(address=address, size=size)
                self._info.memory_used += size
                return address
        raise MemoryError("no free memory block slots")

    def free(self, address):
        """Release the block at an address; unknown addresses are ignored."""
        if address is None:
            return
        for index, block in enumerate(self._blocks):
            if block is not None and block.address == address:
                self._info.memory_used -= block.size
                self._blocks[index] = None
                return

    def add_process(self, name):
        """Start a process and return its pid."""
        for index, slot in enumerate(self._processes):
            if slot is None or not slot.active:
                process = Process(pid=self._next_pid, name=name)
                self._next_pid += 1
                self._processes[index] = process
                self._info.num_processes += 1
                self._info.memory_used += process.memory_usage
                self.log_message(f"Process created: {name} (PID: {process.pid})")
                return process.pid
        self.log_message("ERROR: Process table full, cannot create new process")
        raise RuntimeError("process table full")

    def end_process(self, pid):
        """Terminate an active process."""
        if pid == 0:
            self.log_message("ERROR: Cannot terminate kernel process")
            raise PermissionError("cannot terminate kernel process")
        for process in self._processes:
            if process is not None and process.active and process.pid == pid:
                self._info.num_processes -= 1
                self._info.memory_used -= process.memory_usage
                process.active = False
                self.log_message(f"Process terminated: {process.name} (PID: {pid})")
                return
        raise LookupError(f"no active process with pid {pid}")

    def process_status(self, pid):
        """True if the process is active, False if it has ended."""
        process = self.get_process(pid)
        if process is None:
            raise LookupError(f"no process with pid {pid}")
        return process.active

    def log_message(self, message):
        """Append to the log, dropping the oldest entry when full."""
        self._logs.append(message)

    def handle_error(self, message):
        """Log an error."""
        self.log_message(f"ERROR: {message}")

    def backup_system(self):
        """Simulate a backup of the system files."""
        self.log_message("System backup initiated")
        self.log_message("System backup completed successfully")

    def restore_from_backup(self):
        """Simulate a restore; always succeeds."""
        self.log_message("System restore initiated")
        self.log_message("System restore completed successfully")
        return True

    def check_for_updates(self):
        """Simulate an update check; no updates are ever available."""
        self.log_message("Checking for system updates...")
        self.log_message("No updates available")
        return False

    def install_update(self):
        """Simulate installing an update; always succeeds."""
        self.log_message("Installing system update...")
        self.log_message("System update installed successfully")
        return True

    def get_process(self, pid):
        """The table entry with this pid, active or ended, or None."""
        return next(
            (p for p in self._processes if p is not None and p.pid == pid), None
        )

    def active_processes(self, max_count):
        """Up to max_count active processes in table order."""
        active = [p for p in self._processes if p is not None and p.active]
        return active[:max(0, max_count)]

    def update_system_info(self):
        """Recount processes and memory from the process table."""
        active = [p for p in self._processes if p is not None and p.active]
        self._info.num_processes = len(active)
        self._info.memory_used = sum(p.memory_usage for p in active)


def format_size(num_bytes):
    """Render a byte count as B, KB or MB, rounding down."""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes // 1024} KB"
    return f"{num_bytes // (1024 * 1024)} MB"