"""Inspecting and controlling running processes."""

from __future__ import annotations

import errno
import functools
import os
import platform
import signal
import sys
from pathlib import Path
from typing import Optional

from robotkit.module import Module
from robotkit.procmaps import collect_modules, file_name, name_matcher

_PROC = Path("/proc")
_NATIVE_64BIT = sys.maxsize > 2**32
_ELF_CLASS_OFFSET = 4
_ELF_CLASS_64 = 2


def _pid_alive(pid: int) -> bool:
    """Return whether a process with ``pid`` exists."""
    if pid <= 0 or os.name == "nt":
        return False
    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        return False
    except OSError as exc:
        return exc.errno != errno.ESRCH
    return True


def _leading_int(text: str) -> int:
    """Parse a leading decimal integer the way atoi does, defaulting to 0."""
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if not ("0" <= char <= "9"):
            break
        digits += char
    return sign * int(digits) if digits else 0


class Process:
    """A handle on a running process, identified by its process id.

    A process that could not be opened is invalid and has a pid of 0.
    """

    __slots__ = ("_pid", "_name", "_path", "_is_64bit")

    def __init__(self, pid: int = 0) -> None:
        self._pid = 0
        self._name = ""
        self._path = ""
        self._is_64bit = False
        self.open(pid)

    def __repr__(self) -> str:
        return f"Process(pid={self._pid}, name={self._name!r})"

    @property
    def pid(self) -> int:
        """The process id, or 0 when invalid."""
        return self._pid

    @property
    def handle(self) -> int:
        """The native handle; always 0 where none is needed."""
        return 0

    @property
    def name(self) -> str:
        """File name of the process executable."""
        return self._name

    @property
    def path(self) -> str:
        """Full path of the process executable."""
        return self._path

    def open(self, pid: int) -> bool:
        """Attach to the process ``pid``; return whether it succeeded."""
        if self.is_valid():
            self.close()

        if not _pid_alive(pid):
            return False

        self._pid = pid
        self._is_64bit = _NATIVE_64BIT

        exe = _PROC / str(pid) / "exe"
        try:
            with exe.open("rb") as handle:
                handle.seek(_ELF_CLASS_OFFSET)
                fmt = handle.read(1)
            if fmt:
                self._is_64bit = fmt[0] == _ELF_CLASS_64
        except OSError:
            pass

        if not _NATIVE_64BIT and self._is_64bit:
            self.close()
            return False

        try:
            path = os.readlink(exe)
        except OSError:
            path = ""
        if path:
            self._name = file_name(path)
            self._path = path
        return True

    def close(self) -> None:
        """Detach from the process and reset to the invalid state."""
        self._pid = 0
        self._is_64bit = False
        self._name = ""
        self._path = ""

    def is_valid(self) -> bool:
        """Return whether the process is attached and still exists."""
        return _pid_alive(self._pid)

    def is_64bit(self) -> bool:
        """Return whether the process is a 64-bit process."""
        return self._is_64bit

    def is_debugged(self) -> bool:
        """Return whether a tracer is attached to the process."""
        if not self.is_valid():
            return False
        try:
            with (_PROC / str(self._pid) / "status").open() as status:
                for line in status:
                    marker = line.find("TracerPid:")
                    if marker != -1:
                        return _leading_int(line[marker + len("TracerPid:"):]) != 0
        except OSError:
            return False
        return False

    def exit(self) -> None:
        """Ask the process to terminate."""
        if self.is_valid():
            os.kill(self._pid, signal.SIGTERM)

    def kill(self) -> None:
        """Forcibly terminate the process."""
        if self.is_valid():
            os.kill(self._pid, signal.SIGKILL)

    def has_exited(self) -> bool:
        """Return whether the process is no longer running."""
        return not self.is_valid()

    def modules(self, name: Optional[str] = None) -> list[Module]:
        """Return the modules loaded by the process, sorted by base address.

        ``name`` is a case-insensitive regular expression that must match
        the whole module file name; an invalid pattern gives no modules.
        """
        if not self.is_valid():
            return []
        try:
            with (_PROC / str(self._pid) / "maps").open() as maps:
                return collect_modules(self, maps, name)
        except OSError:
            return []

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Process):
            return self._pid == other._pid
        if isinstance(other, int) and not isinstance(other, bool):
            return self._pid == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._pid)


def list_processes(name: Optional[str] = None) -> list[Process]:
    """Return every process whose name fully matches the pattern ``name``.

    The pattern is a case-insensitive regular expression; ``None`` matches
    all processes and an invalid pattern gives an empty list.
    """
    try:
        matches = name_matcher(name)
    except ValueError:
        return []
    try:
        entries = os.listdir(_PROC)
    except OSError:
        return []

    result: list[Process] = []
    for entry in entries:
        if not (entry.isascii() and entry.isdigit()):
            continue
        process = Process()
        if process.open(int(entry)) and matches(process.name):
            result.append(process)
    return result


def current_process() -> Process:
    """Return the process running this code."""
    return Process(os.getpid())


@functools.lru_cache(maxsize=None)
def is_sys_64bit() -> bool:
    """Return whether the operating system runs on a 64-bit x86 machine."""
    return platform.machine() == "x86_64"