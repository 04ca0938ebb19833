"""Process helpers: PID files, output redirection and process lookup."""

from __future__ import annotations

import contextlib
import os
import re
from pathlib import Path
from typing import Iterable

from utilkit.fileutils import path_extract

_PROC_ROOT = Path("/proc")
_MAX_ARG_LEN = 200
_SELF_EXE = "/proc/self/exe"
_STDIN_FD, _STDOUT_FD, _STDERR_FD = 0, 1, 2
_PID_PATTERN = re.compile(r"\s*([+-]?\d+)")


def read_pid(path: str | os.PathLike) -> int:
    """Read a PID written by :func:`write_pid` from ``path``.

    Raises OSError when the file cannot be read and ValueError when it
    does not start with a number.
    """
    with open(path) as fp:
        content = fp.read()
    match = _PID_PATTERN.match(content)
    if match is None:
        raise ValueError(f"failed to read PID from file {os.fspath(path)}")
    return int(match.group(1))


def write_pid(path: str | os.PathLike) -> None:
    """Write the calling process's PID to ``path``."""
    with open(path, "w") as fp:
        fp.write(f"{os.getpid()}\n")


def o_redirect(mode: int, path: str | os.PathLike | None = None) -> None:
    """Redirect stdout (bit 0 of ``mode``) and/or stderr (bit 1) to ``path``.

    The file is opened for appending and created if needed. With no path
    and a mode of 3, stdin, stdout and stderr are closed instead.
    """
    if path is None:
        if mode == 3:
            for fd in (_STDIN_FD, _STDOUT_FD, _STDERR_FD):
                with contextlib.suppress(OSError):
                    os.close(fd)
        return

    fd = os.open(path, os.O_RDWR | os.O_CREAT | os.O_APPEND, 0o644)
    try:
        if mode & 0x01:
            os.dup2(fd, _STDOUT_FD)
        if mode & 0x02:
            os.dup2(fd, _STDERR_FD)
    finally:
        os.close(fd)


def parse_proc_cmdline(pid: int, pos: int) -> str | None:
    """Return argument number ``pos`` (1 is arg0) of process ``pid``.

    Arguments are cut to 200 characters. None is returned when the process
    is unknown or the argument is missing or empty.
    """
    try:
        data = (_PROC_ROOT / str(pid) / "cmdline").read_bytes()
    except OSError:
        return None
    for _ in range(pos - 1):
        end = data.find(b"\0")
        if end < 0:
            return None
        data = data[end + 1:]
    end = data.find(b"\0")
    arg = (data if end < 0 else data[:end])[:_MAX_ARG_LEN]
    if not arg:
        return None
    return os.fsdecode(arg)


def _arg0_matches(arg0: str, exe_name: str) -> bool:
    try:
        _, base = path_extract(arg0)
    except (ValueError, OSError):
        return False
    return base[:_MAX_ARG_LEN] == exe_name[:_MAX_ARG_LEN]


def pid_of(exe_name: str, omit: Iterable[int] | None = None) -> int | None:
    """Return the PID of a process running ``exe_name``, or None.

    Processes whose PID is in ``omit`` are skipped. Scripts and kernel
    threads are not found.
    """
    omitted = frozenset(omit or ())
    try:
        entries = os.listdir(_PROC_ROOT)
    except OSError:
        return None
    for name in entries:
        if not name.isdigit():
            continue
        pid = int(name)
        if pid in omitted:
            continue
        arg0 = parse_proc_cmdline(pid, 1)
        if arg0 is None or arg0 == _SELF_EXE:
            continue
        if _arg0_matches(arg0, exe_name):
            return pid
    return None


def any_pid_of(exe_name: str) -> int | None:
    """Return the PID of any process running ``exe_name``, or None."""
    return pid_of(exe_name)