"""Leveled logging with a fixed line format, colors and pluggable outputs."""

from __future__ import annotations

import copy
import os
import sys
from enum import IntEnum
from typing import Callable, TextIO

from utilkit.utils import iso8601_utc_datetime

LOGGER_NAME_MAXLEN = 32
LOG_BUF_LEN = 192

FLAG_NONE = 0x00000000
FLAG_NO_COLORS = 0x00000001

_RED = "\x1b[31m"
_GRN = "\x1b[32m"
_YEL = "\x1b[33m"
_MAG = "\x1b[35m"
_RESET = "\x1b[0m"

PutsFn = Callable[[str], object]
LogCallback = Callable[[int, str, int, str], None]


class LogLevel(IntEnum):
    """Syslog style log levels; lower is more severe."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


_LEVEL_COLORS = {
    LogLevel.EMERG: _RED,
    LogLevel.ALERT: _RED,
    LogLevel.CRIT: _RED,
    LogLevel.ERR: _RED,
    LogLevel.WARNING: _YEL,
    LogLevel.NOTICE: _MAG,
    LogLevel.INFO: _GRN,
    LogLevel.DEBUG: _RESET,
}

_LEVEL_NAMES = {
    LogLevel.EMERG: "EMERG",
    LogLevel.ALERT: "ALERT",
    LogLevel.CRIT: "CRIT ",
    LogLevel.ERR: "ERROR",
    LogLevel.WARNING: "WARN ",
    LogLevel.NOTICE: "NOTIC",
    LogLevel.INFO: "INFO ",
    LogLevel.DEBUG: "DEBUG",
}


def _puts(text: str) -> None:
    """Write ``text`` to stdout followed by a newline, as ``puts`` does."""
    sys.stdout.write(text + "\n")


def _basename(path: str) -> str:
    return path[path.rfind(os.sep) + 1:]


class Logger:
    """A named logger writing lines to a puts function, a file or a callback.

    With a callback every message is handed over as is, whatever its level;
    otherwise lines above ``log_level`` are dropped and the rest get a
    ``name: timestamp file:line [LEVEL]`` prefix.
    """

    def __init__(
        self,
        log_level: int = LogLevel.INFO,
        name: str | None = "GLOBAL",
        root_path: str | None = None,
        puts: PutsFn | None = None,
        file: TextIO | None = None,
        callback: LogCallback | None = None,
        flags: int = FLAG_NONE,
    ) -> None:
        if puts is None and file is None and callback is None:
            raise ValueError("a puts function, a file or a callback is required")
        self.log_level = int(log_level)
        self.root_path = root_path
        self.puts = puts
        self.file = file
        self.callback = callback
        self.flags = flags
        if file is not None or callback is not None:
            self.flags |= FLAG_NO_COLORS
        self._name = "GLOBAL"
        self.name = name

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str | None) -> None:
        if value is None:
            return
        self._name = value[: LOGGER_NAME_MAXLEN - 1]

    def _set_color(self, color: str) -> None:
        if self.flags & FLAG_NO_COLORS or self.file is None:
            return
        isatty = getattr(self.file, "isatty", None)
        if isatty is not None and isatty():
            self.file.write(color)

    def log(self, log_level: int, file: str, line: int, fmt: str, *args) -> int:
        """Log ``fmt % args`` from ``file``:``line``; return the line length.

        Returns 0 when the message is dropped for its level.
        """
        file = _basename(file)
        level = int(log_level)
        prefix = ""
        if self.callback is None:
            if not LogLevel.EMERG <= level <= LogLevel.DEBUG or level > self.log_level:
                return 0
            prefix = (
                f"{self.name}: {iso8601_utc_datetime()} {file:>11}:{line:<4} "
                f"[{_LEVEL_NAMES[level]}] "
            )
        message = fmt % args if args else fmt
        text = (prefix + message)[: LOG_BUF_LEN - 1]
        if not text.endswith("\n"):
            text += "\n"

        if self.callback is not None:
            self.callback(level, file, line, text)
        else:
            self._set_color(_LEVEL_COLORS[level])
            if self.file is not None:
                self.file.write(text)
            else:
                self.puts(text)
            self._set_color(_RESET)
        return len(text)


_default_logger = Logger(LogLevel.INFO, "GLOBAL", None, _puts, None, None, FLAG_NONE)


def get_default_logger() -> Logger:
    """Return a copy of the default logger."""
    return copy.copy(_default_logger)


def set_default_logger(logger: Logger) -> None:
    """Make a copy of ``logger`` the default logger."""
    global _default_logger
    _default_logger = copy.copy(logger)


def log(log_level: int, file: str, line: int, fmt: str, *args) -> int:
    """Log through the default logger."""
    return _default_logger.log(log_level, file, line, fmt, *args)