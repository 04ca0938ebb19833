"""Raw access to serial ports through termios."""

from __future__ import annotations

import fcntl
import os
import struct
import termios
from dataclasses import dataclass
from enum import Enum

_SUPPORTED_BAUDS = (
    50, 75, 110, 134, 150, 200, 300, 600, 1200, 1800, 2400, 4800,
    9600, 19200, 38400, 57600, 115200, 230400,
)

_DATA_BITS = {
    "8": termios.CS8,
    "7": termios.CS7,
    "6": termios.CS6,
    "5": termios.CS5,
}

_CRTSCTS = getattr(termios, "CRTSCTS", 0)
_INT = struct.Struct("i")


class Parity(Enum):
    """Parity setting of a serial line."""

    NONE = "N"
    EVEN = "E"
    ODD = "O"


@dataclass(frozen=True)
class SerialMode:
    """Line settings parsed from a mode string such as ``"8N1"``."""

    data_bits: int
    parity: Parity
    stop_bits: int
    flow_control: bool

    @property
    def cflag(self) -> int:
        """Control flags for data bits, parity, stop bits and flow control."""
        flags = _DATA_BITS[str(self.data_bits)]
        if self.parity is not Parity.NONE:
            flags |= termios.PARENB
            if self.parity is Parity.ODD:
                flags |= termios.PARODD
        if self.stop_bits == 2:
            flags |= termios.CSTOPB
        if self.flow_control:
            flags |= _CRTSCTS
        return flags

    @property
    def iflag(self) -> int:
        """Input flags: ignore parity errors without parity, else check them."""
        return termios.IGNPAR if self.parity is Parity.NONE else termios.INPCK


def parse_serial_mode(mode: str) -> SerialMode:
    """Parse a mode string: data bits, parity, stop bits and an optional ``F``.

    Raises ValueError for strings that are not 3 or 4 characters long or
    that name an unsupported number of data bits.
    """
    if not 3 <= len(mode) <= 4:
        raise ValueError(f'invalid mode "{mode}"')
    if mode[0] not in _DATA_BITS:
        raise ValueError(f"invalid number of data-bits '{mode[0]}'")
    parity_char = mode[1].upper()
    if parity_char == "N":
        parity = Parity.NONE
    elif parity_char == "O":
        parity = Parity.ODD
    else:
        parity = Parity.EVEN
    return SerialMode(
        data_bits=int(mode[0]),
        parity=parity,
        stop_bits=2 if mode[2] == "2" else 1,
        flow_control=len(mode) == 4 and mode[3] in "Ff",
    )


def baud_constant(baud: int) -> int:
    """Return the termios speed constant for ``baud``; ValueError if unsupported."""
    if baud not in _SUPPORTED_BAUDS:
        raise ValueError(f"invalid baudrate: {baud}")
    return getattr(termios, f"B{baud}")


def _os_error(exc: termios.error, what: str) -> OSError:
    code = exc.args[0] if exc.args else 0
    return OSError(code, f"{what}: {os.strerror(code) if code else exc}")


class SerialPort:
    """An exclusively locked serial port in raw, non-blocking mode.

    DTR and RTS are raised on open and dropped on close; the original
    port settings are restored on close.
    """

    def __init__(self, device: str | os.PathLike, baud: int, mode: str) -> None:
        speed = baud_constant(baud)
        self.mode = parse_serial_mode(mode)
        self._fd: int | None = None

        fd = os.open(device, os.O_RDWR | os.O_NOCTTY | os.O_NDELAY)
        try:
            try:
                fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
            except OSError as exc:
                raise OSError(
                    exc.errno, "another process has locked the comport"
                ) from exc
            try:
                try:
                    self._old_attrs = termios.tcgetattr(fd)
                except termios.error as exc:
                    raise _os_error(exc, "unable to read portsettings") from exc
                self._configure(fd, speed)
            except BaseException:
                fcntl.flock(fd, fcntl.LOCK_UN)
                raise
        except BaseException:
            os.close(fd)
            raise
        self._fd = fd

    def _configure(self, fd: int, speed: int) -> None:
        cc = [0] * len(self._old_attrs[6])
        cc[termios.VMIN] = 0
        cc[termios.VTIME] = 0
        new_attrs = [
            self.mode.iflag,
            0,
            self.mode.cflag | termios.CLOCAL | termios.CREAD,
            0,
            speed,
            speed,
            cc,
        ]
        try:
            termios.tcsetattr(fd, termios.TCSANOW, new_attrs)
        except termios.error as exc:
            self._restore(fd)
            raise _os_error(exc, "unable to adjust portsettings") from exc
        try:
            status = self._get_status(fd)
            self._set_status(fd, status | termios.TIOCM_DTR | termios.TIOCM_RTS)
        except OSError:
            self._restore(fd)
            raise

    def _restore(self, fd: int) -> None:
        try:
            termios.tcsetattr(fd, termios.TCSANOW, self._old_attrs)
        except termios.error:
            pass

    @staticmethod
    def _get_status(fd: int) -> int:
        result = fcntl.ioctl(fd, termios.TIOCMGET, _INT.pack(0))
        return _INT.unpack(result)[0]

    @staticmethod
    def _set_status(fd: int, status: int) -> None:
        fcntl.ioctl(fd, termios.TIOCMSET, _INT.pack(status))

    @property
    def closed(self) -> bool:
        return self._fd is None

    @property
    def fd(self) -> int:
        if self._fd is None:
            raise ValueError("serial port is closed")
        return self._fd

    def close(self) -> None:
        """Drop DTR and RTS, restore the old settings and release the port."""
        if self._fd is None:
            return
        fd, self._fd = self._fd, None
        try:
            status = self._get_status(fd)
            self._set_status(fd, status & ~(termios.TIOCM_DTR | termios.TIOCM_RTS))
        except OSError:
            pass
        self._restore(fd)
        try:
            fcntl.flock(fd, fcntl.LOCK_UN)
        finally:
            os.close(fd)

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; empty when nothing is waiting."""
        try:
            return os.read(self.fd, size)
        except BlockingIOError:
            return b""

    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes taken (0 if busy)."""
        try:
            return os.write(self.fd, data)
        except BlockingIOError:
            return 0

    def flush_rx(self) -> None:
        """Drop received bytes not yet read."""
        termios.tcflush(self.fd, termios.TCIFLUSH)

    def flush_tx(self) -> None:
        """Drop written bytes not yet sent."""
        termios.tcflush(self.fd, termios.TCOFLUSH)

    def flush(self) -> None:
        """Drop pending bytes in both directions."""
        termios.tcflush(self.fd, termios.TCIOFLUSH)

    def _line(self, bit: int) -> bool:
        return bool(self._get_status(self.fd) & bit)

    def dcd(self) -> bool:
        """State of the data carrier detect line."""
        return self._line(termios.TIOCM_CAR)

    def rng(self) -> bool:
        """State of the ring indicator line."""
        return self._line(termios.TIOCM_RNG)

    def cts(self) -> bool:
        """State of the clear to send line."""
        return self._line(termios.TIOCM_CTS)

    def dsr(self) -> bool:
        """State of the data set ready line."""
        return self._line(termios.TIOCM_DSR)

    def _assert_line(self, bit: int, state: bool) -> None:
        status = self._get_status(self.fd)
        status = status | bit if state else status & ~bit
        self._set_status(self.fd, status)

    def assert_dtr(self, state: bool) -> None:
        """Raise or drop the data terminal ready line."""
        self._assert_line(termios.TIOCM_DTR, state)

    def assert_rts(self, state: bool) -> None:
        """Raise or drop the request to send line."""
        self._assert_line(termios.TIOCM_RTS, state)

    def __enter__(self) -> SerialPort:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()