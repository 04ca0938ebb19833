import fcntl
import os
import termios

import pytest

from utilkit.serialport import (
    Parity,
    SerialMode,
    SerialPort,
    baud_constant,
    parse_serial_mode,
)


def test_parse_8n1():
    mode = parse_serial_mode("8N1")
    assert mode == SerialMode(8, Parity.NONE, 1, False)


def test_parse_lowercase_parity_and_flow():
    mode = parse_serial_mode("7o2f")
    assert mode.data_bits == 7
    assert mode.parity is Parity.ODD
    assert mode.stop_bits == 2
    assert mode.flow_control is True


def test_parse_other_parity_char_is_even():
    assert parse_serial_mode("6E1").parity is Parity.EVEN
    assert parse_serial_mode("5X1").parity is Parity.EVEN


def test_fourth_char_other_than_f_means_no_flow_control():
    assert parse_serial_mode("8N1X").flow_control is False


@pytest.mark.parametrize("mode", ["8N", "8N1FF", "", "9N1", "xN1"])
def test_parse_invalid_modes(mode):
    with pytest.raises(ValueError):
        parse_serial_mode(mode)


def test_cflag_8n1():
    mode = parse_serial_mode("8N1")
    assert mode.cflag == termios.CS8
    assert mode.iflag == termios.IGNPAR


def test_cflag_parity_and_stop_bits():
    mode = parse_serial_mode("7E2")
    assert mode.cflag == termios.CS7 | termios.PARENB | termios.CSTOPB
    assert mode.iflag == termios.INPCK


def test_cflag_odd_parity_sets_parodd():
    mode = parse_serial_mode("8O1")
    assert mode.cflag == termios.CS8 | termios.PARENB | termios.PARODD
    assert mode.iflag == termios.INPCK


@pytest.mark.parametrize("baud", [9600, 115200, 50, 230400])
def test_baud_constant_matches_termios(baud):
    assert baud_constant(baud) == getattr(termios, f"B{baud}")


@pytest.mark.parametrize("baud", [0, 9601, 460800, -9600])
def test_baud_constant_rejects_unsupported(baud):
    with pytest.raises(ValueError):
        baud_constant(baud)


def test_open_with_invalid_baud_raises_value_error(tmp_path):
    with pytest.raises(ValueError):
        SerialPort(tmp_path / "missing", 12345, "8N1")


def test_open_with_invalid_mode_raises_value_error(tmp_path):
    with pytest.raises(ValueError):
        SerialPort(tmp_path / "missing", 9600, "8N")


def test_open_missing_device_raises_os_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        SerialPort(tmp_path / "missing", 9600, "8N1")


def test_open_non_tty_raises_and_releases_lock(tmp_path):
    path = tmp_path / "not-a-tty"
    path.write_bytes(b"")
    with pytest.raises(OSError):
        SerialPort(path, 9600, "8N1")
    fd = os.open(path, os.O_RDWR)
    try:
        fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
        fcntl.flock(fd, fcntl.LOCK_UN)
        locked = True
    except OSError:
        locked = False
    finally:
        os.close(fd)
    assert locked is True


def test_open_locked_device_raises(tmp_path):
    path = tmp_path / "locked"
    path.write_bytes(b"")
    fd = os.open(path, os.O_RDWR)
    try:
        fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
        with pytest.raises(OSError, match="locked"):
            SerialPort(path, 9600, "8N1")
    finally:
        os.close(fd)