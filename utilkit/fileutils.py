"""File and path helpers: whole-file I/O, path joining and tree walks."""

from __future__ import annotations

import os
from typing import IO, AnyStr

PATH_SEP = "/"


def file_size(stream: IO) -> int:
    """Return the size of an open seekable stream and rewind it to the start."""
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0, os.SEEK_SET)
    return size


def read_binary_file(path: str | os.PathLike) -> bytes:
    """Return the whole contents of the file at ``path``."""
    with open(path, "rb") as fp:
        return fp.read()


def write_binary_file(path: str | os.PathLike, data: bytes) -> None:
    """Replace the file at ``path`` with ``data``."""
    with open(path, "wb") as fp:
        fp.write(data)


def file_read_all(stream: IO[AnyStr]) -> AnyStr:
    """Read ``stream`` up to end of file and return everything read.

    Raises ValueError when no stream is given and OSError when the
    stream cannot deliver its data up to end of file.
    """
    if stream is None:
        raise ValueError("no stream to read from")
    data = stream.read()
    if data is None:
        raise OSError("stream did not reach end of file")
    return data


def path_join(first: str | None, second: str) -> str:
    """Join two path parts with a single separator.

    An absolute ``second`` is returned as is; a missing or empty ``first``
    yields ``second``.
    """
    if second is None:
        raise ValueError("second path part is required")
    if second.startswith(PATH_SEP):
        return second
    if not first:
        return second
    if first.endswith(PATH_SEP):
        return first + second
    return first + PATH_SEP + second


def fs_path_walk(root_dir: str) -> list[str]:
    """Return every path below ``root_dir`` that is not a directory.

    Behaves like ``find . -type f``; the root must exist and every
    directory must be readable, otherwise OSError is raised.
    """
    files: list[str] = []
    pending = [root_dir]
    while pending:
        root = pending.pop()
        with os.scandir(root) as entries:
            for entry in entries:
                path = path_join(root, entry.name)
                if entry.is_dir(follow_symlinks=False):
                    pending.append(path)
                else:
                    files.append(path)
    return files


def dir_exists(path: str | os.PathLike) -> bool:
    """True when ``path`` names an existing directory."""
    return os.path.isdir(path)


def get_working_directory() -> str:
    """Return the current working directory."""
    return os.getcwd()


def is_regular_file(path: str | os.PathLike) -> bool:
    """True when ``path`` names a regular file (symlinks are followed)."""
    return os.path.isfile(path)


def file_exists(path: str | os.PathLike) -> bool:
    """True when ``path`` exists."""
    return os.access(path, os.F_OK)


def path_extract(path: str | os.PathLike) -> tuple[str, str]:
    """Return ``(directory, basename)`` of the resolved path of a regular file.

    Raises ValueError when ``path`` is not a regular file.
    """
    if not path or not is_regular_file(path):
        raise ValueError(f"not a regular file: {path!r}")
    real = os.path.realpath(path)
    return os.path.dirname(real), os.path.basename(real)