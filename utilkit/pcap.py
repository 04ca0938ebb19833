"""A writer for libpcap capture files."""

from __future__ import annotations

import os
import struct

from utilkit.utils import get_time

PCAP_MAGIC_NUM = 0xA1B2C3D4
PCAP_VERSION_MAJOR = 2
PCAP_VERSION_MINOR = 4
PCAP_CACHE_SIZE = 1 << 12

_FILE_HEADER = struct.Struct("=IHHIiII")
_RECORD_HEADER = struct.Struct("=IIII")


class PcapWriter:
    """Write packets to a pcap file, buffering up to 4 KiB between writes."""

    def __init__(
        self, path: str | os.PathLike, max_packet_size: int, link_type: int
    ) -> None:
        self.num_packets = 0
        self._cache = bytearray()
        self._file = open(path, "wb")
        try:
            self._file.write(
                _FILE_HEADER.pack(
                    PCAP_MAGIC_NUM,
                    PCAP_VERSION_MAJOR,
                    PCAP_VERSION_MINOR,
                    0,
                    0,
                    max_packet_size,
                    link_type,
                )
            )
        except BaseException:
            self._file.close()
            raise

    @property
    def closed(self) -> bool:
        return self._file.closed

    @property
    def offset(self) -> int:
        """Bytes held in the cache and not yet written out."""
        return len(self._cache)

    def _flush(self) -> None:
        self._file.write(self._cache)
        self._cache.clear()
        self._file.flush()

    def add(self, data: bytes) -> None:
        """Record one packet stamped with the current time."""
        if self.closed:
            raise ValueError("capture is already stopped")
        data = bytes(data)
        record_size = _RECORD_HEADER.size + len(data)
        if record_size > PCAP_CACHE_SIZE:
            raise ValueError("packet does not fit into the capture cache")
        if len(self._cache) + record_size > PCAP_CACHE_SIZE:
            self._flush()
        sec, usec = get_time()
        self._cache += _RECORD_HEADER.pack(
            sec & 0xFFFFFFFF, usec, len(data), len(data)
        )
        self._cache += data
        self.num_packets += 1

    def stop(self) -> None:
        """Write out cached packets and close the file."""
        if self.closed:
            return
        try:
            self._flush()
        finally:
            self._file.close()

    def __enter__(self) -> PcapWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()