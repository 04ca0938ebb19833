"""Utilities: strings, containers, files, processes, logging, sockets, work queues, pcap and serial ports."""

__version__ = "0.1.0"