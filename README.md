# utilkit

Small general-purpose utilities for Python 3.10 and later, with no
dependencies beyond the standard library. Most modules work on any POSIX
system; `utilkit.procutils` reads `/proc` and so finds processes only on
Linux, and `utilkit.serialport` needs `termios` and `fcntl`.

## Modules

### `utilkit.utils`

- `round_up_pow2(value)`: round a 32-bit value up to a power of two
  (0 and values above 2**31 wrap to 0).
- `num_digits_in_number(num)`: decimal digit count; 0 has none.
- `randint(limit)`: random number in `0..limit` inclusive.
- `u8_bit_reverse`, `u16_bit_reverse`, `u32_bit_reverse`.
- `char_is_space`, `char_is_digit`, `char_is_alpha`: accept a character or
  its code.
- `hexdump(data, title="")`: writes a hex and ASCII dump to stdout and
  returns it; raises `ValueError` for empty data.
- `usec_now`, `usec_since`, `millis_now`, `millis_since`, `get_time()`
  (returns `(seconds, microseconds)`) and `iso8601_utc_datetime()`
  (`YYYY-MM-DDThh:mm:ssZ`).
- `dump_trace()`: writes the caller's stack to stdout and returns it.

### `utilkit.byteorder`

`bswap16`, `bswap24`, `bswap32`, `bswap48`, `bswap64`, and
`cpu_to_le`, `le_to_cpu`, `cpu_to_be`, `be_to_cpu`, each taking
`(value, bits)` with `bits` one of 16, 24, 32, 48 or 64 (`ValueError`
otherwise).

### `utilkit.entropy`

`get_random_bytes(length)` returns secure random bytes from the operating
system; more than 256 bytes at once raises `OverflowError`.

### `utilkit.strutils`

- `atohstr(data)` gives upper-case hex; `hstrtoa(hstr)` parses it back and
  raises `ValueError` on empty, odd-length or non-hex input.
- `safe_atoi(text)`: `atoi`-like parsing that raises `ValueError` when the
  text does not start with a number.
- `rstrip`, `lstrip`, `strip` (spaces only), `chomp` (trailing CR/LF),
  `trim_suffix`, `remove_all`, `safe_strncpy`, `to_upper`, `to_lower`.
- `split_string(text, sep)` splits on any character of `sep`, drops empty
  tokens and raises `ValueError` when there are none; `str_sep` returns
  `(token, rest)`; `str_sep_count` counts tokens; `strcntchr`, `strisempty`.
- Hashes: `hash32_djb2`, `hash32_fnv`, `poly_hash`, each with an optional
  `length` (negative means the whole text).

### `utilkit.strlib`

`BoundedString(max_len, text="", allocated=True)` holds at most `max_len`
characters. `copy(mode, text)` and `printf(mode, fmt, *args)` take a mode:
`"c"` writes over the contents, `"a"` appends, and an `f` suffix (`"cf"`,
`"af"`) fills what fits instead of raising `OverflowError`. `printf` needs
the result to stay below `max_len`. Also `resize`, `clone`, `merge`
(appends another string, growing if needed, and empties it) and `flush`.

### `utilkit.hashmap`

`HashMap` maps string keys to values with djb2 hashing and chaining; the
capacity starts at 32 and doubles once the load passes 0.8.
`insert(key, value)` returns the key's hash; `get` and `delete` take a key
or a `key_hash` and return `None` when nothing is found. `clear(callback)`
calls `callback(key, value)` for every entry. It supports `len()`,
iteration over keys and `items()`.

### `utilkit.linkedlist`

`DoublyLinkedList` of `Node` and `SinglyLinkedList` of `SNode` link the
caller's node objects (each with a `value`). Both offer `append`,
`appendleft`, `pop`, `popleft`, `remove_node` and `insert_node`; the doubly
linked list adds `find_node`, `remove_nodes(start, end)` and
`insert_nodes(after, start, end)`, checked with `check_links(first, last)`.
Popping an empty list raises `IndexError`.

### `utilkit.queue_stack`

`Queue` (`enqueue`, `dequeue`, `peek_first`, `peek_last`) of `Node` objects
and `Stack` (`push`, `pop`, `top`) of `SNode` objects; empty ones raise
`IndexError`.

### `utilkit.filo`

`Filo(max_size)`: a bounded stack with `push` (`OverflowError` when full),
`pop` and `peek` (`IndexError` when empty), `reset`, `len()` and
`free_space()`.

### `utilkit.slab`

`SlabPool(slab_size, blob_size)` carves equal blocks out of one buffer.
`alloc()` returns a `Slab` whose `data` is a writable `memoryview`, or
raises `MemoryError` when all blocks are leased; `free(block)` raises
`ValueError` for a block from another pool.

### `utilkit.fileutils`

`read_binary_file`, `write_binary_file`, `file_read_all(stream)`,
`file_size(stream)` (rewinds the stream), `path_join`, `fs_path_walk(root)`
(every non-directory path below `root`, like `find . -type f`),
`dir_exists`, `file_exists`, `is_regular_file`, `get_working_directory` and
`path_extract(path)` returning `(directory, basename)` of a regular file's
resolved path.

### `utilkit.procutils`

`write_pid(path)` / `read_pid(path)`, `o_redirect(mode, path)` (bit 0
redirects stdout, bit 1 stderr; mode 3 without a path closes stdin, stdout
and stderr), `parse_proc_cmdline(pid, pos)`, and `pid_of(exe_name, omit)` /
`any_pid_of(exe_name)`, which return a PID or `None`. Scripts and kernel
threads are not found.

### `utilkit.pcap`

`PcapWriter(path, max_packet_size, link_type)` writes a libpcap file
(headers in host byte order), stamping each `add(data)` with the current
time and buffering up to 4 KiB between writes. A packet larger than that
raises `ValueError`. Use it as a context manager or call `stop()`.

### `utilkit.logger`

`Logger(log_level, name, root_path, puts, file, callback, flags)` with
`LogLevel` from `EMERG` to `DEBUG`. A puts function, a file or a callback
is required. Lines look like `NAME: 2024-01-01T00:00:00Z     file.c:12
[INFO ] message`, are cut to 191 characters and end with a newline. Lines
above the logger's level are dropped (and `log` returns 0); with a callback
every message goes to it without a prefix. Colors are written only to a
file that is a terminal. `log(level, file, line, fmt, *args)`,
`get_default_logger()` and `set_default_logger()` work on a module-wide
default logger that prints to stdout.

### `utilkit.sockutils`

`sock_unix_listen`, `sock_unix_connect`, `sock_stream_connect(host, port)`
(IPv4 addresses only), `sock_stream_listen(port, nr_clients)`, `sock_wait`
(accept) and `sock_shutdown`; they return `socket.socket` objects.

### `utilkit.workqueue`

`WorkQueue(num_workers)` runs `Work(work_fn, arg, complete_fn)` items on
threads. A `work_fn` returning `WORK_YIELD` (positive) is queued again;
`WORK_DONE` or `WORK_ERR` completes the work and calls `complete_fn(work)`.
An exception from `work_fn` completes the work and is kept in
`work.error`. Also `backlog_count()`, `cancel_work`, `work_is_complete` and
`destroy()`, which marks queued work complete and stops the workers; it is
also a context manager.

### `utilkit.serialport`

`SerialPort(device, baud, mode)` opens and exclusively locks a serial
device in raw, non-blocking mode; `mode` is a string like `"8N1"` or
`"8N1F"` (hardware flow control), parsed by `parse_serial_mode`.
`baud_constant` accepts 50 to 230400 baud. The port offers `read`, `write`,
`flush_rx`, `flush_tx`, `flush`, the line states `dcd`, `rng`, `cts`,
`dsr`, and `assert_dtr` / `assert_rts`; `close()` drops DTR and RTS and
restores the old settings.

## Example

```python
from utilkit.strutils import atohstr, hstrtoa
from utilkit.hashmap import HashMap
from utilkit.pcap import PcapWriter

assert atohstr(b"\xca\xfe") == "CAFE"
assert hstrtoa("cafe") == b"\xca\xfe"

table = HashMap()
table.insert("answer", 42)
assert table.get("answer") == 42

with PcapWriter("capture.pcap", 65535, 1) as cap:
    cap.add(b"\x00\x01\x02\x03")
```

## What it does not do

utilkit is a library only: it installs no command-line programs.

## Tests

The tests in `tests/` use pytest, which the `test` extra installs.