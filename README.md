# isismock

Pieces for building an IS-IS mocking and testing tool in Python. The package
has no runtime dependencies beyond the standard library.

- `isismock.utils`: hex dumps, the ISO 8473 Fletcher checksum, area and IPv4
  address conversion, LSP sequence number bumping with checksum
  recomputation, bringing an interface up, and time stamps for log lines.
- `isismock.tester`: `Tester`, a background thread that alternately sends two
  sample databases built from a link-state database and a test database,
  counting its cycles in `TesterStats`.
- Command-line helpers: quote-aware line splitting (`isismock.split`),
  common-prefix completion (`isismock.commonprefix`), command history
  (`isismock.history`), a task scheduler (`isismock.scheduler`), key event
  decoding and keyboard readers (`isismock.inputdevice`,
  `isismock.linuxkeyboard`, `isismock.winkeyboard`) and ANSI colour output
  (`isismock.rang`, `isismock.colorprofile`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## LSP utilities

```python
from isismock.utils import area_to_bytes, ip_to_bytes, hex_dump, time_stamp

area = area_to_bytes("490001")          # b'\x49\x00\x01'
address = ip_to_bytes("10.0.0.1")       # b'\x0a\x00\x00\x01'
print(hex_dump(area + address, True))   # rows of 8 hex bytes plus a printable column
print(time_stamp() + "LSDB loaded")     # "[YYYY-MM-DD HH:MM:SS ZONE] LSDB loaded"
```

- `fletcher_checksum(buffer, offset)` computes the checksum of a `bytearray`,
  writes its two bytes at `offset` and returns them as a big-endian 16-bit
  value. Called with `FLETCHER_CHECKSUM_VALIDATE` as the offset it leaves the
  buffer untouched and returns 0 for a buffer whose checksum is valid. An
  offset without room for two bytes raises `ValueError`.
- `inc_sequence_num(lsdb, key, value, inc)` takes an Ethernet-framed LSP
  (`bytes`, at least 43 long), raises its sequence number by `inc`,
  recomputes the LSP checksum, stores the result in `lsdb[key]` and returns
  it.
- `area_to_bytes` raises `ValueError` on an odd number of hex digits.
- `interface_up(ifname)` sets the interface flags to up and returns whether
  the request succeeded (it needs the privileges to do so).

## Replaying an LSDB

LSDB mappings map string keys (LSP identifiers, at least six characters) to
framed LSPs as `bytes`.

```python
from isismock.tester import Tester, build_test_samples, send_db

def send(frame: bytes) -> None:
    ...  # hand the frame to your transport

with Tester(lsdb, send, lambda: True, testdb, test_interval=1000) as tester:
    ...  # samples are sent alternately, once a second, until the block ends
print(tester.stats.cycles)
```

The third argument is a callable; a cycle sends nothing while it returns
false. `build_test_samples(lsdb, testdb)` returns the two samples the tester
alternates between, and `send_db(lsdb, send)` sends every LSP of one
database once, bumping each stored sequence number by one.

## Command-line helpers

```python
from isismock.split import split
from isismock.commonprefix import common_prefix
from isismock.history import VolatileHistoryStorage
from isismock.scheduler import QueueScheduler

split(' first   "foo bar"  last')              # ['first', 'foo bar', 'last']
common_prefix(["prefix_foo", "prefix_bar"])    # 'prefix_'

history = VolatileHistoryStorage(100)          # keeps the 100 most recent
history.store(["show lsdb", "clear stats"])
history.commands()                             # ['show lsdb', 'clear stats']

scheduler = QueueScheduler()
scheduler.post(lambda: print("hello"))
scheduler.poll_one()                           # runs the task, returns True
```

`QueueScheduler.run()` runs posted tasks until `stop()` is called;
`exec_one()` waits for a single task. Tasks may be posted from any thread.

Keyboards deliver `(KeyType, str)` pairs to the handler given to
`register()`, through a scheduler:

```python
from isismock.linuxkeyboard import LinuxKeyboard

with LinuxKeyboard(scheduler) as keyboard:     # reads standard input
    keyboard.register(print)
    scheduler.run()
```

`LinuxKeyboard` puts a terminal in non-canonical mode without echo while open.
`WinKeyboard` reads the Windows console and raises `OSError` elsewhere. Each
module's `decode_key(get_char)` turns raw key codes into key events.

## Colours

```python
import sys
from isismock.rang import ColorWriter, Fg, Style
from isismock.colorprofile import set_color, before_prompt, after_prompt

writer = ColorWriter(sys.stdout)
writer.write(Fg.GREEN, "ok", Style.RESET, "\n")

set_color()
before_prompt(writer)
writer.write("isis> ")
after_prompt(writer)
```

A `ColorWriter` emits escape sequences only when colours were forced with
`Control.FORCE_COLOR` or when `TERM` names a colour terminal and the stream is
a terminal.

## What the package does not do

It does not open raw sockets, send or receive IS-IS packets, run an adjacency
state machine or keep a live LSDB; the `send` function and the databases given
to `Tester` come from the caller. There is no interactive shell, menu system
or command to run: the command-line helpers are building blocks only.