"""Byte helpers for IS-IS frames: hex dumps, Fletcher checksums, address parsing."""

from __future__ import annotations

import re
import socket
import struct
import time
from collections.abc import MutableMapping
from itertools import accumulate

try:
    import fcntl
except ImportError:  # not available on every platform
    fcntl = None

FLETCHER_CHECKSUM_VALIDATE = 0xFFFF

# Offsets inside an Ethernet/LLC framed LSP.
_SEQ_START = 37
_SEQ_END = 41
_CHECKSUM_START = 41
_PDU_START = 17
_LSP_ID_OFFSET = 12
_MIN_LSP_FRAME = 43

_SIOCSIFFLAGS = 0x8914
_IFF_UP = 0x1
_IFNAMSIZ = 16

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("latin-1")
    return bytes(data)


def render_printable_chars(data: bytes | bytearray | str) -> str:
    """Return `` | `` followed by the data, non-printable bytes shown as dots."""
    raw = _as_bytes(data)
    return " | " + "".join(chr(b) if 0x20 <= b <= 0x7E else "." for b in raw)


def hex_dump(data: bytes | bytearray | str, show_printable_chars: bool = True) -> str:
    """Format data as rows of eight hex bytes, optionally with a printable column."""
    raw = _as_bytes(data)
    parts: list[str] = []
    for start in range(0, len(raw), 8):
        if start and show_printable_chars:
            parts.append(render_printable_chars(raw[start - 8:start]))
        parts.append("\n")
        parts.append(" ".join(f"{b:02x}" for b in raw[start:start + 8]))
    tail = len(raw) % 8
    if tail and show_printable_chars:
        parts.append("   " * (8 - tail))
        parts.append(render_printable_chars(raw[len(raw) - tail:]))
    parts.append("\n")
    return "".join(parts)


def _c_mod(value: int, modulus: int) -> int:
    """Remainder with the sign of the dividend, as integer division truncates."""
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def fletcher_checksum(buffer: bytearray, offset: int = FLETCHER_CHECKSUM_VALIDATE) -> int:
    """Compute the ISO 8473 Fletcher checksum of ``buffer``.

    With ``offset`` set to ``FLETCHER_CHECKSUM_VALIDATE`` the buffer is left
    untouched and the result is 0 when its embedded checksum is valid.
    Otherwise the two checksum bytes at ``offset`` are computed, written into
    the buffer, and returned as a big-endian 16-bit value.
    """
    length = len(buffer)
    validate = offset == FLETCHER_CHECKSUM_VALIDATE
    if not validate:
        if offset < 0 or offset + 1 >= length:
            raise ValueError("checksum offset must leave room for two bytes inside the buffer")
        buffer[offset] = 0
        buffer[offset + 1] = 0

    c0 = sum(buffer) % 255
    c1 = sum(accumulate(buffer)) % 255

    if validate:
        return (c1 << 8) + c0

    x = _c_mod((length - offset - 1) * c0 - c1, 255)
    if x <= 0:
        x += 255
    y = 510 - c0 - x
    if y > 255:
        y -= 255

    buffer[offset] = x
    buffer[offset + 1] = y
    return (x << 8) | y


def area_to_bytes(area_str: str) -> bytes:
    """Convert a string of hex digit pairs (an IS-IS area) into bytes."""
    if len(area_str) % 2:
        raise ValueError(f"area {area_str!r} has an odd number of hex digits")
    return bytes(
        16 * int(high, 16) + int(low, 16)
        for high, low in zip(area_str[::2], area_str[1::2])
    )


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid address component {text!r}")
    return int(match.group(1))


def ip_to_bytes(ip_str: str) -> bytes:
    """Convert a dotted IPv4 address into four bytes.

    Each component is read like a leading decimal integer and truncated to a
    byte. When fewer than four components are given, the last one is repeated.
    """
    parts = ip_str.split(".")
    return bytes(_leading_int(parts[min(i, len(parts) - 1)]) & 0xFF for i in range(4))


def inc_sequence_num(
    lsdb: MutableMapping[str, bytes], key: str, value: bytes, inc: int
) -> bytes:
    """Store ``value`` under ``key`` with its LSP sequence number raised by ``inc``.

    The LSP checksum is recomputed. The new frame is also returned.
    """
    if len(value) < _MIN_LSP_FRAME:
        raise ValueError(f"LSP frame too short: {len(value)} bytes")
    frame = bytearray(value)
    seq_num = (int.from_bytes(frame[_SEQ_START:_SEQ_END], "big") + inc) & 0xFFFFFFFF
    frame[_SEQ_START:_SEQ_END] = seq_num.to_bytes(4, "big")

    pdu = bytearray(frame[_PDU_START + _LSP_ID_OFFSET:])
    checksum = fletcher_checksum(pdu, _LSP_ID_OFFSET)
    frame[_CHECKSUM_START:_CHECKSUM_START + 2] = checksum.to_bytes(2, "big")

    new_value = bytes(frame)
    lsdb[key] = new_value
    return new_value


def interface_up(ifname: str) -> bool:
    """Set the interface flags to IFF_UP. Return whether the request succeeded."""
    if fcntl is None:
        return False
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError:
        return False
    request = struct.pack("16sh22x", ifname.encode()[:_IFNAMSIZ], _IFF_UP)
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCSIFFLAGS, request)
        except OSError:
            return False
    return True


def time_stamp() -> str:
    """Return the local time as ``[YYYY-MM-DD HH:MM:SS ZONE] ``."""
    return time.strftime("[%Y-%m-%d %H:%M:%S %Z] ", time.localtime())