"""Byte, hex, time and ABI helpers shared across the wallet."""

from __future__ import annotations

import json
import os
import string
import sys
import time

from google.protobuf import json_format
from google.protobuf.message import Message

_WORD_SIZE = 32
_HEX_DIGITS = frozenset(string.hexdigits)


def bytes_to_hex(data: bytes) -> str:
    """Return the lower-case hexadecimal form of ``data``."""
    return bytes(data).hex()


def hex_to_bytes(hex_string: str) -> bytes:
    """Decode pairs of hex digits into bytes.

    A trailing unpaired digit is ignored. Upper and lower case digits are
    both accepted; any other character raises ``ValueError``.
    """
    usable = hex_string[: len(hex_string) - len(hex_string) % 2]
    bad = next((ch for ch in usable if ch not in _HEX_DIGITS), None)
    if bad is not None:
        raise ValueError(f"invalid hex character {bad!r} in {hex_string!r}")
    return bytes.fromhex(usable)


def current_time_millis() -> int:
    """Return milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def is_big_endian() -> bool:
    """Return True when the host stores integers most significant byte first."""
    return sys.byteorder == "big"


def random_bytes(length: int) -> bytes:
    """Return ``length`` bytes from the operating system's random source."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return os.urandom(length)


def dump_message(message: Message) -> str:
    """Render a protobuf message as compact JSON with camelCase field names."""
    return json.dumps(json_format.MessageToDict(message), separators=(",", ":"))


def uint256_from_buffer(buf: bytes, offset: int = 0) -> int:
    """Read a big-endian unsigned 256-bit word starting at ``offset``."""
    if offset < 0:
        raise ValueError(f"offset must not be negative, got {offset}")
    end = offset + _WORD_SIZE
    if end > len(buf):
        raise ValueError(
            f"need {_WORD_SIZE} bytes at offset {offset}, buffer holds {len(buf)}"
        )
    return int.from_bytes(bytes(buf[offset:end]), "big")


def parse_string_ret(buf: bytes, arg_offset: int = 0) -> str:
    """Decode an ABI-encoded dynamic string from a contract call result.

    The word at ``arg_offset`` points to a length word, which is followed by
    the string bytes. The text stops at the first NUL byte.
    """
    data_offset = uint256_from_buffer(buf, arg_offset)
    length = uint256_from_buffer(buf, data_offset)
    start = data_offset + _WORD_SIZE
    end = start + length
    if end > len(buf):
        raise ValueError(
            f"string of {length} bytes at offset {start} exceeds buffer of {len(buf)}"
        )
    raw = bytes(buf[start:end]).split(b"\0", 1)[0]
    return raw.decode("utf-8", errors="replace")