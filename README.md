# tronwallet

Small helpers for working with TRON wallet data: hex conversion, big-endian
256-bit words, decoding string values that smart contracts return, and
rendering protobuf messages as JSON. Everything lives in `tronwallet.utils`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from tronwallet.utils import (
    bytes_to_hex,
    hex_to_bytes,
    uint256_from_buffer,
    parse_string_ret,
    current_time_millis,
    is_big_endian,
    random_bytes,
    dump_message,
)

bytes_to_hex(b"\x01\xab")        # '01ab'
hex_to_bytes("01AB")             # b'\x01\xab'
hex_to_bytes("01a")              # b'\x01' (a trailing unpaired digit is ignored)

word = (42).to_bytes(32, "big")
uint256_from_buffer(word)        # 42
uint256_from_buffer(b"\0" * 8 + word, 8)  # 42

# An ABI-encoded string result: offset word, length word, then the data.
ret = (
    (32).to_bytes(32, "big")
    + (5).to_bytes(32, "big")
    + b"hello".ljust(32, b"\0")
)
parse_string_ret(ret)            # 'hello'

current_time_millis()            # milliseconds since the Unix epoch
is_big_endian()                  # True on a big-endian host
random_bytes(16)                 # 16 bytes from os.urandom
```

## Functions

- `bytes_to_hex(data)` – lower-case hexadecimal text of `data`.
- `hex_to_bytes(hex_string)` – decodes pairs of hex digits of either case.
  A trailing unpaired digit is dropped; any other character raises `ValueError`.
- `current_time_millis()` – the current time in whole milliseconds since the epoch.
- `is_big_endian()` – whether the host byte order is big-endian.
- `random_bytes(length)` – `length` random bytes from the operating system;
  a negative length raises `ValueError`.
- `dump_message(message)` – a protobuf message as compact JSON with camelCase
  field names.
- `uint256_from_buffer(buf, offset=0)` – the big-endian unsigned 256-bit word
  at `offset`. A negative offset, or fewer than 32 bytes from `offset`, raises
  `ValueError`.
- `parse_string_ret(buf, arg_offset=0)` – reads the offset word at
  `arg_offset`, then the length word it points to, then that many bytes of
  string data. The text stops at the first NUL byte and is decoded as UTF-8
  with invalid sequences replaced. Data running past the end of the buffer
  raises `ValueError`.

## What this package does not do

It is a set of helpers only. It holds no keys or accounts, builds and signs
no transactions, talks to no TRON node, and has no command-line or graphical
interface.