# Copyright (c) 2024 Anthony Towns
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.
"""Derive a fixed-width integer from structured data via sha1.

Any object with a ``write_to(sink)`` method can be hashed; it just calls
``sink.update(...)`` with whatever bytes identify it. The integer is a
truncated sha1 digest, so it is a fingerprint, not a collision-resistant
identifier.
"""

from __future__ import annotations

from typing import Any

import sha1

def int_to_bytes(i : int) -> bytes:
    """Minimal signed big-endian encoding; 0 is the empty string."""
    if i == 0:
        return b''
    return i.to_bytes((i.bit_length() + 8) // 8, 'big', signed=True)

def _chunk(sink : Any, tag : bytes, data : bytes) -> None:
    sink.update(tag + len(data).to_bytes(8, 'big'))
    sink.update(data)

def feed(value : Any, sink : Any) -> None:
    """Write an unambiguous, order-sensitive encoding of value into sink."""
    if hasattr(value, "write_to"):
        value.write_to(sink)
    elif value is None:
        sink.update(b'n')
    elif value is True:
        sink.update(b't')
    elif value is False:
        sink.update(b'f')
    elif isinstance(value, int):
        _chunk(sink, b'i', int_to_bytes(value))
    elif isinstance(value, str):
        _chunk(sink, b's', value.encode('utf8'))
    elif isinstance(value, (bytes, bytearray, memoryview)):
        _chunk(sink, b'b', memoryview(value).tobytes())
    elif isinstance(value, (tuple, list)):
        sink.update(b'l' + len(value).to_bytes(8, 'big'))
        for v in value:
            feed(v, sink)
    else:
        raise TypeError(f"cannot hash {type(value).__name__}")

def int_hash(value : Any, bits : int = 64) -> int:
    if bits <= 0 or bits % 8 != 0 or bits > 8 * sha1.hasher.digest_size:
        raise ValueError(f"bits must be a multiple of 8 in 8..160, not {bits}")
    h = sha1.hasher()
    feed(value, h)
    return int.from_bytes(h.digest()[:bits // 8], 'big')
