# Copyright (c) 2024 Anthony Towns
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.
"""Pure-python SHA1 with a hashlib-ish interface.

Not a security boundary: SHA1 collisions are practical. Use this for
compatibility (content ids, legacy protocols), not for integrity against
an adversary.
"""

import struct

INITIAL_STATE = (0x67452301, 0xefcdab89, 0x98badcfe, 0x10325476, 0xc3d2e1f0)

K1 = 0x5a827999
K2 = 0x6ed9eba1
K3 = 0x8f1bbcdc
K4 = 0xca62c1d6

MASK = 0xffffffff

# total bit length is encoded in 64 bits
MAX_SIZE = 1 << 61

def rol(x, n):
    return ((x << n) | (x >> (32 - n))) & MASK

def compress(h0, h1, h2, h3, h4, block):
    """Mix one 64 byte block into the state, returning the new state."""
    assert len(block) == 64

    w = list(struct.unpack(">16I", block))
    for t in range(16, 80):
        w.append(rol(w[t-3] ^ w[t-8] ^ w[t-14] ^ w[t-16], 1))

    a, b, c, d, e = h0, h1, h2, h3, h4
    for t in range(80):
        if t < 20:
            f, k = d ^ (b & (c ^ d)), K1
        elif t < 40:
            f, k = b ^ c ^ d, K2
        elif t < 60:
            f, k = (b & c) | (d & (b | c)), K3
        else:
            f, k = b ^ c ^ d, K4
        tmp = (rol(a, 5) + f + e + k + w[t]) & MASK
        a, b, c, d, e = tmp, a, rol(b, 30), c, d

    return ((h0 + a) & MASK, (h1 + b) & MASK, (h2 + c) & MASK,
            (h3 + d) & MASK, (h4 + e) & MASK)

def serialize(state):
    return struct.pack(">5I", *state)

def to_hex(raw):
    return "".join("0123456789abcdef"[x >> 4] + "0123456789abcdef"[x & 15] for x in raw)

def pad(pending, size):
    """Final block(s): pending bytes, 0x80, zeros, 64-bit bit length."""
    assert len(pending) < 64
    zeros = b"\x00" * ((55 - len(pending)) & 63)
    return pending + b"\x80" + zeros + (8 * size).to_bytes(8, 'big')

class hasher:
    name = "sha1"
    digest_size = 20
    block_size = 64

    def __init__(self, data=None):
        self.reset()
        if data is not None:
            self.update(data)

    def reset(self):
        self.state = INITIAL_STATE
        self.pending = b''
        self.size = 0

    def copy(self):
        h = hasher()
        h.state, h.pending, h.size = self.state, self.pending, self.size
        return h

    def update(self, data):
        # rejects str and int, accepts anything exposing the buffer protocol
        data = memoryview(data).tobytes()
        if self.size + len(data) >= MAX_SIZE:
            raise OverflowError("sha1 message length exceeds 2**61 bytes")
        self.size += len(data)

        data = self.pending + data
        end = len(data) - (len(data) % 64)
        state = self.state
        for i in range(0, end, 64):
            state = compress(*state, data[i:i+64])
        self.state = state
        self.pending = data[end:]

    def digest(self):
        # works on a snapshot; the hasher can keep absorbing afterwards
        data = pad(self.pending, self.size)
        state = self.state
        for i in range(0, len(data), 64):
            state = compress(*state, data[i:i+64])
        return serialize(state)

    def hexdigest(self):
        return to_hex(self.digest())

def digest(data):
    return hasher(data).digest()

def hexdigest(data):
    return hasher(data).hexdigest()
