from .GLOBAL import *
from numba import jit
import numpy as np

# Lane (x, y) of a state with W-byte lanes starts at byte W * (5 * y + x).
# Bytes inside a lane are little-endian and bit 0 of a byte comes first.


def rho_offsets(lane_bits: int) -> np.ndarray:
    """
    Builds the rho rotation table for lanes of `lane_bits` bits.

    Walks (x, y) = (1, 0), (x, y) -> (y, 2x + 3y), assigning the triangular
    offsets (t + 1)(t + 2) / 2. Lane (0, 0) keeps offset 0.

    Returns:
        An int64 array of 25 offsets indexed by 5 * y + x, reduced mod lane_bits.
    """
    offsets = np.zeros(25, dtype=np.int64)
    x, y = 1, 0
    for t in range(RHO_STEPS):
        offsets[5 * y + x] = ((t + 1) * (t + 2) // 2) % lane_bits
        x, y = y, (2 * x + 3 * y) % 5
    return offsets


@jit(nopython=True, cache=JIT_CACHE)
def theta(src, dst, C, D, W):
    """ Algorithm 1: theta"""
    # Step 1: column parities
    for x in range(5):
        for z in range(W):
            C[W * x + z] = (
                  src[W * x + z]
                ^ src[W * (5 + x) + z]
                ^ src[W * (10 + x) + z]
                ^ src[W * (15 + x) + z]
                ^ src[W * (20 + x) + z]
            )

    # Step 2: D[x] = C[x - 1] ^ ROT(C[x + 1], 1)
    for x in range(5):
        left = W * ((x + 4) % 5)
        right = W * ((x + 1) % 5)
        for z in range(W):
            D[W * x + z] = (
                  C[left + z]
                ^ ((C[right + z] << 1) & 0xFF)
                ^ (C[right + (z + W - 1) % W] >> 7)
            )

    # Step 3
    for y in range(5):
        for x in range(5):
            for z in range(W):
                dst[W * (5 * y + x) + z] = src[W * (5 * y + x) + z] ^ D[W * x + z]


@jit(nopython=True, cache=JIT_CACHE)
def rho(src, dst, W, offsets):
    """ Algorithm 2: rho"""
    for lane in range(25):
        base = W * lane
        shift_bytes = offsets[lane] >> 3
        shift_bits = offsets[lane] & 7
        for z in range(W):
            hi = (z + W - shift_bytes) % W
            if shift_bits == 0:
                dst[base + z] = src[base + hi]
            else:
                lo = (hi + W - 1) % W
                dst[base + z] = (
                      ((src[base + hi] << shift_bits) & 0xFF)
                    | (src[base + lo] >> (8 - shift_bits))
                )


@jit(nopython=True, cache=JIT_CACHE)
def pi(src, dst, W):
    """ Algorithm 3: pi"""
    for y in range(5):
        for x in range(5):
            # A'[x, y] = A[(x + 3y) mod 5, x]
            s = W * (5 * x + (x + 3 * y) % 5)
            d = W * (5 * y + x)
            for z in range(W):
                dst[d + z] = src[s + z]


@jit(nopython=True, cache=JIT_CACHE)
def chi(src, dst, W):
    """ Algorithm 4: chi"""
    for y in range(5):
        for x in range(5):
            a = W * (5 * y + x)
            b = W * (5 * y + (x + 1) % 5)
            c = W * (5 * y + (x + 2) % 5)
            for z in range(W):
                dst[a + z] = src[a + z] ^ ((0xFF ^ src[b + z]) & src[c + z])


@jit(nopython=True, cache=JIT_CACHE)
def rc(t):
    """
    Algorithm 5: rc(t)

    LFSR x^8 + x^6 + x^5 + x^4 + 1 seeded with 0x01, clocked t mod 255 times.

    Returns:
        The output bit (0 or 1).
    """
    t = t % 255

    R = 1
    for _ in range(t):
        R <<= 1
        if R & 0x100:
            R ^= 0x171
    return R & 1


@jit(nopython=True, cache=JIT_CACHE)
def iota(src, dst, W, l, i_r):
    """ Algorithm 6: iota"""
    for k in range(25 * W):
        dst[k] = src[k]

    # Bit j of RC sits at lane position 2^j - 1, j = 0..l
    for j in range(l + 1):
        if rc(j + 7 * i_r):
            bit_pos = (1 << j) - 1
            dst[bit_pos >> 3] ^= 1 << (bit_pos & 7)
