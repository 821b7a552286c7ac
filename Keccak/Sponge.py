import logging

import numpy as np

from .GLOBAL import *
from .Errors import InvalidParameter
from .Permutation import keccak_p

logger = logging.getLogger(__name__)


def pad10star1(X: int, M: int, b: int = 0) -> bytes:
    """
    (Algorithm 9) pad10*1, byte-aligned.

    Args:
        X: The block size in bytes; the padded length is a multiple of X.
        M: The length in bytes of the data to be padded.
        b: The number of suffix bits already pending in byte M (0..7).

    Returns:
        Just the padding bytes. The first one carries the leading "1" bit
        right after the pending suffix bits, the last one carries the
        closing "1" bit (0x80).

    Raises:
        InvalidParameter: If X <= 0, M < 0 or b is not in 0..7.
    """
    if X <= 0:
        raise InvalidParameter(f"Block size must be positive, got {X}.")
    if M < 0:
        raise InvalidParameter(f"Data length must be non-negative, got {M}.")
    if not 0 <= b <= 7:
        raise InvalidParameter(f"Suffix bit length must be in 0..7, got {b}.")

    # With 7 suffix bits the leading "1" fills byte M, so the closing "1"
    # needs a byte of its own.
    need = M + 1 if b < 7 else M + 2
    total = -(-need // X) * X

    padding = bytearray(total - M)
    padding[0] |= 1 << b
    padding[-1] |= PAD_LAST_BYTE
    return bytes(padding)


def chunks(data, size: int):
    """Yields consecutive `size`-byte views of `data`; a short tail is dropped."""
    view = memoryview(data)
    for start in range(0, len(view) - size + 1, size):
        yield view[start:start + size]


class Sponge:
    """
    (Algorithm 8) SPONGE[f, pad, r].

    Calling the sponge with (N, d, b) returns the first d // 8 output bytes
    for the input N whose last byte holds b pending suffix bits (b = 0 means
    N is plain bytes).
    """

    def __init__(self, f, pad, r: int):
        if not 0 < r < f.width_bits:
            raise InvalidParameter(f"Rate must satisfy 0 < r < {f.width_bits}, got {r}.")
        if r % 8 != 0:
            raise InvalidParameter(f"Rate must be a multiple of 8 bits, got {r}.")

        self.f = f
        self.pad = pad
        self.rate_bits = r
        self.rate_bytes = r >> 3
        self.capacity_bits = f.width_bits - r

        logger.debug(f"Initialized sponge over {f!r} with rate {r}, capacity {self.capacity_bits}.")

    def __repr__(self):
        return f"Sponge({self.f!r}, rate_bits={self.rate_bits})"

    def _padded(self, N: bytes, b: int) -> bytearray:
        """Returns N || pad(R, m, b), the suffix byte (if any) OR-ed with the first padding byte."""
        R = self.rate_bytes
        m = len(N) - (1 if b else 0)

        padding = self.pad(R, m, b)
        P = bytearray(m + len(padding))
        P[:len(N)] = N
        for i, p in enumerate(padding):
            P[m + i] |= p

        if len(P) % R != 0:
            raise InvalidParameter(
                f"Padding rule produced {len(P)} bytes, not a multiple of the rate ({R} bytes)."
            )
        return P

    def __call__(self, N, d: int, b: int = 0) -> bytes:
        if d < 0:
            raise InvalidParameter(f"Output length must be non-negative, got {d} bits.")
        if not 0 <= b <= 7:
            raise InvalidParameter(f"Suffix bit length must be in 0..7, got {b}.")

        N = bytes(N)
        if b != 0:
            if len(N) == 0:
                raise InvalidParameter("Input must end with the suffix byte when b != 0.")
            if N[-1] >> b:
                raise InvalidParameter(f"Suffix byte {N[-1]:#04x} does not fit in {b} bits.")

        D = d >> 3
        R = self.rate_bytes
        P = self._padded(N, b)

        f = self.f
        with f.lock:
            f.clear()

            # Absorb
            for block in chunks(P, R):
                f.state[:R] ^= np.frombuffer(block, dtype=np.uint8)
                f()

            # Squeeze
            Z = bytearray()
            while True:
                Z += f.state[:R].tobytes()
                if len(Z) >= D:
                    break
                f()

        logger.debug("Absorbed %d blocks, squeezed %d bytes.", len(P) // R, D)
        return bytes(Z[:D])


def sponge(f, pad, r: int) -> Sponge:
    """Returns a sponge function over permutation f, padding rule pad and rate r (bits)."""
    return Sponge(f, pad, r)


def keccak_c(c: int) -> Sponge:
    """
    KECCAK[c] = SPONGE[KECCAK-p[1600, 24], pad10*1, 1600 - c].

    Args:
        c: The capacity in bits.

    Raises:
        InvalidParameter: If c is not in 0 < c < 1600 or not a multiple of 8.
    """
    if not 0 < c < DEFAULT_WIDTH:
        raise InvalidParameter(f"Capacity must satisfy 0 < c < {DEFAULT_WIDTH}, got {c}.")
    if c % 8 != 0:
        raise InvalidParameter(f"Capacity must be a multiple of 8 bits, got {c}.")
    return sponge(keccak_p(DEFAULT_WIDTH, DEFAULT_ROUNDS), pad10star1, DEFAULT_WIDTH - c)
