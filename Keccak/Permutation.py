import logging
import threading

import numpy as np

from .GLOBAL import *
from .Errors import InvalidParameter
from .StepMappings import theta, rho, pi, chi, iota, rho_offsets

logger = logging.getLogger(__name__)


class KeccakP:
    """
    (Algorithm 7) KECCAK-p[b, n_r] with its own double-buffered state.

    Every step mapping reads the active buffer, writes the other one and then
    flips the active index, so steps never read what they are writing.
    Calling the object permutes the state in place.

    A single instance is not safe to drive from two sponge calls at once;
    every `Sponge` built over it holds `lock` for a whole digest computation.
    """

    def __init__(self, width_bits: int, rounds: int = None):
        if width_bits not in SUPPORTED_WIDTHS:
            if width_bits in KECCAK_WIDTHS:
                raise InvalidParameter(
                    f"Width {width_bits} has sub-byte lanes; supported widths are {SUPPORTED_WIDTHS}."
                )
            raise InvalidParameter(f"Unsupported permutation width: {width_bits}.")
        self.width_bits = width_bits
        self.width_bytes = width_bits >> 3
        self.lane_bytes = self.width_bytes // 25
        # l = log2(w), w = lane width in bits
        self.l = (self.lane_bytes << 3).bit_length() - 1

        # None selects the full KECCAK-f schedule
        if rounds is None:
            rounds = 12 + 2 * self.l
        if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds < 0:
            raise InvalidParameter(f"Number of rounds must be a non-negative integer, got {rounds!r}.")
        self.rounds = rounds

        # The last n_r rounds of the 12 + 2l schedule
        last_round = 12 + 2 * self.l
        self._round_indices = range(last_round - rounds, last_round)

        self._offsets = rho_offsets(self.lane_bytes << 3)
        self._buffers = (
            np.zeros(self.width_bytes, dtype=np.uint8),
            np.zeros(self.width_bytes, dtype=np.uint8),
        )
        self._active = 0
        self._C = np.zeros(5 * self.lane_bytes, dtype=np.uint8)
        self._D = np.zeros(5 * self.lane_bytes, dtype=np.uint8)
        self.lock = threading.Lock()

        logger.debug(f"Initialized {self!r} over rounds {last_round - rounds}..{last_round - 1}.")

    def __repr__(self):
        return f"KeccakP(width_bits={self.width_bits}, rounds={self.rounds})"

    @property
    def state(self) -> np.ndarray:
        """The "current" state (the active buffer)."""
        return self._buffers[self._active]

    def _write(self):
        return self._buffers[self._active ^ 1]

    def _flip(self):
        self._active ^= 1

    def clear(self):
        """Zero both buffers and make the first one active."""
        for buf in self._buffers:
            buf.fill(0)
        self._active = 0

    def _round(self, i_r: int):
        """ Rnd(A, i_r)"""
        W = self.lane_bytes

        theta(self.state, self._write(), self._C, self._D, W)
        self._flip()
        rho(self.state, self._write(), W, self._offsets)
        self._flip()
        pi(self.state, self._write(), W)
        self._flip()
        chi(self.state, self._write(), W)
        self._flip()
        iota(self.state, self._write(), W, self.l, i_r)
        self._flip()

    def __call__(self):
        for i_r in self._round_indices:
            self._round(i_r)


def keccak_p(b: int, n: int) -> KeccakP:
    """Returns a KECCAK-p[b, n] permutation."""
    return KeccakP(b, n)


def keccak_f(b: int) -> KeccakP:
    """
    KECCAK-f[b] = KECCAK-p[b, 12 + 2l], where l = log2(b / 25).

    Raises:
        InvalidParameter: If b is not a supported width.
    """
    return KeccakP(b)
