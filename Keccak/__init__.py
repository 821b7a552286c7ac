"""
Keccak permutation, sponge construction and the Keccak / SHA-3 / SHAKE hash family
"""

from .Errors import InvalidParameter
from .Permutation import KeccakP, keccak_p, keccak_f
from .Sponge import Sponge, sponge, pad10star1, keccak_c
from .Keccak import (
    fixed_digest,
    xof_digest,
    keccak224,
    keccak256,
    keccak384,
    keccak512,
    sha3_224,
    sha3_256,
    sha3_384,
    sha3_512,
    shake128,
    shake256,
)

__all__ = [
    "InvalidParameter",
    "KeccakP", "keccak_p", "keccak_f",
    "Sponge", "sponge", "pad10star1", "keccak_c",
    "fixed_digest", "xof_digest",
    "keccak224", "keccak256", "keccak384", "keccak512",
    "sha3_224", "sha3_256", "sha3_384", "sha3_512",
    "shake128", "shake256",
]
