from .GLOBAL import *
from .Errors import InvalidParameter
from .Sponge import keccak_c


def _check_suffix(n, b: int):
    if not isinstance(b, int) or not 0 <= b <= 7:
        raise InvalidParameter(f"Suffix bit length must be in 0..7, got {b!r}.")
    if b != 0 and (not isinstance(n, int) or not 0 <= n < (1 << b)):
        raise InvalidParameter(f"Suffix value must fit in {b} bits, got {n!r}.")


def _append_suffix(M, n, b: int) -> bytes:
    """M || n, with n taking a byte of its own only when b != 0."""
    if b == 0:
        return bytes(M)
    return bytes(M) + bytes([n])


def fixed_digest(k, c: int, n, b: int, name: str = None):
    """
    Builds a fixed-output hash from a sponge generator.

    Args:
        k: A sponge generator taking a capacity, e.g. keccak_c.
        c: The capacity in bits. The digest is c / 2 bits long.
        n: The domain separation suffix value (ignored when b = 0).
        b: The length of the suffix in bits.
        name: Optional name attached to the returned function.

    Returns:
        A function M -> digest of c // 16 bytes.

    Raises:
        InvalidParameter: If the suffix or the capacity is out of range.
    """
    _check_suffix(n, b)
    keccak = k(c)
    d = c >> 1

    def digest(M) -> bytes:
        return keccak(_append_suffix(M, n, b), d, b)

    digest.digest_size = d >> 3
    digest.block_size = keccak.rate_bytes
    digest.name = name or f"keccak-c{c}-{n}/{b}"
    return digest


def xof_digest(k, c: int, n, b: int, name: str = None):
    """
    Builds an extendable-output function from a sponge generator.

    Same as fixed_digest, except the caller picks the output length (bytes)
    on every call.

    Returns:
        A function (M, D) -> D output bytes.
    """
    _check_suffix(n, b)
    keccak = k(c)

    def xof(M, D: int) -> bytes:
        if D < 0:
            raise InvalidParameter(f"Output length must be non-negative, got {D} bytes.")
        return keccak(_append_suffix(M, n, b), D << 3, b)

    xof.block_size = keccak.rate_bytes
    xof.name = name or f"keccak-c{c}-{n}/{b}-xof"
    return xof


# --- Keccak (pre-standard padding, as used by Ethereum) ---
keccak224 = fixed_digest(keccak_c, CAPACITY_224, *KECCAK_SUFFIX, name="keccak-224")
keccak256 = fixed_digest(keccak_c, CAPACITY_256, *KECCAK_SUFFIX, name="keccak-256")
keccak384 = fixed_digest(keccak_c, CAPACITY_384, *KECCAK_SUFFIX, name="keccak-384")
keccak512 = fixed_digest(keccak_c, CAPACITY_512, *KECCAK_SUFFIX, name="keccak-512")

# --- SHA-3 ---
sha3_224 = fixed_digest(keccak_c, CAPACITY_224, *SHA3_SUFFIX, name="sha3-224")
sha3_256 = fixed_digest(keccak_c, CAPACITY_256, *SHA3_SUFFIX, name="sha3-256")
sha3_384 = fixed_digest(keccak_c, CAPACITY_384, *SHA3_SUFFIX, name="sha3-384")
sha3_512 = fixed_digest(keccak_c, CAPACITY_512, *SHA3_SUFFIX, name="sha3-512")

# --- SHAKE ---
shake128 = xof_digest(keccak_c, CAPACITY_SHAKE128, *SHAKE_SUFFIX, name="shake128")
shake256 = xof_digest(keccak_c, CAPACITY_SHAKE256, *SHAKE_SUFFIX, name="shake256")
