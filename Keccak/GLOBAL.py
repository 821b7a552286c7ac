# REF: https://nvlpubs.nist.gov/nistpubs/FIPS/NIST.FIPS.202.pdf

# Keccak-p widths b = 25 * 2^l, l = 0..6
KECCAK_WIDTHS = (25, 50, 100, 200, 400, 800, 1600)

# The state is kept as a byte array, so only widths with whole-byte lanes
# (l >= 3) can be represented.
SUPPORTED_WIDTHS = (200, 400, 800, 1600)

DEFAULT_WIDTH   = 1600
DEFAULT_ROUNDS  = 24

# Number of lanes visited by the rho walk
RHO_STEPS       = 24

# Byte value of the "1" bit that closes pad10*1
PAD_LAST_BYTE   = 0x80



"""
    --- Domain separation suffixes (n, b) ---

    Keccak      no suffix                       (0, 0)
    SHA-3       "01"   -> 0b10                  (0b10, 2)
    SHAKE       "1111" -> 0b1111                (0b1111, 4)

    The suffix bits are read LSB first, so "01" is stored as 0b10.
"""
KECCAK_SUFFIX   = (0, 0)
SHA3_SUFFIX     = (0b10, 2)
SHAKE_SUFFIX    = (0b1111, 4)


"""
    --- Capacity presets (bits) ---

    Digest          Capacity    Rate (bytes)    Output (bytes)
    224             448         144             28
    256             512         136             32
    384             768         104             48
    512             1024        72              64
    SHAKE128        256         168             caller
    SHAKE256        512         136             caller
"""
CAPACITY_224    = 448
CAPACITY_256    = 512
CAPACITY_384    = 768
CAPACITY_512    = 1024
CAPACITY_SHAKE128 = 256
CAPACITY_SHAKE256 = 512


# numba writes compiled step mappings to __pycache__ so the first call of a
# new process skips compilation.
JIT_CACHE       = True
