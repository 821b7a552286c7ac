import logging
from concurrent.futures import ThreadPoolExecutor

import pytest
from Crypto.Hash import keccak, SHA3_256

from Keccak import InvalidParameter, Sponge, sponge, pad10star1, keccak_c, keccak_p, keccak_f
from Keccak.Sponge import chunks


# --- pad10*1 ---

def test_pad_full_block():
    padding = pad10star1(136, 0, 0)
    assert len(padding) == 136
    assert padding[0] == 0x01
    assert padding[-1] == 0x80
    assert not any(padding[1:-1])


def test_pad_single_byte_combines_both_bits():
    assert pad10star1(136, 135, 0) == b"\x81"
    assert pad10star1(136, 135, 2) == b"\x84"
    assert pad10star1(136, 135, 4) == b"\x90"


def test_pad_exact_multiple_adds_block():
    assert len(pad10star1(136, 136, 0)) == 136
    assert len(pad10star1(136, 272, 0)) == 136


def test_pad_length():
    for M in range(0, 300):
        padding = pad10star1(72, M, 0)
        assert (M + len(padding)) % 72 == 0
        assert 1 <= len(padding) <= 72


def test_pad_seven_suffix_bits_need_two_bytes():
    padding = pad10star1(136, 135, 7)
    assert len(padding) == 137
    assert padding[0] == 0x80
    assert padding[-1] == 0x80
    assert pad10star1(136, 10, 7)[0] == 0x80


@pytest.mark.parametrize("X, M, b", [(0, 0, 0), (-8, 0, 0), (136, -1, 0), (136, 0, 8), (136, 0, -1)])
def test_pad_rejects_bad_parameters(X, M, b):
    with pytest.raises(InvalidParameter):
        pad10star1(X, M, b)


# --- chunks ---

def test_chunks():
    assert [bytes(c) for c in chunks(b"abcdefghi", 3)] == [b"abc", b"def", b"ghi"]
    assert [bytes(c) for c in chunks(b"abcdefg", 3)] == [b"abc", b"def"]
    assert list(chunks(b"", 3)) == []


def test_chunks_is_restartable():
    data = bytearray(b"0123456789")
    first = [bytes(c) for c in chunks(data, 5)]
    second = [bytes(c) for c in chunks(data, 5)]
    assert first == second == [b"01234", b"56789"]


# --- Sponge ---

def test_keccak_c_matches_keccak():
    k = keccak_c(512)
    assert k(b"abc", 256, 0) == keccak.new(digest_bits=256, data=b"abc").digest()


def test_keccak_c_with_suffix_matches_sha3():
    k = keccak_c(512)
    # "abc" || 01
    assert k(b"abc\x02", 256, 2) == SHA3_256.new(b"abc").digest()


def test_sponge_properties():
    k = keccak_c(512)
    assert k.rate_bits == 1088
    assert k.rate_bytes == 136
    assert k.capacity_bits == 512
    assert k.f.width_bits == 1600
    assert k.f.rounds == 24
    assert isinstance(k, Sponge)


def test_output_length_in_bits():
    k = keccak_c(512)
    for d in (0, 8, 256, 1088, 1096, 4000):
        assert len(k(b"x", d, 0)) == d // 8
    # d is floored to whole bytes
    assert k(b"x", 263, 0) == k(b"x", 256, 0)


def test_long_output_is_prefix_consistent():
    k = keccak_c(512)
    long = k(b"squeeze", 8 * 500, 0)
    short = k(b"squeeze", 8 * 100, 0)
    assert long[:100] == short


def test_zero_output():
    assert keccak_c(256)(b"anything", 0, 0) == b""


def test_repeated_calls_reset_state():
    k = keccak_c(512)
    first = k(b"hello", 256, 0)
    k(b"something else entirely", 256, 0)
    assert k(b"hello", 256, 0) == first


def test_accepts_bytes_like():
    k = keccak_c(512)
    assert k(bytearray(b"abc"), 256, 0) == k(b"abc", 256, 0)
    assert k(memoryview(b"abc"), 256, 0) == k(b"abc", 256, 0)


def test_generic_sponge_over_small_permutation():
    f = keccak_f(400)
    s = sponge(f, pad10star1, 144)
    out = s(b"abc" * 20, 8 * 50, 0)
    assert len(out) == 50
    assert out == s(b"abc" * 20, 8 * 50, 0)
    assert out != s(b"abc" * 20 + b"d", 8 * 50, 0)


@pytest.mark.parametrize("r", [0, 1600, 1608, -8])
def test_rate_out_of_range(r):
    with pytest.raises(InvalidParameter):
        sponge(keccak_p(1600, 24), pad10star1, r)


def test_rate_must_be_whole_bytes():
    with pytest.raises(InvalidParameter):
        sponge(keccak_p(1600, 24), pad10star1, 1087)


@pytest.mark.parametrize("c", [0, 1600, 2000, 500, -512])
def test_keccak_c_rejects_bad_capacity(c):
    with pytest.raises(InvalidParameter):
        keccak_c(c)


def test_negative_output_length():
    with pytest.raises(InvalidParameter):
        keccak_c(512)(b"abc", -8, 0)


def test_suffix_byte_required():
    with pytest.raises(InvalidParameter):
        keccak_c(512)(b"", 256, 2)


def test_suffix_byte_must_fit():
    with pytest.raises(InvalidParameter):
        keccak_c(512)(b"abc\x04", 256, 2)


def test_suffix_length_range():
    with pytest.raises(InvalidParameter):
        keccak_c(512)(b"abc", 256, 8)


def test_padding_rule_must_fill_blocks():
    def short_pad(X, M, b):
        return b"\x81"

    s = sponge(keccak_p(1600, 24), short_pad, 1088)
    with pytest.raises(InvalidParameter):
        s(b"abc", 256, 0)


def test_sponges_sharing_a_permutation_do_not_interleave():
    f = keccak_f(1600)
    first = sponge(f, pad10star1, 1088)
    second = sponge(f, pad10star1, 1088)
    inputs = [bytes([i]) * (i * 5) for i in range(40)]
    expected = [keccak.new(digest_bits=256, data=m).digest() for m in inputs]

    def run(s):
        results = []
        for _ in range(10):
            results.extend(s(m, 256, 0) for m in inputs)
        return results

    with ThreadPoolExecutor(max_workers=2) as pool:
        outputs = list(pool.map(run, [first, second]))

    for results in outputs:
        assert results == expected * 10


def test_call_log_record_is_lazy(caplog):
    with caplog.at_level(logging.DEBUG, logger="Keccak.Sponge"):
        keccak_c(512)(b"abc", 256, 0)

    records = [r for r in caplog.records if r.msg.startswith("Absorbed")]
    assert records[-1].args == (1, 32)
    assert records[-1].getMessage() == "Absorbed 1 blocks, squeezed 32 bytes."
