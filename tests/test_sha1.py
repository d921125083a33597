import hashlib

import pytest

from loopchat.sha1 import H, cycle_shift_left, sha1


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"abc",
        b"password",
        b"a" * 55,
        b"a" * 56,
        b"a" * 63,
        b"a" * 64,
        b"a" * 65,
        bytes(range(256)) * 3,
        "пароль".encode("utf-8"),
    ],
)
def test_matches_standard_library(data):
    assert sha1(data) == hashlib.sha1(data).digest()


def test_known_vector_empty():
    assert sha1(b"").hex() == "da39a3ee5e6b4b0d3255bfef95601890afd80709"


def test_known_vector_abc():
    assert sha1(b"abc").hex() == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_digest_length_is_twenty_bytes():
    assert len(sha1(b"some longer input " * 10)) == 20


def test_accepts_bytearray_and_memoryview():
    expected = sha1(b"hello")
    assert sha1(bytearray(b"hello")) == expected
    assert sha1(memoryview(b"hello")) == expected


def test_rejects_str():
    with pytest.raises(TypeError):
        sha1("hello")


def test_cycle_shift_left_wraps_high_bit():
    assert cycle_shift_left(0x80000000, 1) == 1


def test_cycle_shift_left_full_rotation_is_identity():
    for value in H:
        assert cycle_shift_left(value, 32) == value
        assert cycle_shift_left(cycle_shift_left(value, 5), 27) == value


def test_cycle_shift_left_stays_32_bit():
    assert cycle_shift_left(0xFFFFFFFF, 7) == 0xFFFFFFFF