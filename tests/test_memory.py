import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxlo")


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray(b"AAAA")


def test_memset_too_long():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"ef"


@pytest.mark.parametrize("nmemb,size", [(3, 4), (1, 1), (10, 7)])
def test_calloc_zeroed(nmemb, size):
    buf = calloc(nmemb, size)
    assert len(buf) == nmemb * size
    assert not any(buf)


def test_calloc_zero_members():
    assert calloc(0, 8) == bytearray()
    assert calloc(8, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**40, 2**40)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    data = b"banana"
    idx = memchr(data, ord("n"), len(data))
    assert data[idx] == ord("n")
    assert ord("n") not in data[:idx]


def test_memchr_respects_limit():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_value_as_unsigned_byte():
    assert memchr(b"\x01\x02", 0x102, 2) == 1


def test_memcmp_equal_prefix():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_difference_of_bytes():
    a, b = b"abcX", b"abcY"
    assert memcmp(a, b, 4) == a[3] - b[3]
    assert memcmp(b, a, 4) == -memcmp(a, b, 4)


def test_memcmp_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_memcpy_copies_prefix():
    dest = bytearray(6)
    src = b"source"
    result = memcpy(dest, src, 4)
    assert result is dest
    assert dest[:4] == src[:4]
    assert dest[4:] == bytes(2)


def test_memcpy_too_long():
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abc", 3)


@pytest.mark.parametrize("dest,src,n", [(2, 0, 4), (0, 2, 4), (1, 1, 3), (0, 3, 0)])
def test_memmove_overlap(dest, src, n):
    original = bytes(b"abcdefgh")
    buf = bytearray(original)
    memmove(buf, dest, src, n)
    assert buf[dest:dest + n] == original[src:src + n]
    untouched = [i for i in range(len(original)) if not dest <= i < dest + n]
    assert all(buf[i] == original[i] for i in untouched)


def test_memmove_forward_overlap_literal():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memmove_negative_offset():
    with pytest.raises(ValueError):
        memmove(bytearray(4), -1, 0, 1)