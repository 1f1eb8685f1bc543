import io

import pytest

from radixsort.errors import InvalidDigit, InvalidRadix
from radixsort.tokens import iter_tokens, sort_stream, sort_tokens


def test_iter_tokens_splits_on_any_whitespace():
    stream = io.StringIO("16\n1A  F\t0A\n\n FF 10 \n")
    assert list(iter_tokens(stream)) == ["16", "1A", "F", "0A", "FF", "10"]


def test_sort_tokens_reads_radix_first():
    assert sort_tokens(["16", "1A", "F", "0A", "FF", "10"]) == ["0A", "F", "10", "1A", "FF"]


def test_sort_tokens_accepts_a_lazy_iterator():
    tokens = (t for t in ["10", "3", "20", "1"])
    assert sort_tokens(tokens) == ["1", "3", "20"]


def test_empty_stream():
    assert sort_stream(io.StringIO("")) == []
    assert sort_stream(io.StringIO("  \n\n")) == []


def test_radix_only():
    assert sort_stream(io.StringIO("10\n")) == []


def test_sort_stream():
    stream = io.StringIO("10\n170\n45\n75\n90\n802\n24\n2\n66\n")
    assert sort_stream(stream) == ["2", "24", "45", "66", "75", "90", "170", "802"]


@pytest.mark.parametrize("text", ["x 1 2", "1 0 0", "40 1", "-10 1"])
def test_bad_radix_token(text):
    with pytest.raises(InvalidRadix):
        sort_stream(io.StringIO(text))


def test_bad_digit_in_stream():
    with pytest.raises(InvalidDigit) as exc_info:
        sort_stream(io.StringIO("10 12 4G 3"))
    assert exc_info.value.entry == "4G"
