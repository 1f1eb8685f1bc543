import random

import pytest

from radixsort import demo
from radixsort.errors import InvalidRadix


def test_to_digits():
    assert demo.to_digits(0, 10) == "0"
    assert demo.to_digits(255, 16) == "FF"
    assert demo.to_digits(5, 2) == "101"
    assert demo.to_digits(35, 36) == "Z"


def test_random_entries_are_valid_digit_strings():
    rng = random.Random(0)
    entries = demo.random_entries(30, 1000, 16, rng)
    assert len(entries) == 30
    for entry in entries:
        assert 0 <= int(entry, 16) <= 1000


def test_run_matches_reference(capsys):
    input_array, reference, sorted_array = demo.run(n=40, max_val=5000, radix=16, seed=7)
    assert sorted_array == reference
    assert sorted(input_array) == sorted(sorted_array)
    out = capsys.readouterr().out
    assert "sorted reference" in out
    assert "sorted_array" in out


def test_run_is_reproducible_with_seed(capsys):
    assert demo.run(seed=3) == demo.run(seed=3)


def test_run_rejects_bad_radix():
    with pytest.raises(InvalidRadix):
        demo.run(radix=1)
