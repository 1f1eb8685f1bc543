# random input -> radix sort -> compare with python's sorted()
# entries are random non-negative ints written as digit strings in RADIX,
# some with leading zeros, so the zero-padding and stability paths get hit too

import random

from rich import print

from .digits import DIGITS, check_radix
from .sorter import sort


# cfg
N = 10
MAX_VAL = int(1e6)
RADIX = 16
MAX_LEADING_ZEROS = 2


def to_digits(value, radix):
    """Write a non-negative int as an uppercase digit string in ``radix``."""
    if value == 0:
        return "0"
    out = []
    while value:
        value, d = divmod(value, radix)
        out.append(DIGITS[d])
    return "".join(reversed(out)).upper()


def random_entries(n=N, max_val=MAX_VAL, radix=RADIX, rng=random):
    return [
        "0" * rng.randint(0, MAX_LEADING_ZEROS)
        + to_digits(rng.randint(0, max_val), radix)
        for _ in range(n)
    ]


def run(n=N, max_val=MAX_VAL, radix=RADIX, seed=None):
    check_radix(radix)
    rng = random.Random(seed)

    input_array = random_entries(n, max_val, radix, rng)
    # sorted() is stable as well, so the two must match exactly
    reference = sorted(input_array, key=lambda e: int(e, radix))
    print(f"radix: {radix}")
    print(f"input_array: {input_array}")
    print(f"sorted reference: {reference}")

    sorted_array = sort(radix, input_array)
    print(f"sorted_array: {sorted_array}")
    return input_array, reference, sorted_array


if __name__ == "__main__":
    run()
