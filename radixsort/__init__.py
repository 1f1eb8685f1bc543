"""LSD radix sort for non-negative integers written as digit strings."""

from .digits import (
    DEFAULT_RADIX,
    MAX_RADIX,
    MIN_RADIX,
    digit_value,
    entry_digit,
    parse_radix,
)
from .errors import (
    InvalidDigit,
    InvalidInput,
    InvalidRadix,
    RadixSortError,
    SortCancelled,
)
from .sorter import RadixSorter, gather, max_digits, scatter, sort
from .tokens import iter_tokens, sort_stream, sort_tokens

__all__ = [
    "DEFAULT_RADIX",
    "MAX_RADIX",
    "MIN_RADIX",
    "InvalidDigit",
    "InvalidInput",
    "InvalidRadix",
    "RadixSortError",
    "RadixSorter",
    "SortCancelled",
    "digit_value",
    "entry_digit",
    "gather",
    "iter_tokens",
    "max_digits",
    "parse_radix",
    "scatter",
    "sort",
    "sort_stream",
    "sort_tokens",
]
