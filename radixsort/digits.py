"""Radix handling and digit extraction.

Digits are read as characters, never parsed into machine integers:
``0-9`` then ``a-z`` (either case), so radix 16 accepts ``0-9a-fA-F`` and
radix 36 accepts every ASCII letter.
"""

import string

from .errors import InvalidDigit, InvalidRadix

# cfg
DEFAULT_RADIX = 10
MIN_RADIX = 2
MAX_RADIX = 36

DIGITS = string.digits + string.ascii_lowercase  # len == MAX_RADIX

# both cases map to the same value, so lookups never call str.lower()
# (which would let things like "İ" sneak through)
_DIGIT_VALUES = {}
for _value, _char in enumerate(DIGITS):
    _DIGIT_VALUES[_char] = _value
    _DIGIT_VALUES[_char.upper()] = _value
del _value, _char


def check_radix(radix):
    """Return ``radix`` if it is a usable base, else raise InvalidRadix."""
    # bool is an int subclass, True is not a radix
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise InvalidRadix(radix, "radix must be an integer")
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise InvalidRadix(
            radix, f"radix must be between {MIN_RADIX} and {MAX_RADIX}"
        )
    return radix


def parse_radix(token):
    """Parse the leading radix token of an input stream."""
    text = token.strip()
    # int() would also take "+10", "1_0" and non-ascii digits
    if not text or not text.isascii() or not text.isdigit():
        raise InvalidRadix(token, "radix must be a decimal integer")
    return check_radix(int(text))


def digit_value(char, radix):
    """Value of a single digit character in ``radix``."""
    value = _DIGIT_VALUES.get(char)
    if value is None or value >= radix:
        raise InvalidDigit(char, radix)
    return value


def entry_digit(entry, pass_, radix):
    """Digit of ``entry`` used as bucket index on pass ``pass_``.

    Pass 0 is the rightmost character. Entries shorter than the pass are
    treated as left-padded with zeros.
    """
    pos = len(entry) - 1 - pass_
    if pos < 0:
        return 0
    return digit_value(entry[pos], radix)


def validate_entry(entry, radix):
    for char in entry:
        digit_value(char, radix)
    return entry
