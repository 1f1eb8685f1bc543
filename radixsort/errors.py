"""Errors raised while reading or sorting radix entries."""


class RadixSortError(ValueError):
    """Base class for everything the sorter raises."""


class InvalidInput(RadixSortError):
    pass


class InvalidRadix(InvalidInput):
    def __init__(self, radix, reason="radix must be an integer between 2 and 36"):
        self.radix = radix
        super().__init__(f"invalid radix {radix!r}: {reason}")


class InvalidDigit(InvalidInput):
    def __init__(self, char, radix, entry=None, index=None):
        self.char = char
        self.radix = radix
        self.entry = entry
        self.index = index
        msg = f"{char!r} is not a digit in radix {radix}"
        if entry is not None:
            msg += f" (entry {entry!r}"
            if index is not None:
                msg += f" at position {index}"
            msg += ")"
        super().__init__(msg)

    def located(self, entry, index):
        """Same error, tagged with the entry it came from."""
        return InvalidDigit(self.char, self.radix, entry, index)


class SortCancelled(RadixSortError):
    def __init__(self, pass_):
        self.pass_ = pass_
        super().__init__(f"sort cancelled before pass {pass_}")
