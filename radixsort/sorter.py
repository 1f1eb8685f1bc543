"""LSD radix sort over digit strings.

Each pass scatters the master list into ``radix`` buckets by one digit,
starting from the rightmost, then gathers the buckets back in ascending
order. Buckets are plain lists, so both steps are appends/extends and
nothing is copied element by element between passes.
"""

import logging
from typing import Callable, Iterable, List, Optional

from .digits import DEFAULT_RADIX, check_radix, entry_digit, validate_entry
from .errors import InvalidDigit, InvalidInput, SortCancelled

logger = logging.getLogger(__name__)


def max_digits(master):
    # one pass per character of the longest entry
    return max((len(entry) for entry in master), default=0)


def scatter(master, pass_, buckets, radix):
    """Move every entry of ``master`` to the tail of its bucket for ``pass_``.

    ``master`` is left empty.
    """
    for entry in master:
        buckets[entry_digit(entry, pass_, radix)].append(entry)
    master.clear()


def gather(buckets, master):
    # bucket order is digit order
    for bucket in buckets:
        master.extend(bucket)
        bucket.clear()


class RadixSorter:
    """Sorts digit strings in a fixed radix.

    Holds only configuration, the working lists are rebuilt on every call
    to :meth:`sort` so an instance can be reused.

    ``should_stop`` is an optional zero-argument callable polled before
    each pass; when it returns true the sort aborts with SortCancelled.
    """

    def __init__(
        self,
        radix: int = DEFAULT_RADIX,
        should_stop: Optional[Callable[[], bool]] = None,
    ):
        self.radix = check_radix(radix)
        self.should_stop = should_stop

    def ingest(self, entries: Iterable[str]) -> List[str]:
        """Build the master list in arrival order, validating every digit."""
        master = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, str):
                raise InvalidInput(
                    f"entry at position {index} is not a string: {entry!r}"
                )
            if not entry:
                raise InvalidInput(f"entry at position {index} is empty")
            try:
                validate_entry(entry, self.radix)
            except InvalidDigit as exc:
                raise exc.located(entry, index) from None
            master.append(entry)
        return master

    def sort(self, entries: Iterable[str]) -> List[str]:
        master = self.ingest(entries)
        if not master:
            return []

        passes = max_digits(master)
        buckets = [[] for _ in range(self.radix)]
        logger.debug(
            "sorting %d entries in radix %d, %d passes", len(master), self.radix, passes
        )

        for pass_ in range(passes):
            if self.should_stop is not None and self.should_stop():
                raise SortCancelled(pass_)
            scatter(master, pass_, buckets, self.radix)
            gather(buckets, master)
            logger.debug("pass %d: %s", pass_, master)

        return master


def sort(radix: int, entries: Iterable[str]) -> List[str]:
    """Sort ``entries`` in ascending numeric order of ``radix``."""
    return RadixSorter(radix).sort(entries)
