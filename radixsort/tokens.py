"""Token input: the first token is the radix, the rest are entries."""

import logging
from typing import Iterable, Iterator, List, TextIO

from .digits import parse_radix
from .sorter import RadixSorter

logger = logging.getLogger(__name__)


def iter_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-delimited tokens from a text stream, line by line."""
    for line in stream:
        yield from line.split()


def sort_tokens(tokens: Iterable[str]) -> List[str]:
    tokens = iter(tokens)
    first = next(tokens, None)
    if first is None:
        # nothing to sort, not even a radix
        logger.debug("empty input")
        return []
    radix = parse_radix(first)
    # the sorter drains the rest of the iterator before the first pass
    return RadixSorter(radix).sort(tokens)


def sort_stream(stream: TextIO) -> List[str]:
    return sort_tokens(iter_tokens(stream))
