"""
Module containing miscellaneous utility functions.
"""

from typing import Callable, TypeVar, Iterable, List

import logging

T = TypeVar("T")  # pylint: disable=invalid-name

logger: logging.Logger = logging.getLogger("leona")
logger.addHandler(logging.StreamHandler())
# Silent unless a caller asks for more
logger.setLevel(logging.CRITICAL)


def group_lines(
    items: Iterable[T], line_of: Callable[[T], int], last_line: int
) -> List[List[T]]:
    """
    Group an iterable of values into per-line buckets, indexed from line 1 up to and including
    `last_line`. Lines without any values get an empty bucket.
    """
    lines: List[List[T]] = [[] for _ in range(last_line)]
    for item in items:
        lines[line_of(item) - 1].append(item)
    return lines
