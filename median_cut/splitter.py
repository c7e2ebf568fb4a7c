# median_cut/splitter.py
from __future__ import annotations

"""
Median-cut recursion.

Exports:
  split_partition(partition) -> (left, right)
  terminal_partitions(partition, depth, max_depth) -> Iterator[Partition]
  split(partition, depth, max_depth, palette) -> None

Notes:
  - A partition is terminal at max_depth or when it owns a single sample.
  - Samples are ordered with a stable sort on the widest channel, so equal
    keys keep their input order and the median boundary is reproducible.
  - The left child takes the first n // 2 samples; for odd n the right
    child gets the extra one.
  - Left subtrees are visited before right subtrees; palette order follows.
"""

from operator import itemgetter
from typing import Iterator, List, Tuple

from .core_types import RGBTuple
from .errors import InvalidParameterError
from .partition import Partition


def split_partition(partition: Partition) -> Tuple[Partition, Partition]:
    """Cut a partition of two or more samples at the median of its widest channel."""
    n = len(partition)
    if n < 2:
        raise InvalidParameterError(f"cannot split a partition of {n} sample(s)")
    dim = partition.longest_dimension()
    ordered = sorted(partition.samples, key=itemgetter(dim))  # sorted() is stable
    median = n // 2
    return Partition(tuple(ordered[:median])), Partition(tuple(ordered[median:]))


def _is_terminal(partition: Partition, depth: int, max_depth: int) -> bool:
    return depth == max_depth or len(partition) == 1


def terminal_partitions(
    partition: Partition, depth: int, max_depth: int
) -> Iterator[Partition]:
    """Yield terminal partitions depth-first, left before right."""
    if depth < 0 or depth > max_depth:
        raise InvalidParameterError(f"depth {depth} outside [0, {max_depth}]")
    if _is_terminal(partition, depth, max_depth):
        yield partition
        return
    left, right = split_partition(partition)
    yield from terminal_partitions(left, depth + 1, max_depth)
    yield from terminal_partitions(right, depth + 1, max_depth)


def split(
    partition: Partition, depth: int, max_depth: int, palette: List[RGBTuple]
) -> None:
    """Append one averaged colour per terminal partition below `partition`."""
    for leaf in terminal_partitions(partition, depth, max_depth):
        palette.append(leaf.average_color())


__all__ = ["split_partition", "terminal_partitions", "split"]
