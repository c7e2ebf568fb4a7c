# median_cut/partition.py
from __future__ import annotations

"""
Partition: a subset of colour samples plus its tight per-channel bounding box.

Exports:
  Bounds: per-channel (min, max) ranges
  compute_bounds(samples) -> Bounds
  Partition: (samples, bounds) pair; bounds are derived on construction
"""

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from .core_types import RGBTuple
from .errors import EmptyInputError

RED, GREEN, BLUE = 0, 1, 2


@dataclass(frozen=True)
class Bounds:
    """Closed per-channel ranges of a set of colours."""

    rmin: int
    rmax: int
    gmin: int
    gmax: int
    bmin: int
    bmax: int

    def spreads(self) -> Tuple[int, int, int]:
        """(max - min) per channel, in red, green, blue order."""
        return (self.rmax - self.rmin, self.gmax - self.gmin, self.bmax - self.bmin)

    def contains(self, other: "Bounds") -> bool:
        """True if every range of `other` lies inside the matching range here."""
        return (
            self.rmin <= other.rmin
            and other.rmax <= self.rmax
            and self.gmin <= other.gmin
            and other.gmax <= self.gmax
            and self.bmin <= other.bmin
            and other.bmax <= self.bmax
        )


def compute_bounds(samples: Iterable[RGBTuple]) -> Bounds:
    """Single scan over the samples. An empty input has no bounds."""
    it = iter(samples)
    try:
        r, g, b = next(it)
    except StopIteration:
        raise EmptyInputError("cannot bound an empty sample set") from None
    rmin = rmax = r
    gmin = gmax = g
    bmin = bmax = b
    for r, g, b in it:
        if r < rmin:
            rmin = r
        elif r > rmax:
            rmax = r
        if g < gmin:
            gmin = g
        elif g > gmax:
            gmax = g
        if b < bmin:
            bmin = b
        elif b > bmax:
            bmax = b
    return Bounds(rmin, rmax, gmin, gmax, bmin, bmax)


@dataclass(frozen=True)
class Partition:
    """
    Owned samples and their bounding box.

    Immutable: a different membership means a new Partition, so the bounds
    are always recomputed alongside it and can never go stale.
    """

    samples: Tuple[RGBTuple, ...]
    bounds: Bounds = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "samples", tuple(self.samples))
        object.__setattr__(self, "bounds", compute_bounds(self.samples))

    def __len__(self) -> int:
        return len(self.samples)

    def spreads(self) -> Tuple[int, int, int]:
        return self.bounds.spreads()

    def longest_dimension(self) -> int:
        """
        Channel index with the widest spread.

        Ties prefer red over green and green over blue.
        """
        r_len, g_len, b_len = self.spreads()
        if r_len >= g_len and r_len >= b_len:
            return RED
        if g_len >= r_len and g_len >= b_len:
            return GREEN
        return BLUE

    def average_color(self) -> RGBTuple:
        """Channel-wise mean with truncating integer division."""
        n = len(self.samples)
        if n == 0:
            raise EmptyInputError("cannot average an empty partition")
        r_sum = g_sum = b_sum = 0
        for r, g, b in self.samples:
            r_sum += r
            g_sum += g
            b_sum += b
        # channels are non-negative, so floor division truncates
        return (r_sum // n, g_sum // n, b_sum // n)


__all__ = ["RED", "GREEN", "BLUE", "Bounds", "compute_bounds", "Partition"]
