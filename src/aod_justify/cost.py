"""
Cost model for candidate lines.

All arithmetic saturates at ``INFINITE_COST`` (the largest signed 64-bit
integer) so that a sentinel cost always compares worse than any real one.
"""

from __future__ import annotations

from itertools import accumulate
from typing import List, Sequence

INFINITE_COST = 2**63 - 1
# Largest magnitude whose cube still fits in a signed 64-bit integer.
CUBE_LIMIT = 2_097_151


def cube(value: int) -> int:
    """Return ``value ** 3``, or ``INFINITE_COST`` when it would not fit in 64 bits."""
    if value > CUBE_LIMIT or value < -CUBE_LIMIT:
        return INFINITE_COST
    return value * value * value


def saturating_add(left: int, right: int) -> int:
    """Add two non-negative costs, clamping at ``INFINITE_COST``."""
    if left == INFINITE_COST or right == INFINITE_COST:
        return INFINITE_COST
    if left > INFINITE_COST - right:
        return INFINITE_COST
    return left + right


def prefix_sums(lengths: Sequence[int]) -> List[int]:
    """Return ``[0, l0, l0 + l1, ...]`` so any run of lengths sums in O(1)."""
    return list(accumulate(lengths, initial=0))


def delta(prefix: Sequence[int], i: int, k: int) -> int:
    """Natural length of words ``i..k`` inclusive with one space per gap."""
    return prefix[k + 1] - prefix[i] + (k - i)


def line_cost(deficit: int) -> int:
    """Penalty for a non-final line that is ``deficit`` characters short."""
    if deficit < 0:
        return INFINITE_COST
    return cube(deficit)
