from __future__ import annotations

import random
from itertools import product
from typing import Sequence

from aod_justify.cost import INFINITE_COST, line_cost


def plan_cost(lengths: Sequence[int], starts: Sequence[int], width: int) -> int:
    """Cost of breaking ``lengths`` into lines starting at ``starts``."""
    bounds = list(starts) + [len(lengths)]
    total = 0
    for index, (start, end) in enumerate(zip(bounds, bounds[1:])):
        natural = sum(lengths[start:end]) + (end - start - 1)
        if natural > width:
            return INFINITE_COST
        if index < len(bounds) - 2:
            total += line_cost(width - natural)
    return total


def brute_force_cost(lengths: Sequence[int], width: int) -> int:
    """Minimum plan cost found by trying every possible set of breaks."""
    n = len(lengths)
    best = INFINITE_COST
    for cuts in product((False, True), repeat=n - 1):
        starts = [0] + [i + 1 for i, cut in enumerate(cuts) if cut]
        best = min(best, plan_cost(lengths, starts, width))
    return best


def greedy_starts(lengths: Sequence[int], width: int) -> list[int]:
    """Line starts chosen by packing as many words as fit on each line."""
    starts = [0]
    current = lengths[0]
    for i, length in enumerate(lengths[1:], start=1):
        if current + 1 + length <= width:
            current += 1 + length
        else:
            starts.append(i)
            current = length
    return starts


def random_text(seed: int, paragraphs: int, words: int, max_len: int) -> bytes:
    """Build a reproducible document of lowercase words."""
    rng = random.Random(seed)
    blocks = []
    for _ in range(paragraphs):
        tokens = [
            "".join(rng.choice("abcdefghij") for _ in range(rng.randint(1, max_len)))
            for _ in range(rng.randint(1, words))
        ]
        blocks.append(" ".join(tokens))
    return "\n\n".join(blocks).encode("latin-1")
