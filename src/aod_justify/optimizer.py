from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from .cost import INFINITE_COST, delta, line_cost, prefix_sums, saturating_add
from .errors import InfeasibleParagraphError
from .models import Paragraph

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class JustificationPlan:
    """
    Dynamic-programming tables for one paragraph.

    ``costs[i]`` is the minimum cost of justifying words ``i..n-1`` and
    ``next_break[i]`` the first word of the line following the one that
    starts at ``i``. ``next_break[n] == n``.
    """

    costs: List[int]
    valid: List[bool]
    next_break: List[int]

    @property
    def word_count(self) -> int:
        return len(self.next_break) - 1

    @property
    def total_cost(self) -> int:
        return self.costs[0]

    def line_starts(self) -> List[int]:
        """Return the index of the first word of every line, in order."""
        starts: List[int] = []
        i = 0
        while i < self.word_count:
            starts.append(i)
            i = self.next_break[i]
        return starts


def optimize(word_lengths: Sequence[int], width: int) -> JustificationPlan:
    """Compute the minimum-cost line breaks for words of the given lengths."""
    n = len(word_lengths)
    costs = [INFINITE_COST] * (n + 1)
    valid = [False] * (n + 1)
    next_break = list(range(n + 1))
    costs[n] = 0
    valid[n] = True

    prefix = prefix_sums(word_lengths)
    for i in range(n - 1, -1, -1):
        for k in range(i, n):
            line_length = delta(prefix, i, k)
            # Line lengths only grow with k.
            if line_length > width:
                break
            if not valid[k + 1]:
                continue
            penalty = 0 if k == n - 1 else line_cost(width - line_length)
            total = saturating_add(penalty, costs[k + 1])
            # Strict comparison keeps the earliest break among equal costs.
            if total < costs[i]:
                costs[i] = total
                next_break[i] = k + 1
                valid[i] = True

    if not valid[0]:
        raise InfeasibleParagraphError(
            f"no line-break plan fits {n} words into width {width}"
        )
    return JustificationPlan(costs=costs, valid=valid, next_break=next_break)


def justify_paragraph(paragraph: Paragraph, width: int) -> JustificationPlan:
    """Optimize ``paragraph`` and record its optimal cost on it."""
    plan = optimize(paragraph.word_lengths(), width)
    paragraph.optimal_cost = plan.total_cost
    logger.debug(
        "Justified %d words into %d lines (cost %d)",
        paragraph.word_count,
        len(plan.line_starts()),
        plan.total_cost,
    )
    return plan
