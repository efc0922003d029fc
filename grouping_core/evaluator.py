# FILE: grouping_core/evaluator.py
from __future__ import annotations
from typing import List, Sequence
import numpy as np

from grouping_core.constants import CATEGORIES
from grouping_core.models import ImbalanceBreakdown, Person
from grouping_core.preferences import is_preference_met


def _count(group: Sequence[Person], pred) -> int:
    return sum(1 for p in group if pred(p))


def evaluate_partition(group_a: List[Person], group_b: List[Person]) -> ImbalanceBreakdown:
    """
    Sum-of-squares imbalance of one candidate split, term by term.
    """
    category = 0
    for cat in CATEGORIES:
        diff = _count(group_a, lambda p: p.category == cat) - _count(group_b, lambda p: p.category == cat)
        category += diff ** 2

    special = _count(group_a, lambda p: p.special_needs) - _count(group_b, lambda p: p.special_needs)
    behavior = _count(group_a, lambda p: p.behavior_note) - _count(group_b, lambda p: p.behavior_note)
    level = sum(p.level for p in group_a) - sum(p.level for p in group_b)

    unmet = _count(group_a, lambda p: not is_preference_met(p, group_a)) + _count(
        group_b, lambda p: not is_preference_met(p, group_b)
    )

    return ImbalanceBreakdown(
        category=category,
        special_needs=special ** 2,
        behavior=behavior ** 2,
        level=level ** 2,
        preference=unmet ** 2,
    )


class PeopleArena:
    """
    Index-addressed view of a fixed people sequence for batch scoring.

    Columns of `features`: one indicator per category, special needs,
    behaviour note, level. `companions[i, j]` is True when person j's name is
    among person i's preferred names.
    """

    def __init__(self, people: Sequence[Person]):
        self.people = list(people)
        n = len(self.people)
        rows = [
            [p.category == cat for cat in CATEGORIES] + [p.special_needs, p.behavior_note, p.level]
            for p in self.people
        ]
        self.features = np.array(rows, dtype=np.int64).reshape(n, len(CATEGORIES) + 3)
        self.wants = np.array([bool(p.preferred_names) for p in self.people], dtype=bool)
        self.companions = np.array(
            [[q.name in set(p.preferred_names) for q in self.people] for p in self.people],
            dtype=bool,
        ).reshape(n, n)

    def __len__(self) -> int:
        return len(self.people)

    def score_masks(self, masks) -> np.ndarray:
        """Scores for a (batch, n) boolean array; True marks group A."""
        masks = np.asarray(masks, dtype=bool)
        signs = np.where(masks, 1, -1)
        diffs = signs @ self.features
        balance = (diffs ** 2).sum(axis=1)
        same = masks[:, :, None] == masks[:, None, :]
        met = (same & self.companions[None, :, :]).any(axis=2)
        unmet = (self.wants[None, :] & ~met).sum(axis=1)
        return balance + unmet ** 2

    def mask_for(self, indices: Sequence[int]) -> np.ndarray:
        mask = np.zeros(len(self.people), dtype=bool)
        mask[list(indices)] = True
        return mask

    def score_indices(self, indices: Sequence[int]) -> int:
        return int(self.score_masks(self.mask_for(indices)[None, :])[0])
