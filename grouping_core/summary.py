# FILE: grouping_core/summary.py
from __future__ import annotations
from typing import Dict, List, Optional

from grouping_core.constants import CATEGORY_LABELS, IMPERFECT_BALANCE_NOTE
from grouping_core.evaluator import evaluate_partition
from grouping_core.models import ImbalanceBreakdown, Person, SplitResult, SummaryStat
from grouping_core.preferences import is_preference_met, unmet_preference_ids


def _stat(a: int, b: int) -> SummaryStat:
    return SummaryStat(group_a=a, group_b=b, balance=abs(a - b))


def build_summary(group_a: List[Person], group_b: List[Person]) -> Dict[str, SummaryStat]:
    summary: Dict[str, SummaryStat] = {"people": _stat(len(group_a), len(group_b))}
    for cat, label in CATEGORY_LABELS.items():
        summary[label] = _stat(
            sum(1 for p in group_a if p.category == cat),
            sum(1 for p in group_b if p.category == cat),
        )
    summary["special_needs"] = _stat(
        sum(1 for p in group_a if p.special_needs),
        sum(1 for p in group_b if p.special_needs),
    )
    summary["behavior_notes"] = _stat(
        sum(1 for p in group_a if p.behavior_note),
        sum(1 for p in group_b if p.behavior_note),
    )
    summary["level_sum"] = _stat(sum(p.level for p in group_a), sum(p.level for p in group_b))
    summary["met_preferences"] = _stat(
        sum(1 for p in group_a if is_preference_met(p, group_a)),
        sum(1 for p in group_b if is_preference_met(p, group_b)),
    )
    return summary


def unmet_note(names: List[str]) -> str:
    if len(names) == 1:
        return f"WARNING: could not place {names[0]} with their chosen companion."
    return f"WARNING: could not place these people with their chosen companions: {', '.join(names)}."


def build_notes(
    group_a: List[Person],
    group_b: List[Person],
    score: int,
    initial_sort: bool = True,
) -> List[str]:
    notes: List[str] = []
    if initial_sort and score > 0:
        notes.append(IMPERFECT_BALANCE_NOTE)

    unmet = [p.name for p in group_a if not is_preference_met(p, group_a)]
    unmet += [p.name for p in group_b if not is_preference_met(p, group_b)]
    if unmet:
        notes.append(unmet_note(unmet))
    return notes


def describe_partition(
    group_a: List[Person],
    group_b: List[Person],
    score: Optional[int] = None,
) -> SplitResult:
    """
    Build the full result for a split.

    `score=None` means the groups were edited by hand: the score is recomputed
    and the imperfect-balance note is left out.
    """
    if len(group_a) + len(group_b) < 2:
        # trivial split, nothing to balance
        breakdown = ImbalanceBreakdown()
    else:
        breakdown = evaluate_partition(group_a, group_b)
    initial_sort = score is not None
    if score is None:
        score = breakdown.total
    return SplitResult(
        group_a=list(group_a),
        group_b=list(group_b),
        score=score,
        unmet_in_a=unmet_preference_ids(group_a),
        unmet_in_b=unmet_preference_ids(group_b),
        summary=build_summary(group_a, group_b),
        notes=build_notes(group_a, group_b, score, initial_sort=initial_sort),
        breakdown=breakdown,
    )
