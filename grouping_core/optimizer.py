# FILE: grouping_core/optimizer.py
from __future__ import annotations
import itertools
import logging
import time
from typing import List, Optional, Sequence, Tuple
import numpy as np

from grouping_core.combinations import index_combinations
from grouping_core.errors import PartitionNotFoundError, SearchTimeoutError, TooManyPeopleError
from grouping_core.evaluator import PeopleArena
from grouping_core.models import AppConfig, Person, SplitResult
from grouping_core.summary import describe_partition

logger = logging.getLogger(__name__)


def _batch_masks(batch: List[Tuple[int, ...]], n: int) -> np.ndarray:
    masks = np.zeros((len(batch), n), dtype=bool)
    idx = np.array(batch, dtype=np.intp)
    rows = np.repeat(np.arange(len(batch)), idx.shape[1])
    masks[rows, idx.ravel()] = True
    return masks


def find_best_partition(
    people: Sequence[Person],
    config: Optional[AppConfig] = None,
) -> Tuple[List[Person], List[Person], int]:
    """
    Exhaustive search over every group A of size n // 2.

    Returns (group_a, group_b, score). A candidate replaces the incumbent only
    on strict improvement, so ties keep the earliest-enumerated split.
    """
    config = config or AppConfig()
    people = list(people)
    n = len(people)
    if n < 2:
        return people, [], 0
    if n > config.max_people:
        raise TooManyPeopleError(n, config.max_people)

    k = n // 2
    arena = PeopleArena(people)
    started = time.monotonic()
    combos = index_combinations(n, k)

    best: Optional[Tuple[int, ...]] = None
    best_score: Optional[int] = None
    evaluated = 0

    while True:
        batch = list(itertools.islice(combos, config.batch_size))
        if not batch:
            break
        scores = arena.score_masks(_batch_masks(batch, n))
        pos = int(np.argmin(scores))  # first occurrence of the minimum
        if best_score is None or int(scores[pos]) < best_score:
            best_score = int(scores[pos])
            best = batch[pos]
        evaluated += len(batch)
        if best_score == 0:
            # nothing later can be strictly better
            break
        if config.time_limit_s is not None and time.monotonic() - started > config.time_limit_s:
            raise SearchTimeoutError(config.time_limit_s, evaluated)

    if best is None or best_score is None:
        raise PartitionNotFoundError(f"No candidate split was selected for {n} people.")

    logger.info(
        "Split %d people: %d candidates evaluated, best score %d (%.3fs)",
        n, evaluated, best_score, time.monotonic() - started,
    )
    chosen = set(best)
    group_a = [people[i] for i in best]
    group_b = [p for i, p in enumerate(people) if i not in chosen]
    return group_a, group_b, best_score


def optimize(people: Sequence[Person], config: Optional[AppConfig] = None) -> SplitResult:
    group_a, group_b, score = find_best_partition(people, config)
    return describe_partition(group_a, group_b, score=score)
