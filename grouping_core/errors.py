# FILE: grouping_core/errors.py
from __future__ import annotations


class GroupingError(RuntimeError):
    """Base class for failures raised by the split search."""


class PartitionNotFoundError(GroupingError):
    """The search finished without choosing a candidate although n >= 2."""


class TooManyPeopleError(GroupingError):
    def __init__(self, count: int, limit: int):
        super().__init__(f"Cannot split {count} people: the exhaustive search is limited to {limit}.")
        self.count = count
        self.limit = limit


class SearchTimeoutError(GroupingError):
    def __init__(self, time_limit_s: float, evaluated: int):
        super().__init__(
            f"Search stopped after {time_limit_s:g}s with {evaluated} candidates evaluated."
        )
        self.time_limit_s = time_limit_s
        self.evaluated = evaluated
