# FILE: grouping_core/preferences.py
from __future__ import annotations
from typing import Iterable, List, Set
from grouping_core.models import Person


def _names(group: Iterable[Person]) -> Set[str]:
    return {p.name for p in group}


def is_preference_met(person: Person, group: Iterable[Person]) -> bool:
    """
    True when the person asked for nobody, or when at least one preferred name
    belongs to a member of `group`. Matching is by display name, not id.
    """
    if not person.preferred_names:
        return True
    names = _names(group)
    return any(name in names for name in person.preferred_names)


def satisfied_companions(person: Person, group: Iterable[Person]) -> List[str]:
    names = _names(group)
    return [name for name in person.preferred_names if name in names]


def unmet_preference_ids(group: List[Person]) -> Set[int]:
    return {p.id for p in group if not is_preference_met(p, group)}
