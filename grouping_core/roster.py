# FILE: grouping_core/roster.py
"""
Record management around the split: create, update and delete people in a
RosterState, plus the manual "move to the other group" edit.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Tuple

from grouping_core.constants import normalize_name
from grouping_core.models import Person, RosterState

logger = logging.getLogger(__name__)


def parse_companions(text: str) -> List[str]:
    if not text:
        return []
    return [normalize_name(s) for s in str(text).split(",") if s.strip()]


def add_or_update_person(
    state: RosterState,
    fields: Dict[str, Any],
    editing_id: Optional[int] = None,
) -> Optional[Person]:
    """
    fields: name, category, special_needs, behavior_note, level, preferred_names
    (list or comma-separated string). A blank name is ignored.
    """
    name = normalize_name(str(fields.get("name", "") or ""))
    if not name:
        return None
    companions = fields.get("preferred_names", [])
    if isinstance(companions, str):
        companions = parse_companions(companions)
    data = {
        "name": name,
        "category": fields.get("category", "boy"),
        "special_needs": bool(fields.get("special_needs", False)),
        "behavior_note": bool(fields.get("behavior_note", False)),
        "level": int(fields.get("level", 1)),
        "preferred_names": list(companions),
    }

    if editing_id is not None:
        for i, p in enumerate(state.people):
            if p.id == editing_id:
                updated = Person(id=editing_id, **data)
                state.people[i] = updated
                logger.debug("Updated person %d (%s)", editing_id, name)
                return updated
        return None

    person = Person(id=state.next_id, **data)
    state.people.append(person)
    state.next_id += 1
    logger.debug("Added person %d (%s)", person.id, name)
    return person


def delete_person(state: RosterState, person_id: int) -> bool:
    before = len(state.people)
    state.people = [p for p in state.people if p.id != person_id]
    return len(state.people) < before


def move_person(
    group_a: List[Person],
    group_b: List[Person],
    person_id: int,
) -> Tuple[List[Person], List[Person]]:
    """Move one person to the other group. No re-optimisation happens."""
    if any(p.id == person_id for p in group_a):
        moving = [p for p in group_a if p.id == person_id]
        return [p for p in group_a if p.id != person_id], list(group_b) + moving
    if any(p.id == person_id for p in group_b):
        moving = [p for p in group_b if p.id == person_id]
        return list(group_a) + moving, [p for p in group_b if p.id != person_id]
    return list(group_a), list(group_b)
