# FILE: grouping_core/validation.py
from __future__ import annotations
from collections import Counter
from typing import Any, Dict, List

from grouping_core.constants import CATEGORIES, LEVELS
from grouping_core.models import Person

REQUIRED_KEYS = ["id", "name", "category", "special_needs", "behavior_note", "level", "preferred_names"]


def is_valid_person(obj: Any) -> bool:
    """Shape check applied to stored records before they become Person objects."""
    return (
        isinstance(obj, dict)
        and isinstance(obj.get("id"), int) and not isinstance(obj.get("id"), bool)
        and obj["id"] > 0
        and isinstance(obj.get("name"), str)
        and bool(obj["name"].strip())
        and obj.get("category") in CATEGORIES
        and isinstance(obj.get("special_needs"), bool)
        and isinstance(obj.get("behavior_note"), bool)
        and obj.get("level") in LEVELS and not isinstance(obj.get("level"), bool)
        and isinstance(obj.get("preferred_names"), list)
        and all(isinstance(c, str) for c in obj["preferred_names"])
    )


def validate_people(records: List[Dict[str, Any]]) -> List[str]:
    errs: List[str] = []
    seen_ids = set()
    for row, rec in enumerate(records, start=1):
        missing = [k for k in REQUIRED_KEYS if k not in rec]
        if missing:
            errs.append(f"Row {row}: missing fields {missing}")
            continue
        pid = rec["id"]
        if not isinstance(pid, int) or isinstance(pid, bool) or pid <= 0:
            errs.append(f"Row {row}: id must be a positive integer")
        elif pid in seen_ids:
            errs.append(f"Row {row}: duplicate id {pid}")
        else:
            seen_ids.add(pid)
        if not isinstance(rec["name"], str) or not rec["name"].strip():
            errs.append(f"Row {row}: name is empty")
        if rec["category"] not in CATEGORIES:
            errs.append(f"Row {row}: category must be one of {list(CATEGORIES)}")
        for flag in ("special_needs", "behavior_note"):
            if not isinstance(rec[flag], bool):
                errs.append(f"Row {row}: {flag} must be true or false")
        if rec["level"] not in LEVELS or isinstance(rec["level"], bool):
            errs.append(f"Row {row}: level must be one of {LEVELS}")
        prefs = rec["preferred_names"]
        if not isinstance(prefs, list) or not all(isinstance(c, str) for c in prefs):
            errs.append(f"Row {row}: preferred_names must be a list of names")
    return errs


def roster_warnings(people: List[Person]) -> List[str]:
    """
    Preferences are matched by name, so duplicate names make them ambiguous.
    These are warnings only; the split still runs.
    """
    warns: List[str] = []
    counts = Counter(p.name for p in people)
    dupes = sorted(name for name, c in counts.items() if c > 1)
    if dupes:
        warns.append(f"Duplicate names make companion preferences ambiguous: {', '.join(dupes)}")
    for p in people:
        unknown = [c for c in p.preferred_names if c not in counts]
        if unknown:
            warns.append(f"{p.name} prefers unknown name(s): {', '.join(unknown)}")
    return warns


def run_self_test():
    """
    Run a basic suite of self-tests.
    """
    results = {"tests": []}
    from grouping_core.combinations import combinations
    combos = combinations(list(range(6)), 3)
    results["tests"].append(("C(6,3) == 20", len(combos) == 20))
    results["tests"].append(("Combinations are unique", len({tuple(c) for c in combos}) == 20))

    from grouping_core.optimizer import optimize
    people = [
        Person(id=1, name="E1", category="boy", level=1),
        Person(id=2, name="E2", category="girl", level=2),
        Person(id=3, name="E3", category="boy", level=3),
        Person(id=4, name="E4", category="girl", level=4),
    ]
    result = optimize(people)
    results["tests"].append(("Balanced 4-person split scores 0", result.score == 0))
    results["tests"].append(("Group A is {E1, E4}", [p.name for p in result.group_a] == ["E1", "E4"]))
    return results
