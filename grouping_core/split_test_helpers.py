"""
Internal helpers for tests (not imported by app).
"""
from __future__ import annotations
import random
from typing import List, Optional
from .models import Person


def quick_person(pid: int, name: str, category: str = "boy", level: int = 1,
                 special: bool = False, behavior: bool = False,
                 prefs: Optional[List[str]] = None) -> Person:
    return Person(
        id=pid, name=name, category=category,
        special_needs=special, behavior_note=behavior,
        level=level, preferred_names=prefs or [],
    )


def random_people(n: int, seed: int = 0) -> List[Person]:
    rng = random.Random(seed)
    names = [f"P{i}" for i in range(1, n + 1)]
    people = []
    for i, name in enumerate(names, start=1):
        prefs = rng.sample(names, rng.randint(0, 2)) if rng.random() < 0.6 else []
        people.append(quick_person(
            i, name,
            category=rng.choice(["boy", "girl"]),
            level=rng.randint(1, 4),
            special=rng.random() < 0.2,
            behavior=rng.random() < 0.2,
            prefs=prefs,
        ))
    return people
