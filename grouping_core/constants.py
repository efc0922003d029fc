# FILE: grouping_core/constants.py
from __future__ import annotations
from typing import Dict, List, Set

# --- Categories ---
BOY = "boy"
GIRL = "girl"
CATEGORIES = (BOY, GIRL)
CATEGORY_LABELS: Dict[str, str] = {BOY: "boys", GIRL: "girls"}

LEVELS: List[int] = [1, 2, 3, 4]

# --- Summary criteria (display order) ---
SUMMARY_CRITERIA: List[str] = [
    "people",
    "boys",
    "girls",
    "special_needs",
    "behavior_notes",
    "level_sum",
    "met_preferences",
]

SUMMARY_LABELS: Dict[str, str] = {
    "people": "People",
    "boys": "Boys",
    "girls": "Girls",
    "special_needs": "Special needs",
    "behavior_notes": "Behaviour notes",
    "level_sum": "Level (sum)",
    "met_preferences": "Met preferences",
}

# --- Notes ---
IMPERFECT_BALANCE_NOTE = (
    "A perfectly balanced split is not possible. "
    "This arrangement is the best option balancing all criteria."
)

# --- CSV ---
CSV_HEADERS: List[str] = [
    "id", "name", "category", "special_needs", "behavior_note", "level", "preferred_names",
]
HEADER_ALIASES: Dict[str, Set[str]] = {
    # canonical -> aliases (lowercase)
    "id": {"id", "person_id", "student_id"},
    "name": {"name", "full name", "student"},
    "category": {"category", "sex", "gender"},
    "special_needs": {"special_needs", "special needs", "special", "isspecial"},
    "behavior_note": {"behavior_note", "behaviour_note", "behavior", "attitude", "hasactitudinalproblems"},
    "level": {"level", "knowledge", "knowledge_level", "knowledgelevel"},
    "preferred_names": {"preferred_names", "companions", "preferred companions", "preferredcompanions"},
}

TRUE_TOKENS = {"true", "1", "yes", "y", "x"}


def normalize_name(s: str) -> str:
    if s is None:
        return ""
    return " ".join(s.split())


def normalize_category(s: str) -> str:
    if not s:
        return ""
    s = s.strip().lower()
    if s in ("b", "m", "male", "boys"):
        return BOY
    if s in ("g", "f", "female", "girls"):
        return GIRL
    return s
