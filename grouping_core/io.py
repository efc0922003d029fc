# FILE: grouping_core/io.py
from __future__ import annotations
import io
import json
import logging
import os
from typing import Dict, Iterable, List, Optional
import pandas as pd
import yaml
from pydantic import ValidationError

from grouping_core.config import DEFAULT_CONFIG
from grouping_core.constants import (
    CSV_HEADERS, HEADER_ALIASES, TRUE_TOKENS, normalize_category, normalize_name,
)
from grouping_core.models import AppConfig, Person, RosterState, SplitResult
from grouping_core.roster import parse_companions
from grouping_core.validation import is_valid_person

logger = logging.getLogger(__name__)


# ---------- CSV ----------
def _header_map(cols: Iterable[str]) -> Dict[str, str]:
    """
    Map provided columns to canonical headers (case-insensitive, via HEADER_ALIASES).
    Unknown columns are left untouched.
    """
    out = {}
    for c in cols:
        lc = str(c).strip().lower()
        mapped = None
        for canon, aliases in HEADER_ALIASES.items():
            if lc == canon or lc in aliases:
                mapped = canon
                break
        out[c] = mapped if mapped else c
    return out


def _to_int(v) -> Optional[int]:
    try:
        return int(float(str(v).strip()))
    except (TypeError, ValueError, OverflowError):
        return None


def _to_bool(v) -> bool:
    if isinstance(v, bool):
        return v
    if v is None or (isinstance(v, float) and pd.isna(v)):
        return False
    return str(v).strip().lower() in TRUE_TOKENS


def dataframe_to_people(df: pd.DataFrame) -> List[Person]:
    """
    Rows with a blank name are skipped; a missing id gets the next free one.
    Raises ValueError naming the row for anything pydantic rejects.
    """
    people: List[Person] = []
    seen_ids = set()
    ids = [i for i in (_to_int(v) for v in df.get("id", [])) if i is not None]
    next_id = max(ids, default=0) + 1
    for i, (_, r) in enumerate(df.iterrows(), start=1):
        name = normalize_name(str(r.get("name", "") or ""))
        if not name or name.lower() == "nan":
            continue
        pid = _to_int(r.get("id"))
        if pid is None:
            pid = next_id
            next_id += 1
        if pid in seen_ids:
            raise ValueError(f"Row {i} ({name}): duplicate id {pid}")
        seen_ids.add(pid)
        prefs = r.get("preferred_names", "")
        if isinstance(prefs, (list, tuple)):
            prefs = [normalize_name(str(x)) for x in prefs if str(x).strip()]
        else:
            prefs = parse_companions("" if pd.isna(prefs) else str(prefs))
        level = _to_int(r.get("level", 1))
        try:
            people.append(Person(
                id=pid,
                name=name,
                category=normalize_category(str(r.get("category", "") or "")),
                special_needs=_to_bool(r.get("special_needs")),
                behavior_note=_to_bool(r.get("behavior_note")),
                level=1 if level is None else level,
                preferred_names=prefs,
            ))
        except ValidationError as e:
            err = e.errors()[0]
            field = ".".join(str(x) for x in err["loc"])
            raise ValueError(f"Row {i} ({name}): {field}: {err['msg']}") from e
    return people


def load_people_csv(file_like) -> List[Person]:
    if isinstance(file_like, (bytes, bytearray)):
        file_like = io.BytesIO(file_like)
    df = pd.read_csv(file_like, dtype=str, keep_default_na=False)
    df = df.rename(columns=_header_map(df.columns))
    if "name" not in df.columns:
        raise ValueError("Missing required column: name")
    for c in CSV_HEADERS:
        if c not in df.columns:
            df[c] = ""
    return dataframe_to_people(df[CSV_HEADERS])


def people_to_dataframe(people: List[Person]) -> pd.DataFrame:
    rows = [{
        "id": p.id,
        "name": p.name,
        "category": p.category,
        "special_needs": p.special_needs,
        "behavior_note": p.behavior_note,
        "level": p.level,
        "preferred_names": ", ".join(p.preferred_names),
    } for p in people]
    return pd.DataFrame(rows, columns=CSV_HEADERS)


def save_people_csv_bytes(people: List[Person]) -> bytes:
    buf = io.StringIO()
    people_to_dataframe(people).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def generate_template_csv_bytes() -> bytes:
    buf = io.StringIO()
    pd.DataFrame(columns=CSV_HEADERS).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


# ---------- JSON store ----------
def load_store(path: str) -> RosterState:
    if not os.path.exists(path):
        return RosterState()
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Error reading people store %s: %s", path, e)
        return RosterState()

    people_raw = raw.get("people") if isinstance(raw, dict) else None
    if not isinstance(people_raw, list) or not all(is_valid_person(p) for p in people_raw):
        logger.error("People store %s has invalid records; starting empty", path)
        return RosterState()
    try:
        people = [Person(**p) for p in people_raw]
    except ValidationError as e:
        logger.error("People store %s has invalid records; starting empty (%s)", path, e)
        return RosterState()
    if len({p.id for p in people}) != len(people):
        logger.error("People store %s has duplicate ids; starting empty", path)
        return RosterState()

    fallback_id = max((p.id for p in people), default=0) + 1
    next_id = raw.get("next_id")
    if not isinstance(next_id, int) or isinstance(next_id, bool) or next_id <= 0:
        logger.error("People store %s has invalid next_id %r; using %d", path, next_id, fallback_id)
        next_id = fallback_id
    return RosterState(people=people, next_id=next_id)


def save_store(path: str, state: RosterState) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(state.model_dump_json(indent=2))


# ---------- Config / results ----------
def load_config_yaml(path: str) -> AppConfig:
    with open(path, "r", encoding="utf-8") as f:
        obj = yaml.safe_load(f) or {}
    if not isinstance(obj, dict):
        raise ValueError(f"Config {path} must be a mapping of settings.")
    unknown = sorted(set(obj) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {unknown}")
    return AppConfig(**{**DEFAULT_CONFIG, **obj})


def result_to_json_bytes(result: SplitResult) -> bytes:
    data = result.model_dump(mode="json")
    data["unmet_in_a"] = sorted(result.unmet_in_a)
    data["unmet_in_b"] = sorted(result.unmet_in_b)
    data["breakdown"]["total"] = result.breakdown.total
    return json.dumps(data, indent=2, ensure_ascii=False).encode("utf-8")
