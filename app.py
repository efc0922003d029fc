# app.py
import logging
from typing import List

import pandas as pd
import streamlit as st

from grouping_core.config import (
    DEFAULT_CONFIG,
    CONFIG_PATH,
    ensure_assets_exist,
    ui_css,
)
from grouping_core.constants import CATEGORIES, LEVELS, SUMMARY_CRITERIA, SUMMARY_LABELS
from grouping_core.errors import GroupingError
from grouping_core.io import (
    load_config_yaml,
    load_store,
    save_store,
    people_to_dataframe,
)
from grouping_core.models import AppConfig, Person, SplitResult
from grouping_core.optimizer import optimize
from grouping_core.preferences import satisfied_companions
from grouping_core.roster import add_or_update_person, delete_person, move_person
from grouping_core.summary import describe_partition
from grouping_core.validation import roster_warnings


# ---------- Page & Theme ----------
st.set_page_config(page_title="Group Splitter", layout="wide")
st.markdown(ui_css(), unsafe_allow_html=True)

ensure_assets_exist()


def _load_config() -> AppConfig:
    try:
        return load_config_yaml(CONFIG_PATH)
    except (OSError, ValueError) as e:
        st.warning(f"Invalid {CONFIG_PATH}; using defaults. ({e})")
        return AppConfig(**DEFAULT_CONFIG)


# ---------- Session State ----------
def _init_state():
    ss = st.session_state
    ss.setdefault("app_config", _load_config())
    ss.setdefault("roster", load_store(ss.app_config.store_path))
    ss.setdefault("editing_id", None)
    ss.setdefault("show_form", True)
    ss.setdefault("result", None)        # SplitResult of the last split
    ss.setdefault("split_error", None)

_init_state()

logging.basicConfig(
    level=getattr(logging, st.session_state.app_config.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("group_splitter")


def _persist():
    save_store(st.session_state.app_config.store_path, st.session_state.roster)


def _clear_result():
    st.session_state.result = None
    st.session_state.split_error = None


# ---------- Sidebar ----------
with st.sidebar:
    st.header("⚙️ Settings")
    cfg = st.session_state.app_config
    cfg.max_people = int(st.number_input(
        "Max people for exhaustive search",
        min_value=2, max_value=DEFAULT_CONFIG["max_people"],
        value=min(cfg.max_people, DEFAULT_CONFIG["max_people"]), step=1,
        help="The search is exponential; above ~26 people it becomes very slow.",
    ))
    limit = st.number_input(
        "Time limit (s, 0 = none)",
        min_value=0.0, max_value=600.0, value=float(cfg.time_limit_s or 0.0), step=5.0,
    )
    cfg.time_limit_s = float(limit) or None
    if st.button("Reload config.yaml", use_container_width=True):
        st.session_state.app_config = _load_config()
        st.success("Config reloaded.")


# ---------- Header ----------
st.markdown(
    """
<div class="card">
  <h2>Group Splitter</h2>
  <div class="small">
    Add people → <b>Split</b>. The split balances boys/girls, special needs,
    behaviour notes and level, and tries to place everyone with a chosen companion.
  </div>
</div>
""",
    unsafe_allow_html=True,
)

roster = st.session_state.roster

# ============================================================
# People form (add / edit)
# ============================================================
if st.button("Hide form" if st.session_state.show_form else "Add person"):
    st.session_state.show_form = not st.session_state.show_form
    if not st.session_state.show_form:
        st.session_state.editing_id = None
    st.rerun()

if st.session_state.show_form:
    editing = next((p for p in roster.people if p.id == st.session_state.editing_id), None)
    with st.form("person_form", clear_on_submit=True):
        st.subheader("Edit person" if editing else "Add person")
        c1, c2, c3 = st.columns([2, 1, 1])
        with c1:
            name = st.text_input("Name", value=editing.name if editing else "")
            companions = st.text_input(
                "Preferred companions (comma separated)",
                value=", ".join(editing.preferred_names) if editing else "",
            )
        with c2:
            category = st.radio(
                "Category", CATEGORIES,
                index=CATEGORIES.index(editing.category) if editing else 0,
                horizontal=True,
            )
            level = st.selectbox("Level", LEVELS, index=(editing.level - 1) if editing else 0)
        with c3:
            special = st.checkbox("Special needs", value=editing.special_needs if editing else False)
            behavior = st.checkbox("Behaviour note", value=editing.behavior_note if editing else False)
        submitted = st.form_submit_button("Save" if editing else "Add")

    if submitted:
        person = add_or_update_person(
            roster,
            {
                "name": name,
                "category": category,
                "special_needs": special,
                "behavior_note": behavior,
                "level": level,
                "preferred_names": companions,
            },
            editing_id=st.session_state.editing_id,
        )
        if person is None:
            st.warning("Name is required.")
        else:
            st.session_state.editing_id = None
            _persist()
            st.rerun()
    if editing and st.button("Cancel edit"):
        st.session_state.editing_id = None
        st.rerun()

# ============================================================
# People list
# ============================================================
st.subheader(f"People ({len(roster.people)})")
if not roster.people:
    st.info("No people yet. Add some above or import a CSV on the Import & Export page.")
else:
    st.dataframe(people_to_dataframe(roster.people), use_container_width=True, hide_index=True)
    cols = st.columns([3, 1, 1])
    with cols[0]:
        pick = st.selectbox(
            "Select person",
            [p.id for p in roster.people],
            format_func=lambda pid: next(p.name for p in roster.people if p.id == pid),
        )
    with cols[1]:
        if st.button("Edit", use_container_width=True):
            st.session_state.editing_id = pick
            st.session_state.show_form = True
            st.rerun()
    with cols[2]:
        if st.button("Delete", use_container_width=True):
            delete_person(roster, pick)
            if st.session_state.editing_id == pick:
                st.session_state.editing_id = None
            _persist()
            _clear_result()
            st.rerun()

    for w in roster_warnings(roster.people):
        st.warning(w)

# ============================================================
# Split
# ============================================================
if st.button("Split into two groups", type="primary", disabled=not roster.people):
    _clear_result()
    st.session_state.show_form = False
    try:
        with st.spinner("Searching every split..."):
            st.session_state.result = optimize(roster.people, st.session_state.app_config)
    except GroupingError as e:
        logger.error("Split failed: %s", e)
        st.session_state.split_error = str(e)

if st.session_state.split_error:
    st.error(st.session_state.split_error)


def _render_group(title: str, group: List[Person], unmet: set):
    st.markdown(f"#### {title} ({len(group)})")
    for p in group:
        tags = []
        if p.special_needs:
            tags.append('<span class="tag">special needs</span>')
        if p.behavior_note:
            tags.append('<span class="tag">behaviour</span>')
        met = satisfied_companions(p, group)
        with_txt = f' <span class="small">with {", ".join(met)}</span>' if met else ""
        cls = "person unmet" if p.id in unmet else "person"
        st.markdown(
            f'<div class="{cls}">{p.name} · {p.category} · L{p.level} {"".join(tags)}{with_txt}</div>',
            unsafe_allow_html=True,
        )


result: SplitResult = st.session_state.result
if result is not None:
    for note in result.notes:
        st.warning(note)

    g1, g2 = st.columns(2)
    with g1:
        _render_group("Group 1", result.group_a, result.unmet_in_a)
    with g2:
        _render_group("Group 2", result.group_b, result.unmet_in_b)

    st.markdown("#### Summary")
    rows = [
        {
            "Criterion": SUMMARY_LABELS[key],
            "Group 1": result.summary[key].group_a,
            "Group 2": result.summary[key].group_b,
            "Balance": result.summary[key].balance,
        }
        for key in SUMMARY_CRITERIA
    ]
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
    st.caption(f"Imbalance score: {result.score}")

    # Manual edit: move one person; stats are recalculated, nothing is re-optimised.
    everyone = result.group_a + result.group_b
    mv = st.selectbox(
        "Move person to the other group",
        [p.id for p in everyone],
        format_func=lambda pid: next(p.name for p in everyone if p.id == pid),
    )
    if st.button("Move"):
        a, b = move_person(result.group_a, result.group_b, mv)
        st.session_state.result = describe_partition(a, b)
        st.rerun()
