# FILE: pages/1_Import_Export.py
import streamlit as st

from grouping_core.config import SAMPLE_PEOPLE_PATH, ensure_assets_exist
from grouping_core.export_pdf import render_groups_pdf
from grouping_core.io import (
    load_people_csv,
    save_people_csv_bytes,
    generate_template_csv_bytes,
    result_to_json_bytes,
    save_store,
)
from grouping_core.models import RosterState

ensure_assets_exist()

st.title("Import & Export")

if "roster" not in st.session_state:
    st.warning("Open the main page first to load the saved people.")
    st.stop()

roster: RosterState = st.session_state.roster

st.subheader("People CSV")
replace = st.checkbox("Replace current people", value=False)
uploaded_file = st.file_uploader("Upload people CSV", type=["csv"])
if uploaded_file is not None and st.button("Import"):
    try:
        imported = load_people_csv(uploaded_file)
    except ValueError as e:
        st.error(f"Error loading CSV: {e}")
    else:
        if replace:
            roster.people = imported
        else:
            taken = {p.id for p in roster.people}
            clashes = [p.id for p in imported if p.id in taken]
            if clashes:
                st.error(f"Ids already in use: {clashes}. Tick 'Replace current people' or renumber the CSV.")
                st.stop()
            roster.people = roster.people + imported
        roster.next_id = max([roster.next_id] + [p.id + 1 for p in roster.people])
        save_store(st.session_state.app_config.store_path, roster)
        st.session_state.result = None
        st.success(f"Imported {len(imported)} people.")

c1, c2, c3 = st.columns(3)
with c1:
    st.download_button("Download people.csv", data=save_people_csv_bytes(roster.people),
                       file_name="people.csv", mime="text/csv", disabled=not roster.people)
with c2:
    st.download_button("Download template.csv", data=generate_template_csv_bytes(),
                       file_name="template.csv", mime="text/csv")
with c3:
    with open(SAMPLE_PEOPLE_PATH, "rb") as f:
        st.download_button("Download sample_people.csv", data=f.read(),
                           file_name="sample_people.csv", mime="text/csv")

st.subheader("Groups")
result = st.session_state.get("result")
if result is None:
    st.info("No split yet. Run one on the main page first.")
else:
    st.download_button("Download groups (PDF)", data=render_groups_pdf(result),
                       file_name="groups.pdf", mime="application/pdf")
    st.download_button("Download groups (JSON)", data=result_to_json_bytes(result),
                       file_name="groups.json", mime="application/json")
