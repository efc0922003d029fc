# FILE: pages/2_Admin_Tools.py
import streamlit as st
from grouping_core.validation import run_self_test

st.title("Admin & Self-Test")

if st.button("Run Self-Test"):
    results = run_self_test()
    for name, ok in results["tests"]:
        (st.success if ok else st.error)(name)

st.write("Use this page for diagnostics.")
