# FILE: tests/test_export_pdf.py
from grouping_core.export_pdf import render_groups_pdf
from grouping_core.optimizer import optimize
from grouping_core.split_test_helpers import random_people

def test_render_groups_pdf():
    result = optimize(random_people(7, seed=2))
    pdf = render_groups_pdf(result, title="Class 3B")
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 500
