# grouping_core/export_pdf.py
from __future__ import annotations
import io
from itertools import zip_longest
from reportlab.lib.pagesizes import A4
from reportlab.lib import colors
from reportlab.pdfgen import canvas
from reportlab.platypus import Table, TableStyle

from grouping_core.constants import SUMMARY_CRITERIA, SUMMARY_LABELS
from grouping_core.models import Person, SplitResult

_TABLE_STYLE = TableStyle([
    ("BACKGROUND", (0,0), (-1,0), colors.lightgrey),
    ("TEXTCOLOR", (0,0), (-1,0), colors.black),
    ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
    ("FONTSIZE", (0,0), (-1,-1), 9),
    ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ("ALIGN", (0,0), (-1,-1), "LEFT"),
    ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
])


def _cell(p: Person | None, unmet: set) -> str:
    if p is None:
        return ""
    tags = []
    if p.special_needs:
        tags.append("SN")
    if p.behavior_note:
        tags.append("BN")
    if p.id in unmet:
        tags.append("!")
    suffix = f" [{', '.join(tags)}]" if tags else ""
    return f"{p.name} ({p.category}, L{p.level}){suffix}"


def _draw_table(c, data, x, top, max_w, max_h) -> float:
    t = Table(data, repeatRows=1)
    t.setStyle(_TABLE_STYLE)
    _, h = t.wrapOn(c, max_w, max_h)
    t.drawOn(c, x, top - h)
    return top - h


def render_groups_pdf(result: SplitResult, title: str = "Groups") -> bytes:
    buf = io.BytesIO()
    page_w, page_h = A4
    c = canvas.Canvas(buf, pagesize=A4)
    c.setFont("Helvetica-Bold", 16)
    c.drawString(40, page_h - 40, title)
    c.setFont("Helvetica", 10)
    c.drawString(40, page_h - 58, f"Imbalance score: {result.score}")

    unmet = result.unmet_in_a | result.unmet_in_b
    groups = [["Group 1", "Group 2"]]
    for a, b in zip_longest(result.group_a, result.group_b):
        groups.append([_cell(a, unmet), _cell(b, unmet)])
    y = _draw_table(c, groups, 40, page_h - 75, page_w - 80, page_h - 120)

    summary = [["Criterion", "Group 1", "Group 2", "Balance"]]
    for key in SUMMARY_CRITERIA:
        stat = result.summary.get(key)
        if stat is not None:
            summary.append([SUMMARY_LABELS[key], stat.group_a, stat.group_b, stat.balance])
    y = _draw_table(c, summary, 40, y - 20, page_w - 80, y - 60)

    c.setFont("Helvetica", 9)
    for note in result.notes:
        y -= 14
        c.drawString(40, y, note[:130])

    c.showPage()
    c.save()
    return buf.getvalue()
