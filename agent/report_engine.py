# agent/report_engine.py

import logging
from datetime import datetime
from io import BytesIO

import pandas as pd
from docx import Document
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ["Disease", "Match (%)", "Matched Symptoms", "Evidence"]
HISTORY_COLUMNS = ["time", "query", "matches", "top_match", "top_percent"]

DISCLAIMER_LINES = (
    "This is a demonstration tool for educational purposes only.",
    "Always consult with qualified healthcare professionals for medical advice and diagnosis.",
)
DISCLAIMER = " ".join(DISCLAIMER_LINES)


# =====================================================
# TABLES (pandas)
# =====================================================

def results_to_dataframe(results):
    rows = [
        {
            "Disease": r.name.upper(),
            "Match (%)": r.match_percent,
            "Matched Symptoms": ", ".join(r.matched_symptoms),
            "Evidence": r.evidence,
        }
        for r in results
    ]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def history_to_dataframe(history):
    return pd.DataFrame(list(history), columns=HISTORY_COLUMNS)


# =====================================================
# REPORT GENERATORS (DOCX / PDF)
# =====================================================

def _result_lines(r):
    lines = [f"Match: {r.match_percent}%"]
    if r.matched_symptoms:
        lines.append(f"Matched symptoms: {', '.join(r.matched_symptoms)}")
    lines.append(f"Evidence: {r.evidence}")
    return lines


def create_docx_for_diagnosis(query, results):
    doc = Document()
    doc.add_heading("Diagnosis Suggestions", level=1)

    doc.add_paragraph(f"Generated on: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    doc.add_paragraph(f"Symptoms entered: {query}")
    doc.add_paragraph("")

    if not results:
        doc.add_paragraph("No matching diagnoses found.")

    for idx, r in enumerate(results, start=1):
        doc.add_heading(f"{idx}. {r.name.upper()}", level=2)
        for line in _result_lines(r):
            doc.add_paragraph(line)

    doc.add_paragraph("")
    doc.add_paragraph(f"Disclaimer: {DISCLAIMER}")

    buffer = BytesIO()
    doc.save(buffer)
    buffer.seek(0)
    logger.debug("DOCX report built for %d result(s)", len(results))
    return buffer


def create_pdf_for_diagnosis(query, results):
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    width, height = A4
    bottom = 50

    y = height - 50
    c.setFont("Helvetica-Bold", 16)
    c.drawString(50, y, "Diagnosis Suggestions")
    y -= 40

    lines = [
        f"Generated on: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
        f"Symptoms entered: {query}",
        "",
    ]
    if not results:
        lines.append("No matching diagnoses found.")
    for idx, r in enumerate(results, start=1):
        lines.append(f"{idx}. {r.name.upper()}")
        lines.extend(f"    {line}" for line in _result_lines(r))
        lines.append("")

    c.setFont("Helvetica", 11)
    for line in lines:
        if y < bottom:
            c.showPage()
            c.setFont("Helvetica", 11)
            y = height - 50
        c.drawString(50, y, line)
        y -= 18

    c.setFont("Helvetica-Oblique", 8)
    for i, line in enumerate(DISCLAIMER_LINES):
        c.drawString(50, bottom - 20 - i * 10, line)

    c.showPage()
    c.save()
    buffer.seek(0)
    logger.debug("PDF report built for %d result(s)", len(results))
    return buffer
