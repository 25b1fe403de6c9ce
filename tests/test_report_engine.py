from docx import Document

from agent.disease_matcher import diagnose
from agent.report_engine import (
    HISTORY_COLUMNS,
    RESULT_COLUMNS,
    create_docx_for_diagnosis,
    create_pdf_for_diagnosis,
    history_to_dataframe,
    results_to_dataframe,
)

QUERY = "fever, cough, headache"


def test_results_dataframe():
    df = results_to_dataframe(diagnose(QUERY))
    assert list(df.columns) == RESULT_COLUMNS
    assert df["Disease"].tolist() == ["INFLUENZA", "COVID-19", "COMMON COLD", "MIGRAINE", "ALLERGIES"]
    assert df["Match (%)"].tolist() == [50, 43, 40, 25, 25]
    assert df.loc[0, "Matched Symptoms"] == "fever, cough, headache"


def test_empty_dataframes_keep_columns():
    assert list(results_to_dataframe([]).columns) == RESULT_COLUMNS
    assert list(history_to_dataframe([]).columns) == HISTORY_COLUMNS


def test_history_dataframe():
    history = [{"time": "2024-01-01 10:00:00", "query": "fever", "matches": 2,
                "top_match": "influenza", "top_percent": 17}]
    df = history_to_dataframe(history)
    assert df.loc[0, "top_match"] == "influenza"
    assert "query" in df.to_csv(index=False)


def test_docx_report_lists_every_result():
    buf = create_docx_for_diagnosis(QUERY, diagnose(QUERY))
    text = "\n".join(p.text for p in Document(buf).paragraphs)

    assert f"Symptoms entered: {QUERY}" in text
    assert "1. INFLUENZA" in text
    assert "5. ALLERGIES" in text
    assert "Match: 43%" in text
    assert "Disclaimer:" in text


def test_docx_report_without_matches():
    buf = create_docx_for_diagnosis("xyz", [])
    text = "\n".join(p.text for p in Document(buf).paragraphs)
    assert "No matching diagnoses found." in text


def test_pdf_report_is_a_pdf():
    data = create_pdf_for_diagnosis(QUERY, diagnose(QUERY)).getvalue()
    assert data.startswith(b"%PDF")
    assert len(data) > 500


def test_pdf_report_handles_many_results():
    # enough lines to spill onto a second page
    results = diagnose(QUERY) * 12
    data = create_pdf_for_diagnosis(QUERY, results).getvalue()
    assert data.startswith(b"%PDF")
