import logging

import streamlit as st

from agent.settings import configure_logging, get_diagnosis_delay
from agent.disease_matcher import DISEASE_KB
from agent.diagnosis_view import DiagnosisView
from agent.report_engine import (
    DISCLAIMER,
    create_docx_for_diagnosis,
    create_pdf_for_diagnosis,
    history_to_dataframe,
    results_to_dataframe,
)

configure_logging()
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Medical Diagnosis Assistant", page_icon="🧠")


# =====================================================
# SESSION STATE
# =====================================================

if "diagnosis_view" not in st.session_state:
    st.session_state.diagnosis_view = DiagnosisView(DISEASE_KB)

view = st.session_state.diagnosis_view


def submit_symptoms():
    # Enter in the text box submits the form too
    view.submit(st.session_state.get("symptoms", ""))


# =====================================================
# MAIN HEADER
# =====================================================

st.title("🧠 Medical Diagnosis Assistant")
st.write("Enter your symptoms to get possible diagnoses")


# =====================================================
# SYMPTOM INPUT
# =====================================================

st.subheader("Enter Your Symptoms")
with st.form("symptom_form"):
    st.text_input(
        "Separate multiple symptoms with commas (e.g., fever, cough, headache)",
        key="symptoms",
        placeholder="fever, cough, headache",
    )
    st.form_submit_button(
        "Analyzing..." if view.state.is_loading else "🔍 Get Diagnosis",
        on_click=submit_symptoms,
        disabled=view.state.is_loading,
    )


# =====================================================
# RESULTS
# =====================================================

# replaces whatever the previous run left here, so stale results
# are not shown while the next diagnosis is loading
results_area = st.empty()

if view.state.is_loading:
    with st.spinner("Analyzing symptoms..."):
        view.wait_and_complete(get_diagnosis_delay())

results = view.state.results

if results is not None:
    with results_area.container():
        st.markdown("---")
        st.header("✅ Diagnosis Suggestions")

        if not results:
            st.info("No matching diagnoses found. Try different symptoms.")
        else:
            for r in results:
                name_col, pct_col = st.columns([3, 1])
                with name_col:
                    st.subheader(r.name.upper())
                with pct_col:
                    st.metric("match", f"{r.match_percent}%")

                st.progress(r.match_percent)
                st.caption(f"Matched symptoms: {', '.join(r.matched_symptoms)}")
                st.markdown(f"**Evidence:** {r.evidence}")
                st.markdown("---")

            st.subheader("Export Results")
            try:
                st.dataframe(results_to_dataframe(results), hide_index=True)

                col1, col2 = st.columns(2)
                with col1:
                    st.download_button(
                        label="⬇ Download as DOCX",
                        data=create_docx_for_diagnosis(view.state.query, results),
                        file_name="diagnosis_report.docx",
                        mime="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                    )
                with col2:
                    st.download_button(
                        label="⬇ Download as PDF",
                        data=create_pdf_for_diagnosis(view.state.query, results),
                        file_name="diagnosis_report.pdf",
                        mime="application/pdf",
                    )
            except Exception as e:
                logger.exception("Report generation failed")
                st.error(f"Something went wrong while building the report: {e}")

        st.warning(f"Disclaimer: {DISCLAIMER}")


# =====================================================
# SIDEBAR: SESSION HISTORY
# =====================================================

with st.sidebar:
    st.header("🕘 This Session")
    if not view.history:
        st.caption("No diagnoses yet.")
    else:
        history_df = history_to_dataframe(view.history)
        st.dataframe(history_df, hide_index=True)
        st.download_button(
            "Download CSV",
            history_df.to_csv(index=False),
            "diagnosis_history.csv",
            "text/csv",
        )
        if st.button("🗑️ Clear History"):
            view.clear_history()
            st.rerun()
