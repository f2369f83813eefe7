"""Streamlit front end: `streamlit run resume_screener/ui.py` next to a running API."""
import os

import streamlit as st

from resume_screener.client import DEFAULT_API_URL, Phase, ScreeningSession, score_label

PHASE_TEXT = {
    Phase.PARSING: "Extracting text from your resume...",
    Phase.ANALYZING: "Evaluating with AI...",
}

st.set_page_config(page_title="Resume Parser & Screener")

if "session" not in st.session_state:
    st.session_state.session = ScreeningSession(os.getenv("SCREENER_API_URL", DEFAULT_API_URL))
session: ScreeningSession = st.session_state.session

st.title("Resume Parser & Screener")
st.write(
    "Upload a PDF or DOCX resume, add a job description, and get an AI-powered "
    "screening with a score and recommendations."
)

resume_file = st.file_uploader("Resume file (PDF or DOCX)", type=["pdf", "docx"])
job_desc = st.text_area("Job Description", placeholder="Paste the target job description here...", height=200)

status = st.empty()

def show_phase(phase: Phase):
    if phase in PHASE_TEXT:
        status.info(PHASE_TEXT[phase])
    else:
        status.empty()

session.on_phase = show_phase

inputs = (resume_file.name if resume_file else None, resume_file.size if resume_file else None, job_desc)
if st.session_state.get("last_inputs") != inputs:
    st.session_state.last_inputs = inputs
    if not session.busy:
        session.reset()

if st.button("Analyze Resume", disabled=not session.can_submit(resume_file is not None, job_desc)):
    session.submit(
        resume_file.name,
        resume_file.getvalue(),
        resume_file.type,
        job_desc,
    )

if session.phase == Phase.FAILED and session.error:
    st.error(f"Something went wrong: {session.error}")
    if st.button("Dismiss"):
        session.dismiss_error()
        st.rerun()

result = session.result
score = result.score if result else 0

st.subheader("Score")
col_score, col_label = st.columns(2)
col_score.metric("Match score", score)
col_label.write(score_label(score) if result else "")
st.progress(score / 100)
st.caption("0 to 100 (higher is better)")

sections = [
    ("Strengths", result.strengths if result else [], "No strengths to display yet."),
    ("Missing Skills", result.missing_skills if result else [], "No missing skills to display yet."),
    ("Suggestions", result.suggestions if result else [], "No suggestions to display yet."),
]
for col, (title, items, empty) in zip(st.columns(3), sections):
    with col:
        st.subheader(title)
        if items:
            for item in items:
                st.markdown(f"- {item}")
        else:
            st.caption(empty)

if session.resume_text:
    with st.expander("Parsed Resume Text"):
        st.text(session.resume_text)
