# app.py
import matplotlib.pyplot as plt
import streamlit as st

from exceptions import DocumentError
from logging_config import PerformanceMonitor, configure_for_environment, get_logger
from report import build_report, generate_pdf_report, summary_csv, summary_frame

configure_for_environment()
logger = get_logger(__name__)

TEXT_EXTENSIONS = (".txt", ".md")

st.set_page_config(page_title="Resume Insight", layout="wide")
st.title("Resume Insight — Resume Analyzer & Job Matcher")

st.sidebar.header("Resumes / Job")
uploaded_files = st.sidebar.file_uploader("Upload plain-text resumes (TXT)", accept_multiple_files=True)
pasted_resume = st.sidebar.text_area("Or paste a resume", height=150)
job_desc = st.sidebar.text_area("Optional: Paste Job Description (for JD matching)", height=150)
run_button = st.sidebar.button("Analyze")


def read_upload(file):
    """file is a Streamlit UploadedFile or similar object"""
    name = file.name
    if not name.lower().endswith(TEXT_EXTENSIONS):
        raise DocumentError(
            f"{name}: only plain-text files can be analyzed here; convert PDF/DOCX to text first",
            document_name=name,
        )
    text = file.read().decode(errors='ignore')
    if not text.strip():
        raise DocumentError(f"{name} is empty", document_name=name)
    return text


def collect_documents():
    documents = []
    for f in uploaded_files or []:
        try:
            documents.append((f.name, read_upload(f)))
        except DocumentError as e:
            logger.warning(f"Skipping upload: {e.to_dict()}")
            st.warning(e.message)
    if pasted_resume.strip():
        documents.append(("pasted_resume", pasted_resume))
    return documents


if run_button:
    documents = collect_documents()
    if not documents:
        st.info("Upload or paste at least one resume.")
        st.stop()

    reports = []
    with PerformanceMonitor(f"Analyzing {len(documents)} resumes", logger=logger):
        for name, text in documents:
            reports.append(build_report(name, text, job_desc))

    st.subheader("Summary")
    st.dataframe(summary_frame(reports))
    st.download_button("Download summary CSV", data=summary_csv(reports),
                       file_name="resume_insight_summary.csv", mime="text/csv")

    st.subheader("ATS Scores")
    fig, ax = plt.subplots(figsize=(8, 3))
    ax.bar([r['filename'] for r in reports], [r['ats_score'] for r in reports], color='green')
    ax.set_ylabel("ATS Score")
    ax.set_ylim(0, 100)
    st.pyplot(fig)

    for r in reports:
        with st.expander(f"{r['filename']} — ATS {r['ats_score']}"):
            st.write("Emails:", r['emails'])
            st.write("Phones:", r['phones'])
            st.write("Skills:", r['skills'])
            st.write("Education lines:", r['education'])
            st.write("Experience (snippets):", [e[:200] for e in r['experience']])
            st.write("Top keywords:", r['keywords'])
            st.write("ATS checks:")
            for check in r['ats_checks']:
                st.write("✅" if check['passed'] else "❌", check['label'], "—", check['description'])
            st.write("Suggestions:")
            for s in r['suggestions']:
                st.write("-", s)
            if "jd_score" in r:
                st.write("Job description match:", f"{r['jd_score']}% ({r['jd_label']})")
                st.write("Matched JD keywords:", r['jd_matched'])
                st.write("Missing JD keywords:", r['jd_missing'])
            st.download_button("Download PDF report", data=generate_pdf_report(r),
                               file_name=f"{r['filename']}_analysis.pdf", mime="application/pdf",
                               key=f"pdf_{r['filename']}")
else:
    st.info("Upload or paste resumes and click Analyze in the sidebar.")
