# report.py
import io

import pandas as pd
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from ats import analyze_ats
from job_matcher import match_job
from resume_parser import extract_resume_data

SUMMARY_COLUMNS = ["Filename", "Skills", "Education", "Experience", "ATS", "JD Match"]


def build_report(filename, text, job_description=""):
    """Flatten extraction, ATS and optional job match results into one dict."""
    record = extract_resume_data(text)
    ats = analyze_ats(text, job_description)
    report = {
        "filename": filename,
        "emails": list(record.emails),
        "phones": list(record.phones),
        "skills": list(record.skills),
        "education": list(record.education),
        "experience": list(record.experience),
        "keywords": list(record.keywords),
        "summary": record.summary,
        "word_count": len(text.split()),
        "ats_score": ats.score,
        "ats_checks": [c.model_dump() for c in ats.checks],
        "suggestions": list(ats.suggestions),
    }
    if job_description and job_description.strip():
        match = match_job(text, job_description)
        report["jd_similarity"] = match.similarity
        report["jd_score"] = match.score
        report["jd_label"] = match.label
        report["jd_matched"] = list(match.matched_keywords)
        report["jd_missing"] = list(match.missing_keywords)
    return report


def summary_frame(reports):
    df = pd.DataFrame([{
        "Filename": r["filename"],
        "Skills": len(r["skills"]),
        "Education": len(r["education"]),
        "Experience": len(r["experience"]),
        "ATS": r["ats_score"],
        "JD Match": r.get("jd_score", ""),
    } for r in reports], columns=SUMMARY_COLUMNS)
    return df.sort_values(by="ATS", ascending=False, kind="stable").reset_index(drop=True)


def summary_csv(reports):
    return summary_frame(reports).to_csv(index=False).encode('utf-8')


def generate_pdf_report(report):
    """Return bytes of a simple one-page PDF report (text-only)"""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    w, h = A4
    left = 40
    y = h - 50
    c.setFont("Helvetica-Bold", 14)
    c.drawString(left, y, "Resume Insight - Resume Analysis")
    y -= 25
    c.setFont("Helvetica", 10)
    c.drawString(left, y, f"File: {report.get('filename')}   Words: {report.get('word_count', 0)}")
    y -= 18
    c.drawString(left, y, f"ATS Score: {report.get('ats_score', '-')}")
    if "jd_score" in report:
        c.drawString(left + 150, y, f"Job Match: {report['jd_score']}% ({report.get('jd_label', '')})")
    y -= 20
    c.setFont("Helvetica-Bold", 11)
    c.drawString(left, y, "Contacts:")
    y -= 12
    c.setFont("Helvetica", 10)
    c.drawString(left, y, f"Emails: {', '.join(report.get('emails', []))}")
    y -= 12
    c.drawString(left, y, f"Phones: {', '.join(report.get('phones', []))}")
    y -= 18
    c.setFont("Helvetica-Bold", 11)
    c.drawString(left, y, "Skills:")
    y -= 12
    c.setFont("Helvetica", 10)
    c.drawString(left, y, ", ".join(report.get('skills', []))[:120])
    y -= 18
    c.setFont("Helvetica-Bold", 11)
    c.drawString(left, y, "Top Keywords:")
    y -= 12
    c.setFont("Helvetica", 10)
    c.drawString(left, y, ", ".join(report.get('keywords', []))[:120])
    if report.get("jd_missing"):
        y -= 18
        c.setFont("Helvetica-Bold", 11)
        c.drawString(left, y, "Missing Job Keywords:")
        y -= 12
        c.setFont("Helvetica", 10)
        c.drawString(left, y, ", ".join(report["jd_missing"])[:120])
    y -= 30
    c.setFont("Helvetica-Bold", 11)
    c.drawString(left, y, "Suggestions:")
    y -= 12
    c.setFont("Helvetica", 10)
    for s in report.get('suggestions', [])[:8]:
        c.drawString(left + 10, y, "- " + s[:110])
        y -= 12
    c.showPage()
    c.save()
    buf.seek(0)
    return buf.read()
