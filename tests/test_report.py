import pandas as pd

from report import SUMMARY_COLUMNS, build_report, generate_pdf_report, summary_csv, summary_frame


class TestBuildReport:
    """Test cases for report assembly"""

    def test_without_job(self, sample_resume):
        report = build_report("jane.txt", sample_resume)
        assert report["filename"] == "jane.txt"
        assert report["emails"] == ["jane.doe@example.com"]
        assert "python" in report["skills"]
        assert report["word_count"] == len(sample_resume.split())
        assert 40 <= report["ats_score"] <= 100
        assert len(report["ats_checks"]) == 5
        assert "jd_score" not in report

    def test_with_job(self, sample_resume, sample_job):
        report = build_report("jane.txt", sample_resume, sample_job)
        assert 0.0 <= report["jd_similarity"] <= 1.0
        assert report["jd_label"]
        assert "terraform" in report["jd_missing"]
        assert "python" in report["jd_matched"]

    def test_blank_job_is_ignored(self, sample_resume):
        assert "jd_score" not in build_report("jane.txt", sample_resume, "   ")


class TestSummary:
    """Test cases for the summary table"""

    def test_sorted_by_ats(self, sample_resume):
        reports = [build_report("empty.txt", ""), build_report("jane.txt", sample_resume)]
        df = summary_frame(reports)
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == SUMMARY_COLUMNS
        assert list(df["Filename"]) == ["jane.txt", "empty.txt"]

    def test_csv(self, sample_resume):
        data = summary_csv([build_report("jane.txt", sample_resume)])
        assert data.startswith(b"Filename,Skills,Education,Experience,ATS,JD Match")
        assert b"jane.txt" in data

    def test_empty_summary(self):
        df = summary_frame([])
        assert df.empty
        assert list(df.columns) == SUMMARY_COLUMNS


class TestPdfReport:
    """Test cases for the PDF report"""

    def test_pdf_bytes(self, sample_resume, sample_job):
        pdf = generate_pdf_report(build_report("jane.txt", sample_resume, sample_job))
        assert pdf.startswith(b"%PDF")
        assert len(pdf) > 500

    def test_pdf_for_empty_resume(self):
        assert generate_pdf_report(build_report("empty.txt", "")).startswith(b"%PDF")
