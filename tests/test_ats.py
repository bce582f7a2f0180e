from ats import (
    ACTION_VERBS,
    GENERAL_TIPS,
    ATSReport,
    analyze_ats,
    calculate_ats_score,
    generate_ats_suggestions,
    has_action_verbs,
    has_quantifiable_results,
    section_count,
)

STRONG_RESUME = (
    "Experience: developed APIs that increased revenue by 20%. "
    "Education: BSc Computer Science. Skills: Python."
)


class TestATSChecks:
    """Test cases for individual ATS heuristics"""

    def test_action_verbs(self):
        assert has_action_verbs("I Developed a platform")
        assert not has_action_verbs("I wrote a platform")

    def test_quantifiable_results(self):
        assert has_quantifiable_results("cut costs by 30%")
        assert has_quantifiable_results("managed a $5000 budget")
        assert has_quantifiable_results("improved by a lot")
        assert not has_quantifiable_results("did good work")

    def test_section_count(self):
        assert section_count(STRONG_RESUME) == 3
        assert section_count("SKILLS only") == 1
        assert section_count("") == 0


class TestATSScore:
    """Test cases for the ATS score"""

    def test_base_score(self):
        assert calculate_ats_score("") == 40

    def test_short_strong_resume(self):
        assert calculate_ats_score(STRONG_RESUME) == 85

    def test_length_bonus(self):
        text = STRONG_RESUME + " filler" * 400
        assert calculate_ats_score(text) == 100

    def test_too_long_gets_no_length_bonus(self):
        text = STRONG_RESUME + " filler" * 1200
        assert calculate_ats_score(text) == 85


class TestATSSuggestions:
    """Test cases for ATS suggestions"""

    def test_weak_resume(self):
        suggestions = generate_ats_suggestions("")
        assert suggestions[0] == "Use strong action verbs like: " + ", ".join(ACTION_VERBS[:5])
        assert any("too short" in s for s in suggestions)
        assert any("technical skills" in s for s in suggestions)
        assert any("quantifiable" in s for s in suggestions)
        assert suggestions[-3:] == list(GENERAL_TIPS)
        assert len(suggestions) == 7

    def test_missing_keywords_come_first(self):
        suggestions = generate_ats_suggestions("python developer", "kubernetes terraform python")
        assert suggestions[0] == "Add these important keywords: kubernetes, terraform"

    def test_no_keyword_hint_without_job(self, sample_resume):
        suggestions = generate_ats_suggestions(sample_resume)
        assert not any(s.startswith("Add these important keywords") for s in suggestions)
        assert not any(s.startswith("Use strong action verbs") for s in suggestions)


class TestAnalyzeATS:
    """Test cases for the combined ATS report"""

    def test_report(self, sample_resume, sample_job):
        report = analyze_ats(sample_resume, sample_job)
        assert isinstance(report, ATSReport)
        assert report.score == calculate_ats_score(sample_resume)
        assert [c.label for c in report.checks] == [
            "Uses action verbs",
            "Includes quantifiable results",
            "Appropriate length",
            "Contains standard sections",
            "Contact information",
        ]
        checks = {c.label: c.passed for c in report.checks}
        assert checks["Uses action verbs"]
        assert checks["Includes quantifiable results"]
        assert not checks["Appropriate length"]
        assert checks["Contains standard sections"]
        assert checks["Contact information"]

    def test_empty_resume(self):
        report = analyze_ats("")
        assert report.score == 40
        assert not any(c.passed for c in report.checks)
