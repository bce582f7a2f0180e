# ats.py
import re
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from job_matcher import find_missing_keywords
from resume_parser import extract_emails, extract_phones, extract_skills

BASE_SCORE = 40
ACTION_VERBS = (
    'achieved', 'improved', 'developed', 'created', 'designed', 'implemented',
    'led', 'managed', 'optimized', 'increased', 'reduced', 'built', 'launched',
    'delivered', 'collaborated', 'streamlined', 'automated', 'analyzed', 'coordinated',
    'executed', 'initiated', 'resolved', 'transformed', 'pioneered',
)
SECTIONS = ('experience', 'education', 'skills')
QUANTIFIED_RE = re.compile(r'\d+%|\$\d+|increased|decreased|improved by')
GENERAL_TIPS = (
    "Use consistent formatting throughout the document",
    "Keep bullet points concise and focused on achievements",
    "Include relevant certifications if applicable",
)


class ATSCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    passed: bool
    description: str


class ATSReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int
    checks: Tuple[ATSCheck, ...] = Field(default_factory=tuple)
    suggestions: Tuple[str, ...] = Field(default_factory=tuple)


def has_action_verbs(text):
    low = text.lower()
    return any(verb in low for verb in ACTION_VERBS)


def has_quantifiable_results(text):
    return QUANTIFIED_RE.search(text) is not None


def section_count(text):
    low = text.lower()
    return sum(1 for s in SECTIONS if s in low)


def word_count(text):
    # an empty string still counts as one word
    return len(re.split(r'\s+', text))


def has_good_length(text):
    return 300 < word_count(text) < 1000


def calculate_ats_score(text):
    """Heuristic 0-100 score for how well a resume reads to keyword-driven ATS software."""
    score = BASE_SCORE
    if has_action_verbs(text):
        score += 15
    if has_quantifiable_results(text):
        score += 15
    if has_good_length(text):
        score += 15
    score += section_count(text) * 5
    return min(score, 100)


def generate_ats_suggestions(resume_text, job_description=""):
    suggestions = []

    if job_description.strip():
        missing = find_missing_keywords(resume_text, job_description)
        if missing:
            suggestions.append(f"Add these important keywords: {', '.join(missing[:10])}")

    if not has_action_verbs(resume_text):
        suggestions.append("Use strong action verbs like: " + ", ".join(ACTION_VERBS[:5]))

    if len(resume_text) < 500:
        suggestions.append("Resume seems too short. Add more details about your experience and achievements.")

    if len(extract_skills(resume_text)) < 5:
        suggestions.append("Add more technical skills relevant to the job description.")

    if not has_quantifiable_results(resume_text):
        suggestions.append('Include quantifiable achievements (e.g., "Increased efficiency by 40%")')

    suggestions.extend(GENERAL_TIPS)
    return suggestions


def analyze_ats(resume_text, job_description="") -> ATSReport:
    checks = (
        ATSCheck(
            label="Uses action verbs",
            passed=has_action_verbs(resume_text),
            description="Strong action verbs make your achievements stand out",
        ),
        ATSCheck(
            label="Includes quantifiable results",
            passed=has_quantifiable_results(resume_text),
            description="Numbers and metrics demonstrate impact",
        ),
        ATSCheck(
            label="Appropriate length",
            passed=has_good_length(resume_text),
            description="Resume should be comprehensive but concise",
        ),
        ATSCheck(
            label="Contains standard sections",
            passed=section_count(resume_text) == len(SECTIONS),
            description="ATS systems look for standard section headers",
        ),
        ATSCheck(
            label="Contact information",
            passed=bool(extract_emails(resume_text) or extract_phones(resume_text)),
            description="Recruiters need an email address or phone number to reach you",
        ),
    )
    return ATSReport(
        score=calculate_ats_score(resume_text),
        checks=checks,
        suggestions=generate_ats_suggestions(resume_text, job_description),
    )
