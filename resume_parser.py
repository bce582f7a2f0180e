# resume_parser.py
import re
from collections import Counter
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from logging_config import get_logger

logger = get_logger(__name__)

STOP_WORDS = ENGLISH_STOP_WORDS

KEYWORD_MIN_LENGTH = 4
SUMMARY_LENGTH = 500
MAX_EDUCATION = 5
MAX_EXPERIENCE = 10
MAX_LINE_LENGTH = 200

EMAIL_RE = re.compile(r'[\w\.-]+@[\w\.-]+\.\w+', re.ASCII)
PHONE_RE = re.compile(r'(?:\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}', re.ASCII)
PUNCT_RE = re.compile(r'[^\w\s]|_')
CAPITALIZED_RE = re.compile(r'\b[A-Z][a-zA-Z+#.]{2,}\b')
INSTITUTION_RE = re.compile(r'university|institute|college|school', re.IGNORECASE)

TECH_SKILLS = (
    # languages
    "javascript", "typescript", "python", "java", "c++", "c#", "ruby", "go", "rust", "php",
    "swift", "kotlin", "scala",
    # frameworks
    "react", "angular", "vue", "node.js", "express", "django", "flask", "spring", "asp.net", "laravel",
    # databases
    "sql", "mysql", "postgresql", "mongodb", "redis", "elasticsearch", "cassandra", "oracle",
    # cloud & devops
    "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "git", "ci/cd", "terraform", "ansible",
    # data & ml
    "machine learning", "deep learning", "tensorflow", "pytorch", "pandas", "numpy", "scikit-learn", "nlp",
    # other
    "agile", "scrum", "rest api", "graphql", "microservices", "testing", "jest", "junit", "selenium",
)

CAPITALIZED_STOP_WORDS = frozenset(["The", "And", "For", "With", "From", "That", "This"])

DEGREE_KEYWORDS = (
    "bachelor", "master", "phd", "mba", "bsc", "msc", "ba", "ma", "mca", "bca", "b.tech", "m.tech",
)

JOB_TITLE_KEYWORDS = (
    "developer", "engineer", "manager", "analyst", "designer", "architect",
    "lead", "senior", "junior", "intern",
)

# whole-word match that also works for entries ending in symbols (c++, c#)
SKILL_PATTERNS = tuple(
    (skill, re.compile(r'(?<!\w)' + re.escape(skill) + r'(?!\w)', re.IGNORECASE))
    for skill in TECH_SKILLS
)


class ExtractedRecord(BaseModel):
    """Structured fields pulled out of one resume text."""

    model_config = ConfigDict(frozen=True)

    skills: Tuple[str, ...] = Field(default_factory=tuple)
    education: Tuple[str, ...] = Field(default_factory=tuple)
    experience: Tuple[str, ...] = Field(default_factory=tuple)
    keywords: Tuple[str, ...] = Field(default_factory=tuple)
    emails: Tuple[str, ...] = Field(default_factory=tuple)
    phones: Tuple[str, ...] = Field(default_factory=tuple)
    summary: str = ""


def tokenize(text: str, min_length: int = 1, remove_stopwords: bool = True) -> List[str]:
    """Lower-case, strip punctuation and split text into tokens.

    Tokens shorter than ``min_length`` are dropped first, then stopwords when
    ``remove_stopwords`` is set. Order and duplicates are kept.
    """
    words = PUNCT_RE.sub(' ', text.lower()).split()
    tokens = [w for w in words if len(w) >= min_length]
    if remove_stopwords:
        tokens = [t for t in tokens if t not in STOP_WORDS]
    return tokens


# Contacts
def extract_emails(text):
    return EMAIL_RE.findall(text)


def extract_phones(text):
    return PHONE_RE.findall(text)


def extract_skills(text):
    """Dictionary skills (lower-cased) followed by capitalized words found verbatim."""
    found = {}
    for skill, pattern in SKILL_PATTERNS:
        if pattern.search(text):
            found.setdefault(skill, None)

    for word in CAPITALIZED_RE.findall(text):
        if word not in CAPITALIZED_STOP_WORDS:
            found.setdefault(word, None)

    return list(found)


def extract_education(text):
    mentions_institution = INSTITUTION_RE.search(text) is not None
    education = []
    for line in text.split('\n'):
        low = line.lower()
        has_degree = any(deg in low for deg in DEGREE_KEYWORDS)
        if has_degree or (mentions_institution and len(line) < MAX_LINE_LENGTH):
            if len(line.strip()) > 10:
                education.append(line.strip())
    return education[:MAX_EDUCATION]


def extract_experience(text):
    """Lines naming a job title, each joined with the two lines after it.

    Windows are not de-duplicated, so titles on adjacent lines produce
    overlapping blocks.
    """
    lines = text.split('\n')
    experience = []
    for i, line in enumerate(lines):
        low = line.lower()
        if any(title in low for title in JOB_TITLE_KEYWORDS) and len(line) < MAX_LINE_LENGTH:
            block = ' '.join(lines[i:i + 3]).strip()
            if len(block) > 20:
                experience.append(block)
    return experience[:MAX_EXPERIENCE]


def extract_keywords(text, top_n=20):
    """Most frequent non-stopword tokens of 4+ characters, ties in first-seen order."""
    if top_n <= 0:
        return []
    freq = Counter(tokenize(text, min_length=KEYWORD_MIN_LENGTH))
    return [word for word, _ in freq.most_common(top_n)]


def extract_resume_data(text: str) -> ExtractedRecord:
    record = ExtractedRecord(
        skills=extract_skills(text),
        education=extract_education(text),
        experience=extract_experience(text),
        keywords=extract_keywords(text),
        emails=extract_emails(text),
        phones=extract_phones(text),
        summary=text[:SUMMARY_LENGTH],
    )
    logger.debug(
        f"Extracted {len(record.skills)} skills, {len(record.education)} education lines, "
        f"{len(record.experience)} experience blocks from {len(text)} chars"
    )
    return record
