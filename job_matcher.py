# job_matcher.py
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field
from sklearn.feature_extraction.text import CountVectorizer
from sklearn.metrics.pairwise import cosine_similarity

from logging_config import get_logger
from resume_parser import extract_keywords, tokenize
from settings import get_settings

logger = get_logger(__name__)

TFIDF_MIN_LENGTH = 3
SOURCE_KEYWORDS = 50
TARGET_KEYWORDS = 30


class JobMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    similarity: float
    score: int
    label: str
    matched_keywords: Tuple[str, ...] = Field(default_factory=tuple)
    missing_keywords: Tuple[str, ...] = Field(default_factory=tuple)


def _passthrough(tokens):
    return tokens


def calculate_tfidf(documents) -> Dict[str, List[float]]:
    """TF-IDF weight of every term in every document.

    tf is the raw count over the document's token total (0 for a document
    without tokens), idf is ln(N / df). Terms found in every document get a
    weight of 0 everywhere. Each value list is index-aligned with ``documents``.
    """
    token_lists = [tokenize(doc, min_length=TFIDF_MIN_LENGTH) for doc in documents]
    if not any(token_lists):
        return {}

    vectorizer = CountVectorizer(analyzer=_passthrough)
    counts = vectorizer.fit_transform(token_lists).toarray().astype(float)
    terms = vectorizer.get_feature_names_out()

    totals = counts.sum(axis=1, keepdims=True)
    tf = np.divide(counts, totals, out=np.zeros_like(counts), where=totals > 0)
    df = np.count_nonzero(counts, axis=0)
    idf = np.log(len(token_lists) / df)
    weights = tf * idf

    logger.debug(f"TF-IDF over {len(token_lists)} documents, {len(terms)} terms")
    return {str(term): weights[:, j].tolist() for j, term in enumerate(terms)}


def calculate_cosine_similarity(text_a, text_b) -> float:
    tfidf = calculate_tfidf([text_a, text_b])
    if not tfidf:
        return 0.0
    vectors = np.array(list(tfidf.values())).T
    if not np.linalg.norm(vectors[0]) or not np.linalg.norm(vectors[1]):
        return 0.0
    sim = cosine_similarity(vectors[0:1], vectors[1:2])[0, 0]
    return float(min(1.0, max(0.0, sim)))  # between 0 and 1


def find_missing_keywords(source_text, target_text):
    """Target's top keywords that the source's top keywords do not cover, in target order."""
    source = set(extract_keywords(source_text, SOURCE_KEYWORDS))
    return [k for k in extract_keywords(target_text, TARGET_KEYWORDS) if k not in source]


def find_matched_keywords(source_text, target_text):
    source = set(extract_keywords(source_text, SOURCE_KEYWORDS))
    return [k for k in extract_keywords(target_text, TARGET_KEYWORDS) if k in source]


def match_label(score):
    if score >= 70:
        return "Excellent Match"
    if score >= 50:
        return "Good Match"
    if score >= 30:
        return "Moderate Match"
    return "Low Match"


def match_job(resume_text, job_description) -> JobMatch:
    similarity = calculate_cosine_similarity(resume_text, job_description)
    score = int(round(similarity * 100))
    return JobMatch(
        similarity=similarity,
        score=score,
        label=match_label(score),
        matched_keywords=find_matched_keywords(resume_text, job_description),
        missing_keywords=find_missing_keywords(resume_text, job_description),
    )


def rank_jobs(resume_text, job_descriptions, max_workers=None) -> List[Tuple[int, JobMatch]]:
    """Match one resume against many job descriptions in parallel.

    Returns ``(index, JobMatch)`` pairs, best first by score and then by the
    number of matched keywords. Ties keep input order.
    """
    if not job_descriptions:
        return []
    workers = max_workers or get_settings().match_workers

    with ThreadPoolExecutor(max_workers=min(workers, len(job_descriptions))) as ex:
        futures = [ex.submit(match_job, resume_text, jd) for jd in job_descriptions]
        matches = [f.result() for f in futures]

    ranked = sorted(
        enumerate(matches),
        key=lambda item: (item[1].score, len(item[1].matched_keywords)),
        reverse=True,
    )
    logger.info(f"Ranked {len(ranked)} job descriptions with {workers} workers")
    return ranked
