import logging

import pytest

from settings import get_settings

SAMPLE_RESUME = """Jane Doe
jane.doe@example.com | +1 555-123-4567
Experience
Senior Software Engineer at Acme Corp
Developed microservices in Python and Django on AWS
Increased deployment frequency by 40%
Education
Bachelor of Science in Computer Science, State University
Skills: Python, Django, PostgreSQL, Docker, Kubernetes, React
"""

SAMPLE_JOB = """Backend Engineer
We need a Python engineer with Kubernetes and Terraform experience.
Kubernetes operations, Terraform modules and Python services on AWS.
"""


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def sample_job():
    return SAMPLE_JOB


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_logging():
    logger = logging.getLogger("resume_insight")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
