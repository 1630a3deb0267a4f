import os

import pytest

# Pin configuration for tests before any imports happen
os.environ["ENABLED_SITES"] = ""
os.environ["HTTP_TIMEOUT"] = "5"
os.environ["ADAPTER_TIMEOUT"] = "5"

from job_search_aggregator.models import ScrapedJob  # noqa: E402


@pytest.fixture
def sample_job():
    """A reusable sample ScrapedJob for tests."""
    return ScrapedJob(
        title="Desenvolvedor Python",
        company="Tech Lda",
        location="Lisboa",
        url="https://www.net-empregos.com/vaga/123",
        source="Net Empregos",
    )


@pytest.fixture
def sample_job_no_company():
    """A reusable sample ScrapedJob without company or location."""
    return ScrapedJob(
        title="QA Engineer",
        url="https://www.indeed.com/viewjob?jk=abc",
        source="Indeed",
    )
