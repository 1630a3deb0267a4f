from abc import ABC, abstractmethod

from job_search_aggregator.models import ScrapedJob, SiteReport


class BaseScraper(ABC):
    """
    Abstract base class for all site adapters.
    """

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Fixed label stamped on every job this adapter produces."""

    @abstractmethod
    async def search(self, search_term: str) -> SiteReport:
        """
        Search the target site and report the jobs found, or why none could be fetched.
        """

    async def scrape(self, search_term: str) -> list[ScrapedJob]:
        """Search the target site and return only the jobs."""
        report = await self.search(search_term)
        return report.jobs
