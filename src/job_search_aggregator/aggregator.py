import asyncio
import logging
from collections.abc import Callable, Sequence

from job_search_aggregator import config
from job_search_aggregator.config import DEFAULT_ADAPTER_TIMEOUT
from job_search_aggregator.fetcher import Fetcher
from job_search_aggregator.models import ScrapedJob, SearchResult, SiteReport
from job_search_aggregator.scrapers.base import BaseScraper
from job_search_aggregator.scrapers.site_scraper import SiteScraper
from job_search_aggregator.scrapers.sites import get_sites

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]

CANCELLED = "cancelled"


class JobAggregator:
    """
    Runs every site adapter concurrently for one search term and merges the results.

    Each adapter settles on its own: a failure, timeout or cancellation is
    logged and contributes zero jobs, but never fails the whole search.
    Progress is reported once per settled adapter, in settlement order.
    """

    def __init__(
        self,
        scrapers: Sequence[BaseScraper],
        adapter_timeout: float | None = DEFAULT_ADAPTER_TIMEOUT,
    ) -> None:
        self.scrapers = list(scrapers)
        self.adapter_timeout = adapter_timeout

    @classmethod
    def from_config(
        cls,
        site_keys: list[str] | None = None,
        fetcher: Fetcher | None = None,
        adapter_timeout: float | None = None,
    ) -> "JobAggregator":
        """Build an aggregator over the configured sites, filling gaps from the environment."""
        if site_keys is None:
            site_keys = config.ENABLED_SITES
        if fetcher is None:
            fetcher = Fetcher(user_agent=config.SCRAPER_USER_AGENT, timeout=config.HTTP_TIMEOUT)
        if adapter_timeout is None:
            adapter_timeout = config.ADAPTER_TIMEOUT

        scrapers = [SiteScraper(site, fetcher=fetcher) for site in get_sites(site_keys)]
        return cls(scrapers, adapter_timeout=adapter_timeout)

    async def search(
        self,
        search_term: str,
        on_progress: ProgressCallback | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> SearchResult:
        """
        Search every site and wait until all of them have settled.

        Setting `cancel_event` cancels the adapters still running; they settle
        as failed and the jobs collected so far are kept.
        """
        result = SearchResult(search_term=search_term)
        total = len(self.scrapers)
        completed = 0

        def settle(report: SiteReport) -> None:
            nonlocal completed
            result.reports.append(report)
            result.jobs.extend(report.jobs)
            completed += 1
            if on_progress is not None:
                on_progress(completed / total * 100)

        pending: dict[asyncio.Task[SiteReport], BaseScraper] = {
            asyncio.create_task(self._run_scraper(scraper, search_term)): scraper
            for scraper in self.scrapers
        }
        cancel_waiter = asyncio.create_task(cancel_event.wait()) if cancel_event is not None else None

        try:
            while pending:
                waiting_on: set[asyncio.Future] = set(pending)
                if cancel_waiter is not None:
                    waiting_on.add(cancel_waiter)
                done, _ = await asyncio.wait(waiting_on, return_when=asyncio.FIRST_COMPLETED)

                for task in done:
                    if task in pending:
                        pending.pop(task)
                        settle(task.result())

                if cancel_waiter is not None and cancel_waiter.done() and pending:
                    logger.info(
                        f"Search for '{search_term}' cancelled; stopping {len(pending)} site(s)"
                    )
                    cancelled = list(pending.items())
                    pending.clear()
                    for task, _ in cancelled:
                        task.cancel()
                    await asyncio.gather(*(task for task, _ in cancelled), return_exceptions=True)
                    for _, scraper in cancelled:
                        settle(SiteReport(source=scraper.source_name, error=CANCELLED))
        finally:
            leftovers = list(pending)
            if cancel_waiter is not None:
                leftovers.append(cancel_waiter)
            for task in leftovers:
                task.cancel()
            # Wait for cancelled adapters so their HTTP clients are closed
            await asyncio.gather(*leftovers, return_exceptions=True)

        logger.info(
            f"Search for '{search_term}' finished. "
            f"Jobs: {len(result.jobs)}, "
            f"Sites: {total}, "
            f"Failed: {len(result.failed_sources)}"
        )
        return result

    async def search_all_sites(
        self,
        search_term: str,
        on_progress: ProgressCallback | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> list[ScrapedJob]:
        """Search every site and return only the combined jobs."""
        result = await self.search(search_term, on_progress=on_progress, cancel_event=cancel_event)
        return result.jobs

    async def _run_scraper(self, scraper: BaseScraper, search_term: str) -> SiteReport:
        """Run one adapter, turning any failure or timeout into a failed report."""
        source = scraper.source_name
        try:
            return await asyncio.wait_for(scraper.search(search_term), timeout=self.adapter_timeout)
        except TimeoutError:
            logger.error(f"[{source}] Timed out after {self.adapter_timeout}s")
            return SiteReport(source=source, error=f"timed out after {self.adapter_timeout}s")
        except Exception as e:
            logger.error(f"[{source}] Scraper failed: {e!r}")
            return SiteReport(source=source, error=f"{type(e).__name__}: {e}")


async def search_all_sites(
    search_term: str,
    on_progress: ProgressCallback | None = None,
    cancel_event: asyncio.Event | None = None,
) -> list[ScrapedJob]:
    """Search every configured site for `search_term` and return all jobs found."""
    aggregator = JobAggregator.from_config()
    return await aggregator.search_all_sites(
        search_term, on_progress=on_progress, cancel_event=cancel_event
    )
