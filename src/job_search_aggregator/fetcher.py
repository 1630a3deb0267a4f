import logging

import httpx

from job_search_aggregator.config import DEFAULT_HTTP_TIMEOUT, DEFAULT_USER_AGENT
from job_search_aggregator.models import FetchResult

logger = logging.getLogger(__name__)


class Fetcher:
    """
    Fetches a single search results page over HTTP.

    Transport errors, DNS failures, malformed URLs and non-2xx statuses are logged and
    returned as a failed FetchResult; they are never raised and never retried.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = DEFAULT_HTTP_TIMEOUT,
    ) -> None:
        self.user_agent = user_agent
        self.timeout = timeout

    async def fetch_page(self, url: str) -> FetchResult:
        """GET a fully formed URL and return its markup or the failure."""
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Error fetching {url}: HTTP {e.response.status_code}")
            return FetchResult.failure(
                url, f"HTTP {e.response.status_code}", status_code=e.response.status_code
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Error fetching {url}: {e!r}")
            return FetchResult.failure(url, f"{type(e).__name__}: {e}")

        logger.debug(f"Fetched {url} ({response.status_code}, {len(response.text)} chars)")
        return FetchResult.success(url, response.text, status_code=response.status_code)
