import logging
from urllib.parse import quote, urljoin

from bs4 import BeautifulSoup, Tag

from job_search_aggregator.fetcher import Fetcher
from job_search_aggregator.models import ScrapedJob, SiteReport
from job_search_aggregator.scrapers.base import BaseScraper
from job_search_aggregator.scrapers.sites import SiteConfig

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides the unreserved set
URI_COMPONENT_SAFE = "!~*'()"


class SiteScraper(BaseScraper):
    """
    Generic site adapter driven by a SiteConfig.
    Fetches the first results page for a search term and extracts one
    ScrapedJob per listing element. Pagination is never followed.
    """

    def __init__(self, site: SiteConfig, fetcher: Fetcher | None = None):
        self.site = site
        self.fetcher = fetcher or Fetcher()

    @property
    def source_name(self) -> str:
        return self.site.name

    def build_search_url(self, search_term: str) -> str:
        """Percent-encode the search term into the site's search URL template."""
        query = quote(search_term, safe=URI_COMPONENT_SAFE)
        return self.site.search_url_template.format(query=query)

    async def search(self, search_term: str) -> SiteReport:
        url = self.build_search_url(search_term)
        result = await self.fetcher.fetch_page(url)
        if not result.ok:
            return SiteReport(source=self.source_name, error=result.error)

        jobs = self.parse(result.html)
        logger.info(f"[{self.source_name}] Found {len(jobs)} jobs for '{search_term}'")
        return SiteReport(source=self.source_name, jobs=jobs)

    def parse(self, html: str) -> list[ScrapedJob]:
        """Extract every listing on a results page, in document order."""
        soup = BeautifulSoup(html, "html.parser")
        listings = soup.select(self.site.listing_selector)

        if not listings and html.strip():
            # Either a genuine empty result or the site changed its markup
            logger.warning(
                f"[{self.source_name}] No elements matched '{self.site.listing_selector}'; "
                f"page markup may have changed"
            )

        return [self._parse_listing(listing) for listing in listings]

    def _parse_listing(self, listing: Tag) -> ScrapedJob:
        return ScrapedJob(
            title=self._field_text(listing, "title", self.site.title_selector),
            company=self._field_text(listing, "company", self.site.company_selector),
            location=self._field_text(listing, "location", self.site.location_selector),
            url=self._resolve_link(listing),
            source=self.source_name,
        )

    def _field_text(self, listing: Tag, field: str, selector: str) -> str:
        """Concatenated text of every match, or of the first one for first-match fields."""
        if field in self.site.first_match_fields:
            element = listing.select_one(selector)
            return element.get_text().strip() if element else ""
        return "".join(element.get_text() for element in listing.select(selector)).strip()

    def _resolve_link(self, listing: Tag) -> str:
        """Return the listing's link as an absolute URL, or "" if it has none."""
        anchor = listing.select_one(self.site.link_selector)
        href = str(anchor.get("href") or "").strip() if anchor else ""
        if not href or href.startswith("http"):
            return href
        return urljoin(self.site.origin, href)
