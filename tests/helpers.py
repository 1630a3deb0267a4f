from job_search_aggregator.models import FetchResult


class StubFetcher:
    """
    Fetcher stand-in that serves canned markup by URL.
    URLs without canned markup are served as an empty page.
    An Exception instance as the value is raised instead of returned.
    """

    def __init__(self, pages: dict[str, str | Exception] | None = None, default: str = ""):
        self.pages = pages or {}
        self.default = default
        self.requested: list[str] = []

    async def fetch_page(self, url: str) -> FetchResult:
        self.requested.append(url)
        page = self.pages.get(url, self.default)
        if isinstance(page, Exception):
            raise page
        return FetchResult.success(url, page, status_code=200)


def listings_html(container_class: str, items: list[str]) -> str:
    """Wrap listing elements in a minimal results page."""
    body = "\n".join(f'<div class="{container_class}">{item}</div>' for item in items)
    return f"<!DOCTYPE html><html><body><main>{body}</main></body></html>"
