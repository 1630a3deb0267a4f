from pydantic import BaseModel, Field


class ScrapedJob(BaseModel):
    """
    A single listing found on one external job site.
    Records are never validated beyond their types: a selector miss yields
    an empty string rather than a missing field.
    """

    title: str
    company: str | None = None
    location: str | None = None
    url: str
    source: str
    description: str | None = None
    salary: str | None = None
    posted_date: str | None = None


class FetchResult(BaseModel):
    """
    Outcome of a single page fetch.
    A page that was fetched but is empty is `ok` with `html == ""`;
    an unreachable page carries an `error` instead.
    """

    url: str
    html: str = ""
    status_code: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, url: str, html: str, status_code: int | None = None) -> "FetchResult":
        return cls(url=url, html=html, status_code=status_code)

    @classmethod
    def failure(cls, url: str, error: str, status_code: int | None = None) -> "FetchResult":
        return cls(url=url, error=error, status_code=status_code)


class SiteReport(BaseModel):
    """What one site adapter produced for one search."""

    source: str
    jobs: list[ScrapedJob] = Field(default_factory=list)
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class SearchResult(BaseModel):
    """
    Combined outcome of searching every site.
    Jobs and reports are kept in the order the adapters settled.
    """

    search_term: str
    jobs: list[ScrapedJob] = Field(default_factory=list)
    reports: list[SiteReport] = Field(default_factory=list)

    @property
    def failed_sources(self) -> list[str]:
        return [report.source for report in self.reports if report.failed]
