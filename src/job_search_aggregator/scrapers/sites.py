from pydantic import BaseModel


class SiteConfig(BaseModel):
    """
    Declarative description of one job board's first results page.
    `search_url_template` must contain a `{query}` placeholder; selectors are
    CSS selectors evaluated relative to each listing element.
    """

    key: str
    name: str
    origin: str
    search_url_template: str
    listing_selector: str
    title_selector: str
    company_selector: str
    location_selector: str
    link_selector: str = "a"
    # Fields read from their first match only; others join the text of every match
    first_match_fields: frozenset[str] = frozenset()


# Launch order of the adapters
SITES: dict[str, SiteConfig] = {
    site.key: site
    for site in (
        SiteConfig(
            key="net_empregos",
            name="Net Empregos",
            origin="https://www.net-empregos.com",
            search_url_template=(
                "https://www.net-empregos.com/pesquisa-empregos.asp?chave={query}"
            ),
            listing_selector=".job-item",
            title_selector=".job-title",
            company_selector=".company-name",
            location_selector=".job-location",
        ),
        SiteConfig(
            key="sapo_emprego",
            name="SAPO Emprego",
            origin="https://emprego.sapo.pt",
            search_url_template="https://emprego.sapo.pt/empregos/{query}",
            listing_selector=".job-listing",
            title_selector=".job-title",
            company_selector=".company",
            location_selector=".location",
        ),
        SiteConfig(
            key="linkedin",
            name="LinkedIn",
            origin="https://www.linkedin.com",
            search_url_template="https://www.linkedin.com/jobs/search?keywords={query}",
            listing_selector=".job-card-container",
            title_selector=".job-card-list__title",
            company_selector=".job-card-container__company-name",
            location_selector=".job-card-container__metadata-item",
            first_match_fields=frozenset({"location"}),
        ),
        SiteConfig(
            key="indeed",
            name="Indeed",
            origin="https://www.indeed.com",
            search_url_template="https://www.indeed.com/jobs?q={query}",
            listing_selector=".job_seen_beacon",
            title_selector=".jobTitle",
            company_selector=".companyName",
            location_selector=".companyLocation",
        ),
    )
}

# Sites worth browsing by hand, including ones that are not scraped
SITE_DIRECTORY: dict[str, list[tuple[str, str]]] = {
    "portugal": [
        ("Net Empregos", "https://www.net-empregos.com/"),
        ("SAPO Emprego", "https://emprego.sapo.pt/"),
        ("Emprego XL", "https://www.empregoxl.com/"),
        ("Turijobs", "https://www.turijobs.pt/"),
        ("IEFP", "https://www.iefp.pt/emprego"),
        ("CustoJusto", "https://www.custojusto.pt/emprego"),
    ],
    "international": [
        ("LinkedIn", "https://www.linkedin.com/jobs/"),
        ("Indeed", "https://www.indeed.com/"),
        ("Glassdoor", "https://www.glassdoor.com/Job/index.htm"),
        ("Jooble", "https://jooble.org/"),
        ("Monster", "https://www.monster.com/"),
    ],
}


def get_sites(keys: list[str] | None = None) -> list[SiteConfig]:
    """
    Return the site configs for the given keys, in the order given.
    Returns every configured site when `keys` is None.
    """
    if keys is None:
        return list(SITES.values())

    unknown = [key for key in keys if key not in SITES]
    if unknown:
        raise ValueError(
            f"Unknown site(s): {', '.join(unknown)}. Known sites: {', '.join(SITES)}"
        )
    return [SITES[key] for key in keys]
