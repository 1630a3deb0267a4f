import json
from collections.abc import Iterable

from job_search_aggregator.models import ScrapedJob, SiteReport

NO_RESULTS = "Nenhum resultado encontrado"
NO_RESULTS_HINT = "Tente ajustar seus termos de busca ou tente novamente mais tarde."


class ResultFormatter:
    """
    Formats search results as plain text for a terminal.
    """

    @classmethod
    def format_job(cls, job: ScrapedJob) -> str:
        """
        Formats one job as a small card: title, optional company and location,
        the source site and the link to the listing.
        """
        lines = [job.title or "(sem título)"]
        if job.company:
            lines.append(f"  {job.company}")
        if job.location:
            lines.append(f"  {job.location}")
        lines.append(f"  Fonte: {job.source}")
        if job.url:
            lines.append(f"  Ver Vaga: {job.url}")
        return "\n".join(lines)

    @classmethod
    def format_results(cls, jobs: list[ScrapedJob]) -> str:
        if not jobs:
            return f"{NO_RESULTS}\n{NO_RESULTS_HINT}"

        cards = [f"{index}. {cls.format_job(job)}" for index, job in enumerate(jobs, start=1)]
        return f"Resultados da Pesquisa ({len(jobs)})\n\n" + "\n\n".join(cards)

    @staticmethod
    def format_progress(percent: float) -> str:
        return f"Pesquisando... {round(percent)}%"

    @staticmethod
    def format_failures(reports: Iterable[SiteReport]) -> str:
        """One line per site that could not be searched; empty if all succeeded."""
        return "\n".join(
            f"Falha em {report.source}: {report.error}" for report in reports if report.failed
        )

    @staticmethod
    def format_directory(directory: dict[str, list[tuple[str, str]]]) -> str:
        titles = {"portugal": "Sites em Portugal", "international": "Sites Internacionais"}
        sections = []
        for region, sites in directory.items():
            lines = [titles.get(region, region)]
            lines.extend(f"  {name}: {url}" for name, url in sites)
            sections.append("\n".join(lines))
        return "\n\n".join(sections)

    @staticmethod
    def format_json(jobs: list[ScrapedJob]) -> str:
        return json.dumps([job.model_dump() for job in jobs], ensure_ascii=False, indent=2)
