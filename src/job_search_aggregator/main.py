import argparse
import asyncio
import logging
import math
import signal
import sys

from job_search_aggregator.aggregator import JobAggregator
from job_search_aggregator.formatter import ResultFormatter
from job_search_aggregator.models import SearchResult
from job_search_aggregator.scrapers.sites import SITE_DIRECTORY, SITES

# Set up logging once, in the application entry point only
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.INFO
)
logger = logging.getLogger(__name__)

EMPTY_SEARCH_TERM = "Por favor, insira um termo de busca"


def _print_progress(percent: float) -> None:
    print(ResultFormatter.format_progress(percent), file=sys.stderr)


async def run_search(
    search_term: str,
    site_keys: list[str] | None = None,
    adapter_timeout: float | None = None,
    as_json: bool = False,
) -> SearchResult:
    """
    Run one search across every selected site and print the results.

    SIGINT/SIGTERM cancel the sites still running; whatever was found
    before the signal is still printed.
    """
    aggregator = JobAggregator.from_config(site_keys=site_keys, adapter_timeout=adapter_timeout)
    cancel_event = asyncio.Event()

    def _signal_handler() -> None:
        logger.info("Cancellation requested. Stopping search...")
        cancel_event.set()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, _signal_handler)

    logger.info(f"Searching {len(aggregator.scrapers)} site(s) for '{search_term}'...")
    try:
        result = await aggregator.search(
            search_term, on_progress=_print_progress, cancel_event=cancel_event
        )
    finally:
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.remove_signal_handler(sig)

    failures = ResultFormatter.format_failures(result.reports)
    if failures:
        print(failures, file=sys.stderr)

    if as_json:
        print(ResultFormatter.format_json(result.jobs))
    else:
        print(ResultFormatter.format_results(result.jobs))

    return result


def _parse_site_keys(raw: str) -> list[str]:
    keys = [key.strip() for key in raw.split(",") if key.strip()]
    if not keys:
        raise argparse.ArgumentTypeError("expected at least one site key")
    unknown = [key for key in keys if key not in SITES]
    if unknown:
        raise argparse.ArgumentTypeError(
            f"unknown site(s): {', '.join(unknown)} (choose from {', '.join(SITES)})"
        )
    return keys


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="job-search-aggregator",
        description="Search several job boards at once and list every job found.",
    )

    parser.add_argument(
        "search_term",
        nargs="*",
        metavar="TERM",
        help="Free-text search term, e.g. 'desenvolvedor'.",
    )
    parser.add_argument(
        "--sites",
        type=_parse_site_keys,
        default=None,
        metavar="KEYS",
        help=(
            "Comma-separated site keys to search (overrides ENABLED_SITES env var). "
            f"Available: {', '.join(SITES)}."
        ),
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Per-site timeout in seconds (overrides ADAPTER_TIMEOUT env var).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON instead of text.",
    )
    parser.add_argument(
        "--list-sites",
        action="store_true",
        help="List known job sites for manual browsing and exit.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser.parse_args(argv)


def cli(argv: list[str] | None = None) -> None:
    """CLI entry point for the package."""
    args = parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.list_sites:
        print(ResultFormatter.format_directory(SITE_DIRECTORY))
        return

    search_term = " ".join(args.search_term).strip()
    if not search_term:
        print(EMPTY_SEARCH_TERM, file=sys.stderr)
        sys.exit(1)

    if args.timeout is not None and (not math.isfinite(args.timeout) or args.timeout <= 0):
        logger.error("--timeout must be a positive number.")
        sys.exit(1)

    try:
        asyncio.run(
            run_search(
                search_term,
                site_keys=args.sites,
                adapter_timeout=args.timeout,
                as_json=args.json,
            )
        )
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
