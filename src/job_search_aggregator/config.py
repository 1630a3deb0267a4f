import math
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
DEFAULT_HTTP_TIMEOUT = 15.0  # seconds
DEFAULT_ADAPTER_TIMEOUT = 30.0  # seconds


def get_config() -> dict[str, str]:
    """
    Load raw configuration values from environment variables.
    Called lazily so that a bad value never crashes an import.
    """
    return {
        "SCRAPER_USER_AGENT": os.getenv("SCRAPER_USER_AGENT", DEFAULT_USER_AGENT),
        "HTTP_TIMEOUT": os.getenv("HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT)),
        "ADAPTER_TIMEOUT": os.getenv("ADAPTER_TIMEOUT", str(DEFAULT_ADAPTER_TIMEOUT)),
        "ENABLED_SITES": os.getenv("ENABLED_SITES", ""),
    }


def _positive_seconds(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a positive number of seconds, got '{raw}'") from None
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a positive number of seconds, got {value}")
    return value


class _Config:
    """Lazy configuration that only validates when values are actually accessed."""

    def __init__(self) -> None:
        self._config: dict[str, str] | None = None

    def _load(self) -> dict[str, str]:
        if self._config is None:
            self._config = get_config()
        return self._config

    @property
    def SCRAPER_USER_AGENT(self) -> str:
        return self._load()["SCRAPER_USER_AGENT"].strip() or DEFAULT_USER_AGENT

    @property
    def HTTP_TIMEOUT(self) -> float:
        """Per-request HTTP timeout in seconds."""
        return _positive_seconds("HTTP_TIMEOUT", self._load()["HTTP_TIMEOUT"])

    @property
    def ADAPTER_TIMEOUT(self) -> float:
        """Upper bound in seconds for one site adapter to settle."""
        return _positive_seconds("ADAPTER_TIMEOUT", self._load()["ADAPTER_TIMEOUT"])

    @property
    def ENABLED_SITES(self) -> list[str] | None:
        """
        Comma-separated list of site keys to search.
        None means every configured site.
        """
        # Imported here to keep config importable on its own
        from job_search_aggregator.scrapers.sites import SITES

        raw = self._load()["ENABLED_SITES"]
        keys = [key.strip() for key in raw.split(",") if key.strip()]
        if not keys:
            return None
        unknown = [key for key in keys if key not in SITES]
        if unknown:
            raise ValueError(
                f"ENABLED_SITES contains unknown site(s): {', '.join(unknown)}. "
                f"Known sites: {', '.join(SITES)}"
            )
        return keys


_cfg = _Config()

# Module-level type declarations for mypy.
# The actual values come from __getattr__ below.
SCRAPER_USER_AGENT: str
HTTP_TIMEOUT: float
ADAPTER_TIMEOUT: float
ENABLED_SITES: list[str] | None


# Module-level lazy access using __getattr__ (PEP 562).
def __getattr__(name: str) -> str | float | list[str] | None:
    if name == "SCRAPER_USER_AGENT":
        return _cfg.SCRAPER_USER_AGENT
    if name == "HTTP_TIMEOUT":
        return _cfg.HTTP_TIMEOUT
    if name == "ADAPTER_TIMEOUT":
        return _cfg.ADAPTER_TIMEOUT
    if name == "ENABLED_SITES":
        return _cfg.ENABLED_SITES
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
