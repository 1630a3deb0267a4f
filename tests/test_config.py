import pytest

from job_search_aggregator.config import DEFAULT_USER_AGENT, _Config

# NOTE: conftest.py pins ENABLED_SITES, HTTP_TIMEOUT and ADAPTER_TIMEOUT in
# os.environ before any source imports. These tests use monkeypatch to
# override/remove env vars for specific scenarios.


def test_import_config_does_not_crash():
    import job_search_aggregator.config  # noqa: F401


def test_timeouts_read_from_environment():
    from job_search_aggregator.config import ADAPTER_TIMEOUT, HTTP_TIMEOUT

    assert HTTP_TIMEOUT == 5.0
    assert ADAPTER_TIMEOUT == 5.0


def test_timeout_defaults_when_unset(monkeypatch):
    monkeypatch.delenv("HTTP_TIMEOUT", raising=False)
    monkeypatch.delenv("ADAPTER_TIMEOUT", raising=False)

    cfg = _Config()
    assert cfg.HTTP_TIMEOUT == 15.0
    assert cfg.ADAPTER_TIMEOUT == 30.0


@pytest.mark.parametrize("raw", ["abc", "0", "-3", "", "nan", "inf"])
def test_invalid_adapter_timeout_raises_on_access(monkeypatch, raw):
    monkeypatch.setenv("ADAPTER_TIMEOUT", raw)

    cfg = _Config()
    with pytest.raises(ValueError, match="ADAPTER_TIMEOUT"):
        _ = cfg.ADAPTER_TIMEOUT


@pytest.mark.parametrize("raw", ["soon", "nan", "-inf"])
def test_invalid_http_timeout_raises_on_access(monkeypatch, raw):
    monkeypatch.setenv("HTTP_TIMEOUT", raw)

    cfg = _Config()
    with pytest.raises(ValueError, match="HTTP_TIMEOUT"):
        _ = cfg.HTTP_TIMEOUT


def test_user_agent_defaults_to_browser_string(monkeypatch):
    monkeypatch.delenv("SCRAPER_USER_AGENT", raising=False)

    cfg = _Config()
    assert cfg.SCRAPER_USER_AGENT == DEFAULT_USER_AGENT
    assert cfg.SCRAPER_USER_AGENT.startswith("Mozilla/5.0")


def test_user_agent_override(monkeypatch):
    monkeypatch.setenv("SCRAPER_USER_AGENT", "TestAgent/1.0")

    cfg = _Config()
    assert cfg.SCRAPER_USER_AGENT == "TestAgent/1.0"


def test_enabled_sites_empty_means_all():
    cfg = _Config()
    assert cfg.ENABLED_SITES is None


def test_enabled_sites_comma_separated(monkeypatch):
    monkeypatch.setenv("ENABLED_SITES", "linkedin, indeed")

    cfg = _Config()
    assert cfg.ENABLED_SITES == ["linkedin", "indeed"]


def test_enabled_sites_unknown_key_raises(monkeypatch):
    monkeypatch.setenv("ENABLED_SITES", "linkedin,monster")

    cfg = _Config()
    with pytest.raises(ValueError, match="monster"):
        _ = cfg.ENABLED_SITES


def test_config_lazy_loads_only_once():
    cfg = _Config()
    assert cfg._config is None

    _ = cfg.HTTP_TIMEOUT
    assert cfg._config is not None

    first_config = cfg._config
    _ = cfg.ADAPTER_TIMEOUT
    assert cfg._config is first_config


def test_module_getattr_unknown_attribute():
    import job_search_aggregator.config as config_module

    with pytest.raises(AttributeError, match="NONEXISTENT"):
        _ = config_module.NONEXISTENT
