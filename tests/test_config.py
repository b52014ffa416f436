from tenant_dashboard.config import (
    DEFAULT_SEARCH_DELAY,
    DEFAULT_TENANT,
    Settings,
    load_settings,
)


def test_defaults():
    assert load_settings({}) == Settings()
    assert load_settings({}).tenant == DEFAULT_TENANT
    assert load_settings({}).search_delay == DEFAULT_SEARCH_DELAY


def test_values_from_environment():
    settings = load_settings(
        {
            "DASHBOARD_TENANT": "acme",
            "DASHBOARD_STRICT_CHECKS": "true",
            "DASHBOARD_SEARCH_DELAY": "0",
            "DASHBOARD_LOG_LEVEL": "debug",
        }
    )
    assert settings == Settings(tenant="acme", strict_checks=True, search_delay=0.0, log_level="DEBUG")


def test_blank_values_use_defaults():
    settings = load_settings({"DASHBOARD_TENANT": "  ", "DASHBOARD_STRICT_CHECKS": ""})
    assert settings.tenant == DEFAULT_TENANT
    assert settings.strict_checks is False


def test_invalid_values_fall_back(caplog):
    with caplog.at_level("WARNING"):
        settings = load_settings({"DASHBOARD_SEARCH_DELAY": "soon", "DASHBOARD_LOG_LEVEL": "loud"})
    assert settings.search_delay == DEFAULT_SEARCH_DELAY
    assert settings.log_level == "INFO"
    assert "DASHBOARD_SEARCH_DELAY" in caplog.text


def test_negative_delay_clamped():
    assert load_settings({"DASHBOARD_SEARCH_DELAY": "-2"}).search_delay == 0.0


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv("DASHBOARD_TENANT", "from-env")
    assert load_settings().tenant == "from-env"
