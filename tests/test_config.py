from labinsights import __main__ as entrypoint
from labinsights.config import Settings
from labinsights.services.polarity import PolarityTable, parse_biomarker_ids


def test_polarity_ids_from_environment(monkeypatch):
    monkeypatch.setenv("LOWER_IS_BETTER_BIOMARKERS", "triglycerides, crp")
    configured = Settings()
    table = PolarityTable(parse_biomarker_ids(configured.lower_is_better_biomarkers))
    assert list(table) == ["crp", "triglycerides"]


def test_main_runs_uvicorn_with_settings(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(entrypoint.uvicorn, "run", fake_run)
    entrypoint.main()
    assert calls["app"] == "labinsights.main:app"
    assert calls["port"] == entrypoint.settings.app_port
