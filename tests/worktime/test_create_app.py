from src.timesheet_system.timesheet_system.main import create_app


def test_create_app_registers_stats_route(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    app = create_app()

    rules = {r.rule for r in app.url_map.iter_rules()}
    assert "/api/work-time-stats" in rules
