"""Unit tests for the launcher script."""

import pytest

import start_server


class TestParseArgs:
    """Test command-line parsing."""

    def test_defaults(self):
        args = start_server.parse_args([])

        assert args.host == "127.0.0.1"
        assert args.port == 5000
        assert args.id_strategy is None
        assert args.falsy_ids_list_all is False

    def test_options(self):
        args = start_server.parse_args(["--port", "8080", "--id-strategy", "sequential", "--falsy-ids-list-all"])

        assert args.port == 8080
        assert args.id_strategy == "sequential"
        assert args.falsy_ids_list_all is True

    def test_unknown_strategy(self):
        with pytest.raises(SystemExit):
            start_server.parse_args(["--id-strategy", "uuid"])


def test_main_runs_uvicorn(monkeypatch):
    """Test main applies settings and hands the app to uvicorn."""
    import uvicorn

    calls = {}
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.update(app=app, **kwargs))
    monkeypatch.setenv("RECORDSTORE_ID_STRATEGY", "positional")

    start_server.main(["--id-strategy", "sequential", "--port", "9000"])

    assert calls["app"] == "recordstore.server:app"
    assert calls["port"] == 9000
    from recordstore.services.config_service import get_config_service
    assert get_config_service().settings.id_strategy.value == "sequential"
