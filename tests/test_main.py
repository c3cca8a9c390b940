"""Tests for main module."""

from fastapi import FastAPI

from finite import main as main_module


def test_main_serves_app_on_configured_port(monkeypatch) -> None:
    calls = []

    def fake_run(app, **kwargs) -> None:
        calls.append((app, kwargs))

    monkeypatch.setenv("PORT", "4321")
    monkeypatch.setattr(main_module.uvicorn, "run", fake_run)

    main_module.main()

    app, kwargs = calls[0]
    assert isinstance(app, FastAPI)
    assert kwargs["port"] == 4321
    assert kwargs["host"] == "0.0.0.0"  # noqa: S104
