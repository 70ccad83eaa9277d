from __future__ import annotations

from pathlib import Path

import pytest

from rails_navigator.core.config import NavigatorSettings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOG_LEVEL", "LOG_FILE", "QUIET", "JSON_OUTPUT"):
        monkeypatch.delenv(f"RAILS_NAV_{name}", raising=False)

    settings = NavigatorSettings(_env_file=None)

    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_FILE is None
    assert settings.QUIET is False
    assert settings.JSON_OUTPUT is False


def test_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("RAILS_NAV_LOG_LEVEL", "debug")
    monkeypatch.setenv("RAILS_NAV_LOG_FILE", str(tmp_path / "nav.log"))
    monkeypatch.setenv("RAILS_NAV_JSON_OUTPUT", "true")

    settings = NavigatorSettings(_env_file=None)

    assert settings.LOG_LEVEL == "debug"
    assert settings.LOG_FILE == tmp_path / "nav.log"
    assert settings.JSON_OUTPUT is True


def test_unprefixed_variables_are_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RAILS_NAV_QUIET", raising=False)
    monkeypatch.setenv("QUIET", "true")

    assert NavigatorSettings(_env_file=None).QUIET is False
