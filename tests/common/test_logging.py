from __future__ import annotations

import logging

import pytest

from common.logging import setup_default_logging


def test_setup_is_noop_when_root_has_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [handler])
    called: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: called.append(kw))

    setup_default_logging("DEBUG")
    assert called == []


def test_setup_applies_basic_config_once(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    called: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: called.append(kw))

    setup_default_logging("warning")
    assert len(called) == 1
    assert called[0]["level"] == logging.WARNING
    assert "%(name)s" in called[0]["format"]


def test_setup_uses_settings_level_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    from common import settings

    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(settings.get(), "LOG_LEVEL", "ERROR")
    called: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: called.append(kw))

    setup_default_logging()
    assert called[0]["level"] == logging.ERROR
