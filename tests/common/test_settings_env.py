from __future__ import annotations

import logging

import pytest

from common import settings, setup_default_logging
from common.env import env_bool, env_int, env_str
from common.logging import resolve_level


def test_env_int_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HUEPAL_TEST_INT", "12")
    assert env_int("HUEPAL_TEST_INT") == 12
    monkeypatch.setenv("HUEPAL_TEST_INT", "-3")
    assert env_int("HUEPAL_TEST_INT", 5, min_value=0) == 0
    monkeypatch.setenv("HUEPAL_TEST_INT", "abc")
    assert env_int("HUEPAL_TEST_INT", 5) == 5
    monkeypatch.delenv("HUEPAL_TEST_INT")
    assert env_int("HUEPAL_TEST_INT") is None


def test_env_bool_and_str(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HUEPAL_TEST_FLAG", "off")
    assert env_bool("HUEPAL_TEST_FLAG", True) is False
    monkeypatch.setenv("HUEPAL_TEST_FLAG", "1")
    assert env_bool("HUEPAL_TEST_FLAG") is True
    monkeypatch.setenv("HUEPAL_TEST_FLAG", "maybe")
    assert env_bool("HUEPAL_TEST_FLAG", True) is True

    monkeypatch.setenv("HUEPAL_TEST_STR", "  data/out ")
    assert env_str("HUEPAL_TEST_STR") == "data/out"
    monkeypatch.setenv("HUEPAL_TEST_STR", "   ")
    assert env_str("HUEPAL_TEST_STR", "x") == "x"


def test_settings_defaults() -> None:
    s = settings.get()
    assert s.LOG_LEVEL == "INFO"
    assert s.SEED is None
    assert s.EXPORT_DIR is None
    assert s.EXPORT_OVERWRITE is True


def test_settings_reload_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HUEPAL_LOG_LEVEL", "debug")
    monkeypatch.setenv("HUEPAL_SEED", "7")
    monkeypatch.setenv("HUEPAL_EXPORT_DIR", "/tmp/palettes")
    monkeypatch.setenv("HUEPAL_EXPORT_OVERWRITE", "no")
    settings.reload_from_env()
    s = settings.get()
    assert s.LOG_LEVEL == "DEBUG"
    assert s.SEED == 7
    assert s.EXPORT_DIR == "/tmp/palettes"
    assert s.EXPORT_OVERWRITE is False


def test_setup_default_logging_is_noop_with_handlers() -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    before = list(root.handlers)
    level = root.level
    try:
        setup_default_logging("DEBUG")
        assert root.handlers == before
        assert root.level == level
    finally:
        root.removeHandler(handler)


def _capture_basic_config(monkeypatch: pytest.MonkeyPatch) -> list[dict]:
    """ルートのハンドラを空にし、`basicConfig` の引数を記録する。"""
    calls: list[dict] = []
    monkeypatch.setattr(logging.getLogger(), "handlers", [])
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    return calls


def test_setup_default_logging_uses_env_level_when_unspecified(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls = _capture_basic_config(monkeypatch)
    monkeypatch.setenv("HUEPAL_LOG_LEVEL", "debug")
    settings.reload_from_env()
    setup_default_logging()
    assert len(calls) == 1
    assert calls[0]["level"] == logging.DEBUG


def test_setup_default_logging_explicit_level_wins_over_env(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls = _capture_basic_config(monkeypatch)
    monkeypatch.setenv("HUEPAL_LOG_LEVEL", "DEBUG")
    settings.reload_from_env()
    setup_default_logging("error")
    assert calls[0]["level"] == logging.ERROR


def test_resolve_level_unknown_name_falls_back_to_warning() -> None:
    assert resolve_level("chatty") == logging.WARNING
    assert resolve_level(15) == 15
