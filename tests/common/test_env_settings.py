from __future__ import annotations

import logging

import pytest

from common import settings
from common.env import env_bool, env_int, env_str
from common.logging import setup_default_logging


def test_env_int(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PXC_TEST_INT", "0")
    assert env_int("PXC_TEST_INT", 5, min_value=1) == 1
    monkeypatch.setenv("PXC_TEST_INT", "abc")
    assert env_int("PXC_TEST_INT", 5) == 5
    monkeypatch.setenv("PXC_TEST_INT", "  ")
    assert env_int("PXC_TEST_INT", None) is None
    monkeypatch.setenv("PXC_TEST_INT", "30")
    assert env_int("PXC_TEST_INT", 5) == 30


@pytest.mark.parametrize(
    "raw, expected", [("1", True), ("0", False), ("yes", True), ("off", False), ("maybe", False)]
)
def test_env_bool(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("PXC_TEST_BOOL", raw)
    assert env_bool("PXC_TEST_BOOL", False) is expected


def test_env_str_empty_is_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PXC_TEST_STR", "   ")
    assert env_str("PXC_TEST_STR", "dflt") == "dflt"
    monkeypatch.delenv("PXC_TEST_STR")
    assert env_str("PXC_TEST_STR") is None


def test_settings_defaults(clean_env: None) -> None:
    s = settings.get()
    assert s.LOG_LEVEL == "INFO"
    assert s.FPS is None
    assert s.DEBUG_SCENE is False


def test_settings_reload_reads_environment(clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PXC_LOG_LEVEL", "debug")
    monkeypatch.setenv("PXC_FPS", "-3")
    monkeypatch.setenv("PXC_DEBUG_SCENE", "true")
    settings.reload_from_env()
    s = settings.get()
    assert s.LOG_LEVEL == "DEBUG"
    assert s.FPS == 1
    assert s.DEBUG_SCENE is True


def test_setup_default_logging_is_noop_with_handlers() -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    before = list(root.handlers)
    try:
        setup_default_logging("DEBUG")
        assert root.handlers == before
    finally:
        root.removeHandler(handler)
