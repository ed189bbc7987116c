from __future__ import annotations

import logging

import pytest

from passview.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def _restore_levels():
    root = logging.getLogger()
    pil = logging.getLogger("PIL")
    levels = (root.level, pil.level)
    yield
    root.setLevel(levels[0])
    pil.setLevel(levels[1])


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("PASSVIEW_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PASSVIEW_DEBUG", raising=False)
    return monkeypatch


def test_info_without_cli_or_env(clean_env) -> None:
    assert logging_utils.configure_root() == logging.INFO
    assert logging.getLogger().level == logging.INFO


def test_env_level_applies_without_cli(clean_env) -> None:
    clean_env.setenv("PASSVIEW_LOG_LEVEL", "warning")
    assert logging_utils.configure_root() == logging.WARNING


def test_cli_level_wins_over_env(clean_env) -> None:
    clean_env.setenv("PASSVIEW_LOG_LEVEL", "ERROR")
    clean_env.setenv("PASSVIEW_DEBUG", "1")
    assert logging_utils.configure_root("debug") == logging.DEBUG


def test_debug_flag_enables_debug(clean_env) -> None:
    clean_env.setenv("PASSVIEW_DEBUG", "yes")
    assert logging_utils.configure_root() == logging.DEBUG


@pytest.mark.parametrize("raw", ["²", "nonsense", "1.5"])
def test_unparseable_env_level_falls_back(clean_env, caplog, raw: str) -> None:
    clean_env.setenv("PASSVIEW_LOG_LEVEL", raw)
    with caplog.at_level(logging.WARNING, logger="passview.utils.logging"):
        assert logging_utils.configure_root() == logging.INFO
    assert "PASSVIEW_LOG_LEVEL" in caplog.text


def test_unparseable_cli_level_defers_to_env(clean_env) -> None:
    clean_env.setenv("PASSVIEW_LOG_LEVEL", "error")
    assert logging_utils.configure_root("loud") == logging.ERROR


@pytest.mark.parametrize(
    "raw, expected",
    [("debug", logging.DEBUG), (" Warning ", logging.WARNING), ("15", 15), ("", None), ("²", None), (None, None)],
)
def test_parse_level(raw, expected) -> None:
    assert logging_utils.parse_level(raw) == expected


def test_pillow_debug_chatter_is_capped(clean_env) -> None:
    logging_utils.configure_root("debug")
    assert logging.getLogger("PIL").level == logging.INFO
