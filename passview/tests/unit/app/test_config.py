from __future__ import annotations

import os

import pytest

from passview.app.config import AppConfig, default_data_dir
from passview.app.config import load_config


def test_defaults() -> None:
    cfg = AppConfig()
    assert cfg.data_dir == default_data_dir()
    assert cfg.tick_interval_ms == 1000
    assert cfg.splash_ms == 1000
    assert cfg.ephemeral is False


def test_from_env_reads_overrides(tmp_path) -> None:
    cfg = AppConfig.from_env(
        {
            "PASSVIEW_DATA_DIR": str(tmp_path),
            "PASSVIEW_TICK_MS": " 250 ",
            "PASSVIEW_SPLASH_MS": "0",
        }
    )
    assert cfg.data_dir == str(tmp_path)
    assert cfg.tick_interval_ms == 250
    assert cfg.splash_ms == 0


def test_from_env_rejects_bad_values() -> None:
    with pytest.raises(ValueError, match="PASSVIEW_TICK_MS"):
        AppConfig.from_env({"PASSVIEW_TICK_MS": "fast"})
    with pytest.raises(ValueError):
        AppConfig.from_env({"PASSVIEW_TICK_MS": "0"})
    with pytest.raises(ValueError):
        AppConfig.from_env({"PASSVIEW_SPLASH_MS": "-5"})


def test_with_overrides_skips_none() -> None:
    cfg = AppConfig(data_dir="/srv/pass").with_overrides(data_dir=None, ephemeral=True)
    assert cfg.data_dir == "/srv/pass"
    assert cfg.ephemeral is True


def test_cli_flags_override_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("PASSVIEW_DATA_DIR", "/from/env")
    monkeypatch.setenv("PASSVIEW_TICK_MS", "500")

    cfg = load_config(["--data-dir", str(tmp_path), "--ephemeral", "--log-level", "DEBUG"])

    assert cfg.data_dir == str(tmp_path)
    assert cfg.ephemeral is True
    assert cfg.log_level == "DEBUG"
    assert cfg.tick_interval_ms == 500


def test_cli_without_flags_keeps_environment(monkeypatch) -> None:
    monkeypatch.setenv("PASSVIEW_DATA_DIR", "~/passes")
    monkeypatch.delenv("PASSVIEW_TICK_MS", raising=False)
    monkeypatch.delenv("PASSVIEW_SPLASH_MS", raising=False)

    cfg = load_config([])

    assert cfg.data_dir == os.path.expanduser("~/passes")
    assert cfg.ephemeral is False
    assert cfg.log_level is None


def test_ticket_details_default_to_neutral_labels() -> None:
    cfg = AppConfig()
    assert (cfg.transport_mode, cfg.ticket_type) == ("Bus", "One-way journey")


def test_ticket_details_from_env() -> None:
    cfg = AppConfig.from_env({"PASSVIEW_TRANSPORT_MODE": " Tram ", "PASSVIEW_TICKET_TYPE": ""})
    assert cfg.transport_mode == "Tram"
    assert cfg.ticket_type == "One-way journey"


def test_blank_ticket_details_are_rejected() -> None:
    with pytest.raises(ValueError, match="must not be blank"):
        AppConfig(transport_mode="  ")
