"""Runtime configuration for the pass display.

Values come from defaults, then environment variables, then the CLI flags
handled by ``load_config``.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Sequence

ENV_DATA_DIR = "PASSVIEW_DATA_DIR"
ENV_TICK_MS = "PASSVIEW_TICK_MS"
ENV_SPLASH_MS = "PASSVIEW_SPLASH_MS"
ENV_TRANSPORT_MODE = "PASSVIEW_TRANSPORT_MODE"
ENV_TICKET_TYPE = "PASSVIEW_TICKET_TYPE"


def default_data_dir() -> str:
    return os.path.join(os.path.expanduser("~"), ".passview")


@dataclass(frozen=True)
class AppConfig:
    """Typed runtime settings."""

    data_dir: str = ""
    tick_interval_ms: int = 1000
    splash_ms: int = 1000
    ephemeral: bool = False
    log_level: Optional[str] = None
    transport_mode: str = "Bus"
    ticket_type: str = "One-way journey"

    def __post_init__(self) -> None:
        if not self.data_dir:
            object.__setattr__(self, "data_dir", default_data_dir())
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive.")
        if self.splash_ms < 0:
            raise ValueError("splash_ms must be non-negative.")
        if not self.transport_mode.strip() or not self.ticket_type.strip():
            raise ValueError("transport_mode and ticket_type must not be blank.")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if environ is None else environ
        updates: dict[str, Any] = {}
        data_dir = (env.get(ENV_DATA_DIR) or "").strip()
        if data_dir:
            updates["data_dir"] = os.path.expanduser(data_dir)
        if env.get(ENV_TICK_MS):
            updates["tick_interval_ms"] = _coerce_int(ENV_TICK_MS, env[ENV_TICK_MS])
        if env.get(ENV_SPLASH_MS):
            updates["splash_ms"] = _coerce_int(ENV_SPLASH_MS, env[ENV_SPLASH_MS])
        for field_name, var in (("transport_mode", ENV_TRANSPORT_MODE), ("ticket_type", ENV_TICKET_TYPE)):
            text = (env.get(var) or "").strip()
            if text:
                updates[field_name] = text
        return cls(**updates)

    def with_overrides(self, **changes: Any) -> "AppConfig":
        """Return a copy with every non-``None`` entry of ``changes`` applied."""
        filtered = {key: value for key, value in changes.items() if value is not None}
        if "data_dir" in filtered:
            filtered["data_dir"] = os.path.expanduser(str(filtered["data_dir"]))
        return replace(self, **filtered)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passview", description="Single-screen pass display.")
    parser.add_argument("--data-dir", default=None, help="Directory for the local key-value store.")
    parser.add_argument(
        "--ephemeral",
        action="store_true",
        default=None,
        help="Keep everything in memory; nothing is written to disk.",
    )
    parser.add_argument("--log-level", default=None, help="Root log level (DEBUG, INFO, ...).")
    return parser


def load_config(argv: Optional[Sequence[str]] = None) -> AppConfig:
    """Defaults, then environment, then CLI flags."""
    args = build_parser().parse_args(argv)
    return AppConfig.from_env().with_overrides(
        data_dir=args.data_dir,
        ephemeral=args.ephemeral,
        log_level=args.log_level,
    )


def _coerce_int(name: str, value: Any) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be an integer.") from exc


__all__ = [
    "AppConfig",
    "build_parser",
    "default_data_dir",
    "load_config",
    "ENV_DATA_DIR",
    "ENV_SPLASH_MS",
    "ENV_TICK_MS",
    "ENV_TICKET_TYPE",
    "ENV_TRANSPORT_MODE",
]
