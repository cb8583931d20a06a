from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

DEFAULT_ADDR = "localhost"
# IANA-reserved port of a project that never shipped, so nothing else claims it.
DEFAULT_PORT = 4774

SETTINGS_DIR_NAME = ".montage_commands"
SETTINGS_FILE_NAME = "settings.json"


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "y", "on"}:
            return True
        if normalized in {"0", "false", "no", "n", "off", ""}:
            return False
    return default


def _as_minutes(value: Any, default: str) -> str:
    if value is None or isinstance(value, bool):
        return default
    text = str(value).strip()
    return text or default


def _as_port(value: Any, default: int) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class ClientConfig:
    addr: str = DEFAULT_ADDR
    port: int = DEFAULT_PORT
    endpoint: str | None = None

    @property
    def endpoint_url(self) -> str:
        if self.endpoint:
            return self.endpoint
        return f"http://{self.addr}:{self.port}/graphql"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> ClientConfig:
        source = os.environ if env is None else env
        endpoint = source.get("MONTAGE_ENDPOINT", "").strip() or None
        return cls(
            addr=source.get("MONTAGE_ADDR", "").strip() or DEFAULT_ADDR,
            port=_as_port(source.get("MONTAGE_PORT"), DEFAULT_PORT),
            endpoint=endpoint,
        )


@dataclass(frozen=True)
class CommandSettings:
    start_minutes: str = "25"
    break_minutes: str = "5"
    extend_minutes: str = "5"
    break_description: str = "Break"
    start_description_from_project: bool = False

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> CommandSettings:
        defaults = cls()
        return cls(
            start_minutes=_as_minutes(payload.get("start_minutes"), defaults.start_minutes),
            break_minutes=_as_minutes(payload.get("break_minutes"), defaults.break_minutes),
            extend_minutes=_as_minutes(payload.get("extend_minutes"), defaults.extend_minutes),
            break_description=str(payload.get("break_description") or defaults.break_description),
            start_description_from_project=_as_bool(
                payload.get("start_description_from_project", False), False
            ),
        )


def default_settings_path(home: Path | None = None) -> Path:
    base = home if home is not None else Path.home()
    return base / SETTINGS_DIR_NAME / SETTINGS_FILE_NAME


def load_settings(path: Path | None = None) -> CommandSettings:
    target = path or default_settings_path()
    if not target.exists():
        return CommandSettings()
    try:
        with target.open("r", encoding="utf-8") as fp:
            payload = json.load(fp)
    except (OSError, json.JSONDecodeError):
        return CommandSettings()
    if not isinstance(payload, dict):
        return CommandSettings()
    return CommandSettings.from_dict(payload)
