from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class ConfigStore:
    def __init__(self, app_name: str = "filefinder", config_dir: Path | None = None) -> None:
        self._config_dir = config_dir or Path.home() / ".config" / app_name
        self._config_path = self._config_dir / "config.json"
        self._data: dict[str, Any] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._config_path

    def _load(self) -> None:
        if not self._config_path.exists():
            return
        try:
            data = json.loads(self._config_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            return
        if isinstance(data, dict):
            self._data = data

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def get_str(self, key: str, default: str = "") -> str:
        value = self._data.get(key, default)
        if value is None:
            return default
        return str(value)

    def get_int(self, key: str, default: int = 0) -> int:
        value = self._data.get(key, default)
        if isinstance(value, bool):
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._data.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in {"1", "true", "yes", "on"}
        return bool(value)
