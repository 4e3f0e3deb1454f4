"""Persistent settings: custom browsers and hidden browsers."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


def default_config_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return the path of the configuration file under LOCALAPPDATA (or '.')."""
    env = os.environ if environ is None else environ
    base = env.get("LOCALAPPDATA", ".")
    return Path(base) / "Browsea" / "config.json"


@dataclass
class Config:
    """User settings stored as JSON."""

    custom_browsers: list[tuple[str, str]] = field(default_factory=list)
    hidden_browsers: list[str] = field(default_factory=list)

    @classmethod
    def load(cls, path: str | os.PathLike | None = None) -> Config:
        """Load the configuration; any problem yields the default settings."""
        config_path = Path(path) if path is not None else default_config_path()
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return cls()
        return cls._from_json(data) or cls()

    @classmethod
    def _from_json(cls, data: object) -> Config | None:
        if not isinstance(data, dict):
            return None
        custom = data.get("custom_browsers")
        hidden = data.get("hidden_browsers")
        if not isinstance(custom, list) or not isinstance(hidden, list):
            return None
        browsers: list[tuple[str, str]] = []
        for item in custom:
            if (
                not isinstance(item, list)
                or len(item) != 2
                or not all(isinstance(part, str) for part in item)
            ):
                return None
            browsers.append((item[0], item[1]))
        if not all(isinstance(name, str) for name in hidden):
            return None
        return cls(custom_browsers=browsers, hidden_browsers=list(hidden))

    def to_json(self) -> str:
        """Serialise the configuration as pretty-printed JSON."""
        payload = {
            "custom_browsers": [list(entry) for entry in self.custom_browsers],
            "hidden_browsers": list(self.hidden_browsers),
        }
        return json.dumps(payload, indent=2)

    def save(self, path: str | os.PathLike | None = None) -> None:
        """Write the configuration, creating its directory; raises OSError."""
        config_path = Path(path) if path is not None else default_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(self.to_json(), encoding="utf-8")