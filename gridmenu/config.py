"""Engine settings and their optional JSON persistence."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

_SETTINGS_PATH = Path(__file__).resolve().parent / "engine_settings.json"


@dataclass
class EngineSettings:
    """Tunable behaviour of :class:`~gridmenu.core.engine.MenuEngine`."""

    close_check_delay: float = 0.05
    no_permission_message: str = "You do not have permission to open this menu."
    border_name: str = " "
    back_label: str = "Back"
    next_label: str = "Next page"
    previous_label: str = "Previous page"
    close_label: str = "Close"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineSettings":
        """Build settings from ``data``, keeping defaults for bad entries."""
        settings = cls()
        for entry in fields(cls):
            if entry.name not in data:
                continue
            value = data[entry.name]
            default = getattr(settings, entry.name)
            if isinstance(default, float):
                if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                    continue
                value = float(value)
            elif not isinstance(value, type(default)):
                continue
            setattr(settings, entry.name, value)
        return settings

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_engine_settings(path: Optional[Path] = None) -> EngineSettings:
    """Load settings from disk, falling back to defaults on any problem."""
    target = path or _SETTINGS_PATH
    try:
        with target.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
            if isinstance(data, dict):
                return EngineSettings.from_dict(data)
    except FileNotFoundError:
        return EngineSettings()
    except json.JSONDecodeError:
        return EngineSettings()
    except OSError:
        return EngineSettings()
    return EngineSettings()


def save_engine_settings(settings: EngineSettings, path: Optional[Path] = None) -> None:
    """Persist settings to disk, ignoring filesystem errors."""
    target = path or _SETTINGS_PATH
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8") as handle:
            json.dump(settings.to_dict(), handle, indent=2, sort_keys=True)
    except OSError:
        pass


__all__ = ["EngineSettings", "load_engine_settings", "save_engine_settings"]
