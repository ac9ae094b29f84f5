"""Settings management for Capture Config."""

import json
import os
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ValidationError


@dataclass
class Settings:
    """Toolkit defaults applied to new capture configurations."""

    default_snaplen: int = 1518
    default_timeout: int = 0  # milliseconds, 0 = unlimited
    default_mode: str = "passive"
    verbose: bool = False

    @classmethod
    def from_file(cls, path: Path) -> "Settings":
        """Load settings from JSON file."""
        if not path.exists():
            return cls()

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            raise ValidationError(f"Invalid settings file: {path}", str(e)) from e

        if not isinstance(data, dict):
            raise ValidationError(f"Invalid settings file: {path}", "expected a JSON object")

        settings = cls()
        for key, value in data.items():
            if not hasattr(settings, key):
                continue
            expected = type(getattr(settings, key))
            # bool is a subclass of int, so compare exact types
            if type(value) is not expected:
                raise ValidationError(
                    f"Invalid settings file: {path}",
                    f"{key} must be {expected.__name__}, got {type(value).__name__}",
                )
            setattr(settings, key, value)

        return settings

    def save(self, path: Path) -> None:
        """Save settings to JSON file."""
        data = {
            "default_snaplen": self.default_snaplen,
            "default_timeout": self.default_timeout,
            "default_mode": self.default_mode,
            "verbose": self.verbose,
        }
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(data, f, indent=2)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        settings_path = Path(os.environ.get("CAPTURECONFIG_SETTINGS", ".captureconfig.json"))
        _settings = Settings.from_file(settings_path)
    return _settings


def set_settings(settings: Settings | None) -> None:
    """Set the global settings instance (None forces a reload)."""
    global _settings
    _settings = settings
