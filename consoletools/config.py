"""
Configuration management for ConsoleTools.

Settings live in an optional JSON file; environment variables override it:
- NO_COLOR: any non-empty value disables ANSI styling
- CONSOLETOOLS_TYPING_DELAY: "min,max" typing delay in milliseconds
"""

import json
import logging
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Mapping, Optional

from .exceptions import SettingsError

logger = logging.getLogger(__name__)

ENV_NO_COLOR = "NO_COLOR"
ENV_TYPING_DELAY = "CONSOLETOOLS_TYPING_DELAY"


@dataclass
class ConsoleSettings:
    """Defaults for the interactive routines and the demo."""
    typing_min_delay_ms: int = 20
    typing_max_delay_ms: int = 80
    spinner_duration_ms: int = 2000
    spinner_speed_ms: int = 150
    progress_width: int = 20
    use_color: bool = True

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ConsoleSettings":
        """Build settings from a dict, ignoring unknown keys."""
        settings = cls()
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            expected = type(getattr(settings, f.name))
            # bool is an int subclass; keep the two apart
            if type(value) is not expected:
                raise SettingsError(
                    f"{f.name} must be {expected.__name__}, got {type(value).__name__}"
                )
            setattr(settings, f.name, value)
        return settings

    @classmethod
    def load(cls, path: Path) -> "ConsoleSettings":
        """Load settings from file, falling back to defaults if missing or unreadable."""
        if not path.exists():
            return cls()
        try:
            with open(path) as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Could not load %s: %s", path, e)
            return cls()
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", path)
            return cls()
        return cls.from_dict(data)

    def save(self, path: Path):
        """Save settings to file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def apply_env(self, environ: Optional[Mapping[str, str]] = None) -> "ConsoleSettings":
        """Apply environment overrides in place and return self."""
        environ = os.environ if environ is None else environ

        if environ.get(ENV_NO_COLOR):
            self.use_color = False

        delay = environ.get(ENV_TYPING_DELAY, "").strip()
        if delay:
            try:
                low, high = (int(part) for part in delay.split(","))
            except ValueError:
                logger.warning("Ignoring %s=%r: expected 'min,max'", ENV_TYPING_DELAY, delay)
            else:
                self.typing_min_delay_ms = low
                self.typing_max_delay_ms = high

        return self

    @classmethod
    def from_env(
        cls,
        path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ConsoleSettings":
        """Load settings from path (if given) and apply environment overrides."""
        settings = cls.load(path) if path is not None else cls()
        return settings.apply_env(environ)
