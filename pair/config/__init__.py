"""Configuration Management Package

Two files are involved:

1. The co-author config (`.pair.json`), looked up in order:
   - `--config PATH` on the command line
   - `.pair.json` in the current directory (project-specific)
   - `~/.pair.json` (global default)

2. Optional application settings in `~/.config/pair/config.json`, with
   environment overrides (`NO_COLOR`, `PAIR_TEMPLATE_PATH`, `PAIR_DEBUG`).
"""

import json
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pair.coauthors.models import ConfigError, Registry
from pair.log import get_logger

log = get_logger(__name__)

CONFIG_FILENAME = ".pair.json"
SETTINGS_DIR = Path("~/.config/pair")
SETTINGS_FILENAME = "config.json"
DEFAULT_TEMPLATE_PATH = str(SETTINGS_DIR / "git_commit_template")

TRUTHY = {"1", "true", "yes", "on"}

SAMPLE_COAUTHORS = {
    "coauthors": {
        "jane": {"name": "Jane Doe", "email": "jane.doe@example.com"},
        "john": {"name": "John Doe", "email": "john.doe@example.com"},
    }
}


@dataclass
class Settings:
    """Application settings with sensible defaults."""
    template_path: str = DEFAULT_TEMPLATE_PATH
    no_color: bool = False
    debug: bool = False

    def validate(self) -> list[str]:
        """Validate settings and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Settings()

        if not isinstance(self.template_path, str) or not self.template_path.strip():
            warnings.append(f"Invalid template_path '{self.template_path}', using '{defaults.template_path}'")
            self.template_path = defaults.template_path

        for name in ("no_color", "debug"):
            if not isinstance(getattr(self, name), bool):
                warnings.append(f"Invalid {name} '{getattr(self, name)}', using {str(getattr(defaults, name)).lower()}")
                setattr(self, name, getattr(defaults, name))

        return warnings

    @property
    def resolved_template_path(self) -> Path:
        return Path(self.template_path).expanduser()

    @classmethod
    def from_dict(cls, data: dict) -> 'Settings':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        settings = cls(**filtered)
        for warning in settings.validate():
            print(f"Settings warning: {warning}", file=sys.stderr)
        return settings


class SettingsManager:
    """Loads settings from disk and applies environment overrides."""

    def __init__(self, settings_dir: Optional[Path] = None):
        self.settings_dir = Path(settings_dir or SETTINGS_DIR).expanduser()

    @property
    def settings_path(self) -> Path:
        return self.settings_dir / SETTINGS_FILENAME

    def load(self, environ: Optional[dict] = None) -> Settings:
        environ = os.environ if environ is None else environ
        settings = self._load_from_file(self.settings_path) if self.settings_path.exists() else Settings()
        return self._apply_env(settings, environ)

    def _load_from_file(self, path: Path) -> Settings:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            log.debug("settings loaded", path=str(path))
            return Settings.from_dict(data)
        except (json.JSONDecodeError, ValueError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Settings()

    def _apply_env(self, settings: Settings, environ) -> Settings:
        if 'NO_COLOR' in environ:
            settings.no_color = True
        if environ.get('PAIR_TEMPLATE_PATH'):
            settings.template_path = environ['PAIR_TEMPLATE_PATH']
        if environ.get('PAIR_DEBUG', '').strip().lower() in TRUTHY:
            settings.debug = True
        return settings


def load_settings() -> Settings:
    return SettingsManager().load()


def get_config_path() -> Path:
    """Default co-author config: local `.pair.json` if present, else the home one."""
    local_path = Path.cwd() / CONFIG_FILENAME
    if local_path.exists():
        return local_path
    return Path.home() / CONFIG_FILENAME


def load_registry(path: Optional[Path] = None) -> Registry:
    return Registry.load(path or get_config_path())


def write_sample_config(path: Path) -> bool:
    """Write the sample co-author config. Returns False if *path* already exists."""
    path = Path(path)
    if path.exists():
        return False
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(SAMPLE_COAUTHORS, f, indent=2)
            f.write('\n')
    except OSError as e:
        raise ConfigError(f"error writing config file {path}: {e}")
    return True


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_TEMPLATE_PATH",
    "SAMPLE_COAUTHORS",
    "ConfigError",
    "Settings",
    "SettingsManager",
    "get_config_path",
    "load_registry",
    "load_settings",
    "write_sample_config",
]
