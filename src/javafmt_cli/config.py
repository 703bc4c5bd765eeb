import logging
import tomllib
from pathlib import Path

from javafmt_style.exceptions import ConfigError
from javafmt_style.models import FormatterOptions, StylePreset, builder

log = logging.getLogger(__name__)


class StyleConfig:
    """Handles loading of the [tool.javafmt] table from .javafmt.toml or pyproject.toml"""

    def __init__(self, config_path: Path | None = None):
        self.style: str = StylePreset.GOOGLE.name.lower()

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
            # Fall back to defaults if the file can't be read
            log.warning("Ignoring unreadable config %s: %s", path, exc)
            return

        tool = _table(data, "tool", path)
        section = _table(tool, "javafmt", path, "tool.")
        style = section.get("style", self.style)
        if not isinstance(style, str):
            raise ConfigError(f"{path}: 'style' must be a string, got {type(style).__name__}")
        self.style = style

    def resolve(self, style: str | None = None, aosp: bool = False) -> FormatterOptions:
        """Pick the preset: --aosp, then an explicit name, then the config file"""
        if aosp:
            return builder().style(StylePreset.AOSP).build()
        return builder().style(style if style is not None else self.style).build()


def _table(data: dict, key: str, path: Path, prefix: str = "") -> dict:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"{path}: '{prefix}{key}' must be a table, got {type(value).__name__}")
    return value
