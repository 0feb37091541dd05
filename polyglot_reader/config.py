"""
Reader configuration and its on-disk JSON form.

The config file lives in the reader's home directory, which is
$POLYGLOT_READER_HOME when set and ~/.polyglot_reader otherwise.
Loading never fails: a missing or corrupt file yields the defaults.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any

from polyglot_reader.exceptions import ConfigurationError
from polyglot_reader.paginator import DEFAULT_LINES_PER_PAGE, validate_page_size

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "POLYGLOT_READER_HOME"
CONFIG_FILE_NAME = "config.json"

MIN_FONT_SIZE = 8.0
MAX_FONT_SIZE = 72.0
FONT_SIZE_STEP = 2.0

# Field name -> key used in config.json
_JSON_KEYS = {
    "font_name": "fontName",
    "font_size": "fontSize",
    "lines_per_page": "linesPerPage",
    "window_width": "windowWidth",
    "window_height": "windowHeight",
    "follow_system_appearance": "followSystemAppearance",
}


@dataclass(frozen=True)
class ReaderConfig:
    """
    Display and pagination settings.

    All options have sensible defaults. Use dataclasses.replace() or
    the helper methods to derive a changed copy.

    Example:
        >>> config = ReaderConfig(lines_per_page=60)
        >>> config.with_font_step(+1).font_size
        16.0
    """

    font_name: str = "Menlo"
    font_size: float = 14.0
    lines_per_page: int = DEFAULT_LINES_PER_PAGE
    window_width: float = 1200.0
    window_height: float = 800.0
    follow_system_appearance: bool = True

    def __post_init__(self):
        """Validate configuration."""
        validate_page_size(self.lines_per_page)

        if not MIN_FONT_SIZE <= self.font_size <= MAX_FONT_SIZE:
            raise ConfigurationError(
                f"font_size must be between {MIN_FONT_SIZE:g} and {MAX_FONT_SIZE:g}, "
                f"got {self.font_size}"
            )
        if self.window_width <= 0 or self.window_height <= 0:
            raise ConfigurationError(
                f"window size must be positive, got {self.window_width}x{self.window_height}"
            )

    def with_font_step(self, steps: int) -> ReaderConfig:
        """Copy with the font size moved by `steps` increments, clamped to range."""
        size = self.font_size + steps * FONT_SIZE_STEP
        size = min(MAX_FONT_SIZE, max(MIN_FONT_SIZE, size))
        return replace(self, font_size=size)

    def with_lines_per_page(self, lines_per_page: int) -> ReaderConfig:
        """Copy with a new page size; raises InvalidPageSizeError if < 1."""
        return replace(self, lines_per_page=lines_per_page)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the config.json representation."""
        return {_JSON_KEYS[key]: value for key, value in asdict(self).items()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReaderConfig:
        """
        Build a config from its config.json representation.

        Unknown keys are ignored and missing keys take their defaults.

        Raises:
            ConfigurationError: If a present value is invalid.
        """
        kwargs = {field: data[key] for field, key in _JSON_KEYS.items() if key in data}
        return cls(**kwargs)


def config_dir() -> Path:
    """The reader's home directory (not created here)."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".polyglot_reader"


def config_path() -> Path:
    return config_dir() / CONFIG_FILE_NAME


def load_config(path: str | Path | None = None) -> ReaderConfig:
    """
    Load the config file, falling back to defaults.

    Args:
        path: Config file to read; defaults to config_path().

    Returns:
        The stored config, or ReaderConfig() if the file is missing,
        unreadable, not JSON, or holds invalid values.
    """
    path = Path(path) if path is not None else config_path()
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No config at %s, using defaults", path)
        return ReaderConfig()
    except OSError as e:
        logger.warning("Could not read config %s: %s", path, e)
        return ReaderConfig()

    try:
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ConfigurationError(f"expected a JSON object, got {type(data).__name__}")
        return ReaderConfig.from_dict(data)
    except (json.JSONDecodeError, ConfigurationError, TypeError) as e:
        logger.warning("Ignoring invalid config %s: %s", path, e)
        return ReaderConfig()


def save_config(config: ReaderConfig, path: str | Path | None = None) -> bool:
    """
    Write the config file, creating its directory if needed.

    Returns:
        True if the file was written. Write failures are logged, not raised.
    """
    path = Path(path) if path is not None else config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
    except OSError as e:
        logger.warning("Could not save config %s: %s", path, e)
        return False
    return True
