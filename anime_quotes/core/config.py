"""UI configuration loaded from ``config.toml``.

Every key is optional. A missing or unparseable file yields the defaults,
and a value of the wrong type falls back to the default for that key.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from anime_quotes.core.charsets import DEFAULT_GRADIENT
from anime_quotes.core.color import Palette, parse_color_or_default
from anime_quotes.core.errors import ConfigError
from anime_quotes.core.settings import (
    DEFAULT_CHAR_ASPECT,
    DEFAULT_DETAIL_X,
    DEFAULT_DETAIL_Y,
    DEFAULT_TARGET_WIDTH,
    AsciiSettings,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.toml")
DEFAULT_SHOW_INSTRUCTIONS = True


def read_toml(path: str | Path) -> dict[str, Any]:
    """Read a TOML document.

    Raises:
        ConfigError: the file cannot be read or is not valid TOML.
    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"failed to read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"failed to parse {path}: {e}") from e


def _typed(table: dict[str, Any], key: str, kind: type | tuple[type, ...], default: Any) -> Any:
    value = table.get(key, default)
    # bool is an int subclass; never accept it for numeric keys
    is_stray_bool = isinstance(value, bool) and kind is not bool
    if is_stray_bool or not isinstance(value, kind):
        logger.warning("Ignoring %s = %r: expected %s", key, value, getattr(kind, "__name__", kind))
        return default
    return value


def _table(parent: dict[str, Any], key: str) -> dict[str, Any]:
    value = parent.get(key, {})
    if not isinstance(value, dict):
        logger.warning("Ignoring [%s]: expected a table", key)
        return {}
    return value


@dataclass(frozen=True)
class AsciiConfig:
    target_width: int = DEFAULT_TARGET_WIDTH
    char_aspect: float = DEFAULT_CHAR_ASPECT
    gradient: str = DEFAULT_GRADIENT
    detail_x: int = DEFAULT_DETAIL_X
    detail_y: int = DEFAULT_DETAIL_Y

    @classmethod
    def from_table(cls, table: dict[str, Any]) -> AsciiConfig:
        return cls(
            target_width=_typed(table, "target_width", int, DEFAULT_TARGET_WIDTH),
            char_aspect=float(_typed(table, "char_aspect", (int, float), DEFAULT_CHAR_ASPECT)),
            gradient=_typed(table, "gradient", str, DEFAULT_GRADIENT),
            detail_x=_typed(table, "detail_x", int, DEFAULT_DETAIL_X),
            detail_y=_typed(table, "detail_y", int, DEFAULT_DETAIL_Y),
        )

    def to_settings(self) -> AsciiSettings:
        return AsciiSettings.create(
            base_width=self.target_width,
            char_aspect=self.char_aspect,
            gradient=self.gradient,
            detail_x=self.detail_x,
            detail_y=self.detail_y,
        )


@dataclass(frozen=True)
class ColorConfig:
    anime: str = "yellow"
    character: str = "cyan"
    japanese: str = "green"
    romaji: str = "magenta"
    quote: str = "white"
    count: str = "gray"
    instructions: str = "blue"

    @classmethod
    def from_table(cls, table: dict[str, Any]) -> ColorConfig:
        defaults = cls()
        values = {
            f.name: _typed(table, f.name, str, getattr(defaults, f.name))
            for f in fields(cls)
        }
        return cls(**values)

    def to_palette(self) -> Palette:
        defaults = Palette()
        values = {
            f.name: parse_color_or_default(getattr(self, f.name), getattr(defaults, f.name))
            for f in fields(Palette)
        }
        return Palette(**values)


@dataclass(frozen=True)
class UiConfig:
    show_instructions: bool = DEFAULT_SHOW_INSTRUCTIONS
    ascii: AsciiConfig = field(default_factory=AsciiConfig)
    colors: ColorConfig = field(default_factory=ColorConfig)

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> UiConfig:
        ui = _table(document, "ui")
        return cls(
            show_instructions=_typed(ui, "show_instructions", bool, DEFAULT_SHOW_INSTRUCTIONS),
            ascii=AsciiConfig.from_table(_table(ui, "ascii")),
            colors=ColorConfig.from_table(_table(ui, "colors")),
        )


def load_ui_config(path: str | Path = DEFAULT_CONFIG_PATH) -> UiConfig:
    """Load the ``[ui]`` section of a config file, or defaults on failure."""
    try:
        document = read_toml(path)
    except ConfigError as e:
        logger.error("%s", e)
        return UiConfig()
    return UiConfig.from_document(document)
