"""Tests for config.toml loading."""

import pytest

from anime_quotes.core.charsets import DEFAULT_GRADIENT
from anime_quotes.core.color import Palette
from anime_quotes.core.config import (
    AsciiConfig,
    UiConfig,
    load_ui_config,
    read_toml,
)
from anime_quotes.core.errors import ConfigError


def _write(tmp_path, text):
    path = tmp_path / "config.toml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadUiConfig:
    def test_missing_file_gives_defaults(self, tmp_path, caplog):
        with caplog.at_level("ERROR"):
            config = load_ui_config(tmp_path / "config.toml")
        assert config == UiConfig()
        assert "failed to read" in caplog.text

    def test_invalid_toml_gives_defaults(self, tmp_path, caplog):
        path = _write(tmp_path, "[ui\nshow_instructions = ")
        with caplog.at_level("ERROR"):
            assert load_ui_config(path) == UiConfig()
        assert "failed to parse" in caplog.text

    def test_empty_file(self, tmp_path):
        assert load_ui_config(_write(tmp_path, "")) == UiConfig()

    def test_full_file(self, tmp_path):
        path = _write(
            tmp_path,
            """
[ui]
show_instructions = false

[ui.ascii]
target_width = 42
char_aspect = 0.6
gradient = " .#"
detail_x = 1
detail_y = 3

[ui.colors]
anime = "#ff0000"
quote = "grey"
""",
        )
        config = load_ui_config(path)
        assert config.show_instructions is False
        assert config.ascii == AsciiConfig(42, 0.6, " .#", 1, 3)
        assert config.colors.anime == "#ff0000"
        assert config.colors.quote == "grey"
        assert config.colors.character == "cyan"

    def test_integer_aspect_accepted(self, tmp_path):
        config = load_ui_config(_write(tmp_path, "[ui.ascii]\nchar_aspect = 1\n"))
        assert config.ascii.char_aspect == 1.0

    def test_wrong_types_fall_back_per_key(self, tmp_path, caplog):
        path = _write(
            tmp_path,
            """
[ui]
show_instructions = "yes"

[ui.ascii]
target_width = "wide"
detail_x = true
detail_y = 4
""",
        )
        with caplog.at_level("WARNING"):
            config = load_ui_config(path)
        assert config.show_instructions is True
        assert config.ascii.target_width == 30
        assert config.ascii.detail_x == 2
        assert config.ascii.detail_y == 4
        assert "target_width" in caplog.text

    def test_non_table_section_ignored(self, tmp_path):
        config = load_ui_config(_write(tmp_path, "[ui]\nascii = 3\n"))
        assert config.ascii == AsciiConfig()


class TestToSettings:
    def test_clamps(self):
        settings = AsciiConfig(target_width=0, char_aspect=-1.0, gradient="  ", detail_x=0, detail_y=-2).to_settings()
        assert settings.base_width == 1
        assert settings.char_aspect == 0.5
        assert settings.gradient == DEFAULT_GRADIENT
        assert settings.detail_x == 1
        assert settings.detail_y == 1

    def test_passes_values_through(self):
        settings = AsciiConfig(12, 0.4, "ab", 3, 1).to_settings()
        assert (settings.base_width, settings.char_aspect, settings.gradient) == (12, 0.4, "ab")
        assert (settings.detail_x, settings.detail_y) == (3, 1)


class TestToPalette:
    def test_defaults(self):
        assert UiConfig().colors.to_palette() == Palette()

    def test_bad_colors_fall_back(self, tmp_path):
        path = _write(tmp_path, '[ui.colors]\nanime = "nope"\ncount = "#abc"\n')
        palette = load_ui_config(path).colors.to_palette()
        assert palette.anime == Palette().anime
        assert palette.count == "#aabbcc"


class TestReadToml:
    def test_raises_config_error(self, tmp_path):
        with pytest.raises(ConfigError):
            read_toml(tmp_path / "absent.toml")
