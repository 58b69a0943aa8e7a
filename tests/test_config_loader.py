"""Tests for whisker.config_loader — whisker.yaml / whisker.toml merging."""

from __future__ import annotations

from pathlib import Path

import pytest

from whisker._errors import ConfigError
from whisker.config_loader import load_config


class TestLoadConfig:
    def test_no_file_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert config.root == tmp_path
        assert config.content_dir == "docs"

    def test_yaml_top_level_keys(self, tmp_path: Path) -> None:
        (tmp_path / "whisker.yaml").write_text("content_dir: pages\nport: 4000\n")
        config = load_config(tmp_path)
        assert config.content_dir == "pages"
        assert config.port == 4000

    def test_yaml_whisker_section(self, tmp_path: Path) -> None:
        (tmp_path / "whisker.yml").write_text("whisker:\n  site_title: Docs\n")
        assert load_config(tmp_path).site_title == "Docs"

    def test_toml(self, tmp_path: Path) -> None:
        (tmp_path / "whisker.toml").write_text(
            '[whisker]\non_collision = "error"\noutput = "public"\n'
        )
        config = load_config(tmp_path)
        assert config.on_collision == "error"
        assert config.output == Path("public")

    def test_yaml_preferred_over_toml(self, tmp_path: Path) -> None:
        (tmp_path / "whisker.yaml").write_text("port: 1111\n")
        (tmp_path / "whisker.toml").write_text("port = 2222\n")
        assert load_config(tmp_path).port == 1111

    def test_overrides_win(self, tmp_path: Path) -> None:
        (tmp_path / "whisker.yaml").write_text("port: 4000\n")
        assert load_config(tmp_path, port=5000).port == 5000

    def test_defaults_lose_to_file_and_overrides(self, tmp_path: Path) -> None:
        (tmp_path / "whisker.yaml").write_text("port: 4000\n")
        defaults = {"host": "0.0.0.0", "port": 8000, "workers": 2}
        config = load_config(tmp_path, defaults=defaults, workers=4)
        assert config.host == "0.0.0.0"
        assert config.port == 4000
        assert config.workers == 4

    def test_none_override_keeps_file_value(self, tmp_path: Path) -> None:
        (tmp_path / "whisker.yaml").write_text("content_dir: pages\n")
        assert load_config(tmp_path, content_dir=None).content_dir == "pages"

    def test_output_normalized_to_path(self, tmp_path: Path) -> None:
        config = load_config(tmp_path, output="public")
        assert config.output_path == tmp_path / "public"

    def test_unknown_key(self, tmp_path: Path) -> None:
        (tmp_path / "whisker.yaml").write_text("colour: blue\n")
        with pytest.raises(ConfigError, match="colour"):
            load_config(tmp_path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "whisker.yaml").write_text("port: [unclosed\n")
        with pytest.raises(ConfigError, match="Failed to read"):
            load_config(tmp_path)

    def test_yaml_must_be_mapping(self, tmp_path: Path) -> None:
        (tmp_path / "whisker.yaml").write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "whisker.toml").write_text("port = \n")
        with pytest.raises(ConfigError):
            load_config(tmp_path)
