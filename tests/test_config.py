"""Tests for TOML config file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from cleanstring.cli import build_parser, config_prefix, load_config, resolve_options
from cleanstring.errors import ConfigError


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text('[clean]\nprefix = ">"\n')
        assert load_config(cfg, tmp_path) == {"clean": {"prefix": ">"}}

    def test_auto_discover_cleanstring_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "cleanstring.toml"
        cfg.write_text('[clean]\nprefix = "#"\n')
        assert load_config(None, tmp_path)["clean"] == {"prefix": "#"}

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        cfg = tmp_path / "cleanstring.toml"
        cfg.write_text("[clean\n")
        with pytest.raises(ConfigError, match="invalid TOML") as exc_info:
            load_config(None, tmp_path)
        assert exc_info.value.path == cfg

    def test_invalid_utf8_raises(self, tmp_path: Path) -> None:
        cfg = tmp_path / "cleanstring.toml"
        cfg.write_bytes(b"[clean]\nprefix = \"\xff\"\n")
        with pytest.raises(ConfigError, match="not valid UTF-8") as exc_info:
            load_config(None, tmp_path)
        assert exc_info.value.path == cfg


class TestConfigPrefix:
    def test_absent_section(self, tmp_path: Path) -> None:
        assert config_prefix({}, tmp_path / "c.toml") is None

    def test_absent_key(self, tmp_path: Path) -> None:
        assert config_prefix({"clean": {}}, tmp_path / "c.toml") is None

    @pytest.mark.parametrize("value", ["", 1, ["|"]])
    def test_bad_value_raises(self, tmp_path: Path, value: object) -> None:
        with pytest.raises(ConfigError) as exc_info:
            config_prefix({"clean": {"prefix": value}}, tmp_path / "c.toml")
        assert exc_info.value.key == "clean.prefix"


class TestConfigMerge:
    def test_default_prefix(self, tmp_path: Path) -> None:
        doc = tmp_path / "doc.txt"
        doc.write_text("")
        opts = resolve_options(build_parser().parse_args([str(doc)]))
        assert opts.prefix == "|"
        assert opts.input_file == doc

    def test_config_prefix_used(self, tmp_path: Path) -> None:
        (tmp_path / "cleanstring.toml").write_text('[clean]\nprefix = ">"\n')
        doc = tmp_path / "doc.txt"
        doc.write_text("")
        opts = resolve_options(build_parser().parse_args([str(doc)]))
        assert opts.prefix == ">"

    def test_cli_overrides_config(self, tmp_path: Path) -> None:
        (tmp_path / "cleanstring.toml").write_text('[clean]\nprefix = ">"\n')
        doc = tmp_path / "doc.txt"
        doc.write_text("")
        opts = resolve_options(build_parser().parse_args([str(doc), "-p", "#"]))
        assert opts.prefix == "#"

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text('[clean]\nprefix = "//"\n')
        doc = tmp_path / "doc.txt"
        doc.write_text("")
        opts = resolve_options(build_parser().parse_args([str(doc), "--config", str(cfg)]))
        assert opts.prefix == "//"

    def test_stdin_input(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "cleanstring.toml").write_text('[clean]\nprefix = "*"\n')
        opts = resolve_options(build_parser().parse_args([]))
        assert opts.input_file is None
        assert opts.prefix == "*"
