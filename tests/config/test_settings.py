"""Tests for RulesSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from airules.config.settings import RulesSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        settings = RulesSettings.from_cli(start=tmp_path)
        assert settings.root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.strict_lookup is False
        assert settings.lookup.suffixes == [".md"]
        assert settings.listing.extensions == [".md"]
        assert settings.listing.exclude == ["README*"]
        assert list(settings.alias_table) == ["ascii", "claude"]

    def test_frozen(self, tmp_path: Path) -> None:
        settings = RulesSettings.from_cli(root=tmp_path, start=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestRootResolution:
    def test_config_dir_is_root(self, tmp_path: Path) -> None:
        (tmp_path / "airules.toml").write_text('name = "lib"\n')
        child = tmp_path / "ascii-art"
        child.mkdir()
        settings = RulesSettings.from_cli(start=child)
        assert settings.root == tmp_path
        assert settings.name == "lib"

    def test_relative_root_in_config(self, tmp_path: Path) -> None:
        (tmp_path / "airules.toml").write_text('root = "docs/rules"\n')
        settings = RulesSettings.from_cli(start=tmp_path)
        assert settings.root == tmp_path / "docs" / "rules"

    def test_absolute_root_in_config(self, tmp_path: Path) -> None:
        elsewhere = tmp_path / "elsewhere"
        (tmp_path / "airules.toml").write_text(f'root = "{elsewhere.as_posix()}"\n')
        settings = RulesSettings.from_cli(start=tmp_path)
        assert settings.root == elsewhere

    def test_env_beats_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "airules.toml").write_text('root = "from-toml"\n')
        monkeypatch.setenv("AIRULES_ROOT", str(tmp_path / "from-env"))
        settings = RulesSettings.from_cli(start=tmp_path)
        assert settings.root == tmp_path / "from-env"

    def test_cli_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AIRULES_ROOT", str(tmp_path / "from-env"))
        settings = RulesSettings.from_cli(root=tmp_path / "from-cli", start=tmp_path)
        assert settings.root == tmp_path / "from-cli"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('name = "custom"\n')
        settings = RulesSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.name == "custom"
        assert settings.config_path == custom
        assert settings.root == custom.parent


class TestTomlSections:
    def test_sparse_override(self, tmp_path: Path) -> None:
        (tmp_path / "airules.toml").write_text('[listing]\nextensions = [".md", ".txt"]\n')
        settings = RulesSettings.from_cli(start=tmp_path)
        assert settings.listing.extensions == [".md", ".txt"]
        assert settings.listing.exclude == ["README*"]  # default preserved

    def test_strict_from_lookup_section(self, tmp_path: Path) -> None:
        (tmp_path / "airules.toml").write_text("[lookup]\nstrict = true\n")
        settings = RulesSettings.from_cli(start=tmp_path)
        assert settings.strict is False
        assert settings.strict_lookup is True

    def test_strict_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AIRULES_LOOKUP__STRICT", "true")
        settings = RulesSettings.from_cli(root=tmp_path, start=tmp_path)
        assert settings.strict_lookup is True

    def test_unset_flags_defer_to_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("AIRULES_STRICT", "true")
        monkeypatch.setenv("AIRULES_VERBOSE", "1")
        monkeypatch.setenv("AIRULES_QUIET", "true")
        settings = RulesSettings.from_cli(
            root=tmp_path,
            start=tmp_path,
            json_output=False,
            quiet=False,
            verbose=False,
            log_json=False,
            strict=False,
        )
        assert settings.strict is True
        assert settings.verbose is True
        assert settings.quiet is True
        assert settings.json_output is False

    def test_set_flag_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AIRULES_QUIET", "false")
        settings = RulesSettings.from_cli(root=tmp_path, start=tmp_path, quiet=True)
        assert settings.quiet is True

    def test_env_flag_beats_config(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "airules.toml").write_text("quiet = true\n")
        monkeypatch.setenv("AIRULES_QUIET", "false")
        settings = RulesSettings.from_cli(start=tmp_path)
        assert settings.quiet is False

    def test_alias_table_merge(self, tmp_path: Path) -> None:
        (tmp_path / "airules.toml").write_text(
            "[aliases]\n"
            'ascii = "guides/ascii.md"\n'
            "[aliases.style]\n"
            'path = "guides/style.md"\n'
            'description = "Show the style guide"\n'
        )
        table = RulesSettings.from_cli(start=tmp_path).alias_table
        assert list(table) == ["ascii", "claude", "style"]
        assert table["ascii"].target_path == "guides/ascii.md"
        assert table["style"].description == "Show the style guide"

    def test_reserved_alias_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "airules.toml").write_text('[aliases]\nlist = "x.md"\n')
        with pytest.raises(ValidationError):
            RulesSettings.from_cli(start=tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "airules.toml").write_text("name = \n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            RulesSettings.from_cli(start=tmp_path)
