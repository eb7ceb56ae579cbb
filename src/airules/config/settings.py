"""Unified settings: CLI flags, env vars, airules.toml and defaults.

Priority (highest first): CLI flags, ``AIRULES_*`` environment variables,
the discovered ``airules.toml``, code-baked defaults.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from airules.config.discovery import find_config
from airules.config.models import AliasConfig, ListingConfig, LookupConfig, coerce_alias_table
from airules.domain.aliases import Alias, build_alias_table


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``airules.toml`` file discovered via walk-up.

    A relative ``root`` is taken relative to the file's directory; without
    a ``root`` key the file's directory is the library root.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

            base = toml_path.parent
            root = self._data.get("root")
            if root is None:
                self._data["root"] = base
            else:
                root_path = Path(str(root)).expanduser()
                self._data["root"] = root_path if root_path.is_absolute() else base / root_path

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RulesSettings(BaseSettings):
    """Unified settings for the airules CLI.

    Merges CLI flags, environment variables, the TOML file and code-baked
    defaults into a single frozen object, stored on the CLI's AppContext.

    Attributes:
        root: Directory every query is resolved against.
        config_path: The ``airules.toml`` in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "AIRULES_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    name: str = "airules"

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    strict: bool = False

    # --- TOML sections ---
    lookup: LookupConfig = Field(default_factory=LookupConfig)
    listing: ListingConfig = Field(default_factory=ListingConfig)
    aliases: dict[str, AliasConfig] = Field(default_factory=dict)

    @field_validator("aliases", mode="before")
    @classmethod
    def _accept_path_shorthand(cls, value: Any) -> Any:
        return coerce_alias_table(value)

    @field_validator("aliases")
    @classmethod
    def _check_keywords(cls, value: dict[str, AliasConfig]) -> dict[str, AliasConfig]:
        # Alias() raises on reserved or malformed keywords.
        for keyword, entry in value.items():
            Alias(keyword=keyword, target_path=entry.path, description=entry.description)
        return value

    @property
    def alias_table(self) -> dict[str, Alias]:
        """Built-in aliases with configured ones merged on top."""
        return build_alias_table(
            Alias(keyword=keyword, target_path=entry.path, description=entry.description)
            for keyword, entry in self.aliases.items()
        )

    @property
    def strict_lookup(self) -> bool:
        """True when a failed lookup should exit non-zero."""
        return self.strict or self.lookup.strict

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: str | Path | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> RulesSettings:
        """Construct settings from a CLI invocation.

        Discovers ``airules.toml`` via walk-up from *start* (default: cwd)
        unless *config_path* names one. An explicit *root* wins over every
        other source.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        # Only flags given on the command line outrank env vars and the TOML.
        overrides: dict[str, Any] = {k: v for k, v in cli_flags.items() if v}
        if root is not None:
            overrides["root"] = Path(root)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
