"""Unified settings: CLI flags, env vars and the JSON config file in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``BITSTORE_*`` prefix
  3. JSON file: ``~/.bitstore`` or the ``--config`` path
  4. Code defaults: ``network = "livenet"``

Uses Pydantic Settings v2 with a custom :class:`JsonSettingsSource`.  The
``host`` is derived from ``network`` when none of the sources set it.
"""

from __future__ import annotations

import json
import threading
from enum import StrEnum
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError, model_validator
from pydantic.alias_generators import to_snake
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from bitstore.config.discovery import default_config_path, resolve_config_path


class Network(StrEnum):
    LIVENET = "livenet"
    TESTNET = "testnet"


DEFAULT_HOSTS: dict[Network, str] = {
    Network.LIVENET: "https://bitstore.blockai.com",
    Network.TESTNET: "https://bitstore-test.blockai.com",
}


class ConfigError(click.ClickException):
    """Configuration is missing or unusable; no remote call is attempted."""


class JsonSettingsSource(PydanticBaseSettingsSource):
    """Read settings from the JSON config file.

    A missing file contributes nothing, so the loader falls through to
    env vars and defaults.  Keys may be camelCase (``privateKey``) or
    snake_case (``private_key``).
    """

    def __init__(self, settings_cls: type[BaseSettings], json_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if json_path and json_path.is_file():
            try:
                raw = json_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise ConfigError(f"Cannot read {json_path}: {exc}") from exc
            try:
                data = json.loads(raw) if raw.strip() else {}
            except json.JSONDecodeError as exc:
                msg = f"Invalid JSON in {json_path}: {exc}"
                raise ConfigError(msg) from exc
            if not isinstance(data, dict):
                raise ConfigError(f"Expected a JSON object in {json_path}")
            self._data = {to_snake(key): value for key, value in data.items()}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full JSON data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for the config path during construction.
_tls = threading.local()


class BitstoreSettings(BaseSettings):
    """Unified settings for the bitstore CLI.

    Built once per invocation and handed to the client factory; never
    written back to disk.

    Attributes:
        config_path: The config file that was consulted (it may not exist).
        network: ``livenet`` or ``testnet``.
        host: Service base URL, derived from *network* when unset.
        private_key: Credential used to authenticate requests.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BITSTORE_",
        "extra": "ignore",
    }

    config_path: Path = Field(default_factory=default_config_path)

    # --- Config file keys ---
    network: Network = Network.LIVENET
    host: str | None = None
    private_key: str | None = Field(default=None, repr=False)

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    @model_validator(mode="before")
    @classmethod
    def derive_host(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("host"):
            network = data.get("network") or Network.LIVENET
            derived = DEFAULT_HOSTS.get(network) if isinstance(network, str) else None
            if derived is not None:
                data = {**data, "host": derived}
        return data

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the JSON source between env vars and defaults."""
        json_path = getattr(_tls, "json_path", None)
        return (
            init_settings,
            env_settings,
            JsonSettingsSource(settings_cls, json_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | Path | None = None,
        **cli_flags: Any,
    ) -> BitstoreSettings:
        """Construct settings from a CLI invocation.

        Reads the JSON config at *config_path* (or the default location)
        and merges CLI flags as highest-priority overrides.

        Raises:
            ConfigError: The file is not valid JSON or a value fails
                validation (e.g. an unknown network).
        """
        path = resolve_config_path(config_path)
        _tls.json_path = path
        try:
            return cls(config_path=path, **cli_flags)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
                for err in exc.errors()
            )
            raise ConfigError(f"Invalid configuration in {path}: {problems}") from exc
        finally:
            _tls.json_path = None

    def require_private_key(self) -> str:
        """Return the credential or fail with instructions naming the config file."""
        if not self.private_key:
            raise ConfigError(f'Configure {{ privateKey: "" }} in {self.config_path}')
        return self.private_key
