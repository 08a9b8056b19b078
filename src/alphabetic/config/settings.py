"""Resolved settings for one alphabetic run.

Sources, strongest first: CLI flags, ``ALPHABETIC_*`` environment
variables (``__`` reaches into sections, e.g.
``ALPHABETIC_LETTERS__DEFAULT_SHIFT``), the TOML file chosen by
:func:`alphabetic.config.discovery.resolve_config`, then model defaults.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsError,
    TomlConfigSettingsSource,
)

from alphabetic.config.discovery import resolve_config
from alphabetic.config.models import LettersConfig

# pydantic-settings builds sources in a classmethod, so the file chosen by
# from_cli reaches it through this variable for the duration of one build.
_toml_file: ContextVar[Path | None] = ContextVar("alphabetic_toml_file", default=None)


def _summarize(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


class AlphabeticSettings(BaseSettings):
    """Frozen view of flags, environment and ``alphabetic.toml``.

    Attributes:
        config_path: The TOML file that was read, or None.
        letters: The ``[letters]`` section.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ALPHABETIC_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    letters: LettersConfig = Field(default_factory=LettersConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=_toml_file.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_from: Path | None = None,
        **cli_flags: Any,
    ) -> AlphabeticSettings:
        """Build settings for a CLI invocation.

        Raises:
            click.ClickException: The TOML file does not parse, or a value
                from the file or environment fails validation.
        """
        toml_path = resolve_config(config_path, search_from)
        token = _toml_file.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc
        except ValidationError as exc:
            msg = f"Invalid configuration: {_summarize(exc)}"
            raise click.ClickException(msg) from exc
        except SettingsError as exc:
            msg = f"Invalid configuration: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _toml_file.reset(token)
