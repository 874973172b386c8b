"""Configuration model and loaders for the docsformat CLI.

Responsibilities:
- Define CLI defaults as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

The formatter functions never read configuration; only `docsformat.cli` does.

Key types:
- `FormatterConfig`: normalized CLI settings for one invocation.
- `ConfigLoader`: static construction helpers for `FormatterConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_non_negative_int,
    parse_required_boolean,
)


DEFAULT_MAX_LENGTH = 80

ENV_MAX_LENGTH = "DOCSFORMAT_MAX_LENGTH"
ENV_LOG_EVENTS = "DOCSFORMAT_LOG_EVENTS"


@dataclass(frozen=True, slots=True)
class FormatterConfig:
    """CLI defaults for one docsformat invocation.

    Attributes:
        max_length: Default display budget used by `truncate`.
        log_events: Whether phase logs are written to stderr.
    """

    max_length: int = DEFAULT_MAX_LENGTH
    log_events: bool = False

    def validate(self) -> None:
        """Validate configuration values before running a command."""

        if isinstance(self.max_length, bool) or self.max_length < 0:
            raise ValueError("`max_length` must be a non-negative integer.")


class ConfigLoader:
    """Factory methods for loading `FormatterConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"max_length", "log_events"})

    @staticmethod
    def from_yaml(path: Path, base: FormatterConfig | None = None) -> FormatterConfig:
        """Load configuration from a YAML mapping file.

        Keys absent from the file keep the values of `base` (dataclass defaults
        when `base` is omitted).

        Raises:
            FileNotFoundError: If `path` does not exist.
            ValueError: If the payload is not a mapping or holds invalid values.
        """

        raw_text = Path(path).read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(raw_text, path)
        return ConfigLoader._build_config_from_mapping(
            payload, f"YAML config `{path}`", base or FormatterConfig()
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> FormatterConfig:
        """Load configuration from environment variables, falling back to defaults."""

        env_map = env if env is not None else os.environ

        max_length = DEFAULT_MAX_LENGTH
        raw_max_length = normalize_optional_string(env_map.get(ENV_MAX_LENGTH))
        if raw_max_length is not None:
            max_length = ConfigLoader._parse_field(
                parse_non_negative_int, raw_max_length, ENV_MAX_LENGTH, "Environment variable"
            )

        log_events = False
        raw_log_events = normalize_optional_string(env_map.get(ENV_LOG_EVENTS))
        if raw_log_events is not None:
            log_events = ConfigLoader._parse_field(
                parse_required_boolean, raw_log_events, ENV_LOG_EVENTS, "Environment variable"
            )

        config = FormatterConfig(max_length=max_length, log_events=log_events)
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str, base: FormatterConfig
    ) -> FormatterConfig:
        """Build a validated config from a mapping payload."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        max_length = base.max_length
        if payload.get("max_length") is not None:
            max_length = ConfigLoader._parse_field(
                parse_non_negative_int,
                payload["max_length"],
                "max_length",
                f"{source_label} field",
            )

        log_events = base.log_events
        if payload.get("log_events") is not None:
            log_events = ConfigLoader._parse_field(
                parse_required_boolean,
                payload["log_events"],
                "log_events",
                f"{source_label} field",
            )

        config = FormatterConfig(max_length=max_length, log_events=log_events)
        config.validate()
        return config

    @staticmethod
    def _parse_field(parser: Any, value: object, key: str, prefix: str) -> Any:
        """Run a field parser and prefix failures with the value source label."""

        try:
            return parser(value, key)
        except ValueError as exc:
            raise ValueError(f"{prefix} {exc}") from exc
