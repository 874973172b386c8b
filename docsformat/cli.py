"""Command-line interface for docsformat.

Responsibilities:
- Expose the text formatters to shell scripts and docs build steps.
- Resolve `FormatterConfig` from CLI options, YAML files, and the environment.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated, Callable

import typer

from .cli_rendering import exit_with_command_error
from .config import ConfigLoader, FormatterConfig
from .errors import CommandStageError, FormatterInputError
from .telemetry.logger import RunLogger
from .text.formatters import capitalize_first, to_kebab_case, truncate

app = typer.Typer(
    name="docsformat",
    no_args_is_help=True,
    help="Format titles, slugs, and display text for documentation sites.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
LogEventsOption = Annotated[
    bool | None,
    typer.Option(
        "--log-events/--no-log-events",
        help="Write phase logs to stderr (overrides config and environment).",
    ),
]


def _resolve_config(
    config_file: Path | None,
    max_length: int | None = None,
    log_events: bool | None = None,
) -> FormatterConfig:
    """Resolve effective config as CLI option > YAML file > environment > default."""

    try:
        resolved = ConfigLoader.from_env(os.environ)
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=str(exc),
            hint="Fix or unset the `DOCSFORMAT_*` environment variables.",
        ) from exc

    if config_file is not None:
        try:
            resolved = ConfigLoader.from_yaml(config_file, base=resolved)
        except FileNotFoundError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Config file not found: `{config_file}`.",
                hint="Provide an existing path via `--config <path.yaml>`.",
            ) from exc
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Invalid config file `{config_file}`: {exc}",
                hint="Fix config schema/values and rerun.",
            ) from exc

    return FormatterConfig(
        max_length=max_length if max_length is not None else resolved.max_length,
        log_events=log_events if log_events is not None else resolved.log_events,
    )


def _run_formatter(
    command_name: str,
    config: FormatterConfig,
    formatter: Callable[[], str],
) -> str:
    """Run one formatter call, emitting phase logs when enabled."""

    run_logger = RunLogger() if config.log_events else None
    if run_logger is not None:
        run_logger.log_stage_start("format", command=command_name)
    try:
        result = formatter()
    except FormatterInputError as exc:
        if run_logger is not None:
            run_logger.log_stage_failure("format", error_type=type(exc).__name__)
        raise
    if run_logger is not None:
        run_logger.log_stage_complete("format", command=command_name, length=len(result))
    return result


@app.command("capitalize")
def capitalize_command(
    text: Annotated[str, typer.Argument(help="Text whose first character is uppercased.")],
    config_file: ConfigOption = None,
    log_events: LogEventsOption = None,
) -> None:
    """Uppercase the first character of TEXT."""

    try:
        config = _resolve_config(config_file, log_events=log_events)
        result = _run_formatter("capitalize", config, lambda: capitalize_first(text))
    except Exception as exc:
        exit_with_command_error("capitalize", exc)

    typer.echo(result)


@app.command("kebab")
def kebab_command(
    text: Annotated[str, typer.Argument(help="Title or identifier to convert.")],
    config_file: ConfigOption = None,
    log_events: LogEventsOption = None,
) -> None:
    """Convert TEXT to kebab-case."""

    try:
        config = _resolve_config(config_file, log_events=log_events)
        result = _run_formatter("kebab", config, lambda: to_kebab_case(text))
    except Exception as exc:
        exit_with_command_error("kebab", exc)

    typer.echo(result)


@app.command("truncate")
def truncate_command(
    text: Annotated[str, typer.Argument(help="Text to fit into the display budget.")],
    max_length: Annotated[
        int | None,
        typer.Option(
            "--max-length",
            help="Display budget in characters, ellipsis included (default: 80).",
        ),
    ] = None,
    config_file: ConfigOption = None,
    log_events: LogEventsOption = None,
) -> None:
    """Truncate TEXT to fit a display budget, ending with `...` when shortened."""

    try:
        config = _resolve_config(config_file, max_length=max_length, log_events=log_events)
        result = _run_formatter(
            "truncate", config, lambda: truncate(text, config.max_length)
        )
    except FormatterInputError as exc:
        exit_with_command_error(
            "truncate",
            CommandStageError(
                stage="format",
                detail=exc.detail,
                hint="Pass `--max-length` with a value of 0 or more.",
            ),
        )
    except Exception as exc:
        exit_with_command_error("truncate", exc)

    typer.echo(result)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
