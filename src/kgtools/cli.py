from __future__ import annotations

import logging
from typing import Optional

import typer
import yaml

from kgtools.config import load_config
from kgtools.utils.logging import setup_logging
from kgtools.utils.time_utils import ensure_utc_datetime, to_datetime, to_unix_time, unix_time

app = typer.Typer(no_args_is_help=True, add_completion=False)
config_app = typer.Typer(no_args_is_help=True, add_completion=False, help="Config validation and dump utilities.")
app.add_typer(config_app, name="config")
logger = logging.getLogger(__name__)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Root log level; overrides the config."),
    config: Optional[str] = typer.Option(None, "--config", help="Path to a kgtools YAML config."),
) -> None:
    level = log_level or "WARNING"
    if config is not None:
        try:
            cfg = load_config(config)
        except (FileNotFoundError, ValueError) as exc:
            logger.error("CONFIG_ERROR | path=%s | error=%s", config, exc)
            raise typer.Exit(code=1)
        level = log_level or cfg.logging.level
    setup_logging(level)


@app.command()
def now() -> None:
    """Print the current unix timestamp."""
    typer.echo(unix_time())


@app.command("to-datetime")
def to_datetime_cmd(timestamp: int = typer.Argument(..., help="Unix timestamp in seconds.")) -> None:
    """Print a unix timestamp as an ISO-8601 UTC datetime."""
    try:
        converted = to_datetime(timestamp)
    except (OverflowError, ValueError) as exc:
        logger.error("TIME_CONVERT_ERROR | value=%s | error=%s", timestamp, exc)
        raise typer.Exit(code=1)
    typer.echo(converted.isoformat())


@app.command("to-unix")
def to_unix_cmd(value: str = typer.Argument(..., help="ISO-8601 datetime; naive values are taken as UTC.")) -> None:
    """Print the unix timestamp for an ISO-8601 datetime."""
    try:
        parsed = ensure_utc_datetime(value)
    except ValueError as exc:
        logger.error("TIME_PARSE_ERROR | value=%s | error=%s", value, exc)
        raise typer.Exit(code=1)
    typer.echo(to_unix_time(parsed))


@config_app.command("show")
def config_show(
    config: Optional[str] = typer.Option(None, "--config", help="Path to a kgtools YAML config."),
) -> None:
    """Dump the effective config as YAML."""
    try:
        cfg = load_config(config)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("CONFIG_ERROR | path=%s | error=%s", config, exc)
        raise typer.Exit(code=1)
    typer.echo(yaml.safe_dump(cfg.model_dump(by_alias=True), sort_keys=False).rstrip())


@config_app.command("validate")
def config_validate(path: str = typer.Argument(..., help="Path to a kgtools YAML config.")) -> None:
    """Validate a config file."""
    try:
        cfg = load_config(path)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("CONFIG_INVALID | path=%s | error=%s", path, exc)
        raise typer.Exit(code=1)
    typer.echo(f"OK | {cfg.summary()}")


if __name__ == "__main__":
    app()
