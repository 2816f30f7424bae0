"""
Status Mirror — CLI Entry Point

Usage:
    python -m statusmirror.main mirror --source FILE --target FILE --type TYPE
    python -m statusmirror.main conditions FILE
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from .cli.conditions import conditions_cmd, mirror_cmd
from .logging_config import setup_logging


@click.group()
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR (default: LOG_LEVEL or WARNING)")
@click.option("--log-format", type=click.Choice(["text", "json"]), default=None,
              help="Log output format (default: LOG_FORMAT or text)")
def cli(log_level: Optional[str], log_format: Optional[str]) -> None:
    """Status Mirror — Mirror status conditions between resources."""
    # .env is read before logging so LOG_LEVEL/LOG_FORMAT can live there
    env_file = Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file)

    setup_logging(level=log_level, format_type=log_format)


cli.add_command(mirror_cmd)
cli.add_command(conditions_cmd)


if __name__ == "__main__":
    cli()
