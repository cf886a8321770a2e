# SPDX-License-Identifier: MPL-2.0
"""Main CLI entry point."""
import json
import sys

import click
from pydantic import ValidationError

from receipt_points.api.schemas import ReceiptPayload
from receipt_points.config import Settings, configure_logging
from receipt_points.core.exceptions import ConfigurationError
from receipt_points.core.processor import ReceiptProcessor
from receipt_points.core.scoring import breakdown


def load_settings() -> Settings:
    """Load settings from the environment, exiting on invalid values."""
    try:
        return Settings.from_env()
    except ConfigurationError as e:
        click.echo(f"Error loading configuration: {e.message}", err=True)
        for error in e.details.get("errors", []):
            click.echo(f"  {error.get('loc')}: {error.get('msg')}", err=True)
        sys.exit(1)


@click.group()  # type: ignore[misc]
def cli() -> None:
    """Receipt Points CLI."""


@cli.command()  # type: ignore[misc]
def version() -> None:
    """Show version information."""
    from receipt_points import __version__

    click.echo(f"Receipt Points v{__version__}")


@cli.command()  # type: ignore[misc]
@click.option("--host", default=None, help="Interface to bind (default: RECEIPT_POINTS_HOST or 0.0.0.0).")
@click.option("--port", type=int, default=None, help="Port to listen on (default: RECEIPT_POINTS_PORT or 8080).")
@click.option("--log-level", default=None, help="Logging level (default: RECEIPT_POINTS_LOG_LEVEL or INFO).")
def serve(host: str | None, port: int | None, log_level: str | None) -> None:
    """Run the HTTP API server."""
    import uvicorn

    from receipt_points.api.app import create_app

    settings = load_settings()
    overrides = {
        key: value
        for key, value in (("host", host), ("port", port), ("log_level", log_level))
        if value is not None
    }
    if overrides:
        try:
            settings = Settings(**{**settings.model_dump(), **overrides})
        except ValidationError as e:
            click.echo(f"Invalid option: {e}", err=True)
            sys.exit(1)

    configure_logging(settings.log_level)
    click.echo(f"Server starting at {settings.host}:{settings.port}")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


@cli.command()  # type: ignore[misc]
@click.argument("receipt_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--breakdown", "show_breakdown", is_flag=True, help="Show the points awarded by each rule.")
def score(receipt_file: str, show_breakdown: bool) -> None:
    """Score a receipt stored as a JSON file."""
    try:
        with open(receipt_file, "r") as f:
            payload = ReceiptPayload.model_validate(json.load(f))
    except json.JSONDecodeError as e:
        click.echo(f"Invalid JSON in {receipt_file}: {e}", err=True)
        sys.exit(1)
    except ValidationError as e:
        click.echo(f"Invalid receipt in {receipt_file}: {e}", err=True)
        sys.exit(1)

    receipt = payload.to_receipt()
    entry = ReceiptProcessor().process(receipt)
    click.echo(f"ID: {entry.id}")
    click.echo(f"Points: {entry.points}")

    if show_breakdown:
        for rule, points in breakdown(receipt).items():
            click.echo(f"  {rule}: {points}")


if __name__ == "__main__":
    cli()
