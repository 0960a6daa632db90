"""Command line interface for sending AS2 messages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from as2client import ClientRequest, get_sender, load_config, send_synchronous
from as2client.constants import DEFAULT_CONTENT_TYPE

app = typer.Typer(help="CLI for the AS2 client")


@app.callback()
def main() -> None:
    """as2client CLI entry point."""
    pass


@app.command("send")
def send(
    path: Path,
    content_type: str = typer.Option(DEFAULT_CONTENT_TYPE, help="MIME type of the payload"),
    subject: Optional[str] = typer.Option(None, help="Message subject (default: file name)"),
    config: Optional[Path] = typer.Option(None, help="Path to the YAML configuration"),
    sender: Optional[str] = typer.Option(None, help="Sender backend: http or loopback"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Send a file to the configured partner and wait for the synchronous MDN.

    Example:
        as2client send invoice.edi --content-type application/edifact
        as2client send order.xml --config ./partner.yaml --sender loopback
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    client_config = load_config(str(config) if config else None)
    if client_config.settings is None:
        typer.echo("No client settings configured", err=True)
        raise typer.Exit(code=2)

    request = ClientRequest(
        subject=subject or path.name,
        content_type=content_type,
        data=path,
    )
    response = send_synchronous(
        client_config.settings,
        request,
        sender=get_sender(sender, config=client_config),
    )
    typer.echo(response.as_string())
    if response.has_exception:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
