"""backend/cli.py - Typer-based CLI for the card table server."""

import logging
from typing import Optional

import typer
import uvicorn

from backend.api import create_app
from backend.config import configure_logging, load_settings


logger = logging.getLogger(__name__)

app = typer.Typer(
    name="cardtable-server",
    help="A server for the card table frontend.",
    add_completion=False,
)


@app.command()
def serve(
    log_level: Optional[str] = typer.Option(
        None, "-l", "--log", help="Set the log level (default: info)"),
    addr: Optional[str] = typer.Option(
        None, "-a", "--addr", help="Set the listen address (default: localhost)"),
    port: Optional[int] = typer.Option(
        None, "-p", "--port", help="Set the listen port (default: 8080)"),
    static_dir: Optional[str] = typer.Option(
        None, "--static-dir", help="Directory where static files are found (default: ./dist)"),
):
    """Run the API and static file server."""
    try:
        settings = load_settings().with_overrides(
            log_level=log_level, addr=addr, port=port, static_dir=static_dir)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    configure_logging(settings.log_level)
    logger.info("listening on http://%s:%d", settings.addr, settings.port)

    uvicorn.run(
        create_app(settings),
        host=settings.addr,
        port=settings.port,
        log_level=settings.log_level,
    )


def main():
    app()


if __name__ == "__main__":
    main()
