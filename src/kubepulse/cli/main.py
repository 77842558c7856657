# src/kubepulse/cli/main.py
"""
This module is the main entry point for the KubePulse CLI.
"""

import logging
import sys

import typer

from ..core.config import config
from . import collect

# --- Setup Logger ---
# Diagnostics share stdout with the records, for a single log pipeline.
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="kubepulse",
    help="Log the CPU and memory usage of the pods in a Kubernetes namespace.",
    add_completion=False,
)


def version_callback(value: bool):
    """
    Prints the version of KubePulse.
    """
    if value:
        from .. import __version__

        typer.echo(f"KubePulse version: {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version of KubePulse.
    """
    from .. import __version__

    typer.echo(f"KubePulse version: {__version__}")


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    KubePulse CLI main entry point.
    """
    pass


app.add_typer(collect.app, name="collect")


if __name__ == "__main__":
    app()
