# src/kubepulse/cli/collect.py
"""
Collect command for the KubePulse CLI.

Runs the metrics correlator either once (task mode) or in an endless loop
with a fixed pause between cycles (daemon mode).
"""

import asyncio
import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.config import config
from ..core.exceptions import ClusterConfigError
from ..core.factory import OUTPUT_FORMATS, get_correlator, get_reporter
from ..core.k8s_client import read_namespace
from ..core.scheduler import Scheduler

logger = logging.getLogger(__name__)

app = typer.Typer(name="collect", help="Capture the resource usage of every pod in the namespace.")

MODES = (config.TASK_MODE, config.DAEMON_MODE)


async def run_collection(mode: str, interval: int, namespace: Optional[str], output_format: str) -> None:
    """
    Builds the correlator and drives it according to the mode.
    Raises ClusterConfigError when the cluster identity is not available.
    """
    if not namespace:
        namespace = read_namespace(config.NAMESPACE_FILE)

    correlator = get_correlator(get_reporter(output_format))

    async def collect_instance_metrics():
        await correlator.run(namespace)

    scheduler = Scheduler(interval_seconds=interval)
    try:
        if mode == config.TASK_MODE:
            await scheduler.run_once(collect_instance_metrics)
        else:
            await scheduler.run_forever(collect_instance_metrics)
    finally:
        await correlator.close()


@app.callback(invoke_without_command=True)
def collect(
    ctx: typer.Context,
    mode: Annotated[
        Optional[str],
        typer.Option("--mode", help="'task' to collect once, 'daemon' to collect in a loop. Defaults to JOB_MODE."),
    ] = None,
    interval: Annotated[
        Optional[int],
        typer.Option("--interval", min=0, help="Seconds between cycles in daemon mode. Defaults to INTERVAL or 10."),
    ] = None,
    namespace: Annotated[
        Optional[str],
        typer.Option("--namespace", "-n", help="Namespace to observe instead of the service account's namespace."),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: 'json' (one line per pod) or 'table'."),
    ] = "json",
) -> None:
    """
    Capture CPU and memory usage versus limits for every pod in the namespace.
    """
    if ctx.invoked_subcommand is not None:
        return

    mode = (mode or config.JOB_MODE).lower()
    if mode not in MODES:
        raise typer.BadParameter(f"Invalid mode '{mode}'. Use one of: {', '.join(MODES)}.")
    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter(f"Invalid format '{output_format}'. Use one of: {', '.join(OUTPUT_FORMATS)}.")
    if interval is None:
        interval = config.INTERVAL

    try:
        asyncio.run(run_collection(mode, interval, namespace, output_format))
    except ClusterConfigError as e:
        logger.error(f"Cannot access the cluster: {e}")
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        logger.info("Shutting down KubePulse.")
        raise typer.Exit()
