import asyncio
import logging
from typing import Callable, Coroutine

from .exceptions import ClusterConfigError

logger = logging.getLogger(__name__)


class Scheduler:
    """
    Runs an async job in an endless loop with a fixed pause between runs.
    A run never overlaps the next one.
    """

    def __init__(self, interval_seconds: int):
        self.interval_seconds = interval_seconds
        self.cycles = 0

    async def run_once(self, job_func: Callable[[], Coroutine]):
        """Runs the job a single time, letting every exception propagate."""
        self.cycles += 1
        await job_func()

    async def run_forever(self, job_func: Callable[[], Coroutine]):
        """
        Runs the job, sleeps, and repeats until cancelled.
        Errors are logged and the loop continues, except configuration errors.
        """
        logger.info(f"Scheduled job '{job_func.__name__}' to run every {self.interval_seconds}s.")
        try:
            while True:
                try:
                    await self.run_once(job_func)
                except ClusterConfigError:
                    raise
                except Exception as e:
                    logger.error(f"Error in scheduled job '{job_func.__name__}': {e}", exc_info=True)

                await asyncio.sleep(self.interval_seconds)
        except asyncio.CancelledError:
            logger.info(f"Job '{job_func.__name__}' cancelled.")
            raise
