# src/kubepulse/core/config.py

import logging
import os

from dotenv import load_dotenv

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

logger = logging.getLogger(__name__)


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    # --- Default variables ---
    DEFAULT_INTERVAL = 10
    DEFAULT_PAGE_SIZE = 100
    DEFAULT_NAMESPACE_FILE = "/var/run/secrets/kubernetes.io/serviceaccount/namespace"
    TASK_MODE = "task"
    DAEMON_MODE = "daemon"

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """
        Reads a non-negative integer from the environment.
        Falls back to the default when the variable is unset or unparsable.
        """
        raw = os.getenv(key)
        if raw is None or raw.strip() == "":
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning("Invalid %s value '%s' - falling back to %s", key, raw, default)
            return default
        if value < 0:
            logger.warning("Negative %s value '%s' - falling back to %s", key, raw, default)
            return default
        return value

    # Values are resolved at access time so that changes to the environment
    # (e.g. monkeypatched in tests) are picked up without re-importing.
    @property
    def JOB_MODE(self) -> str:
        mode = os.getenv("JOB_MODE", "").strip().lower()
        return self.TASK_MODE if mode == self.TASK_MODE else self.DAEMON_MODE

    @property
    def INTERVAL(self) -> int:
        return self._get_int("INTERVAL", self.DEFAULT_INTERVAL)

    @property
    def PAGE_SIZE(self) -> int:
        size = self._get_int("PAGE_SIZE", self.DEFAULT_PAGE_SIZE)
        return size or self.DEFAULT_PAGE_SIZE

    @property
    def NAMESPACE_FILE(self) -> str:
        return os.getenv("NAMESPACE_FILE", self.DEFAULT_NAMESPACE_FILE)

    # --- Logging variables ---
    @property
    def LOG_LEVEL(self) -> str:
        return os.getenv("LOG_LEVEL", "INFO")


# Instantiate the config to be imported by other modules
config = Config()
