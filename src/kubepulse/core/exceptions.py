class KubePulseError(Exception):
    """Base exception for KubePulse."""

    pass


class ClusterConfigError(KubePulseError):
    """Raised when the in-cluster identity or API clients cannot be set up.

    This is unrecoverable for the running process: the driver is expected to
    exit and let an external supervisor restart it.
    """

    pass
