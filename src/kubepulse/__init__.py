"""KubePulse: log-based CPU and memory observability for namespace workloads."""

__version__ = "0.1.0"
