"""A priority queue that pops the highest priority first and keeps insertion order within a priority."""

from importlib.metadata import version as _version

from .errors import ConfigError, PriorityError
from .models import Priority, QueueConfig
from .priority_queue import EMPTY, PriorityQueue

try:
    __version__ = _version("bucketqueue")
except Exception:
    # Local copy or not installed with setuptools
    __version__ = "unknown"

__all__ = [
    "EMPTY",
    "ConfigError",
    "Priority",
    "PriorityError",
    "PriorityQueue",
    "QueueConfig",
    "__version__",
]
