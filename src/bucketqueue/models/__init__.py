"""Pydantic models and types used to configure bucketqueue (i.e., in the configuration files or settings)."""

from .queue_config import Priority, QueueConfig, validate_priority

__all__ = [
    "Priority",
    "QueueConfig",
    "validate_priority",
]
