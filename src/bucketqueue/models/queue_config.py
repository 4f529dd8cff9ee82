"""QueueConfig and the Priority type."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import pydantic
import yaml

from bucketqueue.errors import ConfigError, PriorityError

Priority = Annotated[int, pydantic.Field(strict=True, gt=0)]

_priority_adapter: pydantic.TypeAdapter[int] = pydantic.TypeAdapter(Priority)


def validate_priority(priority: object) -> int:
    """
    Check that a priority is a positive integer.

    :param priority: The priority to check.
    :returns: The priority, unchanged.
    :raises PriorityError: If the priority is not a positive integer.
    """
    try:
        return _priority_adapter.validate_python(priority)
    except pydantic.ValidationError as e:
        raise PriorityError(
            f"Priority must be a positive integer, got {priority!r}."
        ) from e


class QueueConfig(pydantic.BaseModel):
    """Configuration for a PriorityQueue."""

    validate_priorities: bool = True
    """
    Reject priorities that are not positive integers.

    If False, any hashable priority that orders against the priorities already
    in the queue is accepted. Priorities that do not, such as ``"2"`` next to
    ``1``, still raise ``PriorityError`` and leave the queue unchanged.
    """

    model_config = pydantic.ConfigDict(extra="forbid")

    def to_yaml(self, file_path: str | Path) -> None:
        """
        Write config to yaml file.

        :param file_path: Path to the file to write to.
        """
        with open(file_path, "w") as file:
            yaml.dump(self.model_dump(), file)

    @classmethod
    def from_yaml(cls, file_path: str | Path) -> QueueConfig:
        """
        Load config from yaml file.

        :param file_path: Path to the file to load from.
        :returns: The config.
        :raises ConfigError: If the file does not hold a valid config.
        """
        with open(file_path) as file:
            data = yaml.safe_load(file)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping in '{file_path}'.")
        try:
            return QueueConfig(**data)
        except pydantic.ValidationError as e:
            raise ConfigError(f"Invalid queue config in '{file_path}'.") from e

