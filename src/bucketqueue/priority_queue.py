"""PriorityQueue class."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Hashable, Iterator
from enum import Enum
from typing import Any, Generic, Literal, TypeVar

from bucketqueue.errors import PriorityError
from bucketqueue.models import QueueConfig, validate_priority

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Empty(Enum):
    """Marker returned by PriorityQueue.pop when there is nothing to pop."""

    EMPTY = "EMPTY"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY: Literal[_Empty.EMPTY] = _Empty.EMPTY


def _matches(stored: object, value: object) -> bool:
    return stored is value or stored == value


class PriorityQueue(Generic[T]):
    """
    A priority queue that pops the value with the highest priority first.

    Values are kept in one bucket per priority. Within a bucket values are
    popped in the order they were added.
    """

    _queue: dict[Hashable, deque[T]]
    _count: int

    def __init__(self, config: QueueConfig | None = None) -> None:
        """
        Initialize this object.

        :param config: Queue configuration. Defaults to ``QueueConfig()``.
        """
        self.config = config if config is not None else QueueConfig()
        self._queue = {}
        self._count = 0

    def _check_priority(self, priority: Any) -> None:
        """
        Check that ``priority`` can be stored next to the current priorities.

        Without validation any priority is accepted that is hashable and
        orders against the priorities already in the queue.

        :param priority: The priority to check.
        :raises PriorityError: If the priority cannot be used.
        """
        if self.config.validate_priorities:
            validate_priority(priority)
            return
        try:
            hash(priority)
            sorted([priority, *self._queue])
        except TypeError as e:
            raise PriorityError(
                f"Priority {priority!r} cannot be ordered against {list(self._queue)!r}."
            ) from e

    def add(self, value: T, priority: int) -> None:
        """
        Add a value to the queue.

        :param value: The value to add.
        :param priority: Positive integer, higher values are popped first.
        :raises PriorityError: If ``priority`` is rejected, see ``QueueConfig.validate_priorities``.
        """
        self._check_priority(priority)
        if priority not in self._queue:
            logger.debug("Creating bucket for priority %r.", priority)
            self._queue[priority] = deque()
        self._queue[priority].append(value)
        self._count += 1

    def pop(self) -> T | Literal[_Empty.EMPTY]:
        """
        Get and remove the oldest value with the highest priority.

        :returns: The removed value, or ``EMPTY`` if the queue is empty.
        """
        if self._count == 0:
            return EMPTY
        max_priority = max(self._queue)
        value = self._queue[max_priority].popleft()
        self._count -= 1
        self._remove_empty_priority(max_priority)
        return value

    def length(self) -> int:
        """
        Get the number of values in the queue.

        :returns: The number of values in the queue.
        """
        return self._count

    def is_empty(self) -> bool:
        """
        Check if the queue is empty.

        :returns: Whether the queue is empty.
        """
        return self._count == 0

    def get_all_priorities(self) -> list[int]:
        """
        Get all priorities that hold at least one value.

        :returns: The priorities, highest first.
        """
        return sorted(self._queue, reverse=True)

    def priority_for_each(self, callback: Callable[[T], object]) -> None:
        """
        Call ``callback`` on every value, in the order they would be popped.

        :param callback: Called with each value. Its return value is ignored.
        """
        for priority in self.get_all_priorities():
            for value in self._queue[priority]:
                callback(value)

    def _remove_empty_priority(self, priority: Hashable) -> None:
        if priority in self._queue and not self._queue[priority]:
            logger.debug("Removing empty bucket for priority %r.", priority)
            del self._queue[priority]

    def change_priority(self, value: T, new_priority: int) -> bool:
        """
        Move a value to a different priority.

        The first matching value, in pop order, is moved to the back of the
        ``new_priority`` bucket. Other equal values are left where they are.

        :param value: The value to move.
        :param new_priority: Positive integer, the priority to move it to.
        :returns: Whether the value was found.
        :raises PriorityError: If ``new_priority`` is rejected, see ``QueueConfig.validate_priorities``.
        """
        self._check_priority(new_priority)
        for priority in self.get_all_priorities():
            bucket = self._queue[priority]
            for index, stored in enumerate(bucket):
                if _matches(stored, value):
                    target = self._queue.setdefault(new_priority, deque())
                    del bucket[index]
                    target.append(stored)
                    self._remove_empty_priority(priority)
                    logger.debug(
                        "Moved %r from priority %r to %r.", value, priority, new_priority
                    )
                    return True
        logger.debug("Value %r not found, priority unchanged.", value)
        return False

    def __len__(self) -> int:
        """Get the number of values in the queue.

        :returns: The number of values in the queue.
        """
        return self._count

    def __iter__(self) -> Iterator[T]:
        """Iterate over a snapshot of the values, in the order they would be popped.

        :returns: An iterator over the values.
        """
        values: list[T] = []
        self.priority_for_each(values.append)
        return iter(values)

    def __contains__(self, value: object) -> bool:
        """Check if a value is in the queue, matching as ``change_priority`` does.

        :returns: Whether the value is in the queue.
        """
        return any(
            _matches(stored, value)
            for bucket in self._queue.values()
            for stored in bucket
        )

    def __repr__(self) -> str:
        """Get the number of values and the priorities in the queue.

        :returns: The representation.
        """
        return (
            f"{type(self).__name__}(count={self._count}, "
            f"priorities={self.get_all_priorities()})"
        )
