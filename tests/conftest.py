"""Test configuration that is ran for every test."""

import pytest

from bucketqueue import PriorityQueue, QueueConfig


@pytest.fixture
def tmp_file(tmp_path):
    file = tmp_path / "test.yaml"
    file.touch()
    return file


@pytest.fixture
def queue():
    return PriorityQueue()


@pytest.fixture
def unchecked_queue():
    return PriorityQueue(QueueConfig(validate_priorities=False))
