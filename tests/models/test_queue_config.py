import pytest

from bucketqueue.errors import ConfigError, PriorityError
from bucketqueue.models import QueueConfig, validate_priority


def test_import_export_queue_config(tmp_file) -> None:
    config = QueueConfig(validate_priorities=False)
    config.to_yaml(tmp_file)
    config_2 = QueueConfig.from_yaml(tmp_file)
    assert config == config_2


def test_empty_file_gives_defaults(tmp_file) -> None:
    assert QueueConfig.from_yaml(tmp_file) == QueueConfig()


def test_unknown_key_rejected(tmp_file) -> None:
    tmp_file.write_text("validate_priorities: true\nmax_size: 10\n")
    with pytest.raises(ConfigError):
        QueueConfig.from_yaml(tmp_file)


def test_non_mapping_rejected(tmp_file) -> None:
    tmp_file.write_text("- validate_priorities\n")
    with pytest.raises(ConfigError, match="Expected a mapping"):
        QueueConfig.from_yaml(tmp_file)


@pytest.mark.parametrize("priority", [1, 2, 10**9])
def test_validate_priority_accepts_positive_ints(priority) -> None:
    assert validate_priority(priority) == priority


@pytest.mark.parametrize("priority", [0, -1, 1.0, 2.5, "3", True, None])
def test_validate_priority_rejects(priority) -> None:
    with pytest.raises(PriorityError):
        validate_priority(priority)


def test_priority_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        validate_priority(0)
