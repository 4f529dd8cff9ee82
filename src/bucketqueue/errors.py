class PriorityError(ValueError):
    """Exception raised for a priority that is not a positive integer."""

    pass


class ConfigError(RuntimeError):
    """An error in the config."""

    pass
