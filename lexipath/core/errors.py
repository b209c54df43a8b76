"""Exception types for LexiPath."""


class ConfigurationError(ValueError):
    """Raised when a cost vector, instruction file or config is malformed."""
