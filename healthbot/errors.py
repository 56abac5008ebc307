class ConfigError(RuntimeError):
    """Raised at startup when the environment is misconfigured."""


class IntakeError(ValueError):
    """Raised when a submitted intake is missing required fields."""


class GenerationError(RuntimeError):
    """Raised when the generation service call itself fails."""
