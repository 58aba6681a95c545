"""Error types raised by config infrastructure."""

from pathlib import Path

from kata_eval.core.errors import KataEvalError


class ConfigValidationError(KataEvalError):
    """Raised when the loaded config is not valid YAML or fails schema validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(KataEvalError):
    """Raised when the config file cannot be opened or read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to load config {path}: {reason}")
