"""Error types raised by loader infrastructure."""

from pathlib import Path

from kata_eval.core.errors import KataEvalError


class ArtifactLoadError(KataEvalError):
    """Raised when an artifact is missing, unreadable, or fails verification."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load artifact {path}: {reason}")
