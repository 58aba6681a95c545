"""Error types raised by project infrastructure."""

from pathlib import Path

from kata_eval.core.errors import KataEvalError


class DescriptorLoadError(KataEvalError):
    """Raised when an exercise descriptor is missing, unreadable, or invalid."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to load descriptor {path}: {reason}")


class LedgerError(KataEvalError):
    """Raised when the completion ledger cannot be read or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to access completion ledger {path}: {reason}")


class ProjectNotFoundError(KataEvalError):
    """Raised when no discovered project matches an exercise id."""

    def __init__(self, exercise_id: str) -> None:
        self.exercise_id = exercise_id
        super().__init__(f"Failed to find exercise: '{exercise_id}'")
