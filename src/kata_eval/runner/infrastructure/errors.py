"""Error types raised while resolving or running exercise code."""

from kata_eval.core.errors import KataEvalError


class ReflectionError(KataEvalError):
    """Raised when user code does not match the exercise's class or method contract."""

    def __init__(self, exercise_id: str, reason: str) -> None:
        self.exercise_id = exercise_id
        super().__init__(f"Failed to resolve implementation for '{exercise_id}': {reason}")


class InvocationError(KataEvalError):
    """Raised when user code raises while being constructed or called."""

    def __init__(self, exercise_id: str, reason: str) -> None:
        self.exercise_id = exercise_id
        super().__init__(f"Failed to invoke implementation for '{exercise_id}': {reason}")


class RunnerContractError(KataEvalError):
    """Raised when a runner artifact does not define a usable runner class."""

    def __init__(self, exercise_id: str, reason: str) -> None:
        self.exercise_id = exercise_id
        super().__init__(f"Failed to resolve runner for '{exercise_id}': {reason}")


class RunnerNotFoundError(KataEvalError):
    """Raised when no runner is registered for an exercise id."""

    def __init__(self, exercise_id: str) -> None:
        self.exercise_id = exercise_id
        super().__init__(f"Failed to find runner for exercise: '{exercise_id}'")
