"""Base exception class for all kata-eval-specific errors."""


class KataEvalError(Exception):
    """Base class for all kata-eval errors.

    No operation in kata-eval retries: every KataEvalError is terminal for the
    attempt that raised it.
    """
