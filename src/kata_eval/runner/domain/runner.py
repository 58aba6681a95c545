"""Runner Protocol — structural interface for every exercise strategy."""

from typing import Protocol

from kata_eval.loader.domain.implementation import LoadedImplementation
from kata_eval.runner.domain.outcome import RunnerOutcome
from kata_eval.runner.domain.result import Result


class Runner(Protocol):
    """Generates inputs, calls the user's code, and checks it against a reference.

    Implementations never raise from either method.
    """

    @property
    def exercise_id(self) -> str: ...

    def get_results(self, implementation: LoadedImplementation) -> list[Result]:
        """Return one Result per case, or [] if the code could not be evaluated."""
        ...

    def evaluate(self, implementation: LoadedImplementation) -> RunnerOutcome: ...
