"""RunnerOutcome — results of one runner call plus the cause of any failure."""

from typing import Literal

from pydantic import BaseModel, Field

from kata_eval.runner.domain.result import Result

type FailureKind = Literal["load", "reflection", "invocation", "internal"]


class EvaluationFailure(BaseModel, frozen=True):
    """Why an evaluation produced no results.

    load: the user's artifact could not be loaded.
    reflection: the class, constructor, or method did not match the contract.
    invocation: the user's code raised while running.
    internal: the runner's own generator or reference raised.
    """

    kind: FailureKind
    reason: str = Field(min_length=1)


class RunnerOutcome(BaseModel, frozen=True):
    """Results in generation order, or an empty list and a failure."""

    results: list[Result]
    failure: EvaluationFailure | None = None

    @property
    def succeeded(self) -> bool:
        return self.failure is None
