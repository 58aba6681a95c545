"""EvaluationReport — the tallied outcome of evaluating one exercise."""

from pydantic import BaseModel, Field

from kata_eval.runner.domain.outcome import EvaluationFailure
from kata_eval.runner.domain.result import Result


class EvaluationReport(BaseModel, frozen=True):
    """Immutable summary of one evaluation of a user's code.

    results is empty exactly when the code could not be evaluated, in which
    case failure says why. complete reflects the project after the evaluation.
    completion_saved is False only when every case passed but the ledger
    could not record it.
    """

    exercise_id: str = Field(min_length=1)
    results: list[Result]
    failure: EvaluationFailure | None = None
    complete: bool
    completion_saved: bool = True

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def all_passed(self) -> bool:
        return self.total > 0 and self.passed == self.total
