"""Result value object — the outcome of a single generated test case."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from kata_eval.runner.domain.comparison import deep_equals


class Result(BaseModel):
    """Immutable record of one test case.

    actual is what the user's implementation returned, expected is what the
    trusted reference computed for the same input, and rendered_input is a
    human-readable form of that input.
    """

    model_config = ConfigDict(frozen=True)

    actual: Any
    expected: Any
    rendered_input: str

    @property
    def passed(self) -> bool:
        return deep_equals(self.actual, self.expected)
