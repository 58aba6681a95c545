"""HasTripleRunner — checks for three consecutive equal values in a short vector."""

import random
from collections.abc import Sequence

from kata_eval.runner.application.generated import GeneratedExerciseRunner

VECTOR_LENGTH = 7
VALUE_BOUND = 10  # values are drawn from [0, VALUE_BOUND - 1]
MAX_RUN_LENGTH = 2


class HasTripleRunner(GeneratedExerciseRunner[list[int]]):
    """Runner for the HasTriple exercise.

    The user implements ``HasTriple.has_triple(nums: list[int]) -> bool``,
    returning True iff some three consecutive elements of nums are equal.

    Inputs are built from short runs of one or two repeated values, so a
    triple only appears when two neighbouring runs happen to share a value.
    """

    exercise_id = "HasTriple"
    class_name = "HasTriple"
    method_name = "has_triple"
    return_type = bool

    def generate_input(self, rng: random.Random) -> list[int]:
        nums: list[int] = []
        while len(nums) < VECTOR_LENGTH:
            value = rng.randrange(VALUE_BOUND)
            # A run length of 0 appends nothing and just draws again.
            run_length = rng.randrange(MAX_RUN_LENGTH + 1)
            for _ in range(run_length):
                if len(nums) == VECTOR_LENGTH:
                    break
                nums.append(value)
        return nums

    def reference(self, case_input: list[int]) -> bool:
        return _has_triple(case_input)


def _has_triple(nums: Sequence[int]) -> bool:
    return any(
        nums[i] == nums[i + 1] == nums[i + 2] for i in range(len(nums) - 2)
    )
