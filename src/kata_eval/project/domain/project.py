"""Project — one exercise bound to its runner, user code location and completion state."""

from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple

from kata_eval.project.domain.properties import ExerciseProperties
from kata_eval.runner.domain.runner import Runner


class ProjectKey(NamedTuple):
    """Identity of a Project: its exercise id and the path of the user's source."""

    exercise_id: str
    source_path: Path


@dataclass(eq=False)
class Project:
    """An exercise instance.

    Equality and hashing use only ProjectKey. Two projects for the same
    exercise and source file are the same project even when their properties
    or runners differ, e.g. before and after a rescan.
    """

    exercise_id: str
    source_path: Path
    properties: ExerciseProperties
    runner: Runner
    complete: bool = False

    @property
    def key(self) -> ProjectKey:
        return ProjectKey(exercise_id=self.exercise_id, source_path=self.source_path)

    @property
    def sort_name(self) -> str:
        """Category followed by id, used to group exercises for display."""
        return self.properties.category + self.exercise_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return self.exercise_id
