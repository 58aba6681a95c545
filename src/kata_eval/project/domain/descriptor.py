"""DescriptorLoader Protocol — reads exercise metadata from a descriptor file."""

from pathlib import Path
from typing import Protocol

from kata_eval.project.domain.properties import ExerciseProperties


class DescriptorLoader(Protocol):
    def load(self, path: Path) -> ExerciseProperties: ...
