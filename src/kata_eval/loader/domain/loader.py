"""ArtifactLoader Protocol — structural interface for loading code artifacts."""

from pathlib import Path
from typing import Protocol

from kata_eval.loader.domain.implementation import LoadedImplementation


class ArtifactLoader(Protocol):
    """Loads a code artifact into a fresh module identity on every call."""

    def load(self, artifact_path: Path) -> LoadedImplementation: ...
