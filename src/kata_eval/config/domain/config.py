"""Top-level KataEvalConfig — where exercises, user code and the ledger live."""

from pathlib import Path

from pydantic import BaseModel


class KataEvalConfig(BaseModel, frozen=True):
    """Root configuration for a kata-eval workspace.

    source_dir holds ``<id>Runner.py`` artifacts and their ``<id>Runner.yaml``
    descriptors, code_dir holds the user's ``<id>.py`` files, and ledger_path
    is the completion ledger.
    """

    source_dir: Path
    code_dir: Path
    ledger_path: Path
