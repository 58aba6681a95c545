"""Delimited text-file implementation of the CompletionLedger port."""

from pathlib import Path

from kata_eval.project.domain.ledger import ledger_key
from kata_eval.project.infrastructure.errors import LedgerError

_DELIMITER = "|"


class DelimitedFileLedger:
    """Stores each completed exercise as ``|<ledger_key>|`` in a flat text file.

    A missing file is an empty ledger. The file is re-read on every query.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    def is_complete(self, exercise_id: str) -> bool:
        """
        Raises:
            LedgerError: if the file exists but cannot be read.
        """
        return _entry(exercise_id) in self._read()

    def mark_complete(self, exercise_id: str) -> None:
        """Append exercise_id's entry unless it is already recorded.

        Raises:
            LedgerError: if the file cannot be read or written.
        """
        if self.is_complete(exercise_id):
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(_entry(exercise_id))
        except OSError as exc:
            raise LedgerError(path=self._path, reason=str(exc)) from exc

    def _read(self) -> str:
        try:
            return self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""
        except (OSError, UnicodeDecodeError) as exc:
            raise LedgerError(path=self._path, reason=str(exc)) from exc


def _entry(exercise_id: str) -> str:
    return f"{_DELIMITER}{ledger_key(exercise_id)}{_DELIMITER}"
