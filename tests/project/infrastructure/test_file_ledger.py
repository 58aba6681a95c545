"""Tests for DelimitedFileLedger."""

from pathlib import Path

import pytest

from kata_eval.project.domain.ledger import ledger_key
from kata_eval.project.infrastructure.errors import LedgerError
from kata_eval.project.infrastructure.file_ledger import DelimitedFileLedger


class TestDelimitedFileLedger:
    def test_missing_file_is_an_empty_ledger(self, tmp_path: Path) -> None:
        ledger = DelimitedFileLedger(path=tmp_path / "data.dat")

        assert ledger.is_complete("HasTriple") is False

    def test_existing_entry_is_complete(self, tmp_path: Path) -> None:
        path = tmp_path / "data.dat"
        path.write_text(f"|{ledger_key('HasTriple')}|", encoding="utf-8")

        assert DelimitedFileLedger(path=path).is_complete("HasTriple") is True

    def test_mark_complete_persists_entry(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "data.dat"
        DelimitedFileLedger(path=path).mark_complete("HasTriple")

        assert DelimitedFileLedger(path=path).is_complete("HasTriple") is True
        assert path.read_text(encoding="utf-8") == f"|{ledger_key('HasTriple')}|"

    def test_mark_complete_is_idempotent(self, tmp_path: Path) -> None:
        path = tmp_path / "data.dat"
        ledger = DelimitedFileLedger(path=path)

        ledger.mark_complete("HasTriple")
        ledger.mark_complete("HasTriple")

        assert path.read_text(encoding="utf-8").count(ledger_key("HasTriple")) == 1

    def test_entries_for_other_exercises_are_kept(self, tmp_path: Path) -> None:
        ledger = DelimitedFileLedger(path=tmp_path / "data.dat")

        ledger.mark_complete("HasTriple")
        ledger.mark_complete("CountEvens")

        assert ledger.is_complete("HasTriple")
        assert ledger.is_complete("CountEvens")
        assert not ledger.is_complete("Other")

    def test_unreadable_ledger_raises_ledger_error(self, tmp_path: Path) -> None:
        path = tmp_path / "data.dat"
        path.mkdir()

        with pytest.raises(LedgerError) as exc_info:
            DelimitedFileLedger(path=path).is_complete("HasTriple")

        assert str(exc_info.value).startswith("Failed to ")
