"""CompletionLedger Protocol and the deterministic key it stores per exercise."""

from typing import Protocol

_KEY_WIDTH = 40


def ledger_key(exercise_id: str) -> str:
    """Return the ledger key for exercise_id.

    The id's UTF-8 bytes are read as one big-endian unsigned integer and
    written as lowercase hex, zero-padded to at least 40 digits.
    Discovery only admits ASCII ids, whose leading byte is below 0x80, so a
    signed reading of the same bytes gives the same number.
    """
    value = int.from_bytes(exercise_id.encode("utf-8"), "big")
    return format(value, f"0{_KEY_WIDTH}x")


class CompletionLedger(Protocol):
    """Persisted record of which exercises have been fully passed."""

    def is_complete(self, exercise_id: str) -> bool: ...

    def mark_complete(self, exercise_id: str) -> None: ...
