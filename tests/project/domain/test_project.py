"""Tests for Project identity and the ledger key."""

from pathlib import Path

from kata_eval.project.domain.ledger import ledger_key
from kata_eval.project.domain.project import Project, ProjectKey
from kata_eval.project.domain.properties import ExerciseProperties
from kata_eval.runner.infrastructure.has_triple import HasTripleRunner
from tests.runner.fake_observer import FakeRunnerObserver


def _project(
    exercise_id: str = "HasTriple",
    source_path: Path = Path("/code/HasTriple.py"),
    category: str = "Arrays",
    complete: bool = False,
) -> Project:
    return Project(
        exercise_id=exercise_id,
        source_path=source_path,
        properties=ExerciseProperties(category=category, prompt="p", skeleton="s"),
        runner=HasTripleRunner(observer=FakeRunnerObserver()),
        complete=complete,
    )


class TestProjectIdentity:
    """Identity is the (exercise_id, source_path) key and nothing else."""

    def test_same_key_with_different_metadata_is_equal(self) -> None:
        # A rescanned project with new metadata is still the same project.
        first = _project(category="Arrays", complete=False)
        second = _project(category="Logic", complete=True)

        assert first == second
        assert hash(first) == hash(second)
        assert first.properties != second.properties

    def test_different_id_is_not_equal(self) -> None:
        assert _project(exercise_id="HasTriple") != _project(exercise_id="Other")

    def test_different_source_path_is_not_equal(self) -> None:
        assert _project(source_path=Path("/a/HasTriple.py")) != _project(
            source_path=Path("/b/HasTriple.py")
        )

    def test_set_membership_uses_key(self) -> None:
        projects = {_project(category="Arrays")}

        assert _project(category="Logic") in projects

    def test_key_exposes_id_and_source_path(self) -> None:
        project = _project()

        assert project.key == ProjectKey(
            exercise_id="HasTriple", source_path=Path("/code/HasTriple.py")
        )

    def test_not_equal_to_other_types(self) -> None:
        assert _project() != "HasTriple"


class TestProjectDisplay:
    def test_sort_name_is_category_then_id(self) -> None:
        assert _project(category="Arrays").sort_name == "ArraysHasTriple"

    def test_str_is_exercise_id(self) -> None:
        assert str(_project()) == "HasTriple"


class TestLedgerKey:
    def test_key_is_zero_padded_hex_of_id_bytes(self) -> None:
        assert ledger_key("A") == "0" * 38 + "41"

    def test_key_is_deterministic(self) -> None:
        assert ledger_key("HasTriple") == ledger_key("HasTriple")

    def test_key_has_at_least_forty_digits(self) -> None:
        assert len(ledger_key("HasTriple")) == 40

    def test_long_ids_are_not_truncated(self) -> None:
        exercise_id = "AVeryLongExerciseIdentifierIndeed"

        assert int(ledger_key(exercise_id), 16) == int.from_bytes(
            exercise_id.encode("utf-8"), "big"
        )

    def test_distinct_ids_have_distinct_keys(self) -> None:
        assert ledger_key("HasTriple") != ledger_key("HasDouble")
