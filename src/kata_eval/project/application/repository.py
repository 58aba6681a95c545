"""ProjectRepository — discovers exercises on disk and owns the project collection."""

import re
from pathlib import Path

from kata_eval.config.domain.config import KataEvalConfig
from kata_eval.core.errors import KataEvalError
from kata_eval.loader.domain.loader import ArtifactLoader
from kata_eval.project.domain.descriptor import DescriptorLoader
from kata_eval.project.domain.ledger import CompletionLedger
from kata_eval.project.domain.observer import ProjectObserver
from kata_eval.project.domain.project import Project, ProjectKey
from kata_eval.project.infrastructure.errors import ProjectNotFoundError
from kata_eval.runner.domain.observer import RunnerObserver
from kata_eval.runner.infrastructure.registry import RunnerRegistry, create_runner

_ARTIFACT_PATTERN = re.compile(r"^(?P<exercise_id>\w+)Runner\.pyc?$", re.ASCII)
_DESCRIPTOR_SUFFIX = "Runner.yaml"
_USER_CODE_SUFFIX = ".py"


class ProjectRepository:
    """Holds every discovered Project, keyed by exercise id.

    A scan replaces the whole collection and re-registers every runner.
    Nothing here is locked: callers must not scan concurrently with another
    scan or with an evaluation that still holds projects from the old scan.
    """

    def __init__(
        self,
        config: KataEvalConfig,
        loader: ArtifactLoader,
        descriptor_loader: DescriptorLoader,
        ledger: CompletionLedger,
        runner_registry: RunnerRegistry,
        observer: ProjectObserver,
        runner_observer: RunnerObserver,
    ) -> None:
        self._config = config
        self._loader = loader
        self._descriptor_loader = descriptor_loader
        self._ledger = ledger
        self._runner_registry = runner_registry
        self._observer = observer
        self._runner_observer = runner_observer
        self._projects: dict[str, Project] = {}

    def discover(self) -> list[Project]:
        """Scan source_dir and rebuild the collection from what is found there.

        An exercise whose descriptor, ledger entry, or runner artifact cannot be
        loaded is skipped; the scan continues with the rest. The collection and
        the runner registry are replaced together once the scan has finished.
        Returns the projects ordered by sort_name.
        """
        source_dir = self._config.source_dir
        self._observer.project_scan_started(source_dir=str(source_dir))

        projects: dict[str, Project] = {}
        for exercise_id, artifact_path in _find_artifacts(source_dir=source_dir):
            if exercise_id in projects:
                self._observer.project_skipped(
                    exercise_id=exercise_id,
                    reason=f"duplicate runner artifact {artifact_path.name}",
                )
                continue
            try:
                project = self._build_project(
                    exercise_id=exercise_id, artifact_path=artifact_path
                )
            except KataEvalError as exc:
                self._observer.project_skipped(exercise_id=exercise_id, reason=str(exc))
                continue
            projects[exercise_id] = project
            self._observer.project_discovered(
                exercise_id=exercise_id, complete=project.complete
            )

        self._runner_registry.clear()
        for project in projects.values():
            self._runner_registry.register(project.runner)
        self._projects = projects
        self._observer.project_scan_completed(
            source_dir=str(source_dir), total_projects=len(projects)
        )
        return self.projects()

    def rescan(self) -> list[Project]:
        """Discard the current collection and discover it again.

        The old collection stays in place until the new scan has finished.
        """
        return self.discover()

    def get(self, exercise_id: str) -> Project:
        """
        Raises:
            ProjectNotFoundError: if no project with exercise_id was discovered.
        """
        if exercise_id not in self._projects:
            raise ProjectNotFoundError(exercise_id=exercise_id)
        return self._projects[exercise_id]

    def projects(self) -> list[Project]:
        return sorted(self._projects.values(), key=lambda p: p.sort_name)

    def current_code(self, project: Project) -> str:
        """Return the user's saved code, or the descriptor's skeleton if there is none.

        Read from disk on every call so edits made since the last scan show up.
        """
        path = project.source_path
        if not path.exists():
            return project.properties.skeleton
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self._observer.project_code_read_failed(
                exercise_id=project.exercise_id, path=str(path), reason=str(exc)
            )
            return project.properties.skeleton

    def save_code(self, project: Project, code: str) -> bool:
        """Write the user's code to the project's source path.

        The code is not compiled or checked. Returns False if the write failed.
        """
        path = project.source_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(code, encoding="utf-8")
        except OSError as exc:
            self._observer.project_code_save_failed(
                exercise_id=project.exercise_id, path=str(path), reason=str(exc)
            )
            return False
        self._observer.project_code_saved(exercise_id=project.exercise_id, path=str(path))
        return True

    def set_complete(self, project: Project, complete: bool) -> bool:
        """Update the completion flag, recording completions in the ledger.

        The ledger only ever gains entries, so clearing the flag affects the
        in-memory project alone. Returns False if the ledger write failed, in
        which case the flag is left unchanged.
        """
        if complete:
            try:
                self._ledger.mark_complete(project.exercise_id)
            except KataEvalError as exc:
                self._observer.project_completion_save_failed(
                    exercise_id=project.exercise_id, reason=str(exc)
                )
                return False
        project.complete = complete
        return True

    def __contains__(self, item: object) -> bool:
        if isinstance(item, ProjectKey):
            project = self._projects.get(item.exercise_id)
            return project is not None and project.key == item
        if isinstance(item, Project):
            return item.key in self
        return item in self._projects

    def __len__(self) -> int:
        return len(self._projects)

    def _build_project(self, exercise_id: str, artifact_path: Path) -> Project:
        source_dir = self._config.source_dir
        properties = self._descriptor_loader.load(
            path=source_dir / f"{exercise_id}{_DESCRIPTOR_SUFFIX}"
        )
        complete = self._ledger.is_complete(exercise_id)
        artifact = self._loader.load(artifact_path=artifact_path)
        runner = create_runner(
            exercise_id=exercise_id,
            artifact=artifact,
            observer=self._runner_observer,
        )
        return Project(
            exercise_id=exercise_id,
            source_path=self._config.code_dir / f"{exercise_id}{_USER_CODE_SUFFIX}",
            properties=properties,
            runner=runner,
            complete=complete,
        )


def _find_artifacts(source_dir: Path) -> list[tuple[str, Path]]:
    """Return (exercise_id, path) for every runner artifact, sorted by file name."""
    if not source_dir.is_dir():
        return []
    found: list[tuple[str, Path]] = []
    for path in sorted(source_dir.iterdir()):
        match = _ARTIFACT_PATTERN.match(path.name)
        if match is None or not path.is_file():
            continue
        found.append((match.group("exercise_id"), path))
    return found
