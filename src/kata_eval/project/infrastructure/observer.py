"""Structlog implementation of the ProjectObserver port."""

import structlog


class StructlogProjectObserver:
    """Delegates project domain events to structlog.

    Satisfies the ProjectObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def project_scan_started(self, source_dir: str) -> None:
        self._log.info("project.scan_started", source_dir=source_dir)

    def project_discovered(self, exercise_id: str, complete: bool) -> None:
        self._log.debug(
            "project.discovered", exercise_id=exercise_id, complete=complete
        )

    def project_skipped(self, exercise_id: str, reason: str) -> None:
        self._log.warning("project.skipped", exercise_id=exercise_id, reason=reason)

    def project_scan_completed(self, source_dir: str, total_projects: int) -> None:
        self._log.info(
            "project.scan_completed",
            source_dir=source_dir,
            total_projects=total_projects,
        )

    def project_code_read_failed(self, exercise_id: str, path: str, reason: str) -> None:
        self._log.error(
            "project.code_read_failed",
            exercise_id=exercise_id,
            path=path,
            reason=reason,
        )

    def project_code_saved(self, exercise_id: str, path: str) -> None:
        self._log.info("project.code_saved", exercise_id=exercise_id, path=path)

    def project_code_save_failed(self, exercise_id: str, path: str, reason: str) -> None:
        self._log.error(
            "project.code_save_failed",
            exercise_id=exercise_id,
            path=path,
            reason=reason,
        )

    def project_completion_save_failed(self, exercise_id: str, reason: str) -> None:
        self._log.error(
            "project.completion_save_failed", exercise_id=exercise_id, reason=reason
        )
