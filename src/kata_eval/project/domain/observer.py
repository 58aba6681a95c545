"""Observer port for the project domain — defines events in domain language."""

from typing import Protocol


class ProjectObserver(Protocol):
    def project_scan_started(self, source_dir: str) -> None: ...

    def project_discovered(self, exercise_id: str, complete: bool) -> None: ...

    def project_skipped(self, exercise_id: str, reason: str) -> None: ...

    def project_scan_completed(self, source_dir: str, total_projects: int) -> None: ...

    def project_code_read_failed(self, exercise_id: str, path: str, reason: str) -> None: ...

    def project_code_saved(self, exercise_id: str, path: str) -> None: ...

    def project_code_save_failed(self, exercise_id: str, path: str, reason: str) -> None: ...

    def project_completion_save_failed(self, exercise_id: str, reason: str) -> None: ...
