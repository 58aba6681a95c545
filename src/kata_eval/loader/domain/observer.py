"""Observer port for the loader domain — defines events in domain language."""

from typing import Protocol


class LoaderObserver(Protocol):
    def artifact_loading_started(self, path: str) -> None: ...

    def artifact_loaded(self, path: str, module_name: str) -> None: ...

    def artifact_loading_failed(self, path: str, reason: str) -> None: ...
