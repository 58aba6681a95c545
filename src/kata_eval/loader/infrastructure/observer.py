"""Structlog implementation of the LoaderObserver port."""

import structlog


class StructlogLoaderObserver:
    """Delegates loader domain events to structlog.

    Satisfies the LoaderObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def artifact_loading_started(self, path: str) -> None:
        self._log.debug("loader.artifact_loading_started", path=path)

    def artifact_loaded(self, path: str, module_name: str) -> None:
        self._log.info("loader.artifact_loaded", path=path, module_name=module_name)

    def artifact_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("loader.artifact_loading_failed", path=path, reason=reason)
