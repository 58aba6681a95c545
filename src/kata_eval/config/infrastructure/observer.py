"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, path: str, source_dir: str, code_dir: str) -> None:
        self._log.info(
            "config.loaded", path=path, source_dir=source_dir, code_dir=code_dir
        )
