"""Module artifact loader — executes a .py or .pyc file under a fresh module identity."""

import importlib.machinery
import importlib.util
import re
import sys
import uuid
from pathlib import Path
from types import CodeType

from kata_eval.loader.domain.implementation import LoadedImplementation
from kata_eval.loader.domain.observer import LoaderObserver
from kata_eval.loader.infrastructure.errors import ArtifactLoadError

_SOURCE_SUFFIX = ".py"
_BYTECODE_SUFFIX = ".pyc"
_MODULE_PREFIX = "kata_eval_artifact"
_UNSAFE_NAME_CHARS = re.compile(r"\W")


class _UncachedSourceLoader(importlib.machinery.SourceFileLoader):
    """Compiles straight from the source file, never touching __pycache__.

    The stock loader trusts a cached .pyc whose recorded mtime and size still
    match, which can serve a stale module when a file is edited twice within
    the filesystem's timestamp resolution.
    """

    def get_code(self, fullname: str) -> CodeType:
        source = self.get_data(self.path)
        return self.source_to_code(source, self.path)


class ModuleArtifactLoader:
    """Loads Python artifacts, never reusing a previously loaded module.

    Loaded code runs with the full privileges of the host process. Only class
    identity is isolated between loads; there is no sandbox.
    """

    def __init__(self, observer: LoaderObserver) -> None:
        self._observer = observer

    def load(self, artifact_path: Path) -> LoadedImplementation:
        """
        Execute the artifact in a brand-new module and return a handle to it.

        The module is registered in sys.modules only while its body executes
        and is removed afterwards, so the import system never serves it again.

        Raises:
            ArtifactLoadError: if the file is missing, has an unsupported suffix,
                cannot be read, holds malformed source or bytecode, or raises
                while its module body runs.
        """
        path_str = str(artifact_path)
        self._observer.artifact_loading_started(path=path_str)

        try:
            implementation = self._load(artifact_path=artifact_path)
        except ArtifactLoadError as exc:
            self._observer.artifact_loading_failed(path=path_str, reason=exc.reason)
            raise

        self._observer.artifact_loaded(
            path=path_str, module_name=implementation.module_name
        )
        return implementation

    def _load(self, artifact_path: Path) -> LoadedImplementation:
        if not artifact_path.is_file():
            raise ArtifactLoadError(path=artifact_path, reason="file not found")

        module_name = _fresh_module_name(artifact_path=artifact_path)
        loader = _make_loader(module_name=module_name, artifact_path=artifact_path)
        spec = importlib.util.spec_from_file_location(
            module_name, artifact_path, loader=loader
        )
        if spec is None:
            raise ArtifactLoadError(path=artifact_path, reason="no module spec")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            loader.exec_module(module)
        except (Exception, SystemExit) as exc:  # noqa: BLE001
            raise ArtifactLoadError(
                path=artifact_path, reason=f"{type(exc).__name__}: {exc}"
            ) from exc
        finally:
            sys.modules.pop(module_name, None)

        return LoadedImplementation(
            artifact_path=artifact_path,
            module_name=module_name,
            module=module,
        )


def _fresh_module_name(artifact_path: Path) -> str:
    """Build a module name that no earlier load can have used."""
    stem = _UNSAFE_NAME_CHARS.sub("_", artifact_path.stem)
    return f"{_MODULE_PREFIX}_{stem}_{uuid.uuid4().hex}"


def _make_loader(
    module_name: str, artifact_path: Path
) -> importlib.machinery.SourceFileLoader | importlib.machinery.SourcelessFileLoader:
    suffix = artifact_path.suffix
    if suffix == _SOURCE_SUFFIX:
        return _UncachedSourceLoader(module_name, str(artifact_path))
    if suffix == _BYTECODE_SUFFIX:
        return importlib.machinery.SourcelessFileLoader(module_name, str(artifact_path))
    raise ArtifactLoadError(
        path=artifact_path, reason=f"unsupported artifact suffix '{suffix}'"
    )
