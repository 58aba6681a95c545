"""LoadedImplementation — handle to a module produced by one artifact load."""

import inspect
from pathlib import Path
from types import ModuleType

from pydantic import BaseModel, ConfigDict


class LoadedImplementation(BaseModel):
    """Immutable handle to freshly loaded code.

    Every load yields a distinct module_name, so two handles for the same
    artifact never share module state or class identity.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    artifact_path: Path
    module_name: str
    module: ModuleType

    def find_class(self, name: str) -> type | None:
        """Return the class bound to name in the loaded module, or None."""
        candidate = getattr(self.module, name, None)
        if inspect.isclass(candidate):
            return candidate
        return None
