"""YAML config loader — parses, resolves relative paths, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kata_eval.config.domain.config import KataEvalConfig
from kata_eval.config.domain.observer import ConfigObserver
from kata_eval.config.infrastructure.errors import ConfigLoadError, ConfigValidationError

_PATH_KEYS = ("source_dir", "code_dir", "ledger_path")


class YamlConfigLoader:
    """Loads, validates, and returns a KataEvalConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> KataEvalConfig:
        """
        Load and validate a KataEvalConfig.

        Relative paths in the file are resolved against the file's own directory,
        so a workspace can be moved without editing its config.

        Raises:
            ConfigLoadError: if the file does not exist or cannot be read.
            ConfigValidationError: if the file is not valid YAML or violates the schema.
        """
        raw = _parse_yaml(path=path)
        resolved = _resolve_paths(raw=raw, base_dir=path.parent)
        cfg = _build_config(resolved=resolved)
        self._observer.config_loaded(
            path=str(path),
            source_dir=str(cfg.source_dir),
            code_dir=str(cfg.code_dir),
        )
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path, reason="file not found") from exc
    except OSError as exc:
        raise ConfigLoadError(path=path, reason=str(exc)) from exc
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"invalid YAML: {exc}") from exc


def _resolve_paths(raw: Any, base_dir: Path) -> Any:
    """Return a copy of raw with every relative path key anchored at base_dir."""
    if not isinstance(raw, dict):
        return raw
    resolved = dict(raw)
    for key in _PATH_KEYS:
        value = resolved.get(key)
        if isinstance(value, str):
            candidate = Path(value).expanduser()
            resolved[key] = candidate if candidate.is_absolute() else base_dir / candidate
    return resolved


def _build_config(resolved: Any) -> KataEvalConfig:
    try:
        return KataEvalConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
