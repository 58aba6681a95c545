"""YAML descriptor loader — reads ExerciseProperties from ``<id>Runner.yaml``."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from kata_eval.project.domain.properties import ExerciseProperties
from kata_eval.project.infrastructure.errors import DescriptorLoadError


class YamlDescriptorLoader:
    """Satisfies the DescriptorLoader protocol structurally."""

    def load(self, path: Path) -> ExerciseProperties:
        """
        Raises:
            DescriptorLoadError: if the file is missing or unreadable, is not
                valid YAML, or does not match the ExerciseProperties schema.
        """
        try:
            with path.open("r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh)
        except FileNotFoundError as exc:
            raise DescriptorLoadError(path=path, reason="file not found") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise DescriptorLoadError(path=path, reason=str(exc)) from exc
        except yaml.YAMLError as exc:
            raise DescriptorLoadError(path=path, reason=f"invalid YAML: {exc}") from exc

        try:
            return ExerciseProperties.model_validate(raw)
        except ValidationError as exc:
            raise DescriptorLoadError(path=path, reason=str(exc)) from exc
