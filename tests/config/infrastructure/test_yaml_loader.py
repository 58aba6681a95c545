"""Tests for YamlConfigLoader."""

from pathlib import Path

import pytest

from kata_eval.config.infrastructure.errors import ConfigLoadError, ConfigValidationError
from kata_eval.config.infrastructure.yaml_loader import YamlConfigLoader
from tests.config.fake_observer import FakeConfigObserver


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "kata-eval.yaml"
    path.write_text(content, encoding="utf-8")
    return path


_VALID = "source_dir: source\ncode_dir: code\nledger_path: data.dat\n"


class TestYamlConfigLoader:
    def test_relative_paths_resolve_against_config_dir(self, tmp_path: Path) -> None:
        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_write(tmp_path, _VALID)
        )

        assert cfg.source_dir == tmp_path / "source"
        assert cfg.code_dir == tmp_path / "code"
        assert cfg.ledger_path == tmp_path / "data.dat"

    def test_absolute_paths_are_kept(self, tmp_path: Path) -> None:
        elsewhere = tmp_path / "elsewhere"
        content = (
            f"source_dir: {elsewhere / 'src'}\n"
            f"code_dir: {elsewhere / 'code'}\n"
            f"ledger_path: {elsewhere / 'ledger'}\n"
        )

        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_write(tmp_path, content)
        )

        assert cfg.source_dir == elsewhere / "src"

    def test_emits_loaded_event(self, tmp_path: Path) -> None:
        observer = FakeConfigObserver()
        path = _write(tmp_path, _VALID)

        YamlConfigLoader(observer=observer).load(path=path)

        assert len(observer.loaded) == 1
        assert observer.loaded[0].path == str(path)
        assert observer.loaded[0].source_dir == str(tmp_path / "source")

    def test_missing_file_raises_load_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError) as exc_info:
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=tmp_path / "missing.yaml"
            )

        assert "file not found" in str(exc_info.value)

    def test_invalid_yaml_raises_validation_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=_write(tmp_path, "source_dir: [oops\n")
            )

    def test_missing_key_raises_validation_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=_write(tmp_path, "source_dir: source\n")
            )

    def test_non_mapping_document_raises_validation_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=_write(tmp_path, "- just\n- a list\n")
            )

    def test_failed_load_emits_no_event(self, tmp_path: Path) -> None:
        observer = FakeConfigObserver()

        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(observer=observer).load(path=_write(tmp_path, "{}\n"))

        assert observer.loaded == []
