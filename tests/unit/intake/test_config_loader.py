from pathlib import Path

import pytest
from pydantic import ValidationError

from question_kit.intake.config import IntakeConfig
from question_kit.intake.config_loader import load_intake_config


class TestLoadIntakeConfig:
    def test_loads_values(self, tmp_path: Path) -> None:
        path = tmp_path / "intake.yaml"
        path.write_text(
            """min_text_chars: 10
max_text_chars: 1000
fallback_to_whole_text: false
"""
        )

        config = load_intake_config(path)

        assert config == IntakeConfig(
            min_text_chars=10, max_text_chars=1000, fallback_to_whole_text=False
        )

    def test_missing_keys_keep_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "intake.yaml"
        path.write_text("max_text_chars: 2000\n")

        config = load_intake_config(str(path))

        assert config.min_text_chars == 20
        assert config.max_text_chars == 2000

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "intake.yaml"
        path.write_text("")

        assert load_intake_config(path) == IntakeConfig()

    def test_unknown_key_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "intake.yaml"
        path.write_text("max_chars: 10\n")

        with pytest.raises(ValidationError):
            load_intake_config(path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "intake.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ValueError, match="must be a mapping"):
            load_intake_config(path)

    def test_out_of_range_value_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "intake.yaml"
        path.write_text("max_text_chars: 0\n")

        with pytest.raises(ValueError, match="max_text_chars must be > 0"):
            load_intake_config(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="not found"):
            load_intake_config(tmp_path / "missing.yaml")
