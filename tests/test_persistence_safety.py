"""Tests for persistence safety features (backups, atomic writes, corruption handling)."""

from pathlib import Path

import pytest
from pydantic import BaseModel

from glyphbeat.exceptions import ConfigFileInvalidError, ConfigValidationError
from glyphbeat.utils import PydanticPersistence


class SampleModel(BaseModel):
    """Simple model for testing."""

    name: str = "test"
    value: int = 42


class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    @pytest.mark.unit
    def test_save_creates_backup(self, tmp_path: Path):
        """Test that save_json creates a .bak file before overwriting."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(name="original", value=1), config_path, backup=False)
        PydanticPersistence.save_json(SampleModel(name="modified", value=2), config_path, backup=True)

        backup_path = config_path.with_suffix(".json.bak")
        assert backup_path.exists()
        assert PydanticPersistence.load_json(backup_path, SampleModel).name == "original"
        assert PydanticPersistence.load_json(config_path, SampleModel).name == "modified"

    @pytest.mark.unit
    def test_save_without_backup(self, tmp_path: Path):
        """Test that backup can be disabled."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(), config_path, backup=False)
        PydanticPersistence.save_json(SampleModel(value=7), config_path, backup=False)

        assert not config_path.with_suffix(".json.bak").exists()

    @pytest.mark.unit
    def test_atomic_write_leaves_no_temp_file(self, tmp_path: Path):
        """Test the temporary file is gone after saving."""
        config_path = tmp_path / "nested" / "config.json"

        PydanticPersistence.save_json(SampleModel(), config_path)

        assert config_path.exists()
        assert not config_path.with_suffix(".json.tmp").exists()

    @pytest.mark.unit
    def test_load_missing_file(self, tmp_path: Path):
        """Test load_json raises FileNotFoundError for a missing file."""
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "missing.json", SampleModel)

    @pytest.mark.unit
    def test_load_or_default_missing_file(self, tmp_path: Path):
        """Test a missing file falls back to the default."""
        model = PydanticPersistence.load_json_or_default(tmp_path / "missing.json", SampleModel)
        assert model == SampleModel()

    @pytest.mark.unit
    def test_load_or_default_factory(self, tmp_path: Path):
        """Test the default factory is used for a missing file."""
        model = PydanticPersistence.load_json_or_default(
            tmp_path / "missing.json", SampleModel, default_factory=lambda: SampleModel(value=5)
        )
        assert model.value == 5

    @pytest.mark.unit
    def test_corrupted_file_raises(self, tmp_path: Path):
        """Test invalid JSON raises instead of falling back to defaults."""
        config_path = tmp_path / "config.json"
        config_path.write_text('{"name": "broken",}')

        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json_or_default(config_path, SampleModel)

        # The broken file is left alone
        assert config_path.read_text() == '{"name": "broken",}'

    @pytest.mark.unit
    def test_empty_file_raises(self, tmp_path: Path):
        """Test an empty file is reported, not treated as missing."""
        config_path = tmp_path / "config.json"
        config_path.write_text("   \n")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PydanticPersistence.load_json(config_path, SampleModel)
        assert exc_info.value.user_message == "Configuration file is empty"

    @pytest.mark.unit
    def test_invalid_value_raises(self, tmp_path: Path):
        """Test values failing validation raise ConfigValidationError."""
        config_path = tmp_path / "config.json"
        config_path.write_text('{"value": "not a number"}')

        with pytest.raises(ConfigValidationError) as exc_info:
            PydanticPersistence.load_json(config_path, SampleModel)
        assert exc_info.value.field == "value"
