"""Unit tests for configuration management."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

import pytest

from pipelint.config import (
    LogLevel,
    PipelintConfig,
    ValidationConfig,
    create_default_config,
    find_config_file,
    load_config,
)


class TestValidationConfig:
    """Test ValidationConfig model."""

    def test_defaults(self):
        config = ValidationConfig()
        assert config.check_cycles is True
        assert config.check_references is True
        assert config.check_properties is True
        assert config.resolve_components is True
        assert config.runtime_key_prefixes == ["elyra_"]

    def test_aliases(self):
        config = ValidationConfig(**{"checkCycles": False, "runtimeKeyPrefixes": ["kfp_"]})
        assert config.check_cycles is False
        assert config.runtime_key_prefixes == ["kfp_"]

    def test_empty_prefix_rejected(self):
        with pytest.raises(ValueError):
            ValidationConfig(runtime_key_prefixes=[""])


class TestPipelintConfig:
    """Test complete PipelintConfig model."""

    def test_minimal_config(self):
        config = PipelintConfig()
        assert config.validation.check_properties is True
        assert config.logging.level == LogLevel.INFO.value

    def test_config_from_dict(self):
        config_data = {
            "validation": {
                "checkReferences": False,
                "resolveComponents": False
            },
            "logging": {"level": "debug"}
        }

        config = PipelintConfig(**config_data)
        assert config.validation.check_references is False
        assert config.validation.resolve_components is False
        assert config.logging.level == "debug"

    def test_config_extra_fields_forbidden(self):
        with pytest.raises(ValueError):
            PipelintConfig(invalid_field="should-fail")

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            PipelintConfig(logging={"level": "verbose"})


class TestConfigFileOperations:
    """Test configuration file loading and discovery."""

    def test_load_config_with_file(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".pipelint.json"
            with open(config_file, "w") as f:
                json.dump({"validation": {"checkCycles": False}}, f)

            config = load_config(config_file)
            assert config.validation.check_cycles is False

    def test_load_config_file_not_found(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / "nonexistent.json"

            with pytest.raises(FileNotFoundError, match="Config file not found"):
                load_config(config_file)

    def test_load_config_invalid_json(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".pipelint.json"
            with open(config_file, "w") as f:
                f.write("{invalid json")

            with pytest.raises(ValueError, match="Invalid JSON"):
                load_config(config_file)

    def test_load_config_invalid_structure(self):
        with TemporaryDirectory() as temp_dir:
            config_file = Path(temp_dir) / ".pipelint.json"
            with open(config_file, "w") as f:
                json.dump({"invalid": "structure"}, f)

            with pytest.raises(ValueError, match="Failed to load config"):
                load_config(config_file)

    def test_find_config_file_parent_dir(self):
        with TemporaryDirectory() as temp_dir:
            temp_path = Path(temp_dir)
            config_file = temp_path / ".pipelint.json"
            config_file.touch()

            sub_dir = temp_path / "subdir"
            sub_dir.mkdir()

            assert find_config_file(sub_dir) == config_file.resolve()

    def test_find_config_file_not_found(self):
        with TemporaryDirectory() as temp_dir:
            with patch("pipelint.config.CONFIG_FILE_NAME", ".pipelint-missing.json"):
                assert find_config_file(Path(temp_dir)) is None

    def test_zero_config_operation(self):
        with patch("pipelint.config.find_config_file", return_value=None):
            config = load_config()
            assert config == create_default_config()
