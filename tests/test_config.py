"""Tests for configuration loading."""

import json

import pytest

from processor_codegen.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


@pytest.fixture
def manager():
    return ConfigManager()


class TestConfigManager:
    def test_defaults(self, manager):
        config = manager.get_config()
        assert config.output_root == "generated"
        assert config.dto_subpackage == "dto"
        assert config.file_extension == ".java"
        assert config.max_depth == 32
        assert config.contract_file is None

    def test_overrides_skip_none(self, manager):
        config = manager.get_config(custom_config={"output_root": None, "base_package": "com.acme"})
        assert config.output_root == "generated"
        assert config.base_package == "com.acme"

    def test_config_file(self, manager, tmp_path):
        path = tmp_path / "codegen.json"
        path.write_text(json.dumps({"max_depth": 8, "team": "payments"}), encoding="utf-8")
        config = manager.get_config(config_file=path)
        assert config.max_depth == 8
        assert config.custom == {"team": "payments"}

    def test_overrides_beat_file(self, manager, tmp_path):
        path = tmp_path / "codegen.json"
        path.write_text(json.dumps({"output_root": "from-file"}), encoding="utf-8")
        config = manager.get_config(custom_config={"output_root": "cli"}, config_file=path)
        assert config.output_root == "cli"

    def test_missing_file(self, manager, tmp_path):
        with pytest.raises(ConfigError):
            manager.get_config(config_file=tmp_path / "absent.json")

    def test_invalid_json(self, manager, tmp_path):
        path = tmp_path / "codegen.json"
        path.write_text("{oops", encoding="utf-8")
        with pytest.raises(ConfigError):
            manager.get_config(config_file=path)

    def test_non_object(self, manager, tmp_path):
        path = tmp_path / "codegen.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ConfigError):
            manager.get_config(config_file=path)

    def test_wrong_extension(self, manager, tmp_path):
        path = tmp_path / "codegen.yaml"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(ConfigError):
            manager.get_config(config_file=path)


class TestValidateConfig:
    def test_valid(self, manager):
        assert manager.validate_config(GeneratorConfig(base_package="com.acme")) == []

    def test_warnings(self, manager):
        config = GeneratorConfig(
            max_depth=0, file_extension="java", base_package="com.1acme", dto_subpackage="d-to"
        )
        warnings = manager.validate_config(config)
        assert len(warnings) == 4


def test_load_config_convenience():
    assert isinstance(load_config(), GeneratorConfig)
