"""Tests for validator configuration."""

import json

import pytest
import yaml

from datavalidator.config import DEFAULT_CONFIG, ValidatorConfig
from datavalidator.exceptions import ConfigurationError


class TestValidatorConfig:
    """Test construction and validation of settings."""

    def test_defaults(self):
        config = ValidatorConfig()
        assert config.tag == "validate"
        assert config.clause_separator == ";"
        assert config.pair_separator == ":"
        assert config.list_separator == ","
        assert config.root_name == "Main"
        assert config == DEFAULT_CONFIG

    def test_round_trip(self):
        config = ValidatorConfig(tag="check", root_name="Root")
        assert ValidatorConfig.from_dict(config.to_dict()) == config

    def test_from_dict_keeps_defaults(self):
        config = ValidatorConfig.from_dict({"tag": "rules"})
        assert config.tag == "rules"
        assert config.clause_separator == ";"

    def test_unknown_keys(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ValidatorConfig.from_dict({"tag": "x", "strict": True})
        assert exc_info.value.context["unknown"] == ["strict"]

    def test_not_a_mapping(self):
        with pytest.raises(ConfigurationError):
            ValidatorConfig.from_dict(["tag"])

    @pytest.mark.parametrize("key", ["tag", "clause_separator", "pair_separator", "list_separator", "root_name"])
    def test_empty_values(self, key):
        with pytest.raises(ConfigurationError):
            ValidatorConfig(**{key: ""})

    def test_non_string_value(self):
        with pytest.raises(ConfigurationError):
            ValidatorConfig(tag=3)

    def test_clashing_separators(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ValidatorConfig(pair_separator=";")
        assert exc_info.value.context["clause_separator"] == ";"

    def test_frozen(self):
        config = ValidatorConfig()
        with pytest.raises(AttributeError):
            config.tag = "other"


class TestConfigFiles:
    """Test loading settings from files."""

    def test_yaml_section(self, tmp_path):
        path = tmp_path / "validator.yaml"
        path.write_text(yaml.safe_dump({"datavalidator": {"tag": "check", "clause_separator": "|"}}))
        config = ValidatorConfig.from_file(path)
        assert config.tag == "check"
        assert config.clause_separator == "|"

    def test_yaml_top_level(self, tmp_path):
        path = tmp_path / "validator.yml"
        path.write_text("root_name: Record\n")
        assert ValidatorConfig.from_file(str(path)).root_name == "Record"

    def test_json(self, tmp_path):
        path = tmp_path / "validator.json"
        path.write_text(json.dumps({"list_separator": "/"}))
        assert ValidatorConfig.from_file(path).list_separator == "/"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "validator.yaml"
        path.write_text("")
        assert ValidatorConfig.from_file(path) == DEFAULT_CONFIG

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            ValidatorConfig.from_file(tmp_path / "nope.yaml")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "validator.toml"
        path.write_text("tag = 'x'\n")
        with pytest.raises(ConfigurationError):
            ValidatorConfig.from_file(path)

    def test_invalid_settings_in_file(self, tmp_path):
        path = tmp_path / "validator.yaml"
        path.write_text("datavalidator:\n  pair_separator: ','\n")
        with pytest.raises(ConfigurationError):
            ValidatorConfig.from_file(path)
