"""Unit tests for the YAML configuration loader."""

from pathlib import Path

import pytest

from proofreader.config.exceptions import ConfigurationError
from proofreader.config.loader import load_configuration, parse_configuration
from proofreader.config.models import Severity


class TestLoadConfiguration:
    """Tests for load_configuration()."""

    def test_mapping_layout(self, tmp_path: Path) -> None:
        """Test the name-keyed validators layout."""
        path = tmp_path / "proofreader.yaml"
        path.write_text(
            """
lang: ja
variant: zenkaku
validators:
  SentenceLength:
    properties:
      max_len: 100
  InvalidWord:
    level: warning
    properties:
      list: [foo, bar]
  HankakuKana:
""",
            encoding="utf-8",
        )

        configuration = load_configuration(path)

        assert configuration.lang == "ja"
        assert configuration.variant == "zenkaku"
        assert [c.name for c in configuration.validator_configs] == [
            "SentenceLength",
            "InvalidWord",
            "HankakuKana",
        ]
        sentence_length, invalid_word, hankaku_kana = configuration.validator_configs
        assert sentence_length.properties == {"max_len": "100"}
        assert invalid_word.properties == {"list": "foo,bar"}
        assert invalid_word.level == Severity.warning
        assert hankaku_kana.properties == {}

    def test_list_layout(self, tmp_path: Path) -> None:
        """Test the list-of-records layout."""
        path = tmp_path / "proofreader.yaml"
        path.write_text(
            """
validators:
  - name: DoubledWord
    properties: {min_len: 4}
""",
            encoding="utf-8",
        )

        configuration = load_configuration(str(path))

        assert configuration.lang == "en"
        assert configuration.validator_configs[0].name == "DoubledWord"
        assert configuration.validator_configs[0].properties == {"min_len": "4"}

    def test_flat_overrides_rejected(self, tmp_path: Path) -> None:
        """Test that a file with overrides outside properties fails loudly."""
        path = tmp_path / "proofreader.yaml"
        path.write_text("validators:\n  SentenceLength:\n    max_len: 100\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="unknown keys: max_len"):
            load_configuration(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file yields the default configuration."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        configuration = load_configuration(path)

        assert configuration.validator_configs == []

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_configuration(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        """Test that invalid YAML raises ConfigurationError."""
        path = tmp_path / "bad.yaml"
        path.write_text("lang: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Failed to parse"):
            load_configuration(path)

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        """Test that a top-level list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="expected mapping"):
            load_configuration(path)


class TestParseConfiguration:
    """Tests for parse_configuration()."""

    def test_unknown_keys_rejected(self) -> None:
        """Test that unknown top-level keys are reported."""
        with pytest.raises(ConfigurationError, match="colour"):
            parse_configuration({"colour": "red"})

    def test_validator_body_must_be_mapping(self) -> None:
        """Test that a scalar validator body is rejected."""
        with pytest.raises(ConfigurationError, match="SentenceLength"):
            parse_configuration({"validators": {"SentenceLength": 5}})

    def test_property_outside_properties_rejected(self) -> None:
        """Test that overrides written directly under the name are not dropped."""
        with pytest.raises(ConfigurationError, match="max_len"):
            parse_configuration({"validators": {"SentenceLength": {"max_len": 100}}})

    def test_misspelled_record_key_rejected(self) -> None:
        """Test that a misspelled properties key is reported."""
        with pytest.raises(ConfigurationError, match="propertes"):
            parse_configuration(
                {"validators": {"SentenceLength": {"propertes": {"max_len": 100}}}}
            )

    def test_list_record_extra_key_rejected(self) -> None:
        """Test that unknown keys in list records are rejected."""
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            parse_configuration({"validators": [{"name": "SentenceLength", "max_len": 100}]})

    def test_validators_must_be_collection(self) -> None:
        """Test that a scalar validators section is rejected."""
        with pytest.raises(ConfigurationError):
            parse_configuration({"validators": "SentenceLength"})

    def test_schema_errors_wrapped(self) -> None:
        """Test that record validation errors become ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            parse_configuration({"validators": [{"name": "X", "level": "fatal"}]})

    def test_numeric_lang_is_stringified(self) -> None:
        """Test that YAML scalars for lang are read as strings."""
        assert parse_configuration({"lang": 1}).lang == "1"
