"""Unit tests for the Validator base class.

This module tests:
- Default property copies per instance
- pre_init() conversion of string overrides to the default's type
- pre_init() errors for unknown properties and malformed values
- The init() hook
- Language applicability and issue construction
"""

import pytest

from proofreader.config.exceptions import ConfigurationError
from proofreader.config.models import Configuration, Severity, ValidatorConfiguration
from proofreader.validator.base import ValidationIssue, Validator


class SampleValidator(Validator):
    """Validator declaring one property of each supported type."""

    default_properties = {
        "count": 3,
        "ratio": 0.5,
        "enabled": True,
        "label": "x",
        "words": ["a", "b"],
        "tags": {"t"},
    }

    def validate(self, sentence: str) -> list[ValidationIssue]:
        return [self.issue("sample", 0, len(sentence))] if sentence else []


class StrictValidator(Validator):
    """Validator whose init() rejects a combination of properties."""

    default_properties = {"min": 1, "max": 10}

    def init(self) -> None:
        if self.get_int("min") > self.get_int("max"):
            raise ConfigurationError("min must not exceed max")

    def validate(self, sentence: str) -> list[ValidationIssue]:
        return []


class EnglishValidator(Validator):
    """Validator restricted to English."""

    supported_languages = frozenset({"en"})

    def validate(self, sentence: str) -> list[ValidationIssue]:
        return []


def _bind(validator: Validator, lang: str = "en", **properties: str) -> Validator:
    config = ValidatorConfiguration(name=validator.name, properties=properties)
    validator.pre_init(config, Configuration(lang=lang, validator_configs=[config]))
    return validator


class TestDefaults:
    """Tests for default properties before pre_init()."""

    def test_properties_are_defaults(self) -> None:
        """Test that a fresh validator exposes its defaults."""
        assert SampleValidator().properties == SampleValidator.default_properties

    def test_instances_do_not_share_defaults(self) -> None:
        """Test that mutable defaults are copied per instance."""
        first = SampleValidator()
        second = SampleValidator()

        first._properties["words"].append("c")

        assert second.get_list("words") == ["a", "b"]
        assert SampleValidator.default_properties["words"] == ["a", "b"]

    def test_properties_returns_copy(self) -> None:
        """Test that callers cannot mutate bound state through properties."""
        validator = SampleValidator()
        validator.properties["words"].append("c")
        assert validator.get_list("words") == ["a", "b"]

    def test_name_strips_suffix(self) -> None:
        """Test the derived name."""
        assert SampleValidator().name == "Sample"

    def test_unbound_level_and_config(self) -> None:
        """Test defaults before any configuration is bound."""
        validator = SampleValidator()
        assert validator.config is None
        assert validator.global_config is None
        assert validator.level == Severity.error
        assert validator.lang == "en"

    def test_cannot_instantiate_abstract_base(self) -> None:
        """Test that the base class is abstract."""
        with pytest.raises(TypeError):
            Validator()  # type: ignore[abstract]


class TestPreInit:
    """Tests for binding configuration with pre_init()."""

    def test_converts_overrides_to_default_types(self) -> None:
        """Test conversion of every supported property type."""
        validator = _bind(
            SampleValidator(),
            count="7",
            ratio="0.25",
            enabled="false",
            label="hello",
            words="x, y ,z",
            tags="p,q",
        )

        assert validator.get_int("count") == 7
        assert validator.get_float("ratio") == 0.25
        assert validator.get_boolean("enabled") is False
        assert validator.get_string("label") == "hello"
        assert validator.get_list("words") == ["x", "y", "z"]
        assert validator.get_set("tags") == {"p", "q"}

    def test_missing_overrides_keep_defaults(self) -> None:
        """Test that properties without overrides keep their defaults."""
        validator = _bind(SampleValidator(), count="9")
        assert validator.get_string("label") == "x"
        assert validator.get_list("words") == ["a", "b"]

    def test_empty_list_override(self) -> None:
        """Test that an empty string clears a list property."""
        assert _bind(SampleValidator(), words="").get_list("words") == []

    @pytest.mark.parametrize("raw", ["true", "True", "yes", "on", "1"])
    def test_boolean_true_spellings(self, raw: str) -> None:
        """Test accepted spellings of true."""
        assert _bind(SampleValidator(), enabled=raw).get_boolean("enabled") is True

    @pytest.mark.parametrize(
        ("key", "raw"),
        [("count", "many"), ("ratio", "half"), ("enabled", "maybe")],
    )
    def test_malformed_value_raises(self, key: str, raw: str) -> None:
        """Test that unconvertible values raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match=key):
            _bind(SampleValidator(), **{key: raw})

    def test_unknown_property_raises(self) -> None:
        """Test that undeclared property names are rejected."""
        with pytest.raises(ConfigurationError, match="unknown property 'size'"):
            _bind(SampleValidator(), size="1")

    def test_init_hook_runs(self) -> None:
        """Test that init() can reject property combinations."""
        with pytest.raises(ConfigurationError, match="min must not exceed max"):
            _bind(StrictValidator(), min="5", max="2")

    def test_records_are_copied(self) -> None:
        """Test that later changes to the records do not reach the validator."""
        config = ValidatorConfiguration(name="Sample", properties={"label": "a"})
        global_config = Configuration(lang="en", validator_configs=[config])
        validator = SampleValidator()
        validator.pre_init(config, global_config)

        config.properties["label"] = "b"
        global_config.lang = "ja"

        assert validator.config.properties == {"label": "a"}
        assert validator.lang == "en"

    def test_level_comes_from_config(self) -> None:
        """Test that issues carry the configured severity."""
        config = ValidatorConfiguration(name="Sample", level=Severity.info)
        validator = SampleValidator()
        validator.pre_init(config, Configuration(validator_configs=[config]))

        [issue] = validator.validate("abc")

        assert issue.level == Severity.info
        assert issue.validator == "Sample"
        assert (issue.start, issue.end) == (0, 3)


class TestSupportsLanguage:
    """Tests for language applicability."""

    def test_unrestricted_supports_everything(self) -> None:
        """Test that an empty language set applies everywhere."""
        assert SampleValidator().supports_language("xx")

    def test_restricted_supports_only_listed(self) -> None:
        """Test that a restricted validator applies to listed languages only."""
        validator = EnglishValidator()
        assert validator.supports_language("en")
        assert not validator.supports_language("ja")
