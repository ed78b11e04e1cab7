"""
Unit Tests for ConfigLoader.

Test Aspects Covered:
    ✅ Business Logic: Config loading and profile merging
    ✅ Error Handling: Invalid values, invalid YAML, missing files
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from number_pipeline.config.loader import ConfigLoader
from number_pipeline.config.models import OutputConfig, PipelineConfig
from number_pipeline.domain.exceptions import ConfigurationError


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    def test_loads_sample_config(self, sample_config_path: Path) -> None:
        """
        SCENARIO: Valid YAML configuration file
        EXPECTED: PipelineConfig object created
        """
        # Arrange
        loader = ConfigLoader(base_path=sample_config_path.parent)

        # Act
        config = loader.load(sample_config_path.name)

        # Assert
        assert isinstance(config, PipelineConfig)
        assert config.observers == ["counter", "printer"]
        assert config.output.pass_template == "passed {number}"
        assert config.logging.level == "INFO"
        assert config.logging.verbose_audit is True

    def test_applies_defaults(self) -> None:
        """
        SCENARIO: Minimal config with only a version
        EXPECTED: Defaults applied for missing fields
        """
        # Arrange
        loader = ConfigLoader()

        # Act
        config = loader.load_from_dict({"version": "1.0"})

        # Assert
        assert config.source.encoding == "utf-8"
        assert config.observers == ["printer", "counter"]
        assert config.output.pass_template == "Number passed: {number}"
        assert config.output.finished_message == "Processing finished."
        assert config.output.total_template == "Total passed numbers: {count}"
        assert config.logging.level == "WARNING"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "empty.yaml").write_text("")

        config = ConfigLoader(base_path=tmp_path).load("empty.yaml")

        assert config == PipelineConfig()

    def test_merges_profile(self, sample_config_path: Path) -> None:
        """
        SCENARIO: Base config plus "quiet" profile
        EXPECTED: Profile values win, untouched base values remain
        """
        # Arrange
        loader = ConfigLoader(base_path=sample_config_path.parent)

        # Act
        config = loader.load(sample_config_path.name, profile="quiet")

        # Assert
        assert config.observers == ["counter"]
        assert config.logging.level == "ERROR"
        assert config.logging.verbose_audit is True
        assert config.output.total_template == "total {count}"

    def test_missing_profile_raises(self, sample_config_path: Path) -> None:
        loader = ConfigLoader(base_path=sample_config_path.parent)

        with pytest.raises(ConfigurationError, match="Profile not found"):
            loader.load(sample_config_path.name, profile="nope")

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Configuration not found") as exc:
            ConfigLoader(base_path=tmp_path).load("missing.yaml")

        assert exc.value.path == tmp_path / "missing.yaml"
        assert isinstance(exc.value.__cause__, FileNotFoundError)

    def test_directory_raises(self, tmp_path: Path) -> None:
        """
        SCENARIO: Config path points at a directory
        EXPECTED: ConfigurationError wrapping the OSError
        """
        with pytest.raises(ConfigurationError, match="Cannot read configuration") as exc:
            ConfigLoader().load(tmp_path)

        assert isinstance(exc.value.__cause__, OSError)

    @pytest.mark.parametrize(
        "config_dict",
        [
            {"observers": []},
            {"observers": ["printer", "logger"]},
            {"output": {"pass_template": "no placeholder"}},
            {"output": {"total_template": "no placeholder"}},
            {"logging": {"level": "LOUD"}},
            {"source": {"encoding": ""}},
        ],
    )
    def test_validates_invalid_config(self, config_dict: dict) -> None:
        """
        SCENARIO: Config with invalid values
        EXPECTED: ConfigurationError wrapping the ValidationError
        """
        with pytest.raises(ConfigurationError, match="Invalid configuration") as exc:
            ConfigLoader().load_from_dict(config_dict)

        assert isinstance(exc.value.__cause__, ValidationError)

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        (tmp_path / "bad.yaml").write_text("observers: [printer\n")

        with pytest.raises(ConfigurationError, match="Malformed configuration"):
            ConfigLoader(base_path=tmp_path).load("bad.yaml")

    def test_non_mapping_root_raises(self, tmp_path: Path) -> None:
        (tmp_path / "list.yaml").write_text("- printer\n- counter\n")

        with pytest.raises(ConfigurationError, match="root must be a mapping"):
            ConfigLoader(base_path=tmp_path).load("list.yaml")

    def test_absolute_path_ignores_base(self, sample_config_path: Path, tmp_path: Path) -> None:
        config = ConfigLoader(base_path=tmp_path).load(sample_config_path)

        assert config.observers == ["counter", "printer"]


class TestOutputTemplates:
    """Templates are checked by formatting them at load time."""

    @pytest.mark.parametrize(
        "template",
        ["n={number} {extra}", "n={number} {", "n={number} }", "{number} {0}", "{number.real.x}"],
    )
    def test_unformattable_pass_template_rejected(self, template: str) -> None:
        """
        SCENARIO: pass_template contains {number} but cannot be formatted
        EXPECTED: Rejected when the config is built, not during a run
        """
        with pytest.raises(ValidationError, match="pass_template is not a valid template"):
            OutputConfig(pass_template=template)

    @pytest.mark.parametrize("template", ["total {count} {", "total {count} {missing}"])
    def test_unformattable_total_template_rejected(self, template: str) -> None:
        with pytest.raises(ValidationError, match="total_template is not a valid template"):
            OutputConfig(total_template=template)

    def test_format_spec_and_escaped_braces_accepted(self) -> None:
        config = OutputConfig(pass_template="{{{number:>4}}}", total_template="{count:,} total")

        assert config.pass_template.format(number=7) == "{   7}"
        assert config.total_template.format(count=1000) == "1,000 total"
