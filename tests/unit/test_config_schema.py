"""Unit tests for configuration schema, loader, adapter and validator.

These tests verify:
- Valid configurations are loaded correctly with defaults
- Invalid values and unknown fields produce clear errors
- Loader error handling (file not found, JSON parse errors)
- Conversion to CutRequest
- Advisory warnings
"""

import json
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from lumber_cuts.application.config import (
    SUPPORTED_VERSIONS,
    ConfigError,
    CutListConfiguration,
    PartConfig,
    check_advisories,
    config_to_lines,
    config_to_request,
    load_config,
    load_config_from_dict,
    validate_config,
)
from lumber_cuts.domain.exceptions import OversizedCutError


def minimal_config(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {"board_length_feet": 8}
    data.update(overrides)
    return data


class TestPartConfig:
    """Tests for PartConfig model."""

    def test_valid(self) -> None:
        part = PartConfig(name=" shelf ", cuts=[30, 30])
        assert part.name == "shelf"
        assert part.cuts == [30.0, 30.0]

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            PartConfig(name="   ", cuts=[1])

    def test_colon_in_name_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            PartConfig(name="a:b", cuts=[1])

    def test_empty_cuts_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            PartConfig(name="shelf", cuts=[])

    @pytest.mark.parametrize("cut", [0, -1])
    def test_non_positive_cut_rejected(self, cut: float) -> None:
        with pytest.raises(PydanticValidationError):
            PartConfig(name="shelf", cuts=[10, cut])


class TestCutListConfiguration:
    """Tests for the root configuration model."""

    def test_defaults(self) -> None:
        config = CutListConfiguration(board_length_feet=8)
        assert config.schema_version == "1.0"
        assert config.margin == 0.25
        assert config.kerf == 0.125
        assert config.parts == []
        assert config.miscellaneous == []

    def test_supported_versions(self) -> None:
        assert "1.0" in SUPPORTED_VERSIONS

    def test_unsupported_version(self) -> None:
        with pytest.raises(PydanticValidationError, match="Unsupported schema version"):
            CutListConfiguration(board_length_feet=8, schema_version="9.9")

    @pytest.mark.parametrize("feet", [0, -4, 8.5])
    def test_invalid_board_length(self, feet: float) -> None:
        with pytest.raises(PydanticValidationError):
            CutListConfiguration(board_length_feet=feet)

    def test_margin_less_than_kerf(self) -> None:
        with pytest.raises(PydanticValidationError, match="cannot be less than"):
            CutListConfiguration(board_length_feet=8, margin=0.1, kerf=0.125)

    def test_zero_kerf_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            CutListConfiguration(board_length_feet=8, kerf=0)

    def test_duplicate_part_names(self) -> None:
        with pytest.raises(PydanticValidationError, match="should not repeat"):
            CutListConfiguration(
                board_length_feet=8,
                parts=[{"name": "a", "cuts": [1]}, {"name": "a", "cuts": [2]}],
            )

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            CutListConfiguration.model_validate(minimal_config(blade="thin"))


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict."""

    def test_valid(self) -> None:
        config = load_config_from_dict(
            minimal_config(parts=[{"name": "shelf", "cuts": [30, 30]}], miscellaneous=[10])
        )
        assert config.parts[0].name == "shelf"
        assert config.miscellaneous == [10.0]

    def test_error_details_have_json_paths(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                minimal_config(parts=[{"name": "shelf", "cuts": [30, -1]}])
            )
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "parts[0].cuts[1]"
        assert error.details[0]["value"] == -1
        assert "parts[0].cuts[1]" in str(error)

    def test_model_level_error_path(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(minimal_config(margin=0, kerf=0.125))
        assert exc_info.value.details[0]["path"] == "(root)"

    def test_missing_board_length(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({})
        detail = exc_info.value.details[0]
        assert detail["path"] == "board_length_feet"
        assert detail["message"] == "Required field is missing"

    def test_cut_error_names_part_and_cut(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                minimal_config(
                    parts=[
                        {"name": "shelf", "cuts": [30]},
                        {"name": "side", "cuts": [40, 0]},
                    ]
                )
            )
        detail = exc_info.value.details[0]
        assert detail["path"] == "parts[1].cuts[1]"
        assert detail["part"] == "side"
        assert detail["message"] == "Cut lengths must be positive (part 'side', cut 2)"

    def test_miscellaneous_cut_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(minimal_config(miscellaneous=[10, "ten"]))
        detail = exc_info.value.details[0]
        assert detail["path"] == "miscellaneous[1]"
        assert detail["part"] is None
        assert detail["message"] == "Cut lengths must be numbers (miscellaneous cut 2)"

    def test_unknown_field_wording(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(minimal_config(blade="thin"))
        detail = exc_info.value.details[0]
        assert detail["path"] == "blade"
        assert detail["message"] == "Unknown field"
        assert "blade: Unknown field (got: 'thin')" in str(exc_info.value)

    def test_non_object_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict([8])
        assert exc_info.value.details[0]["path"] == "(root)"
        assert exc_info.value.path is None


class TestLoadConfig:
    """Tests for load_config file handling."""

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "cuts.json"
        path.write_text(json.dumps(minimal_config(miscellaneous=[12, 24])))

        config = load_config(path)

        assert config.board_length_feet == 8
        assert config.miscellaneous == [12.0, 24.0]

    def test_file_not_found(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"board_length_feet": 8,,}')

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 1
        assert "Invalid JSON" in str(error)

    def test_validation_error(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"board_length_feet": "eight"}))

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.error_type == "validation"
        assert exc_info.value.path == path


class TestConfigAdapter:
    """Tests for conversion to CutRequest."""

    def test_lines_put_miscellaneous_first(self) -> None:
        config = load_config_from_dict(
            minimal_config(
                parts=[{"name": "a", "cuts": [1]}, {"name": "b", "cuts": [2, 3]}],
                miscellaneous=[4],
            )
        )
        assert config_to_lines(config) == [(None, [4.0]), ("a", [1.0]), ("b", [2.0, 3.0])]

    def test_no_miscellaneous_line_when_empty(self) -> None:
        config = load_config_from_dict(minimal_config(parts=[{"name": "a", "cuts": [1]}]))
        assert config_to_lines(config) == [("a", [1.0])]

    def test_config_to_request(self) -> None:
        config = load_config_from_dict(
            minimal_config(parts=[{"name": "shelf", "cuts": [30]}], miscellaneous=[10])
        )

        request = config_to_request(config)

        assert request.usable_length == 95.875
        assert request.part_names == ("shelf",)
        assert request.groups[0].lengths == (30.125,)
        assert request.ungrouped.lengths == (10.125,)

    def test_oversized_cut(self) -> None:
        config = load_config_from_dict(minimal_config(board_length_feet=2, miscellaneous=[24]))
        with pytest.raises(OversizedCutError):
            config_to_request(config)


class TestValidateConfig:
    """Tests for validate_config and advisories."""

    def test_clean_config(self) -> None:
        config = load_config_from_dict(
            minimal_config(parts=[{"name": "shelf", "cuts": [30, 30]}], miscellaneous=[10])
        )
        result = validate_config(config)
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_every_oversized_line_reported(self) -> None:
        config = load_config_from_dict(
            minimal_config(
                board_length_feet=2,
                parts=[
                    {"name": "ok", "cuts": [10]},
                    {"name": "long", "cuts": [30]},
                    {"name": "longer", "cuts": [40]},
                ],
                miscellaneous=[25],
            )
        )

        result = validate_config(config)

        assert [e.path for e in result.errors] == [
            "miscellaneous[0]",
            "parts[1].cuts[0]",
            "parts[2].cuts[0]",
        ]
        assert result.errors[1].value == 30.0
        assert result.errors[1].part == "long"
        assert result.errors[1].message.startswith("Part 'long': Cut of 30.125\"")
        assert result.errors[0].message.startswith("Miscellaneous cut:")
        assert result.usable_length == 23.875
        assert result.request is None
        assert result.exit_code == 1

    def test_only_oversized_cuts_of_a_part_reported(self) -> None:
        config = load_config_from_dict(
            minimal_config(
                board_length_feet=2,
                parts=[{"name": "rails", "cuts": [20, 30, 10, 24]}],
            )
        )

        result = validate_config(config)

        assert [e.path for e in result.errors] == ["parts[0].cuts[1]", "parts[0].cuts[3]"]

    def test_margin_longer_than_board(self) -> None:
        config = load_config_from_dict(
            minimal_config(board_length_feet=1, margin=20, miscellaneous=[5])
        )

        result = validate_config(config)

        assert len(result.errors) == 1
        assert result.errors[0].path == "(root)"
        assert "margin must be shorter than the lumber" in result.errors[0].message
        assert result.usable_length is None
        assert not result.has_warnings
        assert result.exit_code == 1

    def test_margin_longer_than_board_without_cuts(self) -> None:
        config = load_config_from_dict(minimal_config(board_length_feet=1, margin=20))

        result = validate_config(config)

        assert [e.path for e in result.errors] == ["(root)"]
        assert result.exit_code == 1

    def test_valid_config_keeps_request(self) -> None:
        config = load_config_from_dict(
            minimal_config(parts=[{"name": "shelf", "cuts": [30, 30]}], miscellaneous=[10])
        )

        result = validate_config(config)

        assert result.usable_length == 95.875
        assert result.request is not None
        assert result.request.part_names == ("shelf",)
        assert result.request.cut_count == 3

    def test_part_spanning_boards_warning(self) -> None:
        config = load_config_from_dict(
            minimal_config(parts=[{"name": "sides", "cuts": [60, 60]}])
        )

        result = validate_config(config)

        assert result.is_valid
        assert result.warnings[0].path == "parts[0].cuts"
        assert "needs at least 2 boards" in result.warnings[0].message
        assert result.exit_code == 2

    def test_wide_kerf_warning(self) -> None:
        config = load_config_from_dict(
            minimal_config(kerf=0.375, margin=0.5, miscellaneous=[10])
        )
        result = validate_config(config)
        assert [w.path for w in result.warnings] == ["kerf"]

    def test_no_cuts_warning(self) -> None:
        result = validate_config(load_config_from_dict(minimal_config()))
        assert [w.message for w in result.warnings] == ["No cuts are configured"]

    def test_empty_cut_list_is_valid_with_warning(self) -> None:
        result = validate_config(load_config_from_dict(minimal_config(parts=[])))
        assert result.is_valid
        assert result.request is not None
        assert result.request.cut_count == 0
        assert result.exit_code == 2

    def test_check_advisories_uses_request(self) -> None:
        config = load_config_from_dict(
            minimal_config(
                kerf=0.375,
                margin=0.5,
                parts=[{"name": "a", "cuts": [10]}, {"name": "b", "cuts": [50, 50]}],
            )
        )

        result = check_advisories(config_to_request(config))

        assert [w.path for w in result.warnings] == ["kerf", "parts[1].cuts"]
        assert "Part 'b' needs at least 2 boards" in result.warnings[1].message
