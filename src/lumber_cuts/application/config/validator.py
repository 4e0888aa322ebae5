"""Validation structures and cut list advisory checks.

This module provides validation result structures and the checks that go
beyond the configuration schema: board settings that leave no room to cut,
cuts that cannot fit on a board (errors), and settings that are valid but
probably not what the user meant (warnings).
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from lumber_cuts.application.config.adapter import config_to_request
from lumber_cuts.application.config.schema import CutListConfiguration
from lumber_cuts.application.parsing import build_cut_request
from lumber_cuts.domain.exceptions import CutRequestError
from lumber_cuts.domain.value_objects import CutRequest

# Blade widths above this are unusual for a table or miter saw, in inches
MAX_TYPICAL_KERF = 0.25


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "parts[0].cuts[1]")
        message: Human-readable description of the error
        value: The invalid value that caused the error
        part: Name of the part the value belongs to, if any
    """

    path: str
    message: str
    value: Any = None
    part: str | None = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning."""

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    ``usable_length`` is set once the board settings are known to be valid,
    and ``request`` once the whole cut list is.
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)
    usable_length: float | None = None
    request: CutRequest | None = None

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None, part: str | None = None
    ) -> "ValidationResult":
        self.errors.append(
            ValidationError(path=path, message=message, value=value, part=part)
        )
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def _cut_entries(
    config: CutListConfiguration,
) -> Iterator[tuple[str, str | None, float]]:
    """Yield (JSON path, part name, raw length) for every configured cut."""
    for j, length in enumerate(config.miscellaneous):
        yield f"miscellaneous[{j}]", None, length
    for i, part in enumerate(config.parts):
        for j, length in enumerate(part.cuts):
            yield f"parts[{i}].cuts[{j}]", part.name, length


def validate_config(config: CutListConfiguration) -> ValidationResult:
    """Check a schema-valid configuration against the board it will be cut from.

    The board settings are checked first; if they leave no usable length
    there is nothing to check cuts against. Otherwise every cut is checked
    on its own so each oversized piece is reported, not only the first.
    Advisories are added only to a configuration without errors.
    """
    result = ValidationResult()

    try:
        board = build_cut_request(
            config.board_length_feet, config.margin, config.kerf, []
        )
    except CutRequestError as e:
        return result.add_error("(root)", str(e))
    result.usable_length = board.usable_length

    for path, part_name, length in _cut_entries(config):
        try:
            build_cut_request(
                config.board_length_feet,
                config.margin,
                config.kerf,
                [(part_name, [length])],
            )
        except CutRequestError as e:
            label = f"Part '{part_name}'" if part_name else "Miscellaneous cut"
            result.add_error(path, f"{label}: {e}", length, part=part_name)

    if result.is_valid:
        result.request = config_to_request(config)
        result.warnings.extend(check_advisories(result.request).warnings)

    return result


def check_advisories(request: CutRequest) -> ValidationResult:
    """Warn about a valid request whose settings are likely mistakes.

    Group indices of the request match ``parts`` indices of the
    configuration it was built from.
    """
    result = ValidationResult()

    if request.kerf > MAX_TYPICAL_KERF:
        result.add_warning(
            "kerf",
            f"Blade width of {request.kerf:g}\" is unusually wide",
            suggestion="Kerf is in inches; 1/8\" (0.125) is typical",
        )

    for index, group in enumerate(request.groups):
        boards = math.ceil(group.total_length / request.usable_length)
        if boards > 1:
            result.add_warning(
                f"parts[{index}].cuts",
                f"Part '{group.name}' needs at least {boards} boards",
                suggestion="Use longer stock to keep this part on one board",
            )

    if not request.cut_count:
        result.add_warning("parts", "No cuts are configured")

    return result
