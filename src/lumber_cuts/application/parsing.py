"""Parsing and validation of raw cut list input.

This module turns user input into a validated CutRequest. Board length is
given in whole feet, margin and kerf in inches, and cuts as lines of
comma-separated inch lengths, optionally prefixed with a part name:

    shelf: 30, 30
    side: 40
    10, 12.5

Every check happens here, before any packing. Failures raise a
CutRequestError subclass with a message suitable for showing to the user.
"""

from __future__ import annotations

import logging
import math
from numbers import Real
from typing import Iterable, Sequence

from lumber_cuts.domain.exceptions import (
    DuplicatePartNameError,
    InvalidNumericInputError,
    OversizedCutError,
)
from lumber_cuts.domain.value_objects import CutRequest, GroupedCuts, UngroupedCuts

logger = logging.getLogger(__name__)

INCHES_PER_FOOT = 12

# A parsed cut line: part name (None for miscellaneous cuts) and raw lengths.
CutLine = tuple[str | None, Sequence[float]]


def _is_number(value: object) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def parse_board_length(text: str) -> int:
    """Parse a board length in whole feet.

    Raises:
        InvalidNumericInputError: If the text is not a positive integer.
    """
    text = text.strip()
    try:
        if "." in text:
            raise ValueError(text)
        feet = int(text)
    except ValueError:
        raise InvalidNumericInputError(
            "Lumber length must be a positive integer."
        ) from None
    if feet <= 0:
        raise InvalidNumericInputError("Lumber length must be a positive integer.")
    return feet


def _parse_values(text: str) -> list[float]:
    try:
        return [float(value.strip()) for value in text.split(",")]
    except ValueError:
        raise InvalidNumericInputError("All cuts should be positive numbers") from None


def parse_cut_lines(text: str) -> list[CutLine]:
    """Parse cut list text into (part name, lengths) pairs.

    A line of the form ``name: a, b`` is a named part; a line without a
    colon holds miscellaneous cuts. Blank lines are skipped and a blank
    part name counts as miscellaneous.

    Raises:
        InvalidNumericInputError: If a line cannot be parsed.
    """
    lines: list[CutLine] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        fields = line.split(":")
        if len(fields) == 1:
            name, values = None, line
        elif len(fields) == 2:
            name, values = fields[0].strip() or None, fields[1]
        else:
            raise InvalidNumericInputError(f"Could not parse cut line: {line.strip()!r}")
        lines.append((name, _parse_values(values)))
    return lines


def usable_board_length(board_length: float, margin: float, kerf: float) -> float:
    """Length available for kerf-padded cuts.

    The margin is subtracted, less one blade width, because every cut is
    already padded with a blade width.
    """
    return board_length - (margin - kerf)


def build_cut_request(
    board_length_feet: int,
    margin: float,
    kerf: float,
    lines: Iterable[CutLine],
) -> CutRequest:
    """Validate raw input and build a kerf-padded CutRequest.

    Args:
        board_length_feet: Stock length in whole feet.
        margin: Allowed measurement error in inches, at least ``kerf``.
        kerf: Saw blade width in inches.
        lines: Part name (or None) and raw cut lengths in inches, in input
            order. Lines without a name are combined into the
            miscellaneous cuts.

    Returns:
        The validated request.

    Raises:
        InvalidNumericInputError: If a number is missing or out of range.
        DuplicatePartNameError: If a part name is repeated.
        OversizedCutError: If a padded cut is longer than the usable length.
    """
    if (
        isinstance(board_length_feet, bool)
        or not isinstance(board_length_feet, int)
        or board_length_feet <= 0
    ):
        raise InvalidNumericInputError("Lumber length must be a positive integer.")
    if not _is_number(margin) or margin < 0:
        raise InvalidNumericInputError(
            "Lumber error margin must be a non-negative number."
        )
    if not _is_number(kerf) or kerf <= 0:
        raise InvalidNumericInputError("Blade width must be a positive number.")
    if margin < kerf:
        raise InvalidNumericInputError(
            "Lumber error margin cannot be less than blade width."
        )

    board_length = board_length_feet * INCHES_PER_FOOT
    usable_length = usable_board_length(board_length, margin, kerf)
    if usable_length <= 0:
        raise InvalidNumericInputError(
            "Lumber error margin must be shorter than the lumber itself."
        )

    groups: list[GroupedCuts] = []
    seen: set[str] = set()
    ungrouped: list[float] = []

    for name, values in lines:
        if name is not None and name in seen:
            raise DuplicatePartNameError(name)
        if not values:
            raise InvalidNumericInputError("A part cannot have no values")
        if not all(_is_number(v) and v > 0 for v in values):
            raise InvalidNumericInputError("All cuts should be positive numbers")

        padded = tuple(float(v) + kerf for v in values)
        longest = max(padded)
        if longest > usable_length:
            raise OversizedCutError(longest, usable_length)

        if name is None:
            ungrouped.extend(padded)
        else:
            seen.add(name)
            groups.append(GroupedCuts(name, padded))

    request = CutRequest(
        board_length=board_length,
        usable_length=usable_length,
        kerf=kerf,
        margin=margin,
        groups=tuple(groups),
        ungrouped=UngroupedCuts(tuple(ungrouped)),
    )
    logger.debug(
        "Built cut request: %d parts, %d cuts, usable length %.3f\"",
        len(groups),
        request.cut_count,
        usable_length,
    )
    return request


__all__ = [
    "CutLine",
    "INCHES_PER_FOOT",
    "build_cut_request",
    "parse_board_length",
    "parse_cut_lines",
    "usable_board_length",
]
