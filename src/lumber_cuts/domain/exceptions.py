"""Exceptions raised while building and packing cut requests.

User-correctable problems (bad numbers, repeated part names, cuts that are
longer than the board) derive from CutRequestError and are raised before
any packing happens. InvalidCutError signals that a cut reached the packer
without passing through validation.
"""

from __future__ import annotations


class CutRequestError(ValueError):
    """Base class for invalid cut request input."""


class InvalidNumericInputError(CutRequestError):
    """Raised when a length, margin, kerf or cut value is missing or out of range."""


class DuplicatePartNameError(CutRequestError):
    """Raised when the same part name is supplied more than once."""

    def __init__(self, part_name: str) -> None:
        self.part_name = part_name
        super().__init__(f"Part names should not repeat: '{part_name}'")


class OversizedCutError(CutRequestError):
    """Raised when a kerf-padded cut is longer than the usable board length."""

    def __init__(self, length: float, usable_length: float) -> None:
        self.length = length
        self.usable_length = usable_length
        super().__init__(
            f"Cut of {length:g}\" (including blade width) is longer than the "
            f"usable board length of {usable_length:g}\" "
            "(accounting for error margins)"
        )


class InvalidCutError(ValueError):
    """Raised when the packer receives a cut that violates its preconditions."""
