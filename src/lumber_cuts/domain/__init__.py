"""Domain layer - cut requests and their errors."""

from .exceptions import (
    CutRequestError,
    DuplicatePartNameError,
    InvalidCutError,
    InvalidNumericInputError,
    OversizedCutError,
)
from .value_objects import (
    Cut,
    CutRequest,
    GroupedCuts,
    PackingDefaults,
    UngroupedCuts,
)

__all__ = [
    "Cut",
    "CutRequest",
    "CutRequestError",
    "DuplicatePartNameError",
    "GroupedCuts",
    "InvalidCutError",
    "InvalidNumericInputError",
    "OversizedCutError",
    "PackingDefaults",
    "UngroupedCuts",
]
