"""Value objects for lumber cut requests.

All dataclasses are frozen so a request can be shared between packing
strategies without copying.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Cut:
    """A single piece to be cut from a board.

    Attributes:
        length: Requested length in inches, padded with one blade width.
        part_name: Name of the part this piece belongs to, or None for
            miscellaneous pieces.
    """

    length: float
    part_name: str | None = None


@dataclass(frozen=True)
class GroupedCuts:
    """Padded cut lengths belonging to one named part."""

    name: str
    lengths: tuple[float, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Part name must not be empty")

    def cuts(self) -> tuple[Cut, ...]:
        return tuple(Cut(length, self.name) for length in self.lengths)

    @property
    def total_length(self) -> float:
        return sum(self.lengths)


@dataclass(frozen=True)
class UngroupedCuts:
    """Padded cut lengths not associated with any part."""

    lengths: tuple[float, ...] = ()

    def cuts(self) -> tuple[Cut, ...]:
        return tuple(Cut(length) for length in self.lengths)


@dataclass(frozen=True)
class CutRequest:
    """A validated request to cut pieces from stock boards.

    Lengths are in inches. Cut lengths in ``groups`` and ``ungrouped`` are
    already padded with the kerf, and ``usable_length`` is reduced by the
    margin less one kerf to compensate for that padding.

    Attributes:
        board_length: Raw stock length.
        usable_length: Length available for packing padded cuts.
        kerf: Saw blade width.
        margin: Allowed length measurement error.
        groups: Named parts in input order.
        ungrouped: Miscellaneous cuts.
    """

    board_length: float
    usable_length: float
    kerf: float
    margin: float
    groups: tuple[GroupedCuts, ...] = ()
    ungrouped: UngroupedCuts = UngroupedCuts()

    def __post_init__(self) -> None:
        if self.board_length <= 0:
            raise ValueError("Board length must be positive")
        if not 0 < self.usable_length <= self.board_length:
            raise ValueError("Usable length must be positive and at most the board length")
        names = [group.name for group in self.groups]
        if len(names) != len(set(names)):
            raise ValueError("Part names must be unique")

    @property
    def part_names(self) -> tuple[str, ...]:
        return tuple(group.name for group in self.groups)

    def all_cuts(self) -> tuple[Cut, ...]:
        """Every cut in the request, miscellaneous pieces first."""
        cuts = list(self.ungrouped.cuts())
        for group in self.groups:
            cuts.extend(group.cuts())
        return tuple(cuts)

    @property
    def cut_count(self) -> int:
        return len(self.ungrouped.lengths) + sum(len(g.lengths) for g in self.groups)

    def unpadded(self, cut: Cut) -> float:
        """Length of a cut as the user asked for it, without the kerf."""
        return cut.length - self.kerf


@dataclass(frozen=True)
class PackingDefaults:
    """Default saw and measurement allowances in inches.

    Attributes:
        margin: Allowed length measurement error per board.
        kerf: Saw blade width (1/8" typical).
    """

    margin: float = 0.25
    kerf: float = 0.125

    def __post_init__(self) -> None:
        if self.kerf <= 0:
            raise ValueError("Kerf must be positive")
        if self.margin < self.kerf:
            raise ValueError("Margin cannot be less than kerf")
