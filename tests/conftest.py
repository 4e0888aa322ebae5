"""Pytest configuration and shared fixtures for lumber cut tests."""

from __future__ import annotations

from typing import Sequence

import pytest

from lumber_cuts.domain.value_objects import CutRequest, GroupedCuts, UngroupedCuts


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


def make_request(
    usable_length: float = 96.0,
    parts: dict[str, Sequence[float]] | None = None,
    ungrouped: Sequence[float] = (),
    kerf: float = 0.0,
    margin: float = 0.0,
) -> CutRequest:
    """Build a CutRequest directly, bypassing input validation.

    Lengths are used as given, so with the default kerf of zero they are
    the lengths the packer sees.
    """
    groups = tuple(
        GroupedCuts(name, tuple(float(v) for v in values))
        for name, values in (parts or {}).items()
    )
    return CutRequest(
        board_length=usable_length,
        usable_length=usable_length,
        kerf=kerf,
        margin=margin,
        groups=groups,
        ungrouped=UngroupedCuts(tuple(float(v) for v in ungrouped)),
    )


@pytest.fixture
def two_part_request() -> CutRequest:
    """partA [30, 30], partB [40], miscellaneous [10] on 96" boards, no kerf."""
    return make_request(
        parts={"partA": [30, 30], "partB": [40]},
        ungrouped=[10],
    )
