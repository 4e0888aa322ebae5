"""Adapter to convert CutListConfiguration to a CutRequest.

The configuration goes through the same build_cut_request validation as
text input, so kerf padding and the oversized cut check live in one place.
"""

from lumber_cuts.application.config.schema import CutListConfiguration
from lumber_cuts.application.parsing import CutLine, build_cut_request
from lumber_cuts.domain.value_objects import CutRequest


def config_to_lines(config: CutListConfiguration) -> list[CutLine]:
    """Convert configured parts and miscellaneous cuts to cut lines.

    Miscellaneous cuts come first, followed by each part in file order.
    """
    lines: list[CutLine] = []
    if config.miscellaneous:
        lines.append((None, list(config.miscellaneous)))
    for part in config.parts:
        lines.append((part.name, list(part.cuts)))
    return lines


def config_to_request(config: CutListConfiguration) -> CutRequest:
    """Build a validated CutRequest from a configuration.

    Raises:
        CutRequestError: If a padded cut does not fit on a board, or any
            other input rule fails.
    """
    return build_cut_request(
        config.board_length_feet,
        config.margin,
        config.kerf,
        config_to_lines(config),
    )
