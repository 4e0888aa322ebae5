"""Load cut list configuration files.

A file is read, parsed as JSON and handed to ``load_config_from_dict``, so
files and in-memory dictionaries are validated the same way. Every failure
is raised as a ConfigError whose ``details`` list one entry per problem:
``path`` (JSON path such as ``parts[0].cuts[1]``), ``message``, ``value``
and, for anything inside a part, the part's ``part`` name.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from lumber_cuts.application.config.schema import CutListConfiguration


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: One dict per problem found
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


# Pydantic error types reworded for cut lists
_CUT_MESSAGES = {
    "greater_than": "Cut lengths must be positive",
    "finite_number": "Cut lengths must be finite numbers",
    "float_parsing": "Cut lengths must be numbers",
    "float_type": "Cut lengths must be numbers",
}
_FIELD_MESSAGES = {
    "extra_forbidden": "Unknown field",
    "missing": "Required field is missing",
}


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    # Model-level validators report an empty location
    return path or "(root)"


def _part_name(data: Any, loc: tuple[str | int, ...]) -> str | None:
    """Name of the part a ``("parts", i, ...)`` location points into."""
    if len(loc) < 2 or loc[0] != "parts" or not isinstance(loc[1], int):
        return None
    try:
        name = data["parts"][loc[1]]["name"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(name, str):
        return None
    return name.strip() or None


def _describe(err: dict[str, Any], data: Any) -> dict[str, Any]:
    loc = tuple(err["loc"])
    is_cut = "cuts" in loc or loc[:1] == ("miscellaneous",)
    message = (_CUT_MESSAGES if is_cut else _FIELD_MESSAGES).get(
        err["type"], err["msg"]
    )

    part = _part_name(data, loc)
    if part is not None and isinstance(loc[-1], int) and "cuts" in loc:
        message = f"{message} (part '{part}', cut {loc[-1] + 1})"
    elif part is not None:
        message = f"{message} (part '{part}')"
    elif loc[:1] == ("miscellaneous",) and isinstance(loc[-1], int):
        message = f"{message} (miscellaneous cut {loc[-1] + 1})"

    return {
        "path": _format_json_path(loc),
        "message": message,
        "value": err.get("input"),
        "part": part,
        "error_type": err["type"],
    }


def _summary(details: list[dict[str, Any]]) -> str:
    lines = ["Cut list configuration is invalid:"]
    for detail in details:
        value = detail["value"]
        line = f"  - {detail['path']}: {detail['message']}"
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def load_config_from_dict(
    data: Any, path: Path | None = None
) -> CutListConfiguration:
    """Validate parsed configuration data.

    Args:
        data: Parsed JSON, normally a dict.
        path: File the data came from, recorded on any ConfigError.

    Raises:
        ConfigError: With error_type "validation" if the data is invalid.
    """
    try:
        return CutListConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = [_describe(err, data) for err in e.errors()]
        raise ConfigError(
            message=_summary(details),
            error_type="validation",
            path=path,
            details=details,
        ) from None


def load_config(path: Path) -> CutListConfiguration:
    """Read a JSON cut list file and validate it.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or
            fails validation.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(
            f"Config file not found: {path}", "file_not_found", path
        ) from None
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading config file: {path}",
            "permission_denied",
            path,
        ) from None
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            f"Error reading config file {path}: {e}", "file_read_error", path
        ) from None

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in config file {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            "json_parse",
            path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from None

    return load_config_from_dict(data, path=path)
