"""Planning job loader with error reporting.

A planning job reaches the engine either as a JSON file (CLI) or as an
already-parsed request body (web API). Both paths end in the same pydantic
validation; every failure on the way surfaces as ``ConfigError`` carrying a
category and per-field details that the CLI and API render for the user.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from nestplan.application.config.schema import PlanningConfiguration


class ConfigError(Exception):
    """A planning job that could not be read or does not match the schema.

    Attributes:
        message: Human-readable summary.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation.
        path: Job file, when the job came from disk.
        details: Per-problem dicts: ``line``/``column`` for JSON syntax
            errors, ``path``/``message``/``value`` for schema errors.
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


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location the way it reads in the job file.

    Examples:
        >>> format_json_path(("packing", "strategy"))
        'packing.strategy'
        >>> format_json_path(("pieces", 0, "dimensions", "radius"))
        'pieces[0].dimensions.radius'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _schema_problems(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": format_json_path(problem["loc"]),
            "message": problem["msg"],
            "value": problem.get("input"),
            "error_type": problem["type"],
        }
        for problem in error.errors()
    ]


def _summarize(problems: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for problem in problems:
        value = problem.get("value")
        line = f"  - {problem['path']}: {problem['message']}"
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def _validate_job(data: Any, path: Path | None = None) -> PlanningConfiguration:
    try:
        return PlanningConfiguration.model_validate(data)
    except PydanticValidationError as e:
        problems = _schema_problems(e)
        raise ConfigError(
            message=_summarize(problems),
            error_type="validation",
            path=path,
            details=problems,
        ) from e


def _read_job_text(path: Path) -> str:
    if not path.exists():
        raise ConfigError(
            message=f"Planning job not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Planning job is not readable: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Could not read planning job {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e


def load_config(path: Path) -> PlanningConfiguration:
    """Load a planning job file.

    Raises:
        ConfigError: The file is missing or unreadable, is not valid JSON,
            or does not match the job schema. ``error_type`` tells which.
    """
    text = _read_job_text(path)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Planning job {path} is not valid JSON "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    return _validate_job(data, path)


def load_config_from_dict(data: dict[str, Any]) -> PlanningConfiguration:
    """Validate a planning job that arrived as parsed data, e.g. a request body."""
    return _validate_job(data)
