"""Assignment <-> indented JSON text.

Output is deterministic: 2-space indent, sorted keys, UTF-8 kept as is.
"""
from __future__ import annotations

import json, logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from models.assignment import Assignment
from services.errors import AssignmentFileNotFound, IOFailure, MalformedAssignment

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


def encode(assignment: Assignment) -> str:
    try:
        payload = assignment.model_dump(mode="json")
        return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise MalformedAssignment(f"cannot encode assignment {assignment.cube_name!r}: {e}") from e


def decode(text: str) -> Assignment:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedAssignment(f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedAssignment(f"expected a JSON object, got {type(data).__name__}")
    try:
        return Assignment.model_validate(data)
    except ValidationError as e:
        raise MalformedAssignment(f"invalid assignment: {e}") from e


def dump(assignment: Assignment, path: PathLike) -> Path:
    """Write one assignment file, creating parent directories. Overwrites."""
    text = encode(assignment)
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    except OSError as e:
        raise IOFailure(f"cannot write {target}: {e}", path=str(target)) from e
    return target


def load(path: PathLike) -> Assignment:
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise AssignmentFileNotFound(f"{source} not found.", path=str(source)) from e
    except UnicodeDecodeError as e:
        raise MalformedAssignment(f"{source} is not UTF-8: {e}", path=str(source)) from e
    except OSError as e:
        raise IOFailure(f"cannot read {source}: {e}", path=str(source)) from e
    try:
        return decode(text)
    except MalformedAssignment as e:
        e.path = str(source)
        raise
