from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from plan_prompt.core.config import DEFAULT_LANGUAGE, PLAN_FILE_NAME
from plan_prompt.core.errors import (
    PlanEnvironmentError,
    PlanNotFoundError,
    PlanParseError,
    PlanReadError,
)
from plan_prompt.core.model import Plan, PlanBehavior, ProjectInfo
from plan_prompt.core.validate.validate_plan import validate_plan

logger = logging.getLogger(__name__)


def plan_exists(directory: str | Path) -> bool:
    """True iff a plan file sits directly inside ``directory``."""
    return (Path(directory) / PLAN_FILE_NAME).exists()


def plan_exists_in_current_directory() -> bool:
    # An unresolvable working directory is reported as "no plan".
    try:
        cwd = _current_directory()
    except PlanEnvironmentError:
        return False
    return plan_exists(cwd)


def load_plan(path: str | Path) -> Plan:
    """Load, parse and validate a YAML plan file.

    Raises PlanNotFoundError, PlanReadError or PlanParseError for load
    problems, and PlanValidationError when the document is well-formed but
    breaks a structural rule. Never returns an invalid plan.
    """

    p = Path(path)
    if not p.exists():
        raise PlanNotFoundError(
            code="E_FILE_NOT_FOUND",
            message="plan file does not exist",
            file=str(p),
        )

    try:
        raw_text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PlanReadError(code="E_FILE_READ", message=str(e), file=str(p)) from e

    try:
        # BaseLoader keeps every scalar as text: `name: Yes` stays "Yes", a
        # blank value is "" and is left to the validator.
        data = yaml.load(raw_text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise PlanParseError(code="E_YAML_PARSE", message=str(e), file=str(p)) from e

    plan = parse_plan(data, file=str(p))
    validate_plan(plan, file=str(p))
    logger.debug("loaded plan %s with %d behaviors", p, len(plan.behaviors))
    return plan


def load_plan_from_directory(directory: str | Path) -> Plan:
    return load_plan(Path(directory) / PLAN_FILE_NAME)


def load_plan_from_current_directory() -> Plan:
    return load_plan_from_directory(_current_directory())


def parse_plan(data: Any, file: Optional[str] = None) -> Plan:
    """Map a loaded YAML value onto the Plan schema.

    Only shape is checked here: required keys present and string-typed.
    Empty strings and duplicate ids are the validator's concern.
    Unknown keys are ignored.
    """

    if not isinstance(data, dict):
        raise PlanParseError(
            code="E_INVALID_TOP_LEVEL",
            message="top-level document must be a mapping",
            file=file,
        )

    raw_project = _require(data, "project", "project", file)
    if not isinstance(raw_project, dict):
        raise PlanParseError(
            code="E_INVALID_TYPE",
            message="project must be a mapping",
            file=file,
            path="project",
        )

    if "language" in raw_project:
        language = _require_str(raw_project, "language", "project", file)
    else:
        language = DEFAULT_LANGUAGE

    project = ProjectInfo(
        title=_require_str(raw_project, "title", "project", file),
        description=_require_str(raw_project, "description", "project", file),
        language=language,
    )

    raw_behaviors = _require(data, "behaviors", "behaviors", file)
    if not isinstance(raw_behaviors, list):
        raise PlanParseError(
            code="E_INVALID_TYPE",
            message="behaviors must be a list",
            file=file,
            path="behaviors",
        )

    behaviors: list[PlanBehavior] = []
    for i, raw in enumerate(raw_behaviors):
        item_path = f"behaviors[{i}]"
        if not isinstance(raw, dict):
            raise PlanParseError(
                code="E_INVALID_TYPE",
                message="behavior must be a mapping",
                file=file,
                path=item_path,
            )
        behaviors.append(
            PlanBehavior(
                id=_require_str(raw, "id", item_path, file),
                name=_require_str(raw, "name", item_path, file),
                behavior=_require_str(raw, "behavior", item_path, file),
            )
        )

    return Plan(project=project, behaviors=behaviors)


def _require(obj: dict[str, Any], key: str, path: str, file: Optional[str]) -> Any:
    if key not in obj:
        raise PlanParseError(
            code="E_REQUIRED_FIELD",
            message=f"missing required field: {key}",
            file=file,
            path=path,
        )
    return obj[key]


def _require_str(obj: dict[str, Any], key: str, parent: str, file: Optional[str]) -> str:
    field_path = f"{parent}.{key}"
    value = _require(obj, key, field_path, file)
    if not isinstance(value, str):
        raise PlanParseError(
            code="E_INVALID_TYPE",
            message=f"{key} must be a string",
            file=file,
            path=field_path,
        )
    return value


def _current_directory() -> Path:
    try:
        return Path.cwd()
    except OSError as e:
        raise PlanEnvironmentError(
            code="E_CWD_UNAVAILABLE",
            message=f"failed to get current working directory: {e}",
        ) from e
