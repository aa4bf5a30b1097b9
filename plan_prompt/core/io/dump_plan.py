from __future__ import annotations

import logging
from pathlib import Path

import yaml

from plan_prompt.core.errors import PlanSerializeError, PlanWriteError
from plan_prompt.core.model import Plan, plan_to_dict

logger = logging.getLogger(__name__)


def dump_plan_yaml(plan: Plan, path: str | Path) -> None:
    p = Path(path)
    try:
        text = yaml.safe_dump(
            plan_to_dict(plan), sort_keys=False, default_flow_style=False, allow_unicode=True
        )
    except yaml.YAMLError as e:
        raise PlanSerializeError(
            code="E_YAML_SERIALIZE",
            message=f"failed to serialize plan to YAML: {e}",
            file=str(p),
        ) from e

    try:
        if str(p.parent) not in (".", ""):
            p.parent.mkdir(parents=True, exist_ok=True)
        with open(p, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise PlanWriteError(code="E_FILE_WRITE", message=str(e), file=str(p)) from e

    logger.debug("wrote plan with %d behaviors to %s", len(plan.behaviors), p)
