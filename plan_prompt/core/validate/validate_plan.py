from __future__ import annotations

from typing import Optional

from plan_prompt.core.errors import PlanValidationError
from plan_prompt.core.model import Plan


def validate_plan(plan: Plan, file: Optional[str] = None) -> None:
    """Check the structural rules of a parsed plan.

    Stops at the first violation: an empty behavior list, then per behavior
    (in order) an empty id, name or instruction text, or an id seen earlier.
    """

    if not plan.behaviors:
        raise PlanValidationError(
            code="E_NO_BEHAVIORS",
            message="Plan must contain at least one behavior",
            file=file,
            path="behaviors",
        )

    seen: set[str] = set()
    for i, b in enumerate(plan.behaviors):
        item_path = f"behaviors[{i}]"
        if not b.id:
            raise PlanValidationError(
                code="E_EMPTY_ID",
                message="Behavior ID cannot be empty",
                file=file,
                path=f"{item_path}.id",
            )
        if not b.name:
            raise PlanValidationError(
                code="E_EMPTY_NAME",
                message="Behavior name cannot be empty",
                file=file,
                path=f"{item_path}.name",
            )
        if not b.behavior:
            raise PlanValidationError(
                code="E_EMPTY_BEHAVIOR",
                message="Behavior instructions cannot be empty",
                file=file,
                path=f"{item_path}.behavior",
            )
        if b.id in seen:
            raise PlanValidationError(
                code="E_DUPLICATE_ID",
                message=f"Duplicate behavior ID found: {b.id}",
                file=file,
                path=f"{item_path}.id",
            )
        seen.add(b.id)


def summarize_plan(plan: Plan) -> str:
    return (
        f"OK: {len(plan.behaviors)} behaviors\n"
        f"Project: {plan.project.title} ({plan.project.language})\n"
        "Behaviors: " + ", ".join(b.id for b in plan.behaviors)
    )
