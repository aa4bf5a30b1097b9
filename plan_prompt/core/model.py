from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from plan_prompt.core.config import DEFAULT_LANGUAGE


@dataclass(frozen=True)
class ProjectInfo:
    title: str
    description: str
    language: str = DEFAULT_LANGUAGE


@dataclass(frozen=True)
class PlanBehavior:
    id: str
    name: str
    behavior: str  # free-form implementation instructions


@dataclass(frozen=True)
class Plan:
    project: ProjectInfo
    behaviors: list[PlanBehavior]


def plan_to_dict(plan: Plan) -> dict[str, Any]:
    """Document form of a plan, keys in file order. language is always written."""
    return {
        "project": {
            "title": plan.project.title,
            "description": plan.project.description,
            "language": plan.project.language,
        },
        "behaviors": [
            {"id": b.id, "name": b.name, "behavior": b.behavior} for b in plan.behaviors
        ],
    }
