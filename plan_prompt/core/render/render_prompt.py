from __future__ import annotations

from plan_prompt.core.model import Plan


BEHAVIORS_INTRO = "This application has the following defined behaviors:"

CLOSING_INSTRUCTIONS = (
    "When implementing features or making changes, refer to these behaviors to ensure "
    "consistency with the application's intended functionality. "
    "Use the builder extension tools to implement these behaviors effectively."
)


def render_prompt(plan: Plan) -> str:
    """Render a validated plan into the system prompt handed to the agent.

    Pure function of the plan. Embedded text is copied verbatim (no escaping,
    no truncation) and behaviors are numbered from 1 in list order.
    """

    parts: list[str] = [
        f'You are working on a project called "{plan.project.title}" '
        f"({plan.project.language}). Project description: {plan.project.description}\n\n",
        f"{BEHAVIORS_INTRO}\n\n",
    ]
    for index, b in enumerate(plan.behaviors, start=1):
        parts.append(f"{index}. **{b.name}** (ID: {b.id})\n   {b.behavior}\n\n")
    parts.append(CLOSING_INSTRUCTIONS)
    return "".join(parts)
