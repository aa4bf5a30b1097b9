from __future__ import annotations

import logging
from pathlib import Path

from plan_prompt.core.io.dump_plan import dump_plan_yaml
from plan_prompt.core.model import Plan, PlanBehavior, ProjectInfo

logger = logging.getLogger(__name__)


SAMPLE_PLAN = Plan(
    project=ProjectInfo(
        title="Sample Application",
        description=(
            "A sample web application demonstrating modern development practices with user "
            "authentication, data persistence, and a responsive frontend."
        ),
        language="haskell",
    ),
    behaviors=[
        PlanBehavior(
            id="user_authentication",
            name="User Authentication",
            behavior=(
                "Implement secure user login and registration with email verification. "
                "Support OAuth providers like Google and GitHub. Include password reset "
                "functionality and session management."
            ),
        ),
        PlanBehavior(
            id="data_persistence",
            name="Data Persistence",
            behavior=(
                "Set up database schema and models for storing user data, application state, "
                "and business logic. Use appropriate indexing and ensure data integrity with "
                "proper validation."
            ),
        ),
        PlanBehavior(
            id="api_endpoints",
            name="REST API Endpoints",
            behavior=(
                "Create RESTful API endpoints for all core functionality. Include proper error "
                "handling, input validation, rate limiting, and comprehensive API documentation."
            ),
        ),
        PlanBehavior(
            id="frontend_ui",
            name="Frontend User Interface",
            behavior=(
                "Build responsive web interface with modern UI components. Ensure accessibility "
                "compliance and cross-browser compatibility. Implement real-time updates where "
                "appropriate."
            ),
        ),
    ],
)


def write_sample(path: str | Path) -> None:
    """Write SAMPLE_PLAN as YAML to ``path``, replacing any existing file."""
    logger.debug("writing sample plan to %s", path)
    dump_plan_yaml(SAMPLE_PLAN, path)
