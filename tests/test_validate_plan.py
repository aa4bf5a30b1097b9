import pytest

from plan_prompt.core.errors import PlanValidationError
from plan_prompt.core.model import Plan, PlanBehavior, ProjectInfo
from plan_prompt.core.validate.validate_plan import summarize_plan, validate_plan


PROJECT = ProjectInfo(title="Test Project", description="A test project", language="haskell")


def _plan(*behaviors: PlanBehavior) -> Plan:
    return Plan(project=PROJECT, behaviors=list(behaviors))


def _b(id: str, name: str = "Name", behavior: str = "Do it") -> PlanBehavior:
    return PlanBehavior(id=id, name=name, behavior=behavior)


def _code(plan: Plan) -> str:
    with pytest.raises(PlanValidationError) as exc:
        validate_plan(plan)
    return exc.value.code


def test_validate_happy_path():
    validate_plan(_plan(_b("test1"), _b("test2"), _b("Test1")))


def test_validate_empty_behaviors():
    with pytest.raises(PlanValidationError) as exc:
        validate_plan(_plan())
    assert exc.value.code == "E_NO_BEHAVIORS"
    assert exc.value.message == "Plan must contain at least one behavior"


def test_validate_empty_behaviors_reported_even_with_empty_project():
    plan = Plan(project=ProjectInfo(title="", description=""), behaviors=[])
    assert _code(plan) == "E_NO_BEHAVIORS"


def test_validate_duplicate_id():
    with pytest.raises(PlanValidationError) as exc:
        validate_plan(_plan(_b("test1", "Test Behavior 1"), _b("test1", "Test Behavior 2")))
    assert exc.value.code == "E_DUPLICATE_ID"
    assert "test1" in exc.value.message
    assert exc.value.path == "behaviors[1].id"


def test_validate_empty_fields():
    assert _code(_plan(_b(""))) == "E_EMPTY_ID"
    assert _code(_plan(_b("a", name=""))) == "E_EMPTY_NAME"
    assert _code(_plan(_b("a", behavior=""))) == "E_EMPTY_BEHAVIOR"


def test_validate_checks_fields_in_order():
    # Everything empty: the id is reported first, then the name.
    assert _code(_plan(_b("", name="", behavior=""))) == "E_EMPTY_ID"
    assert _code(_plan(_b("a", name="", behavior=""))) == "E_EMPTY_NAME"


def test_validate_reports_first_violation_in_list_order():
    # Duplicate at index 1 comes before the empty name at index 2.
    plan = _plan(_b("a"), _b("a"), _b("c", name=""))
    assert _code(plan) == "E_DUPLICATE_ID"

    # Empty name at index 1 comes before the duplicate at index 2.
    plan = _plan(_b("a"), _b("b", name=""), _b("a"))
    assert _code(plan) == "E_EMPTY_NAME"


def test_validate_duplicate_with_empty_instructions_reports_empty_first():
    plan = _plan(_b("a"), _b("a", behavior=""))
    assert _code(plan) == "E_EMPTY_BEHAVIOR"


def test_validate_carries_file():
    with pytest.raises(PlanValidationError) as exc:
        validate_plan(_plan(), file="plan.yaml")
    assert str(exc.value) == "plan.yaml:behaviors: E_NO_BEHAVIORS: Plan must contain at least one behavior"


def test_summarize_plan():
    out = summarize_plan(_plan(_b("one"), _b("two")))
    assert out.startswith("OK: 2 behaviors")
    assert "Test Project (haskell)" in out
    assert "one, two" in out
