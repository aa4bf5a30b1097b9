from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from plan_prompt.core.config import PLAN_FILE_NAME
from plan_prompt.core.errors import (
    PlanError,
    PlanLoadError,
    PlanParseError,
    PlanValidationError,
)
from plan_prompt.core.io.load_plan import (
    load_plan,
    load_plan_from_current_directory,
    load_plan_from_directory,
    plan_exists,
    plan_exists_in_current_directory,
)
from plan_prompt.core.model import Plan
from plan_prompt.core.render.render_prompt import render_prompt
from plan_prompt.core.sample.sample_plan import write_sample
from plan_prompt.core.validate.validate_plan import summarize_plan

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def _callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Plan prompt CLI."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command("exists")
def exists(
    directory: Optional[str] = typer.Argument(
        None, help=f"Directory to look in for {PLAN_FILE_NAME} (default: cwd)"
    ),
) -> None:
    """Report whether a plan file is present."""
    if directory is None:
        found = plan_exists_in_current_directory()
        where = "current directory"
    else:
        found = plan_exists(directory)
        where = directory

    if found:
        typer.echo(f"{PLAN_FILE_NAME} found in {where}")
        return
    typer.echo(f"no {PLAN_FILE_NAME} in {where}")
    raise typer.Exit(code=1)


@app.command("validate")
def validate(
    path: Optional[str] = typer.Argument(
        None, help=f"Plan file, or a directory holding {PLAN_FILE_NAME} (default: cwd)"
    ),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
) -> None:
    """Load a plan and check its structure."""
    if format not in ("text", "json"):
        err = PlanValidationError(
            code="E_VALIDATE_UNKNOWN_FORMAT",
            message=f"unknown format: {format} (choose one of: text, json)",
            file=None,
            path="format",
        )
        _print_errors([err])
        raise typer.Exit(code=2)

    def _emit_json(ok: bool, *, exit_code: int, errors: list[PlanError], summary: dict | None) -> None:
        payload = {
            "tool": "plan-prompt",
            "command": "validate",
            "ok": ok,
            "error_count": len(errors),
            "errors": [_to_item(e) for e in errors],
            "summary": summary,
        }
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        raise typer.Exit(code=exit_code)

    try:
        plan = _resolve_and_load(path)
    except PlanError as e:
        if format == "json":
            _emit_json(False, exit_code=_exit_code_for(e), errors=[e], summary=None)
        _print_errors([e])
        raise typer.Exit(code=_exit_code_for(e))

    if format == "text":
        typer.echo(summarize_plan(plan))
        return

    summary = {
        "title": plan.project.title,
        "language": plan.project.language,
        "behavior_count": len(plan.behaviors),
        "behavior_ids": [b.id for b in plan.behaviors],
    }
    _emit_json(True, exit_code=0, errors=[], summary=summary)


@app.command("prompt")
def prompt(
    path: Optional[str] = typer.Argument(
        None, help=f"Plan file, or a directory holding {PLAN_FILE_NAME} (default: cwd)"
    ),
) -> None:
    """Print the agent prompt rendered from a plan."""
    try:
        plan = _resolve_and_load(path)
    except PlanError as e:
        _print_errors([e])
        raise typer.Exit(code=_exit_code_for(e))

    typer.echo(render_prompt(plan))


@app.command("init")
def init(
    path: str = typer.Argument(
        PLAN_FILE_NAME, help=f"File to write, or a directory to write {PLAN_FILE_NAME} into"
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a sample plan to get started."""
    target = Path(path)
    if target.is_dir():
        target = target / PLAN_FILE_NAME
    if target.exists() and not force:
        _print_errors(
            [
                PlanError(
                    code="E_INIT_FILE_EXISTS",
                    message="refusing to overwrite existing file (use --force)",
                    file=str(target),
                    path="path",
                )
            ]
        )
        raise typer.Exit(code=2)

    try:
        write_sample(target)
    except PlanError as e:
        _print_errors([e])
        raise typer.Exit(code=1)

    typer.echo(f"OK: wrote sample plan to {target}")


def _resolve_and_load(path: Optional[str]) -> Plan:
    if path is None:
        return load_plan_from_current_directory()
    p = Path(path)
    if p.is_dir():
        return load_plan_from_directory(p)
    return load_plan(p)


def _exit_code_for(e: PlanError) -> int:
    # Content problems exit 2; missing or unreadable inputs exit 1.
    if isinstance(e, (PlanParseError, PlanValidationError)):
        return 2
    return 1


def _to_item(e: PlanError) -> dict:
    source = "load" if isinstance(e, PlanLoadError) else "validate"
    return {
        "code": e.code,
        "message": e.message,
        "file": e.file,
        "path": e.path,
        "severity": "error",
        "source": source,
    }


def _print_errors(errors: list[PlanError]) -> None:
    errors_sorted = sorted(errors, key=lambda e: (e.file or "", e.path or "", e.code))
    for e in errors_sorted:
        typer.echo(str(e), err=True)


def main() -> None:
    app(prog_name="plan-prompt")


cli = typer.main.get_command(app)

if __name__ == "__main__":
    main()
