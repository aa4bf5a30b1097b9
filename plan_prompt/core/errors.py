from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PlanError(Exception):
    """Raised by the loader, validator and writer; the CLI prints ``str(e)``.

    ``code`` is a stable identifier (``E_DUPLICATE_ID``), ``file`` the plan
    file involved and ``path`` the dotted location inside it
    (``behaviors[1].id``). Either may be unknown.
    """

    code: str
    message: str
    file: Optional[str] = None
    path: Optional[str] = None

    def __str__(self) -> str:
        loc = ":".join(part for part in (self.file, self.path) if part) or "<plan>"
        return f"{loc}: {self.code}: {self.message}"


class PlanLoadError(PlanError):
    """Any failure getting from a path to a parsed plan."""


class PlanNotFoundError(PlanLoadError):
    pass


class PlanReadError(PlanLoadError):
    pass


class PlanParseError(PlanLoadError):
    """Bad YAML, or a document that does not have the plan's shape."""


class PlanEnvironmentError(PlanLoadError):
    """The working directory could not be resolved."""


class PlanValidationError(PlanError):
    """A parsed plan breaks a structural rule. Only the first violation is reported."""


class PlanSerializeError(PlanError):
    pass


class PlanWriteError(PlanError):
    pass
