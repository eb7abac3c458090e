"""
Filter validation issues and the exception the API layer raises for them.

The resolver itself never raises: it returns `FilterErrors` as data.
`FilterValidationError` exists so HTTP handlers can hand the issues to
the application-level exception handler (mapped to a 400 response).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from app.core.constants import FilterIssueKind


@dataclass(frozen=True)
class FilterIssue:
    """One rejected filter parameter."""

    kind: FilterIssueKind
    parameter: str
    message: str
    missing: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "kind": self.kind.value,
            "parameter": self.parameter,
            "message": self.message,
        }
        if self.missing:
            data["missing"] = list(self.missing)
        return data


@dataclass(frozen=True)
class FilterErrors:
    """Ordered, distinct issues collected across every filter parameter."""

    issues: tuple[FilterIssue, ...] = field(default_factory=tuple)

    @property
    def messages(self) -> list[str]:
        return [issue.message for issue in self.issues]

    def joined(self, separator: str = " ") -> str:
        return separator.join(self.messages)

    def of_kind(self, kind: FilterIssueKind) -> list[FilterIssue]:
        return [issue for issue in self.issues if issue.kind == kind]

    def __bool__(self) -> bool:
        return bool(self.issues)

    def __len__(self) -> int:
        return len(self.issues)


class FilterValidationError(Exception):
    """Raised by the API layer when a list query carries invalid filters."""

    def __init__(self, errors: FilterErrors, *, details: dict | None = None) -> None:
        self.errors = errors
        self.details = details or {}
        super().__init__(errors.joined())
