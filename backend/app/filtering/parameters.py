"""
Declarative table of list-query filter parameters.

Each entry says how the raw string is read, which other parameters must
be supplied alongside it, and which constraints it contributes once all
checks pass.  The resolver walks FILTER_PARAMETERS in order; adding a
new filter means adding a row here, not a new branch in the resolver.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

from app.core.constants import (
    COVER_REQUESTED,
    MAX_KIDS,
    MAX_STORED_INTEGER,
    MIN_KIDS,
    NO_OUTPATIENT_COVER,
    FilterIssueKind,
    ParameterKind,
)
from app.filtering import fields
from app.filtering.errors import FilterIssue
from app.filtering.predicate import BandContains, BooleanEquals, Constraint, ExactMatch
from app.filtering.request import FilterRequest

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


def _no_constraints(value: Any) -> tuple[Constraint, ...]:
    return ()


@dataclass(frozen=True)
class FilterParameter:
    """One recognized filter parameter and its rules."""

    name: str
    label: str
    kind: ParameterKind
    requires: tuple[str, ...] = ()
    sentinel: str | None = None
    activates_on: str | None = None
    minimum: int | None = None
    maximum: int | None = None
    build: Callable[[Any], tuple[Constraint, ...]] = _no_constraints

    # ─── Presence ──────────────────────────────────────

    def is_supplied(self, request: FilterRequest) -> bool:
        """True when the request carries a usable value (sentinel excluded)."""
        raw = request.get(self.name)
        if raw is None:
            return False
        if self.sentinel is not None and raw.strip().lower() == self.sentinel:
            return False
        return True

    def is_active(self, request: FilterRequest) -> bool:
        """True when this parameter asks for a constraint to be applied."""
        if not self.is_supplied(request):
            return False
        if self.activates_on is None:
            return True
        return request.get(self.name).strip().lower() == self.activates_on

    # ─── Parsing ───────────────────────────────────────

    def parse(self, raw: str) -> tuple[Any, FilterIssue | None]:
        """Convert the raw string.  Returns (value, issue)."""
        if self.kind == ParameterKind.INTEGER:
            return self._parse_integer(raw)
        if self.kind == ParameterKind.BOOLEAN_STRING:
            return raw.strip() == "true", None
        if self.kind == ParameterKind.CHOICE:
            return raw.strip().lower(), None
        return raw.strip(), None

    def _parse_integer(self, raw: str) -> tuple[int | None, FilterIssue | None]:
        text = raw.strip()
        if not _INTEGER_RE.match(text):
            return None, FilterIssue(
                kind=FilterIssueKind.UNPARSEABLE,
                parameter=self.name,
                message=f"{self.label.capitalize()} must be a whole number.",
            )
        value = int(text)
        if value > MAX_STORED_INTEGER:
            return None, FilterIssue(
                kind=FilterIssueKind.OUT_OF_RANGE,
                parameter=self.name,
                message=f"{self.label.capitalize()} must be at most {MAX_STORED_INTEGER}.",
            )
        too_low = self.minimum is not None and value < self.minimum
        too_high = self.maximum is not None and value > self.maximum
        if too_low or too_high:
            return None, FilterIssue(
                kind=FilterIssueKind.OUT_OF_RANGE,
                parameter=self.name,
                message=self._range_message(),
            )
        return value, None

    def _range_message(self) -> str:
        subject = self.label.capitalize()
        if self.minimum is not None and self.maximum is not None:
            return f"{subject} must be between {self.minimum} and {self.maximum}."
        if self.minimum == 0:
            return f"{subject} must not be negative."
        if self.minimum is not None:
            return f"{subject} must be at least {self.minimum}."
        return f"{subject} must be at most {self.maximum}."

    # ─── Dependencies ──────────────────────────────────

    def dependency_issue(self, missing: tuple[str, ...]) -> FilterIssue:
        requirement = _describe_requirements(self.requires)
        return FilterIssue(
            kind=FilterIssueKind.MISSING_DEPENDENCY,
            parameter=self.name,
            message=f"Filtering by {self.label} requires specifying {requirement}.",
            missing=missing,
        )


def _with_article(label: str) -> str:
    article = "an" if label[0] in "aeiou" else "a"
    return f"{article} {label}"


def _describe_requirements(names: tuple[str, ...]) -> str:
    labels = [_with_article(PARAMETERS_BY_NAME[name].label) for name in names]
    if len(labels) == 1:
        return labels[0]
    if len(labels) == 2:
        return f"both {labels[0]} and {labels[1]}"
    return ", ".join(labels[:-1]) + f" and {labels[-1]}"


def _age_band(age: int) -> tuple[Constraint, ...]:
    return (BandContains(fields.AGE_MINIMUM, fields.AGE_MAXIMUM, age),)


FILTER_PARAMETERS: tuple[FilterParameter, ...] = (
    FilterParameter(
        name="inpatientLimit",
        label="inpatient limit",
        kind=ParameterKind.INTEGER,
        minimum=0,
        build=lambda v: (ExactMatch(fields.INPATIENT_LIMIT, v),),
    ),
    FilterParameter(
        name="companyName",
        label="company name",
        kind=ParameterKind.TEXT,
        requires=("inpatientLimit",),
        build=lambda v: (ExactMatch(fields.COMPANY_NAME, v),),
    ),
    FilterParameter(
        name="outpatientLimit",
        label="outpatient limit",
        kind=ParameterKind.INTEGER,
        requires=("inpatientLimit",),
        sentinel=NO_OUTPATIENT_COVER,
        minimum=0,
        build=lambda v: (ExactMatch(fields.OUTPATIENT_LIMIT, v),),
    ),
    FilterParameter(
        name="principalAge",
        label="principal age",
        kind=ParameterKind.INTEGER,
        requires=("inpatientLimit",),
        minimum=0,
        build=_age_band,
    ),
    FilterParameter(
        name="spouseAge",
        label="spouse age",
        kind=ParameterKind.INTEGER,
        requires=("inpatientLimit", "principalAge"),
        minimum=0,
        build=_age_band,
    ),
    FilterParameter(
        name="numberOfKids",
        label="number of kids",
        kind=ParameterKind.INTEGER,
        requires=("inpatientLimit", "principalAge"),
        minimum=MIN_KIDS,
        maximum=MAX_KIDS,
        build=lambda v: (BooleanEquals(fields.ALLOWS_KIDS, True),),
    ),
    FilterParameter(
        name="maternity",
        label="maternity cover",
        kind=ParameterKind.BOOLEAN_STRING,
        requires=("inpatientLimit", "principalAge"),
        build=lambda v: (BooleanEquals(fields.MATERNITY_INCLUDED, v),),
    ),
    FilterParameter(
        name="dental",
        label="dental cover",
        kind=ParameterKind.CHOICE,
        requires=("outpatientLimit",),
        activates_on=COVER_REQUESTED,
        # dental implies optical
        build=lambda v: (
            BooleanEquals(fields.DENTAL_INCLUDED, True),
            BooleanEquals(fields.OPTICAL_INCLUDED, True),
        ),
    ),
    FilterParameter(
        name="optical",
        label="optical cover",
        kind=ParameterKind.CHOICE,
        requires=("outpatientLimit",),
        activates_on=COVER_REQUESTED,
        build=lambda v: (BooleanEquals(fields.OPTICAL_INCLUDED, True),),
    ),
)

PARAMETERS_BY_NAME: dict[str, FilterParameter] = {p.name: p for p in FILTER_PARAMETERS}
