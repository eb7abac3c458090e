"""
FilterPredicate: store-agnostic description of which plans match.

Three constraint shapes are supported:

    ExactMatch     record[field] == value
    BandContains   record[lower_field] <= value <= record[upper_field]
    BooleanEquals  record[field] is value   (field may be a dotted path)

The record store translates these into its own query language
(see app.repositories.insurance_plans.compile_predicate).  `matches()`
evaluates the predicate against a plain mapping in the API's camelCase
shape, which is handy for tests and for callers without a database.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

_MISSING = object()


def lookup(record: Mapping[str, Any], path: str) -> Any:
    """Resolve a dotted path like "additionalCovers.dental.included"."""
    current: Any = record
    for part in path.split("."):
        if not isinstance(current, Mapping) or part not in current:
            return _MISSING
        current = current[part]
    return current


@dataclass(frozen=True)
class ExactMatch:
    field: str
    value: Any

    def matches(self, record: Mapping[str, Any]) -> bool:
        return lookup(record, self.field) == self.value

    def to_dict(self) -> dict[str, Any]:
        return {"type": "exact", "field": self.field, "value": self.value}


@dataclass(frozen=True)
class BandContains:
    lower_field: str
    upper_field: str
    value: int

    def matches(self, record: Mapping[str, Any]) -> bool:
        lower = lookup(record, self.lower_field)
        upper = lookup(record, self.upper_field)
        if lower is _MISSING or upper is _MISSING or lower is None or upper is None:
            return False
        return lower <= self.value <= upper

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "band",
            "lowerField": self.lower_field,
            "upperField": self.upper_field,
            "value": self.value,
        }


@dataclass(frozen=True)
class BooleanEquals:
    field: str
    value: bool

    def matches(self, record: Mapping[str, Any]) -> bool:
        return lookup(record, self.field) is self.value

    def to_dict(self) -> dict[str, Any]:
        return {"type": "boolean", "field": self.field, "value": self.value}


Constraint = Union[ExactMatch, BandContains, BooleanEquals]


@dataclass(frozen=True)
class FilterPredicate:
    """Ordered, de-duplicated conjunction of constraints."""

    constraints: tuple[Constraint, ...] = ()

    def with_constraints(self, *extra: Constraint) -> FilterPredicate:
        """Return a new predicate with `extra` appended (duplicates skipped)."""
        merged = list(self.constraints)
        for constraint in extra:
            if constraint not in merged:
                merged.append(constraint)
        return FilterPredicate(tuple(merged))

    @property
    def is_empty(self) -> bool:
        return not self.constraints

    def matches(self, record: Mapping[str, Any]) -> bool:
        return all(c.matches(record) for c in self.constraints)

    def to_dict(self) -> dict[str, Any]:
        return {"constraints": [c.to_dict() for c in self.constraints]}

    def __len__(self) -> int:
        return len(self.constraints)
