"""
FilterRequest: immutable snapshot of the list-query parameters.

Only recognized parameter names are kept.  Blank values are dropped so
that "supplied" always means "has a non-blank value".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping

RECOGNIZED_PARAMETERS: tuple[str, ...] = (
    "inpatientLimit",
    "companyName",
    "outpatientLimit",
    "principalAge",
    "spouseAge",
    "numberOfKids",
    "maternity",
    "dental",
    "optical",
)


@dataclass(frozen=True)
class FilterRequest:
    """Recognized query parameters and their raw string values."""

    values: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        cleaned = {
            name: str(self.values[name])
            for name in RECOGNIZED_PARAMETERS
            if name in self.values
            and self.values[name] is not None
            and str(self.values[name]).strip()
        }
        object.__setattr__(self, "values", MappingProxyType(cleaned))

    @classmethod
    def from_query(cls, params: Mapping[str, Any]) -> FilterRequest:
        """Build a request from a raw query mapping; unknown keys are ignored."""
        return cls({name: params.get(name) for name in RECOGNIZED_PARAMETERS})

    def get(self, name: str) -> str | None:
        return self.values.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilterRequest):
            return NotImplemented
        return dict(self.values) == dict(other.values)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.values.items())))

    def to_dict(self) -> dict[str, str]:
        return dict(self.values)
