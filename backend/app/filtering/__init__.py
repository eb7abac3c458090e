"""
Filtering package: list-query filter resolution for insurance plans.

    from app.filtering import FilterRequest, resolve_filters

    result = resolve_filters(FilterRequest.from_query(query_params))
    if isinstance(result, FilterErrors):
        ...  # report result.messages
"""

from app.filtering.errors import FilterErrors, FilterIssue, FilterValidationError
from app.filtering.predicate import (
    BandContains,
    BooleanEquals,
    Constraint,
    ExactMatch,
    FilterPredicate,
)
from app.filtering.request import RECOGNIZED_PARAMETERS, FilterRequest
from app.filtering.resolver import resolve_filters

__all__ = [
    "BandContains",
    "BooleanEquals",
    "Constraint",
    "ExactMatch",
    "FilterErrors",
    "FilterIssue",
    "FilterPredicate",
    "FilterRequest",
    "FilterValidationError",
    "RECOGNIZED_PARAMETERS",
    "resolve_filters",
]
