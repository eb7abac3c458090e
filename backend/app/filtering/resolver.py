"""
Filter resolver: turns list-query parameters into a FilterPredicate.

Every active parameter is checked (prerequisites, then parsing) and all
issues are collected before deciding the outcome.  Either the complete
predicate or the complete list of issues is returned; a caller never
receives a predicate with a silently dropped parameter.

Resolution is a pure function of the request: no I/O, no shared state.
"""

from __future__ import annotations

from typing import Any, Mapping

from app.filtering.errors import FilterErrors, FilterIssue
from app.filtering.parameters import FILTER_PARAMETERS, PARAMETERS_BY_NAME
from app.filtering.predicate import FilterPredicate
from app.filtering.request import FilterRequest


def resolve_filters(request: FilterRequest | Mapping[str, Any]) -> FilterPredicate | FilterErrors:
    """Resolve a request into a predicate, or the issues that prevent it."""
    if not isinstance(request, FilterRequest):
        request = FilterRequest.from_query(request)

    issues: list[FilterIssue] = []
    predicate = FilterPredicate()

    for param in FILTER_PARAMETERS:
        if not param.is_active(request):
            continue

        missing = tuple(
            name for name in param.requires
            if not PARAMETERS_BY_NAME[name].is_supplied(request)
        )
        if missing:
            issues.append(param.dependency_issue(missing))

        value, parse_issue = param.parse(request.get(param.name))
        if parse_issue is not None:
            issues.append(parse_issue)

        if missing or parse_issue is not None:
            continue
        predicate = predicate.with_constraints(*param.build(value))

    if issues:
        distinct: list[FilterIssue] = []
        for issue in issues:
            if issue not in distinct:
                distinct.append(issue)
        return FilterErrors(tuple(distinct))
    return predicate
