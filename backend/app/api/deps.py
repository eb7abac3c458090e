"""Shared dependencies for API routes."""

from __future__ import annotations

from fastapi import Depends, Query

from app.core.logging import get_logger
from app.db.session import get_db  # noqa: F401
from app.filtering import (
    FilterErrors,
    FilterPredicate,
    FilterRequest,
    FilterValidationError,
    resolve_filters,
)

logger = get_logger(__name__)


def get_filter_request(
    inpatient_limit: str | None = Query(None, alias="inpatientLimit", description="Exact inpatient limit"),
    company_name: str | None = Query(None, alias="companyName", description="Requires inpatientLimit"),
    outpatient_limit: str | None = Query(
        None, alias="outpatientLimit", description='Requires inpatientLimit; "none" means no outpatient cover'
    ),
    principal_age: str | None = Query(None, alias="principalAge", description="Requires inpatientLimit"),
    spouse_age: str | None = Query(None, alias="spouseAge", description="Requires inpatientLimit and principalAge"),
    number_of_kids: str | None = Query(
        None, alias="numberOfKids", description="1-5; requires inpatientLimit and principalAge"
    ),
    maternity: str | None = Query(None, description='"true"/"false"; requires inpatientLimit and principalAge'),
    dental: str | None = Query(None, description='"yes" to require dental (and optical); requires outpatientLimit'),
    optical: str | None = Query(None, description='"yes" to require optical; requires outpatientLimit'),
) -> FilterRequest:
    """Collect the raw list-query filter parameters."""
    return FilterRequest(
        {
            "inpatientLimit": inpatient_limit,
            "companyName": company_name,
            "outpatientLimit": outpatient_limit,
            "principalAge": principal_age,
            "spouseAge": spouse_age,
            "numberOfKids": number_of_kids,
            "maternity": maternity,
            "dental": dental,
            "optical": optical,
        }
    )


def get_filter_predicate(
    filter_request: FilterRequest = Depends(get_filter_request),
) -> FilterPredicate:
    """Resolve the query filters or raise FilterValidationError (mapped to 400)."""
    result = resolve_filters(filter_request)
    if isinstance(result, FilterErrors):
        logger.info(
            "Rejected plan filters",
            params=filter_request.to_dict(),
            issues=[issue.kind.value for issue in result.issues],
        )
        raise FilterValidationError(result)
    return result
