"""API schema package."""

from app.api.schemas.insurance_plans import (
    AdditionalCover,
    AdditionalCovers,
    BulkDeleteResponse,
    BulkUpdateResponse,
    InsurancePlanCreate,
    InsurancePlanResponse,
    InsurancePlanUpdate,
    MessageResponse,
)

__all__ = [
    "AdditionalCover",
    "AdditionalCovers",
    "BulkDeleteResponse",
    "BulkUpdateResponse",
    "InsurancePlanCreate",
    "InsurancePlanResponse",
    "InsurancePlanUpdate",
    "MessageResponse",
]
