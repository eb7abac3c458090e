"""Insurance plan CRUD endpoints, including the filtered listing."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, get_filter_predicate
from app.api.schemas.insurance_plans import (
    BulkDeleteResponse,
    BulkUpdateResponse,
    InsurancePlanCreate,
    InsurancePlanResponse,
    InsurancePlanUpdate,
    MessageResponse,
)
from app.core.logging import get_logger
from app.filtering import FilterPredicate
from app.repositories import insurance_plans as plan_repository

logger = get_logger(__name__)

router = APIRouter(prefix="/insurance-plans", tags=["Insurance Plans"])


async def _get_plan_or_404(db: AsyncSession, plan_id: UUID):
    plan = await plan_repository.get_plan_by_id(db, plan_id)
    if plan is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cannot find plan")
    return plan


def _require_filters(predicate: FilterPredicate) -> None:
    if predicate.is_empty:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Bulk operations require at least one filter.",
        )


# ─── Collection ───────────────────────────────────────────
@router.get("/", response_model=list[InsurancePlanResponse])
async def list_insurance_plans(
    predicate: FilterPredicate = Depends(get_filter_predicate),
    db: AsyncSession = Depends(get_db),
) -> list[InsurancePlanResponse]:
    """List plans, optionally narrowed by the dependent query filters."""
    try:
        plans = await plan_repository.find_plans(db, predicate)
    except SQLAlchemyError:
        logger.exception("Failed to fetch insurance plans", filters=predicate.to_dict())
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while fetching plans.",
        ) from None

    if not plans:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No plans found matching the specified criteria.",
        )

    logger.info("Insurance plans listed", matched=len(plans), constraints=len(predicate))
    return [InsurancePlanResponse.from_model(plan) for plan in plans]


@router.post("/", response_model=InsurancePlanResponse, status_code=status.HTTP_201_CREATED)
async def create_insurance_plan(
    payload: InsurancePlanCreate,
    db: AsyncSession = Depends(get_db),
) -> InsurancePlanResponse:
    """Create a new insurance plan."""
    try:
        plan = await plan_repository.create_plan(db, **payload.to_columns())
    except IntegrityError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc.orig)) from None
    return InsurancePlanResponse.from_model(plan)


@router.patch("/", response_model=BulkUpdateResponse)
async def update_insurance_plans(
    payload: InsurancePlanUpdate,
    predicate: FilterPredicate = Depends(get_filter_predicate),
    db: AsyncSession = Depends(get_db),
) -> BulkUpdateResponse:
    """Apply one partial update to every plan matching the query filters."""
    _require_filters(predicate)
    changes = payload.to_columns()
    if not changes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Bulk update requires at least one field to change.",
        )
    matched = await plan_repository.update_plans(db, predicate, **changes)
    return BulkUpdateResponse(matched=matched)


@router.delete("/", response_model=BulkDeleteResponse)
async def delete_insurance_plans(
    predicate: FilterPredicate = Depends(get_filter_predicate),
    db: AsyncSession = Depends(get_db),
) -> BulkDeleteResponse:
    """Delete every plan matching the query filters."""
    _require_filters(predicate)
    deleted = await plan_repository.delete_plans(db, predicate)
    return BulkDeleteResponse(deleted=deleted)


# ─── Single plan ──────────────────────────────────────────
@router.get("/{plan_id}", response_model=InsurancePlanResponse)
async def get_insurance_plan(plan_id: UUID, db: AsyncSession = Depends(get_db)) -> InsurancePlanResponse:
    """Get one plan by id."""
    plan = await _get_plan_or_404(db, plan_id)
    return InsurancePlanResponse.from_model(plan)


@router.patch("/{plan_id}", response_model=InsurancePlanResponse)
async def update_insurance_plan(
    plan_id: UUID,
    payload: InsurancePlanUpdate,
    db: AsyncSession = Depends(get_db),
) -> InsurancePlanResponse:
    """Partially update a plan; covers keep their limit unless one is sent."""
    plan = await _get_plan_or_404(db, plan_id)

    changes = payload.to_columns()
    age_minimum = changes.get("age_minimum", plan.age_minimum)
    age_maximum = changes.get("age_maximum", plan.age_maximum)
    if age_minimum > age_maximum:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="ageMinimum must not exceed ageMaximum",
        )

    plan = await plan_repository.update_plan(db, plan_id, **changes)
    return InsurancePlanResponse.from_model(plan)


@router.delete("/{plan_id}", response_model=MessageResponse)
async def delete_insurance_plan(plan_id: UUID, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    """Delete a plan by id."""
    await _get_plan_or_404(db, plan_id)
    await plan_repository.delete_plan(db, plan_id)
    return MessageResponse(message="Deleted Insurance Plan")
