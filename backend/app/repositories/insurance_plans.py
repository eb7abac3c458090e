"""
Insurance plan repository containing all data-access operations for the
insurance_plans table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit

Filtering goes through a store-agnostic FilterPredicate; this module is
the only place that knows how its logical field paths map to columns.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import ColumnElement, and_, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.db.models.insurance_plan import InsurancePlan
from app.filtering import fields
from app.filtering.predicate import (
    BandContains,
    BooleanEquals,
    Constraint,
    ExactMatch,
    FilterPredicate,
)

logger = get_logger(__name__)

FIELD_COLUMNS = {
    fields.COMPANY_NAME: InsurancePlan.company_name,
    fields.INPATIENT_LIMIT: InsurancePlan.inpatient_limit,
    fields.OUTPATIENT_LIMIT: InsurancePlan.outpatient_limit,
    fields.AGE_MINIMUM: InsurancePlan.age_minimum,
    fields.AGE_MAXIMUM: InsurancePlan.age_maximum,
    fields.ALLOWS_KIDS: InsurancePlan.allows_kids,
    fields.MATERNITY_INCLUDED: InsurancePlan.maternity_included,
    fields.DENTAL_INCLUDED: InsurancePlan.dental_included,
    fields.OPTICAL_INCLUDED: InsurancePlan.optical_included,
}

# Everything except identity and audit columns
UPDATABLE_FIELDS = frozenset(
    column.key
    for column in InsurancePlan.__table__.columns
    if column.key not in {"id", "created_at", "updated_at"}
)


def _column(path: str):
    try:
        return FIELD_COLUMNS[path]
    except KeyError:
        raise KeyError(f"No column mapped for filter field '{path}'") from None


def _compile_constraint(constraint: Constraint) -> ColumnElement[bool]:
    if isinstance(constraint, ExactMatch):
        return _column(constraint.field) == constraint.value
    if isinstance(constraint, BandContains):
        return and_(
            _column(constraint.lower_field) <= constraint.value,
            _column(constraint.upper_field) >= constraint.value,
        )
    if isinstance(constraint, BooleanEquals):
        return _column(constraint.field).is_(constraint.value)
    raise TypeError(f"Unsupported constraint: {constraint!r}")


def compile_predicate(predicate: FilterPredicate) -> list[ColumnElement[bool]]:
    """Translate a FilterPredicate into SQLAlchemy WHERE clauses."""
    return [_compile_constraint(c) for c in predicate.constraints]


def _filtered(stmt, predicate: FilterPredicate):
    clauses = compile_predicate(predicate)
    return stmt.where(*clauses) if clauses else stmt


def _writable(fields_: dict[str, Any]) -> dict[str, Any]:
    return {
        key: value
        for key, value in fields_.items()
        if key in UPDATABLE_FIELDS and value is not None
    }


def _keeps_age_band(changes: dict[str, Any]) -> list[ColumnElement[bool]]:
    """Row conditions under which a one-sided age change leaves min <= max."""
    if "age_minimum" in changes and "age_maximum" not in changes:
        return [InsurancePlan.age_maximum >= changes["age_minimum"]]
    if "age_maximum" in changes and "age_minimum" not in changes:
        return [InsurancePlan.age_minimum <= changes["age_maximum"]]
    return []


async def create_plan(db: AsyncSession, **fields_: Any) -> InsurancePlan:
    """Insert a new plan and return it with its generated id."""
    plan = InsurancePlan(**_writable(fields_))
    db.add(plan)
    await db.flush()
    await db.refresh(plan)
    logger.info("Insurance plan created", plan_id=str(plan.id), company=plan.company_name)
    return plan


async def get_plan_by_id(db: AsyncSession, plan_id: uuid.UUID) -> InsurancePlan | None:
    """Fetch a plan by primary key."""
    return await db.get(InsurancePlan, plan_id)


async def find_plans(db: AsyncSession, predicate: FilterPredicate) -> list[InsurancePlan]:
    """Return every plan matching the predicate (all plans when it is empty)."""
    stmt = _filtered(select(InsurancePlan), predicate).order_by(
        InsurancePlan.company_name, InsurancePlan.plan_name
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def update_plan(
    db: AsyncSession,
    plan_id: uuid.UUID,
    **fields_: Any,
) -> InsurancePlan | None:
    """Update non-null, whitelisted fields and return the updated plan."""
    plan = await get_plan_by_id(db, plan_id)
    if plan is None:
        return None

    changes = _writable(fields_)
    for key, value in changes.items():
        setattr(plan, key, value)

    await db.flush()
    await db.refresh(plan)
    logger.info("Insurance plan updated", plan_id=str(plan_id), fields=sorted(changes))
    return plan


async def update_plans(
    db: AsyncSession,
    predicate: FilterPredicate,
    **fields_: Any,
) -> int:
    """Apply the same field changes to every matching plan. Returns the row count.

    A change to only one age bound skips rows whose band it would invert.
    """
    changes = _writable(fields_)
    if not changes:
        return 0
    stmt = (
        _filtered(update(InsurancePlan), predicate)
        .where(*_keeps_age_band(changes))
        .values(**changes)
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(stmt)
    await db.flush()
    logger.info("Insurance plans bulk-updated", matched=result.rowcount, fields=sorted(changes))
    return result.rowcount


async def delete_plan(db: AsyncSession, plan_id: uuid.UUID) -> bool:
    """Hard-delete a plan. Returns True if a row was deleted."""
    plan = await get_plan_by_id(db, plan_id)
    if plan is None:
        return False
    await db.delete(plan)
    await db.flush()
    logger.info("Insurance plan deleted", plan_id=str(plan_id))
    return True


async def delete_plans(db: AsyncSession, predicate: FilterPredicate) -> int:
    """Delete every matching plan. Returns the row count."""
    stmt = (
        _filtered(delete(InsurancePlan), predicate)
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(stmt)
    await db.flush()
    logger.info("Insurance plans bulk-deleted", deleted=result.rowcount)
    return result.rowcount
