"""
InsurancePlan model: one row per insurance plan on offer.

Add-on covers (maternity, dental, optical) are stored as flat
`<cover>_included` / `<cover>_limit` column pairs and exposed by the
API as the nested `additionalCovers` object.
"""

import uuid
from typing import Optional

from sqlalchemy import Boolean, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.core.constants import (
    DEFAULT_ACCIDENTS_WAITING_PERIOD,
    DEFAULT_ILLNESS_CLAIMS_WAITING_PERIOD_MONTHS,
    DEFAULT_SURGICAL_CLAIMS_WAITING_PERIOD_MONTHS,
)
from app.db.models.base import Base, TimestampMixin, generate_uuid


class InsurancePlan(TimestampMixin, Base):
    __tablename__ = "insurance_plans"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=generate_uuid
    )

    # ── Identity ─────────────────────────────
    company_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    plan_name: Mapped[str] = mapped_column(String(255), nullable=False)

    # ── Core limits / eligibility ────────────
    inpatient_limit: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    outpatient_limit: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    age_minimum: Mapped[int] = mapped_column(Integer, nullable=False)
    age_maximum: Mapped[int] = mapped_column(Integer, nullable=False)
    allows_kids: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # ── Additional covers ────────────────────
    maternity_included: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    maternity_limit: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    dental_included: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    dental_limit: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    optical_included: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    optical_limit: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # ── Benefit limits ───────────────────────
    hospital_bed_per_night: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    pre_existing_conditions_inpatient_limit: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    personal_accident_cover_limit: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    critical_illness_cover_limit: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    last_expense_funeral_costs_limit: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    co_payment: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # ── Links ────────────────────────────────
    panel_of_hospitals_link: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    insurance_plan_brochure_link: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ── Waiting periods ──────────────────────
    pre_existing_conditions_waiting_period_years: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    maternity_waiting_period_months: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    illness_claims_waiting_period_months: Mapped[int] = mapped_column(
        Integer, default=DEFAULT_ILLNESS_CLAIMS_WAITING_PERIOD_MONTHS, nullable=False
    )
    surgical_claims_waiting_period_months: Mapped[int] = mapped_column(
        Integer, default=DEFAULT_SURGICAL_CLAIMS_WAITING_PERIOD_MONTHS, nullable=False
    )
    organ_transplant_waiting_period_years: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    cancer_waiting_period_years: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    accidents_waiting_period: Mapped[str] = mapped_column(
        String(100), default=DEFAULT_ACCIDENTS_WAITING_PERIOD, nullable=False
    )

    def __repr__(self) -> str:
        return f"<InsurancePlan id={self.id} {self.company_name}/{self.plan_name} inpatient={self.inpatient_limit}>"
