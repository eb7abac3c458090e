"""Insurance plan request/response schemas (camelCase on the wire)."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from app.core.constants import (
    DEFAULT_ACCIDENTS_WAITING_PERIOD,
    DEFAULT_ILLNESS_CLAIMS_WAITING_PERIOD_MONTHS,
    DEFAULT_SURGICAL_CLAIMS_WAITING_PERIOD_MONTHS,
    MAX_STORED_INTEGER,
    CoverType,
)
from app.db.models.insurance_plan import InsurancePlan


class CamelModel(BaseModel):
    """Accepts camelCase or snake_case input, serialises as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ─── Additional covers ────────────────────────────────────

class AdditionalCover(CamelModel):
    included: bool = False
    limit: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)


class AdditionalCovers(CamelModel):
    maternity: AdditionalCover = Field(default_factory=AdditionalCover)
    dental: AdditionalCover = Field(default_factory=AdditionalCover)
    optical: AdditionalCover = Field(default_factory=AdditionalCover)


class AdditionalCoverUpdate(CamelModel):
    included: bool | None = None
    limit: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)


class AdditionalCoversUpdate(CamelModel):
    maternity: AdditionalCoverUpdate | None = None
    dental: AdditionalCoverUpdate | None = None
    optical: AdditionalCoverUpdate | None = None


# ─── Shared benefit fields ────────────────────────────────

class PlanBenefits(CamelModel):
    """Optional benefit details shared by create and update payloads."""

    hospital_bed_per_night: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)
    pre_existing_conditions_inpatient_limit: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)
    personal_accident_cover_limit: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)
    critical_illness_cover_limit: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)
    last_expense_funeral_costs_limit: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)
    co_payment: str | None = Field(None, max_length=255)
    panel_of_hospitals_link: str | None = None
    insurance_plan_brochure_link: str | None = None
    pre_existing_conditions_waiting_period_years: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)
    maternity_waiting_period_months: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)
    organ_transplant_waiting_period_years: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)
    cancer_waiting_period_years: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)


def _check_age_band(age_minimum: int | None, age_maximum: int | None) -> None:
    if age_minimum is not None and age_maximum is not None and age_minimum > age_maximum:
        raise ValueError("ageMinimum must not exceed ageMaximum")


# ─── Requests ─────────────────────────────────────────────

class InsurancePlanCreate(PlanBenefits):
    """Request payload for creating a plan."""

    company_name: str = Field(..., min_length=1, max_length=255)
    plan_name: str = Field(..., min_length=1, max_length=255)
    inpatient_limit: int = Field(..., ge=0, le=MAX_STORED_INTEGER)
    outpatient_limit: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)
    age_minimum: int = Field(..., ge=0, le=MAX_STORED_INTEGER)
    age_maximum: int = Field(..., ge=0, le=MAX_STORED_INTEGER)
    allows_kids: bool = True
    additional_covers: AdditionalCovers = Field(default_factory=AdditionalCovers)
    illness_claims_waiting_period_months: int = Field(
        DEFAULT_ILLNESS_CLAIMS_WAITING_PERIOD_MONTHS, ge=0, le=MAX_STORED_INTEGER
    )
    surgical_claims_waiting_period_months: int = Field(
        DEFAULT_SURGICAL_CLAIMS_WAITING_PERIOD_MONTHS, ge=0, le=MAX_STORED_INTEGER
    )
    accidents_waiting_period: str = Field(DEFAULT_ACCIDENTS_WAITING_PERIOD, max_length=100)

    @model_validator(mode="after")
    def _validate_age_band(self) -> InsurancePlanCreate:
        _check_age_band(self.age_minimum, self.age_maximum)
        return self

    def to_columns(self) -> dict[str, Any]:
        """Flatten into InsurancePlan column values."""
        columns = self.model_dump(exclude={"additional_covers"})
        for cover in CoverType:
            detail: AdditionalCover = getattr(self.additional_covers, cover.value)
            columns[f"{cover.value}_included"] = detail.included
            columns[f"{cover.value}_limit"] = detail.limit
        return columns


class InsurancePlanUpdate(PlanBenefits):
    """Partial update; null or omitted fields are left untouched."""

    company_name: str | None = Field(None, min_length=1, max_length=255)
    plan_name: str | None = Field(None, min_length=1, max_length=255)
    inpatient_limit: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)
    outpatient_limit: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)
    age_minimum: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)
    age_maximum: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)
    allows_kids: bool | None = None
    additional_covers: AdditionalCoversUpdate | None = None
    illness_claims_waiting_period_months: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)
    surgical_claims_waiting_period_months: int | None = Field(None, ge=0, le=MAX_STORED_INTEGER)
    accidents_waiting_period: str | None = Field(None, max_length=100)

    @model_validator(mode="after")
    def _validate_age_band(self) -> InsurancePlanUpdate:
        _check_age_band(self.age_minimum, self.age_maximum)
        return self

    def to_columns(self) -> dict[str, Any]:
        """Column values for the supplied fields only."""
        columns = self.model_dump(exclude={"additional_covers"}, exclude_none=True)
        if self.additional_covers is not None:
            for cover in CoverType:
                detail: AdditionalCoverUpdate | None = getattr(self.additional_covers, cover.value)
                if detail is None:
                    continue
                if detail.included is not None:
                    columns[f"{cover.value}_included"] = detail.included
                if detail.limit is not None:
                    columns[f"{cover.value}_limit"] = detail.limit
        return columns


# ─── Responses ────────────────────────────────────────────

class InsurancePlanResponse(PlanBenefits):
    """An insurance plan as returned by the API."""

    id: UUID
    company_name: str
    plan_name: str
    inpatient_limit: int
    outpatient_limit: int | None
    age_minimum: int
    age_maximum: int
    allows_kids: bool
    additional_covers: AdditionalCovers
    illness_claims_waiting_period_months: int
    surgical_claims_waiting_period_months: int
    accidents_waiting_period: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, plan: InsurancePlan) -> InsurancePlanResponse:
        data = {column.key: getattr(plan, column.key) for column in plan.__table__.columns}
        data["additional_covers"] = {
            cover.value: {
                "included": data.pop(f"{cover.value}_included"),
                "limit": data.pop(f"{cover.value}_limit"),
            }
            for cover in CoverType
        }
        return cls.model_validate(data)


class BulkUpdateResponse(BaseModel):
    matched: int


class BulkDeleteResponse(BaseModel):
    deleted: int


class MessageResponse(BaseModel):
    message: str
