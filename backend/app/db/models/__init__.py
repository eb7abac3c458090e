"""
Models package: re-exports Base and every model so that
`Base.metadata` (used by Alembic and the test fixtures) sees all tables.
"""

from app.db.models.base import Base
from app.db.models.insurance_plan import InsurancePlan

__all__ = [
    "Base",
    "InsurancePlan",
]
