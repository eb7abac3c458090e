"""
Seed sample insurance plans for development.
Run: python -m scripts.seed_plans  (from backend/)
"""

import asyncio

from app.core.logging import get_logger, setup_logging
from app.db.session import async_session
from app.repositories.insurance_plans import create_plan

logger = get_logger("scripts.seed_plans")

SEED_PLANS = [
    {
        "company_name": "Jubilee Health",
        "plan_name": "Family Plus",
        "inpatient_limit": 500000,
        "outpatient_limit": 20000,
        "age_minimum": 18,
        "age_maximum": 65,
        "allows_kids": True,
        "maternity_included": True,
        "maternity_limit": 100000,
        "dental_included": True,
        "dental_limit": 15000,
        "optical_included": True,
        "optical_limit": 15000,
        "hospital_bed_per_night": 6000,
        "co_payment": "10% on outpatient",
    },
    {
        "company_name": "Jubilee Health",
        "plan_name": "Individual Core",
        "inpatient_limit": 500000,
        "age_minimum": 18,
        "age_maximum": 55,
        "allows_kids": False,
    },
    {
        "company_name": "Madison Insurance",
        "plan_name": "Senior Care",
        "inpatient_limit": 1000000,
        "outpatient_limit": 50000,
        "age_minimum": 50,
        "age_maximum": 80,
        "allows_kids": False,
        "optical_included": True,
        "optical_limit": 10000,
        "pre_existing_conditions_waiting_period_years": 1,
    },
]


async def seed():
    """Insert seed plans."""
    async with async_session() as session:
        for data in SEED_PLANS:
            plan = await create_plan(session, **data)
            logger.info("Seeded plan", company=plan.company_name, plan=plan.plan_name)
        await session.commit()
    logger.info("Seeding complete", count=len(SEED_PLANS))


if __name__ == "__main__":
    setup_logging("INFO")
    asyncio.run(seed())
