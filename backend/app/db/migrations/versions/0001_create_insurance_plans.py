"""create insurance_plans

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "insurance_plans",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("company_name", sa.String(255), nullable=False),
        sa.Column("plan_name", sa.String(255), nullable=False),
        sa.Column("inpatient_limit", sa.Integer(), nullable=False),
        sa.Column("outpatient_limit", sa.Integer(), nullable=True),
        sa.Column("age_minimum", sa.Integer(), nullable=False),
        sa.Column("age_maximum", sa.Integer(), nullable=False),
        sa.Column("allows_kids", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("maternity_included", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("maternity_limit", sa.Integer(), nullable=True),
        sa.Column("dental_included", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("dental_limit", sa.Integer(), nullable=True),
        sa.Column("optical_included", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("optical_limit", sa.Integer(), nullable=True),
        sa.Column("hospital_bed_per_night", sa.Integer(), nullable=True),
        sa.Column("pre_existing_conditions_inpatient_limit", sa.Integer(), nullable=True),
        sa.Column("personal_accident_cover_limit", sa.Integer(), nullable=True),
        sa.Column("critical_illness_cover_limit", sa.Integer(), nullable=True),
        sa.Column("last_expense_funeral_costs_limit", sa.Integer(), nullable=True),
        sa.Column("co_payment", sa.String(255), nullable=True),
        sa.Column("panel_of_hospitals_link", sa.Text(), nullable=True),
        sa.Column("insurance_plan_brochure_link", sa.Text(), nullable=True),
        sa.Column("pre_existing_conditions_waiting_period_years", sa.Integer(), nullable=True),
        sa.Column("maternity_waiting_period_months", sa.Integer(), nullable=True),
        sa.Column("illness_claims_waiting_period_months", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("surgical_claims_waiting_period_months", sa.Integer(), nullable=False, server_default="2"),
        sa.Column("organ_transplant_waiting_period_years", sa.Integer(), nullable=True),
        sa.Column("cancer_waiting_period_years", sa.Integer(), nullable=True),
        sa.Column("accidents_waiting_period", sa.String(100), nullable=False, server_default="No Waiting!"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_insurance_plans_company_name", "insurance_plans", ["company_name"])
    op.create_index("ix_insurance_plans_inpatient_limit", "insurance_plans", ["inpatient_limit"])


def downgrade() -> None:
    op.drop_index("ix_insurance_plans_inpatient_limit", table_name="insurance_plans")
    op.drop_index("ix_insurance_plans_company_name", table_name="insurance_plans")
    op.drop_table("insurance_plans")
