"""Logical plan field paths referenced by filter constraints."""

from app.core.constants import CoverType

COMPANY_NAME = "companyName"
INPATIENT_LIMIT = "inpatientLimit"
OUTPATIENT_LIMIT = "outpatientLimit"
AGE_MINIMUM = "ageMinimum"
AGE_MAXIMUM = "ageMaximum"
ALLOWS_KIDS = "allowsKids"


def cover_included(cover: CoverType) -> str:
    """Path of the inclusion flag for an add-on cover."""
    return f"additionalCovers.{cover.value}.included"


MATERNITY_INCLUDED = cover_included(CoverType.MATERNITY)
DENTAL_INCLUDED = cover_included(CoverType.DENTAL)
OPTICAL_INCLUDED = cover_included(CoverType.OPTICAL)
