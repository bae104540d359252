"""UCSBOrganization ORM - student organizations keyed by their short code.

Invariants:
    - org_code is a natural key supplied by the caller (e.g. "ZPR")
    - Uniqueness of org_code is enforced by the primary key constraint only
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from resource_catalog.db.base import Base


class UCSBOrganization(Base):
    """Student organization."""
    __tablename__ = "ucsb_organizations"

    org_code: Mapped[str] = mapped_column(String(50), primary_key=True)
    org_translation_short: Mapped[str] = mapped_column(String(255), nullable=False)
    org_translation: Mapped[str] = mapped_column(String(500), nullable=False)
    inactive: Mapped[bool] = mapped_column(Boolean, nullable=False)
