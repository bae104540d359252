"""MenuItemReview ORM - a star rating left for a dining commons menu item.

Invariants:
    - item_id is a plain integer, not a foreign key (resources are independent)
"""

from datetime import datetime

from sqlalchemy import BigInteger, Integer, String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from resource_catalog.db.base import Base, SurrogateKey


class MenuItemReview(Base):
    """Review of a menu item."""
    __tablename__ = "menu_item_reviews"

    id: Mapped[int] = mapped_column(
        SurrogateKey, primary_key=True, autoincrement=True,
    )
    item_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    reviewer_email: Mapped[str] = mapped_column(String(255), nullable=False)
    stars: Mapped[int] = mapped_column(Integer, nullable=False)
    date_reviewed: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    comments: Mapped[str] = mapped_column(Text, nullable=False)
