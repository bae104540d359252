"""Articles ORM - links shared with the course, one row per article.

Invariants:
    - id is a store-generated surrogate key
    - date_added is a naive local date-time
"""

from datetime import datetime

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from resource_catalog.db.base import Base, SurrogateKey


class Articles(Base):
    """An article recommended by a student."""
    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(
        SurrogateKey, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(String(2000), nullable=False)
    explanation: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    date_added: Mapped[datetime] = mapped_column(DateTime, nullable=False)
