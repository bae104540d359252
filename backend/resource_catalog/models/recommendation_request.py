"""RecommendationRequest ORM - a student's request for a letter of recommendation."""

from datetime import datetime

from sqlalchemy import Boolean, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from resource_catalog.db.base import Base, SurrogateKey


class RecommendationRequest(Base):
    __tablename__ = "recommendation_requests"

    id: Mapped[int] = mapped_column(
        SurrogateKey, primary_key=True, autoincrement=True,
    )
    requester_email: Mapped[str] = mapped_column(String(255), nullable=False)
    professor_email: Mapped[str] = mapped_column(String(255), nullable=False)
    date_requested: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    date_needed: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    done: Mapped[bool] = mapped_column(Boolean, nullable=False)
