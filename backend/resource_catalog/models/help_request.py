"""HelpRequest ORM - a team's request for help during a lab session.

Invariants:
    - solved is a plain flag; there is no workflow around it
"""

from datetime import datetime

from sqlalchemy import Boolean, String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from resource_catalog.db.base import Base, SurrogateKey


class HelpRequest(Base):
    """Help request raised by a student on behalf of a team."""
    __tablename__ = "help_requests"

    id: Mapped[int] = mapped_column(
        SurrogateKey, primary_key=True, autoincrement=True,
    )
    requester_email: Mapped[str] = mapped_column(String(255), nullable=False)
    team_name: Mapped[str] = mapped_column(String(100), nullable=False)
    request_text: Mapped[str] = mapped_column(Text, nullable=False)
    explanation: Mapped[str] = mapped_column(Text, nullable=False)
    solved: Mapped[bool] = mapped_column(Boolean, nullable=False)
    request_time: Mapped[datetime] = mapped_column(DateTime, nullable=False)
