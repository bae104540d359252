"""UCSBDiningCommonsMenuItem ORM - an item served at a dining commons station."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from resource_catalog.db.base import Base, SurrogateKey


class UCSBDiningCommonsMenuItem(Base):
    __tablename__ = "ucsb_dining_commons_menu_items"

    id: Mapped[int] = mapped_column(
        SurrogateKey, primary_key=True, autoincrement=True,
    )
    dining_commons_code: Mapped[str] = mapped_column(String(50), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    station: Mapped[str] = mapped_column(String(255), nullable=False)
