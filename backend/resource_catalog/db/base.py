"""SQLAlchemy Declarative Base - shared base class for all resource tables.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata (alembic + tests)
"""

from sqlalchemy import BigInteger, Integer
from sqlalchemy.orm import DeclarativeBase

# SQLite only autoincrements an INTEGER PRIMARY KEY
SurrogateKey = BigInteger().with_variant(Integer(), "sqlite")


class Base(DeclarativeBase):
    """Base class for all resource catalog ORM models."""
    pass
