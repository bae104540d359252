"""ORM Models - one SQLAlchemy declarative model per catalog resource.

Invariants:
    - All models inherit from Base (db/base.py)
    - No relationships between tables; every resource is an isolated record type

Design Decisions:
    - One file per resource
    - All models imported here so Base.metadata is complete for alembic and tests
"""

from resource_catalog.models.articles import Articles  # noqa: F401
from resource_catalog.models.menu_item_review import MenuItemReview  # noqa: F401
from resource_catalog.models.recommendation_request import RecommendationRequest  # noqa: F401
from resource_catalog.models.dining_commons_menu_item import UCSBDiningCommonsMenuItem  # noqa: F401
from resource_catalog.models.help_request import HelpRequest  # noqa: F401
from resource_catalog.models.organization import UCSBOrganization  # noqa: F401
