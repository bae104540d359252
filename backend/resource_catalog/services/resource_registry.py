"""Resource Registry - one descriptor per catalog resource, explicitly listed.

Invariants:
    - RESOURCES is the complete, ordered list of exposed resources
    - name is used verbatim in error messages ("<name> with id <key> not found")
    - key_attr names both the ORM primary key column and the read-model attribute
    - Surrogate-key resources never carry key_attr in create_model/update_model

Design Decisions:
    - Descriptors over per-resource controllers: the handler and router factory are
      written once and parameterized by this table
    - Explicit list, no auto-discovery
"""

from dataclasses import dataclass

from pydantic import BaseModel

from resource_catalog.core.domain_types import KeyKind
from resource_catalog.db.base import Base
from resource_catalog.models import (
    Articles, HelpRequest, MenuItemReview, RecommendationRequest,
    UCSBDiningCommonsMenuItem, UCSBOrganization,
)
from resource_catalog.schemas.records import (
    ArticlesFields, ArticlesRead,
    DiningCommonsMenuItemFields, DiningCommonsMenuItemRead,
    HelpRequestFields, HelpRequestRead,
    MenuItemReviewFields, MenuItemReviewRead,
    OrganizationCreate, OrganizationFields, OrganizationRead,
    RecommendationRequestFields, RecommendationRequestRead,
)


@dataclass(frozen=True)
class ResourceDescriptor:
    """Everything the generic handler and router need to know about a resource."""
    name: str
    path: str
    key_kind: KeyKind
    key_param: str
    key_attr: str
    orm_model: type[Base]
    create_model: type[BaseModel]
    update_model: type[BaseModel]
    read_model: type[BaseModel]
    summary: str

    @property
    def prefix(self) -> str:
        return f"/api/{self.path}"


ARTICLES = ResourceDescriptor(
    name="Articles",
    path="articles",
    key_kind=KeyKind.NUMERIC,
    key_param="id",
    key_attr="id",
    orm_model=Articles,
    create_model=ArticlesFields,
    update_model=ArticlesFields,
    read_model=ArticlesRead,
    summary="articles",
)

MENU_ITEM_REVIEW = ResourceDescriptor(
    name="MenuItemReview",
    path="menuitemreview",
    key_kind=KeyKind.NUMERIC,
    key_param="id",
    key_attr="id",
    orm_model=MenuItemReview,
    create_model=MenuItemReviewFields,
    update_model=MenuItemReviewFields,
    read_model=MenuItemReviewRead,
    summary="menu item reviews",
)

RECOMMENDATION_REQUEST = ResourceDescriptor(
    name="RecommendationRequest",
    path="recommendationrequest",
    key_kind=KeyKind.NUMERIC,
    key_param="id",
    key_attr="id",
    orm_model=RecommendationRequest,
    create_model=RecommendationRequestFields,
    update_model=RecommendationRequestFields,
    read_model=RecommendationRequestRead,
    summary="recommendation requests",
)

DINING_COMMONS_MENU_ITEM = ResourceDescriptor(
    name="UCSBDiningCommonsMenuItem",
    path="ucsbdiningcommonsmenuitem",
    key_kind=KeyKind.NUMERIC,
    key_param="id",
    key_attr="id",
    orm_model=UCSBDiningCommonsMenuItem,
    create_model=DiningCommonsMenuItemFields,
    update_model=DiningCommonsMenuItemFields,
    read_model=DiningCommonsMenuItemRead,
    summary="dining commons menu items",
)

HELP_REQUEST = ResourceDescriptor(
    name="HelpRequest",
    path="helprequest",
    key_kind=KeyKind.NUMERIC,
    key_param="id",
    key_attr="id",
    orm_model=HelpRequest,
    create_model=HelpRequestFields,
    update_model=HelpRequestFields,
    read_model=HelpRequestRead,
    summary="help requests",
)

ORGANIZATION = ResourceDescriptor(
    name="UCSBOrganization",
    path="ucsborganization",
    key_kind=KeyKind.NATURAL,
    key_param="orgCode",
    key_attr="org_code",
    orm_model=UCSBOrganization,
    create_model=OrganizationCreate,
    update_model=OrganizationFields,
    read_model=OrganizationRead,
    summary="student organizations",
)

RESOURCES: tuple[ResourceDescriptor, ...] = (
    ARTICLES,
    MENU_ITEM_REVIEW,
    RECOMMENDATION_REQUEST,
    DINING_COMMONS_MENU_ITEM,
    HELP_REQUEST,
    ORGANIZATION,
)
