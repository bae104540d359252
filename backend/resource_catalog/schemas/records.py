"""Record Schemas - fields, create, update and read shapes for each resource.

Invariants:
    - <X>Fields holds every non-key field; it is both the create and the update shape
      for surrogate-key resources
    - Natural-key resources add the key to the create shape only; on update the key
      comes from the query string and any key in the body is ignored
    - <X>Read is what clients receive: key + all fields
    - String lengths and integer ranges mirror the column types, so oversized
      values fail binding instead of reaching the database
"""

from pydantic import Field

from resource_catalog.schemas.common import CatalogModel, Int32, Int64, IsoTimestamp


# --- Articles -----------------------------------------------------------------

class ArticlesFields(CatalogModel):
    title: str = Field(max_length=255)
    url: str = Field(max_length=2000)
    explanation: str
    email: str = Field(max_length=255)
    date_added: IsoTimestamp


class ArticlesRead(ArticlesFields):
    id: int


# --- MenuItemReview -----------------------------------------------------------

class MenuItemReviewFields(CatalogModel):
    item_id: Int64
    reviewer_email: str = Field(max_length=255)
    stars: Int32
    date_reviewed: IsoTimestamp
    comments: str


class MenuItemReviewRead(MenuItemReviewFields):
    id: int


# --- RecommendationRequest ----------------------------------------------------

class RecommendationRequestFields(CatalogModel):
    requester_email: str = Field(max_length=255)
    professor_email: str = Field(max_length=255)
    date_requested: IsoTimestamp
    date_needed: IsoTimestamp
    done: bool


class RecommendationRequestRead(RecommendationRequestFields):
    id: int


# --- UCSBDiningCommonsMenuItem ------------------------------------------------

class DiningCommonsMenuItemFields(CatalogModel):
    dining_commons_code: str = Field(max_length=50)
    name: str = Field(max_length=255)
    station: str = Field(max_length=255)


class DiningCommonsMenuItemRead(DiningCommonsMenuItemFields):
    id: int


# --- HelpRequest --------------------------------------------------------------

class HelpRequestFields(CatalogModel):
    requester_email: str = Field(max_length=255)
    team_name: str = Field(max_length=100)
    request_text: str
    explanation: str
    solved: bool
    request_time: IsoTimestamp


class HelpRequestRead(HelpRequestFields):
    id: int


# --- UCSBOrganization (natural key) -------------------------------------------

class OrganizationFields(CatalogModel):
    org_translation_short: str = Field(max_length=255)
    org_translation: str = Field(max_length=500)
    inactive: bool


class OrganizationCreate(OrganizationFields):
    org_code: str = Field(min_length=1, max_length=50)


class OrganizationRead(OrganizationCreate):
    pass
