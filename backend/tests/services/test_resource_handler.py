"""Resource Handler - authorization, lookup, binding and persistence contract.

Tests cover:
    - Authorization runs first: rejected callers cause no store I/O at all
    - Missing keys produce "<Resource> with id <key> not found" for both key kinds
    - Create binds every field, persists once, returns what the store returned
    - Malformed fields fail before the store is touched
    - Update overwrites every field, keeps the key, never saves a missing record
    - Delete removes and reports
"""

from datetime import datetime

import pytest

from resource_catalog.core.authorization import AuthorizationPolicy
from resource_catalog.core.domain_types import Caller
from resource_catalog.core.errors import (
    AuthorizationError, EntityNotFoundError, PersistenceConflictError,
    RecordValidationError,
)
from resource_catalog.models import Articles, UCSBOrganization
from resource_catalog.services.resource_handler import ResourceHandler
from resource_catalog.services.resource_registry import (
    ARTICLES, MENU_ITEM_REVIEW, ORGANIZATION,
)

ANON = Caller()
USER = Caller(email="user@ucsb.edu", roles=frozenset({"ROLE_USER"}))
ADMIN = Caller(email="admin@ucsb.edu", roles=frozenset({"ROLE_USER", "ROLE_ADMIN"}))

ARTICLE_FIELDS = {
    "title": "Article1",
    "url": "https://www.google.com",
    "explanation": "test",
    "email": "article1@test.com",
    "dateAdded": "2022-01-03T00:00:00",
}


def _article(id_=None, **overrides):
    values = dict(
        title="Test Article", url="https://example.com",
        explanation="Test explanation", email="test@ucsb.edu",
        date_added=datetime(2022, 1, 3),
    )
    values.update(overrides)
    return Articles(id=id_, **values)


def _org(code="ZPR"):
    return UCSBOrganization(
        org_code=code, org_translation_short="ZETA PHI RHO",
        org_translation="ZETA PHI RHO", inactive=False,
    )


@pytest.fixture
def article_store(fake_store_factory):
    return fake_store_factory(ARTICLES, _article(7))


@pytest.fixture
def articles(article_store):
    return ResourceHandler(ARTICLES, article_store, AuthorizationPolicy())


@pytest.fixture
def org_store(fake_store_factory):
    return fake_store_factory(ORGANIZATION, _org())


@pytest.fixture
def organizations(org_store):
    return ResourceHandler(ORGANIZATION, org_store, AuthorizationPolicy())


# ─── Authorization ───────────────────────────────────────────────

async def test_anonymous_caller_cannot_list(articles):
    with pytest.raises(AuthorizationError):
        await articles.list_all(ANON)


async def test_admin_role_without_user_role_is_rejected(articles):
    admin_only = Caller(email="a@ucsb.edu", roles=frozenset({"ROLE_ADMIN"}))
    with pytest.raises(AuthorizationError):
        await articles.get_by_key(admin_only, "7")


async def test_regular_user_cannot_create_and_store_is_untouched(articles, article_store):
    with pytest.raises(AuthorizationError):
        await articles.create(USER, ARTICLE_FIELDS)
    assert article_store.save_calls == []


async def test_authorization_precedes_field_validation(articles, article_store):
    """A baseline caller with garbage fields still gets 403, not 400."""
    with pytest.raises(AuthorizationError):
        await articles.create(USER, {"dateAdded": "not-a-date"})
    assert article_store.save_calls == []


async def test_regular_user_cannot_update_and_store_is_untouched(articles, article_store):
    with pytest.raises(AuthorizationError):
        await articles.update(USER, "7", ARTICLE_FIELDS)
    assert article_store.find_calls == []
    assert article_store.save_calls == []


async def test_regular_user_cannot_delete(articles, article_store):
    with pytest.raises(AuthorizationError):
        await articles.delete(USER, "7")
    assert article_store.delete_calls == []


# ─── List / Get ──────────────────────────────────────────────────

async def test_list_returns_every_record(articles, article_store):
    await article_store.save(_article(title="Second"))
    result = await articles.list_all(USER)
    assert [r.title for r in result] == ["Test Article", "Second"]


async def test_list_of_empty_store_is_empty(fake_store_factory):
    handler = ResourceHandler(
        ARTICLES, fake_store_factory(ARTICLES), AuthorizationPolicy(),
    )
    assert await handler.list_all(USER) == []


async def test_get_existing_record(articles):
    result = await articles.get_by_key(USER, "7")
    assert result.id == 7
    assert result.title == "Test Article"
    assert result.date_added == datetime(2022, 1, 3)


async def test_get_missing_numeric_key_message(articles):
    with pytest.raises(EntityNotFoundError) as exc:
        await articles.get_by_key(USER, "99")
    assert exc.value.message == "Articles with id 99 not found"
    assert exc.value.to_response() == {
        "type": "EntityNotFoundException",
        "message": "Articles with id 99 not found",
    }


async def test_get_missing_natural_key_message(organizations, org_store):
    with pytest.raises(EntityNotFoundError) as exc:
        await organizations.get_by_key(USER, "munger-hall")
    assert exc.value.message == "UCSBOrganization with id munger-hall not found"
    assert org_store.find_calls == ["munger-hall"]


async def test_numeric_key_is_looked_up_as_integer(articles, article_store):
    await articles.get_by_key(USER, "7")
    assert article_store.find_calls == [7]


async def test_non_numeric_key_is_a_validation_error(articles, article_store):
    with pytest.raises(RecordValidationError):
        await articles.get_by_key(USER, "seven")
    assert article_store.find_calls == []


async def test_missing_key_is_a_validation_error(articles):
    with pytest.raises(RecordValidationError):
        await articles.get_by_key(USER, None)


# ─── Create ──────────────────────────────────────────────────────

async def test_admin_creates_record_with_generated_key(articles, article_store):
    result = await articles.create(ADMIN, ARTICLE_FIELDS)

    assert len(article_store.save_calls) == 1
    saved = article_store.save_calls[0]
    assert saved.title == "Article1"
    assert saved.date_added == datetime(2022, 1, 3)
    assert result.id == 8
    assert result.email == "article1@test.com"


async def test_create_then_get_returns_same_record(articles):
    created = await articles.create(ADMIN, ARTICLE_FIELDS)
    fetched = await articles.get_by_key(USER, str(created.id))
    assert fetched == created


async def test_create_with_malformed_timestamp_never_reaches_store(articles, article_store):
    with pytest.raises(RecordValidationError) as exc:
        await articles.create(ADMIN, {**ARTICLE_FIELDS, "dateAdded": "01/03/2022"})
    assert article_store.save_calls == []
    assert exc.value.details[0]["field"] == "dateAdded"


async def test_create_with_missing_field_is_rejected(articles, article_store):
    fields = dict(ARTICLE_FIELDS)
    del fields["url"]
    with pytest.raises(RecordValidationError) as exc:
        await articles.create(ADMIN, fields)
    assert "url" in exc.value.message
    assert article_store.save_calls == []


async def test_create_natural_key_uses_supplied_code(organizations):
    result = await organizations.create(ADMIN, {
        "orgCode": "SKY",
        "orgTranslationShort": "SKYDIVING CLUB",
        "orgTranslation": "SKYDIVING CLUB AT UCSB",
        "inactive": "false",
    })
    assert result.org_code == "SKY"
    assert result.inactive is False


async def test_create_duplicate_natural_key_is_a_store_conflict(organizations, org_store):
    """No existence pre-check: the store decides."""
    with pytest.raises(PersistenceConflictError):
        await organizations.create(ADMIN, {
            "orgCode": "ZPR",
            "orgTranslationShort": "ZPR",
            "orgTranslation": "ZPR",
            "inactive": "true",
        })
    assert org_store.find_calls == []
    assert len(org_store.save_calls) == 1


# ─── Update ──────────────────────────────────────────────────────

async def test_update_overwrites_every_field(articles, article_store):
    body = {
        "title": "Second Article",
        "url": "https://example2.com",
        "explanation": "Second explanation",
        "email": "test2@ucsb.edu",
        "dateAdded": "2023-01-03T00:00:00",
    }
    result = await articles.update(ADMIN, "7", body)

    assert article_store.find_calls == [7]
    assert len(article_store.save_calls) == 1
    assert result.model_dump(by_alias=True, mode="json") == {**body, "id": 7}


async def test_update_ignores_key_in_body(articles):
    result = await articles.update(ADMIN, "7", {**ARTICLE_FIELDS, "id": 123})
    assert result.id == 7


async def test_update_missing_record_never_saves(articles, article_store):
    with pytest.raises(EntityNotFoundError) as exc:
        await articles.update(ADMIN, "67", ARTICLE_FIELDS)
    assert exc.value.message == "Articles with id 67 not found"
    assert article_store.save_calls == []


async def test_update_rejects_partial_body(articles, article_store):
    with pytest.raises(RecordValidationError):
        await articles.update(ADMIN, "7", {"title": "Only the title"})
    assert article_store.save_calls == []


async def test_update_rejects_non_object_body(articles):
    with pytest.raises(RecordValidationError):
        await articles.update(ADMIN, "7", ["not", "an", "object"])


async def test_update_natural_key_keeps_code(organizations):
    result = await organizations.update(ADMIN, "ZPR", {
        "orgCode": "OTHER",
        "orgTranslationShort": "ZETA",
        "orgTranslation": "ZETA PHI RHO CHAPTER",
        "inactive": True,
    })
    assert result.org_code == "ZPR"
    assert result.org_translation == "ZETA PHI RHO CHAPTER"
    assert result.inactive is True


# ─── Delete ──────────────────────────────────────────────────────

async def test_delete_existing_record(articles, article_store):
    result = await articles.delete(ADMIN, "7")
    assert result == {"message": "Articles with id 7 deleted"}
    assert await article_store.find_by_id(7) is None


async def test_delete_missing_record(articles, article_store):
    with pytest.raises(EntityNotFoundError):
        await articles.delete(ADMIN, "15")
    assert article_store.delete_calls == []


# ─── Deferred payloads ───────────────────────────────────────────

async def test_body_loader_is_not_called_for_rejected_caller(articles):
    calls = []

    async def load():
        calls.append("read")
        raise RecordValidationError("Request body is not valid JSON")

    with pytest.raises(AuthorizationError):
        await articles.update(USER, "7", load)
    with pytest.raises(AuthorizationError):
        await articles.create(ANON, load)
    assert calls == []


async def test_body_loader_failure_carries_operation_context(articles):
    async def load():
        raise RecordValidationError("Request body is not valid JSON")

    with pytest.raises(RecordValidationError) as exc:
        await articles.update(ADMIN, "7", load)
    assert exc.value.context.resource == "Articles"
    assert exc.value.context.operation == "update"


async def test_fields_loader_result_is_bound(articles):
    async def load():
        return ARTICLE_FIELDS

    result = await articles.create(ADMIN, load)
    assert result.title == "Article1"


# ─── Column bounds ───────────────────────────────────────────────

REVIEW_FIELDS = {
    "itemId": "27",
    "reviewerEmail": "cgaucho@ucsb.edu",
    "stars": "3",
    "dateReviewed": "2022-01-03T00:00:00",
    "comments": "fine",
}


@pytest.fixture
def review_store(fake_store_factory):
    return fake_store_factory(MENU_ITEM_REVIEW)


@pytest.fixture
def reviews(review_store):
    return ResourceHandler(MENU_ITEM_REVIEW, review_store, AuthorizationPolicy())


@pytest.mark.parametrize("field,value", [
    ("itemId", str(10 ** 20)),
    ("itemId", str(-(2 ** 63) - 1)),
    ("stars", str(2 ** 31)),
    ("stars", str(-(2 ** 31) - 1)),
    ("reviewerEmail", "a" * 256),
])
async def test_review_values_beyond_column_bounds_never_reach_store(
    reviews, review_store, field, value,
):
    with pytest.raises(RecordValidationError) as exc:
        await reviews.create(ADMIN, {**REVIEW_FIELDS, field: value})
    assert exc.value.details[0]["field"] == field
    assert review_store.save_calls == []


async def test_review_values_at_column_bounds_are_accepted(reviews):
    result = await reviews.create(ADMIN, {
        **REVIEW_FIELDS, "itemId": str(2 ** 63 - 1), "stars": str(2 ** 31 - 1),
    })
    assert result.item_id == 2 ** 63 - 1
    assert result.stars == 2 ** 31 - 1


@pytest.mark.parametrize("field,limit", [
    ("title", 255), ("url", 2000), ("email", 255),
])
async def test_article_strings_beyond_column_length_are_rejected(
    articles, article_store, field, limit,
):
    with pytest.raises(RecordValidationError):
        await articles.create(ADMIN, {**ARTICLE_FIELDS, field: "x" * (limit + 1)})
    assert article_store.save_calls == []


async def test_organization_translation_beyond_column_length_is_rejected(organizations):
    with pytest.raises(RecordValidationError):
        await organizations.update(ADMIN, "ZPR", {
            "orgTranslationShort": "ZPR",
            "orgTranslation": "x" * 501,
            "inactive": False,
        })
