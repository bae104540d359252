"""Resource Routes - router factory producing the REST surface of one catalog resource.

Invariants:
    - GET    /api/<path>/all                  -> list
    - GET    /api/<path>?<keyParam>=<key>     -> get by key
    - POST   /api/<path>/post?<field>=<value> -> create (fields as query/form params)
    - PUT    /api/<path>?<keyParam>=<key>     -> update (JSON body, full field set)
    - DELETE /api/<path>?<keyParam>=<key>     -> delete
    - Routes hold no logic: they collect raw inputs and delegate to ResourceHandler,
      so authorization always runs before body decoding, key parsing and field binding

Design Decisions:
    - Key is taken raw (str) and bodies are handed over as loaders: typed FastAPI
      params would reject a malformed request with 400 before the handler could
      answer 403
    - Create reads fields from the query string and from urlencoded form bodies,
      never from JSON
"""

import json
from urllib.parse import parse_qsl

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from resource_catalog.api.identity import get_authorization_policy, get_caller
from resource_catalog.core.authorization import AuthorizationPolicy
from resource_catalog.core.domain_types import Caller
from resource_catalog.core.errors import RecordValidationError
from resource_catalog.infrastructure.database import get_db
from resource_catalog.infrastructure.record_store import SqlRecordStore
from resource_catalog.services.resource_handler import ResourceHandler
from resource_catalog.services.resource_registry import ResourceDescriptor

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


async def read_request_fields(request: Request) -> dict[str, str]:
    """Collect individually named scalar parameters from query string and form body."""
    fields = dict(request.query_params)
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPE):
        try:
            body = (await request.body()).decode("utf-8")
        except UnicodeDecodeError as e:
            raise RecordValidationError(
                "Form body is not valid UTF-8",
                details=[{"field": "body", "message": str(e), "type": "unicode_error"}],
            ) from e
        fields.update(parse_qsl(body, keep_blank_values=True))
    return fields


async def read_json_body(request: Request) -> object:
    """Decode the JSON request body; an empty body reads as None."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        raise RecordValidationError(
            "Request body is not valid JSON",
            details=[{"field": "body", "message": str(e), "type": "json_invalid"}],
        ) from e


def _key_query(descriptor: ResourceDescriptor):
    return Query(
        None, alias=descriptor.key_param,
        description=f"{descriptor.name} {descriptor.key_param}",
    )


def _json_body_schema(descriptor: ResourceDescriptor) -> dict:
    schema = descriptor.update_model.model_json_schema(by_alias=True)
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema}},
        },
    }


def build_resource_router(descriptor: ResourceDescriptor) -> APIRouter:
    """Build the five endpoints for one resource."""
    router = APIRouter(prefix=descriptor.prefix, tags=[descriptor.path])
    read_model = descriptor.read_model

    def get_handler(
        db: AsyncSession = Depends(get_db),
        policy: AuthorizationPolicy = Depends(get_authorization_policy),
    ) -> ResourceHandler:
        store = SqlRecordStore(db, descriptor.orm_model, descriptor.name)
        return ResourceHandler(descriptor, store, policy)

    @router.get(
        "/all", response_model=list[read_model],
        summary=f"List all {descriptor.summary}",
    )
    async def list_all(
        caller: Caller = Depends(get_caller),
        handler: ResourceHandler = Depends(get_handler),
    ):
        return await handler.list_all(caller)

    @router.get(
        "", response_model=read_model,
        summary=f"Get a single {descriptor.name} by {descriptor.key_param}",
    )
    async def get_by_key(
        key: str | None = _key_query(descriptor),
        caller: Caller = Depends(get_caller),
        handler: ResourceHandler = Depends(get_handler),
    ):
        return await handler.get_by_key(caller, key)

    @router.post(
        "/post", response_model=read_model,
        summary=f"Create a new {descriptor.name}",
    )
    async def create(
        request: Request,
        caller: Caller = Depends(get_caller),
        handler: ResourceHandler = Depends(get_handler),
    ):
        return await handler.create(caller, lambda: read_request_fields(request))

    @router.put(
        "", response_model=read_model,
        summary=f"Update a single {descriptor.name}",
        openapi_extra=_json_body_schema(descriptor),
    )
    async def update(
        request: Request,
        key: str | None = _key_query(descriptor),
        caller: Caller = Depends(get_caller),
        handler: ResourceHandler = Depends(get_handler),
    ):
        return await handler.update(caller, key, lambda: read_json_body(request))

    @router.delete(
        "", response_model=dict[str, str],
        summary=f"Delete a single {descriptor.name}",
    )
    async def delete(
        key: str | None = _key_query(descriptor),
        caller: Caller = Depends(get_caller),
        handler: ResourceHandler = Depends(get_handler),
    ):
        return await handler.delete(caller, key)

    return router
