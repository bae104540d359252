"""Resource Handler - the shared list/get/create/update/delete contract for every resource.

Invariants:
    - Authorization is the first step of every operation; a rejected caller triggers
      no body decoding, no key parsing, no field binding and no store call
    - Lookups that miss raise EntityNotFoundError("<name> with id <key> not found")
    - Field binding fails with RecordValidationError before any store write
    - Create never pre-checks key existence; duplicates are the store's call
    - Update overwrites every non-key field; the key itself never changes
    - Stateless: one handler per request, nothing retained between requests

Design Decisions:
    - One generic class parameterized by ResourceDescriptor instead of one
      controller per resource
    - Returns read-model instances (what the store holds after the write), so the
      route layer only serializes
    - Create and update accept either the payload itself or an async loader for it;
      routes pass loaders so request bodies are read only for authorized callers
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Union

from pydantic import BaseModel, ValidationError

from resource_catalog.core.authorization import AuthorizationPolicy
from resource_catalog.core.domain_types import Caller, Key, Operation
from resource_catalog.core.errors import (
    EntityNotFoundError, ErrorContext, RecordValidationError,
)
from resource_catalog.core.keys import parse_key
from resource_catalog.core.repository_protocols import RecordStore
from resource_catalog.services.resource_registry import ResourceDescriptor

logger = logging.getLogger(__name__)

Payload = Union[Any, Callable[[], Awaitable[Any]]]


class ResourceHandler:
    """Applies authorization, lookup, binding and shaping for one resource."""

    def __init__(
        self,
        descriptor: ResourceDescriptor,
        store: RecordStore,
        policy: AuthorizationPolicy,
    ):
        self.descriptor = descriptor
        self._store = store
        self._policy = policy

    # ─── Operations ──────────────────────────────────────────────

    async def list_all(self, caller: Caller) -> list[BaseModel]:
        """Every stored record, in store order."""
        self._authorize(Operation.LIST, caller)
        records = await self._store.find_all()
        return [self._shape(record) for record in records]

    async def get_by_key(self, caller: Caller, raw_key: object) -> BaseModel:
        context = self._authorize(Operation.GET, caller)
        key = self._parse_key(raw_key, context)
        record = await self._lookup(key, context)
        return self._shape(record)

    async def create(
        self, caller: Caller, raw_fields: Payload,
    ) -> BaseModel:
        """Bind individually named fields into a new record and persist it."""
        context = self._authorize(Operation.CREATE, caller)
        raw_fields = await self._load(raw_fields, context)
        data = self._bind(self.descriptor.create_model, raw_fields, context)
        record = self.descriptor.orm_model(**data.model_dump())
        saved = await self._store.save(record)
        logger.info(
            f"Created {self.descriptor.name} with id "
            f"{getattr(saved, self.descriptor.key_attr)}",
            extra=context.as_log_extra(),
        )
        return self._shape(saved)

    async def update(
        self, caller: Caller, raw_key: object, body: Payload,
    ) -> BaseModel:
        """Replace every non-key field of an existing record."""
        context = self._authorize(Operation.UPDATE, caller)
        key = self._parse_key(raw_key, context)
        body = await self._load(body, context)
        if not isinstance(body, Mapping):
            raise RecordValidationError(
                "Request body must be a JSON object", context=context,
            )
        data = self._bind(self.descriptor.update_model, body, context)
        record = await self._lookup(key, context)
        for attr, value in data.model_dump().items():
            setattr(record, attr, value)
        saved = await self._store.save(record)
        logger.info(
            f"Updated {self.descriptor.name} with id {key}",
            extra=context.as_log_extra(),
        )
        return self._shape(saved)

    async def delete(self, caller: Caller, raw_key: object) -> dict:
        context = self._authorize(Operation.DELETE, caller)
        key = self._parse_key(raw_key, context)
        record = await self._lookup(key, context)
        await self._store.delete(record)
        logger.info(
            f"Deleted {self.descriptor.name} with id {key}",
            extra=context.as_log_extra(),
        )
        return {"message": f"{self.descriptor.name} with id {key} deleted"}

    # ─── Steps ───────────────────────────────────────────────────

    def _authorize(self, operation: Operation, caller: Caller) -> ErrorContext:
        context = ErrorContext(
            resource=self.descriptor.name,
            operation=operation.value,
            caller=caller.email or "anonymous",
        )
        self._policy.authorize(operation, caller, context)
        return context

    def _parse_key(self, raw_key: object, context: ErrorContext) -> Key:
        try:
            key = parse_key(
                self.descriptor.key_kind, raw_key, self.descriptor.key_param,
            )
        except RecordValidationError as e:
            e.context = context
            raise
        context.record_key = str(key)
        return key

    async def _lookup(self, key: Key, context: ErrorContext) -> Any:
        record = await self._store.find_by_id(key.value)
        if record is None:
            raise EntityNotFoundError(self.descriptor.name, key, context)
        return record

    async def _load(self, payload: Payload, context: ErrorContext) -> Any:
        if not callable(payload):
            return payload
        try:
            return await payload()
        except RecordValidationError as e:
            e.context = context
            raise

    def _bind(
        self,
        model: type[BaseModel],
        raw: Mapping[str, Any],
        context: ErrorContext,
    ) -> BaseModel:
        try:
            return model.model_validate(dict(raw))
        except ValidationError as e:
            details = [
                {
                    "field": ".".join(str(loc) for loc in err["loc"]),
                    "message": err["msg"],
                    "type": err["type"],
                }
                for err in e.errors()
            ]
            fields = ", ".join(sorted({d["field"] for d in details}))
            raise RecordValidationError(
                f"Invalid {self.descriptor.name} fields: {fields}",
                details=details,
                context=context,
            ) from e

    def _shape(self, record: Any) -> BaseModel:
        return self.descriptor.read_model.model_validate(record)
