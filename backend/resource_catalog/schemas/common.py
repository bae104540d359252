"""Shared Schema Types - camelCase base model and the ISO-8601 timestamp type.

Invariants:
    - CatalogModel accepts both alias (camelCase) and attribute names on input
    - CatalogModel validates straight from ORM rows (from_attributes)
    - Int32 / Int64 reject values the integer columns cannot hold
    - IsoTimestamp only accepts extended ISO-8601 local date-times and always
      serializes to JSON as YYYY-MM-DDTHH:MM:SS
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from resource_catalog.core.keys import INT64_MAX, INT64_MIN
from resource_catalog.core.timestamps import format_iso_timestamp, parse_iso_timestamp


class CatalogModel(BaseModel):
    """Base for every record schema."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


IsoTimestamp = Annotated[
    datetime,
    BeforeValidator(parse_iso_timestamp),
    PlainSerializer(format_iso_timestamp, return_type=str, when_used="json"),
]

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]
