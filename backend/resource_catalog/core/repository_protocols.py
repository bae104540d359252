"""Boundary Protocols - contract between the resource handler and persistence.

Invariants:
    - Core NEVER imports from infrastructure; implementations are injected
    - find_by_id returns None for absence and never raises for it
    - save returns what the store holds after the write (generated keys included)
    - save is atomic per call: a failure leaves no partial row

Design Decisions:
    - Protocol over ABC: structural subtyping, so test fakes need no base class
    - Async methods: implementations do IO; the handler awaits each call
"""

from collections.abc import Sequence
from typing import Protocol, TypeVar

RecordT = TypeVar("RecordT")


class RecordStore(Protocol[RecordT]):
    """Contract for one resource table, keyed by the raw key value."""
    async def find_all(self) -> Sequence[RecordT]: ...
    async def find_by_id(self, key: int | str) -> RecordT | None: ...
    async def save(self, record: RecordT) -> RecordT: ...
    async def delete(self, record: RecordT) -> None: ...
