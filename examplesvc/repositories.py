"""MongoDB-backed storage for example records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping

import pymongo
from bson import ObjectId
from bson.errors import InvalidId

COLLECTION_NAME = "examples"
TIMEOUT_MS = 10_000

_ZERO_ID = "0" * 24
_ZERO_TIME = "0001-01-01T00:00:00Z"


class ExampleNotFoundError(LookupError):
    """Raised when no example has the requested id."""

    def __init__(self, message: str = "example not found") -> None:
        super().__init__(message)


def _format_time(value: datetime | None) -> str:
    """Format a timestamp as RFC 3339 with trailing fractional zeros removed."""
    if value is None:
        return _ZERO_TIME
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    fraction = f"{value.microsecond:06d}".rstrip("0")
    if fraction:
        text += "." + fraction
    offset = value.utcoffset()
    if not offset:
        return text + "Z"
    minutes = int(offset.total_seconds()) // 60
    sign = "+" if minutes >= 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    return f"{text}{sign}{hours:02d}:{mins:02d}"


@dataclass
class Example:
    """An example record as stored in the ``examples`` collection."""

    name: str = ""
    id: ObjectId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_document(self) -> dict[str, Any]:
        """Return the BSON document; ``_id`` is left out when unset."""
        document: dict[str, Any] = {}
        if self.id is not None:
            document["_id"] = self.id
        document["name"] = self.name
        document["created_at"] = self.created_at
        document["updated_at"] = self.updated_at
        return document

    def to_json(self) -> dict[str, str]:
        """Return the JSON-ready representation used by the HTTP API."""
        return {
            "ID": str(self.id) if self.id is not None else _ZERO_ID,
            "Name": self.name,
            "CreatedAt": _format_time(self.created_at),
            "UpdatedAt": _format_time(self.updated_at),
        }

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> Example:
        """Build an Example from a stored document."""
        return cls(
            name=document.get("name", ""),
            id=document.get("_id"),
            created_at=document.get("created_at"),
            updated_at=document.get("updated_at"),
        )


class MongoDBClient:
    """Holds an open MongoDB client."""

    def __init__(self, client: Any) -> None:
        self.client = client

    def disconnect(self) -> None:
        """Close the underlying client."""
        self.client.close()

    def __enter__(self) -> MongoDBClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()


def connect(uri: str) -> MongoDBClient:
    """Connect to ``uri`` and verify the connection with a ping."""
    client = pymongo.MongoClient(
        uri,
        serverSelectionTimeoutMS=TIMEOUT_MS,
        connectTimeoutMS=TIMEOUT_MS,
    )
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        raise
    return MongoDBClient(client)


class ExampleRepository:
    """Reads and writes examples in one database."""

    def __init__(self, client: MongoDBClient, db_name: str) -> None:
        self._client = client
        self._db_name = db_name
        self._collection_name = COLLECTION_NAME

    @property
    def _collection(self) -> Any:
        return self._client.client[self._db_name][self._collection_name]

    def create(self, example: Example) -> Example:
        """Stamp, insert and return ``example`` with its new id."""
        now = datetime.now(timezone.utc)
        example.created_at = now
        example.updated_at = now
        result = self._collection.insert_one(example.to_document())
        example.id = result.inserted_id
        return example

    def find_by_id(self, example_id: str) -> Example:
        """Return the example with the given hex id."""
        try:
            object_id = ObjectId(example_id)
        except (InvalidId, TypeError) as exc:
            raise ValueError("the provided hex string is not a valid ObjectID") from exc
        document = self._collection.find_one({"_id": object_id})
        if document is None:
            raise ExampleNotFoundError()
        return Example.from_document(document)

    def get_all_examples(self) -> list[Example]:
        """Return every stored example."""
        return self.get_examples_with_filter({})

    def get_examples_with_filter(self, query: Mapping[str, Any]) -> list[Example]:
        """Return the examples matching ``query``."""
        cursor = self._collection.find(dict(query), max_time_ms=TIMEOUT_MS)
        return [Example.from_document(document) for document in cursor]

    def get_paginated_examples(self, page: int, limit: int) -> list[Example]:
        """Return one page of examples, newest first."""
        cursor = self._collection.find(
            {},
            skip=(page - 1) * limit,
            limit=limit,
            sort=[("created_at", pymongo.DESCENDING)],
            max_time_ms=TIMEOUT_MS,
        )
        return [Example.from_document(document) for document in cursor]