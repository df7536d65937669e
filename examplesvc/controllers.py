"""HTTP handlers for the examples API."""

from __future__ import annotations

import json
import re
from datetime import datetime, timedelta, timezone
from http import HTTPStatus
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from flask import Response, jsonify, make_response, request

from examplesvc.repositories import Example
from examplesvc.services import ExampleService

_FIELDS = {
    "id": "id",
    "name": "name",
    "createdat": "created_at",
    "updatedat": "updated_at",
}

_TIME_PATTERN = re.compile(
    r"(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})"
)


def _json_kind(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _parse_time(value: str, field: str) -> datetime:
    match = _TIME_PATTERN.fullmatch(value)
    if match is None:
        raise ValueError(f"cannot parse {value!r} as an RFC 3339 time for field {field}")
    base, fraction, zone = match.groups()
    micros = ((fraction or "") + "000000")[:6]
    try:
        parsed = datetime.strptime(f"{base}.{micros}", "%Y-%m-%dT%H:%M:%S.%f")
    except ValueError as exc:
        raise ValueError(f"invalid time {value!r} for field {field}") from exc
    if zone in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = 1 if zone[0] == "+" else -1
        hours, minutes = int(zone[1:3]), int(zone[4:6])
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))
    return parsed.replace(tzinfo=tz)


def parse_example(payload: Any) -> Example:
    """Build an Example from a decoded JSON value, matching keys case-insensitively."""
    example = Example()
    if payload is None:
        return example
    if not isinstance(payload, dict):
        raise ValueError(f"cannot unmarshal {_json_kind(payload)} into an example")
    for key, value in payload.items():
        attr = _FIELDS.get(key.lower())
        if attr is None or value is None:
            continue
        if not isinstance(value, str):
            raise ValueError(
                f"cannot unmarshal {_json_kind(value)} into field {key} of type string"
            )
        if attr == "id":
            if not value:
                example.id = None
                continue
            try:
                example.id = ObjectId(value)
            except (InvalidId, TypeError) as exc:
                raise ValueError("the provided hex string is not a valid ObjectID") from exc
        elif attr == "name":
            example.name = value
        else:
            setattr(example, attr, _parse_time(value, key))
    return example


def _decode_body(body: bytes) -> Any:
    if not body.strip():
        raise ValueError("EOF")
    return json.loads(body)


def _respond(status: HTTPStatus, data: Any) -> Response:
    return make_response(jsonify(data), int(status))


def _error(status: HTTPStatus, exc: BaseException) -> Response:
    return _respond(status, {"error": str(exc)})


class ExampleController:
    """Translates HTTP requests into service calls."""

    def __init__(self, service: ExampleService) -> None:
        self._service = service

    def create_example(self) -> Response:
        """Create an example from the JSON request body."""
        try:
            example = parse_example(_decode_body(request.get_data(cache=True)))
        except ValueError as exc:
            return _error(HTTPStatus.BAD_REQUEST, exc)
        try:
            created = self._service.create_example(example)
        except Exception as exc:
            return _error(HTTPStatus.INTERNAL_SERVER_ERROR, exc)
        return _respond(HTTPStatus.CREATED, created.to_json())

    def get_examples(self) -> Response:
        """List every example."""
        try:
            examples = self._service.get_examples()
        except Exception as exc:
            return _error(HTTPStatus.NOT_FOUND, exc)
        return _respond(HTTPStatus.OK, [example.to_json() for example in examples])

    def get_example_by_id(self, example_id: str) -> Response:
        """Return one example by its hex id."""
        try:
            example = self._service.get_example_by_id(example_id)
        except Exception as exc:
            return _error(HTTPStatus.NOT_FOUND, exc)
        return _respond(HTTPStatus.OK, example.to_json())