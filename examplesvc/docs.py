"""Swagger 2.0 description of the HTTP API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

_JSON = ["application/json"]
_TAGS = ["examples"]
_EXAMPLE_REF = {"$ref": "#/definitions/repositories.Example"}
_ERROR_SCHEMA = {"type": "object", "additionalProperties": {"type": "string"}}


def _error(description: str) -> dict[str, Any]:
    return {"description": description, "schema": _ERROR_SCHEMA}


_PATHS: dict[str, Any] = {
    "/examples": {
        "get": {
            "description": "Get examples",
            "consumes": _JSON,
            "produces": _JSON,
            "tags": _TAGS,
            "summary": "Get examples",
            "responses": {
                "200": {
                    "description": "OK",
                    "schema": {"type": "array", "items": _EXAMPLE_REF},
                },
                "400": _error("Bad Request"),
                "404": _error("Not Found"),
            },
        },
        "post": {
            "description": "Create a new example with the input payload",
            "consumes": _JSON,
            "produces": _JSON,
            "tags": _TAGS,
            "summary": "Create a new example",
            "parameters": [
                {
                    "description": "Create example",
                    "name": "example",
                    "in": "body",
                    "required": True,
                    "schema": _EXAMPLE_REF,
                }
            ],
            "responses": {
                "201": {"description": "Created", "schema": _EXAMPLE_REF},
                "400": _error("Bad Request"),
                "500": _error("Internal Server Error"),
            },
        },
    },
    "/examples/{id}": {
        "get": {
            "description": "Get example by ID",
            "consumes": _JSON,
            "produces": _JSON,
            "tags": _TAGS,
            "summary": "Get example by ID",
            "parameters": [
                {
                    "type": "string",
                    "description": "Example ID",
                    "name": "id",
                    "in": "path",
                    "required": True,
                }
            ],
            "responses": {
                "200": {"description": "OK", "schema": _EXAMPLE_REF},
                "400": _error("Bad Request"),
                "404": _error("Not Found"),
            },
        }
    },
}

_DEFINITIONS: dict[str, Any] = {
    "repositories.Example": {
        "type": "object",
        "properties": {
            "createdAt": {"type": "string"},
            "id": {"type": "string"},
            "name": {"type": "string"},
            "updatedAt": {"type": "string"},
        },
    }
}


@dataclass
class SwaggerInfo:
    """General API information rendered into the Swagger document."""

    version: str = "1.0"
    host: str = "localhost:8080"
    base_path: str = "/api/v1"
    schemes: list[str] = field(default_factory=list)
    title: str = "Go Microservice API"
    description: str = "This is a sample microservice with Go, Gin, MongoDB"
    instance_name: str = "swagger"

    def read_doc(self) -> str:
        """Return the Swagger document as JSON text."""
        document = {
            "schemes": list(self.schemes),
            "swagger": "2.0",
            "info": {
                "description": self.description,
                "title": self.title,
                "contact": {},
                "version": self.version,
            },
            "host": self.host,
            "basePath": self.base_path,
            "paths": _PATHS,
            "definitions": _DEFINITIONS,
        }
        return json.dumps(document, indent=4)


SWAGGER_INFO = SwaggerInfo()