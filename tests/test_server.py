from datetime import datetime, timezone
from http import HTTPStatus
from unittest import mock

import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from examplesvc.controllers import ExampleController
from examplesvc.docs import SwaggerInfo
from examplesvc.repositories import ExampleNotFoundError
from examplesvc.server import create_app, main


class FakeService:
    def __init__(self):
        self.items = {}

    def create_example(self, example):
        example.id = ObjectId()
        now = datetime.now(timezone.utc)
        example.created_at = now
        example.updated_at = now
        self.items[str(example.id)] = example
        return example

    def get_example_by_id(self, example_id):
        ObjectId(example_id)
        try:
            return self.items[example_id]
        except KeyError:
            raise ExampleNotFoundError() from None

    def get_examples(self):
        return list(self.items.values())


@pytest.fixture
def client():
    app = create_app(ExampleController(FakeService()), SwaggerInfo(title="Test API"))
    return app.test_client()


def test_create_then_fetch(client):
    created = client.post("/api/v1/examples", json={"name": "widget"})
    assert created.status_code == HTTPStatus.CREATED
    body = created.get_json()
    fetched = client.get(f"/api/v1/examples/{body['ID']}")
    assert fetched.status_code == HTTPStatus.OK
    assert fetched.get_json() == body


def test_list_examples(client):
    client.post("/api/v1/examples", json={"name": "a"})
    client.post("/api/v1/examples", json={"name": "b"})
    response = client.get("/api/v1/examples")
    assert response.status_code == HTTPStatus.OK
    assert [item["Name"] for item in response.get_json()] == ["a", "b"]


def test_invalid_id_is_not_found(client):
    response = client.get("/api/v1/examples/nothex")
    assert response.status_code == HTTPStatus.NOT_FOUND
    assert "error" in response.get_json()


def test_unsupported_method(client):
    response = client.put("/api/v1/examples/abc", json={})
    assert response.status_code == HTTPStatus.METHOD_NOT_ALLOWED


def test_swagger_doc_json(client):
    response = client.get("/swagger/doc.json")
    assert response.status_code == HTTPStatus.OK
    assert response.get_json()["info"]["title"] == "Test API"


def test_swagger_index_and_redirect(client):
    redirect = client.get("/swagger/")
    assert redirect.status_code == HTTPStatus.MOVED_PERMANENTLY
    assert redirect.headers["Location"].endswith("/swagger/index.html")
    index = client.get("/swagger/index.html")
    assert index.status_code == HTTPStatus.OK
    assert b"Test API" in index.data


def test_swagger_unknown_file(client):
    assert client.get("/swagger/missing.js").status_code == HTTPStatus.NOT_FOUND


def test_main_connection_failure(tmp_path, monkeypatch):
    monkeypatch.delenv("MONGO_URI", raising=False)
    with mock.patch("pymongo.MongoClient") as mongo_cls:
        mongo_cls.return_value.admin.command.side_effect = ServerSelectionTimeoutError(
            "unreachable"
        )
        code = main(["--env-file", str(tmp_path / "missing.env")])
    assert code == 1
    assert mongo_cls.call_args.args[0] == "mongodb://localhost:27017"
    mongo_cls.return_value.close.assert_called_once()


def test_main_runs_server(tmp_path, monkeypatch):
    monkeypatch.setenv("PORT", "9123")
    with mock.patch("pymongo.MongoClient") as mongo_cls, mock.patch(
        "flask.Flask.run"
    ) as run:
        code = main(["--env-file", str(tmp_path / "missing.env")])
    assert code == 0
    assert run.call_args.kwargs["port"] == 9123
    mongo_cls.return_value.close.assert_called_once()


def test_main_invalid_port(tmp_path, monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    with mock.patch("pymongo.MongoClient") as mongo_cls, mock.patch(
        "flask.Flask.run"
    ) as run:
        code = main(["--env-file", str(tmp_path / "missing.env")])
    assert code == 1
    assert run.call_count == 0
    mongo_cls.return_value.close.assert_called_once()