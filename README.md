# examplesvc

A small HTTP service that stores *examples* (a name plus creation and
update timestamps) in MongoDB and serves them as JSON. A Swagger 2.0
description of the API is served next to it.

## Installing

```
pip install .
```

You need a MongoDB server the service can reach.

## Configuration

Settings come from the environment. A dotenv file (`.env` in the working
directory by default) is read first if it exists; it never overrides
variables that are already set. If the file cannot be read, a warning is
logged and only the environment is used. Any variable that is unset or
empty takes its default:

| Variable        | Default                     |
|-----------------|-----------------------------|
| `PORT`          | `8080`                      |
| `MONGO_URI`     | `mongodb://localhost:27017` |
| `MONGO_DB_NAME` | `go_microservice`           |

Examples are stored in the `examples` collection of that database.

## Running

```
examplesvc
examplesvc --env-file path/to/settings.env
```

The server connects to MongoDB and checks the connection with a ping
(10 second timeout). If it cannot connect, or if `PORT` is not a number,
it logs an error and exits with status 1. Once connected it listens on
all interfaces at `PORT`, using Flask's built-in server.

## API

All example routes are under `/api/v1`.

| Method | Path             | Success | Failure                                  |
|--------|------------------|---------|------------------------------------------|
| POST   | `/examples`      | `201`   | `400` bad body, `500` storage error      |
| GET    | `/examples`      | `200`   | `404` storage error                      |
| GET    | `/examples/{id}` | `200`   | `404` unknown or malformed id            |

A failed request is answered with a JSON object of the form
`{"error": "..."}`.

The POST body must be a JSON object (or `null`). Its keys are matched
case-insensitively against `id`, `name`, `createdAt` and `updatedAt`;
other keys are ignored, and every value given must be a string. An `id`
must be a 24-digit hex ObjectId and is used as the stored id; timestamps
must be RFC 3339. An empty body, invalid JSON or a value of the wrong
type gets a `400`. The creation and update times are always set to the
current time when the example is stored.

Example:

```
curl -X POST localhost:8080/api/v1/examples \
     -H 'Content-Type: application/json' \
     -d '{"name": "first"}'
```

Each example in a reply is an object with the keys `ID`, `Name`,
`CreatedAt` and `UpdatedAt`. Times are RFC 3339 in UTC, for example
`2024-05-01T12:30:00.5Z`; an unset time is `0001-01-01T00:00:00Z` and an
unset id is 24 zeros.

Under `/swagger/`:

- `/swagger/` redirects to `/swagger/index.html`;
- `/swagger/index.html` is a plain page linking to the description;
- `/swagger/doc.json` is the Swagger 2.0 document itself.

## Using it as a library

The parts can be put together by hand:

```python
from examplesvc.config import load_config
from examplesvc.repositories import connect, ExampleRepository
from examplesvc.services import ExampleService
from examplesvc.controllers import ExampleController
from examplesvc.docs import SwaggerInfo
from examplesvc.server import create_app

cfg = load_config(".env")
with connect(cfg.mongo_uri) as client:
    repo = ExampleRepository(client, cfg.mongo_db_name)
    app = create_app(ExampleController(ExampleService(repo)), SwaggerInfo())
    app.run(port=int(cfg.port))
```

- `examplesvc.repositories.ExampleRepository` offers `create`,
  `find_by_id` (raises `ValueError` for a malformed id and
  `ExampleNotFoundError` for an unknown one), `get_all_examples`,
  `get_examples_with_filter(query)` and `get_paginated_examples(page,
  limit)` (newest first). The last two are not exposed over HTTP.
- `examplesvc.controllers.parse_example` turns a decoded JSON value into
  an `Example`, with the rules described above.
- `examplesvc.docs.SwaggerInfo.read_doc()` returns the Swagger document
  as JSON text.

## What it does not do

Examples cannot be updated or deleted, neither over HTTP nor through the
repository. The Swagger pages are a bare JSON document and a link page,
not an interactive API browser.

## Tests

```
pip install .[test]
pytest
```