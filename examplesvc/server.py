"""HTTP server wiring and command-line entry point."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from flask import Flask, Response, abort, redirect
from pymongo.errors import PyMongoError

from examplesvc.config import load_config
from examplesvc.controllers import ExampleController
from examplesvc.docs import SWAGGER_INFO, SwaggerInfo
from examplesvc.repositories import ExampleRepository, connect
from examplesvc.services import ExampleService

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"

_INDEX_PAGE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>{title}</title></head>
<body>
<h1>{title}</h1>
<p>API description: <a href="doc.json">doc.json</a></p>
</body>
</html>
"""


def create_app(
    controller: ExampleController, swagger_info: SwaggerInfo = SWAGGER_INFO
) -> Flask:
    """Build the Flask application with the API and Swagger routes."""
    app = Flask(__name__)
    examples = f"{API_PREFIX}/examples"
    app.add_url_rule(
        examples, "create_example", controller.create_example, methods=["POST"]
    )
    app.add_url_rule(
        examples, "get_examples", controller.get_examples, methods=["GET"]
    )
    app.add_url_rule(
        f"{examples}/<example_id>",
        "get_example_by_id",
        controller.get_example_by_id,
        methods=["GET"],
    )

    def swagger(resource: str) -> Response:
        if resource == "":
            return redirect("/swagger/index.html", code=301)
        if resource == "doc.json":
            return Response(swagger_info.read_doc(), mimetype="application/json")
        if resource == "index.html":
            return Response(
                _INDEX_PAGE.format(title=swagger_info.title), mimetype="text/html"
            )
        abort(404)

    app.add_url_rule(
        "/swagger/", "swagger_root", swagger, defaults={"resource": ""}
    )
    app.add_url_rule("/swagger/<path:resource>", "swagger", swagger)
    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Load configuration, connect to MongoDB and serve the API."""
    parser = argparse.ArgumentParser(
        prog="examplesvc", description="Serve the examples HTTP API."
    )
    parser.add_argument("--env-file", default=".env", help="dotenv file to load")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    config = load_config(args.env_file)

    try:
        client = connect(config.mongo_uri)
    except (PyMongoError, ValueError) as exc:
        logger.error("Error connecting to MongoDB: %s", exc)
        return 1

    with client:
        repo = ExampleRepository(client, config.mongo_db_name)
        controller = ExampleController(ExampleService(repo))
        app = create_app(controller)
        try:
            port = int(config.port)
        except ValueError:
            logger.error("Invalid port %r", config.port)
            return 1
        logger.info("Server running on port %s", config.port)
        app.run(host="0.0.0.0", port=port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())