"""Business operations on examples."""

from __future__ import annotations

from examplesvc.repositories import Example, ExampleRepository


class ExampleService:
    """Application-level access to examples."""

    def __init__(self, repo: ExampleRepository) -> None:
        self._repo = repo

    def create_example(self, example: Example) -> Example:
        """Store a new example and return it."""
        return self._repo.create(example)

    def get_example_by_id(self, example_id: str) -> Example:
        """Return the example with the given id."""
        return self._repo.find_by_id(example_id)

    def get_examples(self) -> list[Example]:
        """Return all examples."""
        return self._repo.get_all_examples()