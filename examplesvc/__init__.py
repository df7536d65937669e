"""HTTP microservice that stores and serves examples in MongoDB."""

__version__ = "1.0.0"