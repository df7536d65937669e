[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "examplesvc"
version = "1.0.0"
description = "A small HTTP microservice that stores and serves examples in MongoDB"
requires-python = ">=3.10"
keywords = ["microservice", "flask", "mongodb", "rest", "swagger"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "pymongo",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
examplesvc = "examplesvc.server:main"

[tool.hatch.build.targets.wheel]
packages = ["examplesvc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
