[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ratelimitapi"
version = "0.1.0"
description = "A small JSON HTTP API with per-client token-bucket rate limiting and security, CORS and content-type middleware."
requires-python = ">=3.10"
keywords = ["rate-limit", "token-bucket", "flask", "api", "middleware", "cors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Web Environment",
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ratelimitapi = "ratelimitapi.main:main"

[tool.hatch.build.targets.wheel]
packages = ["ratelimitapi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
