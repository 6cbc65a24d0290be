[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bountysvc"
version = "0.1.0"
description = "A small WSGI service for listing, creating and updating bug bounties"
requires-python = ">=3.10"
dependencies = [
    "python-dotenv",
]
keywords = ["bug bounty", "wsgi", "rest", "json", "api", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bountysvc = "bountysvc.main:main"

[tool.hatch.build.targets.wheel]
packages = ["bountysvc"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
