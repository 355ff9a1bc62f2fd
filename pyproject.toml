[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zerobase"
version = "0.1.0"
description = "Demo HTTP API, an Ollama-backed translation endpoint, SQLAlchemy examples and console helpers."
requires-python = ">=3.10"
keywords = ["flask", "http", "api", "sqlalchemy", "translation", "ollama", "cli", "logging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
    "Topic :: Database :: Front-Ends",
]
dependencies = [
    "flask>=2.2",
    "sqlalchemy>=2.0",
    "requests>=2.28",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
zerobase = "zerobase.cli:main"
zerobase-web = "zerobase.webapp:main"
zerobase-translator = "zerobase.translator:main"

[tool.hatch.build.targets.wheel]
packages = ["zerobase"]

[tool.hatch.build.targets.sdist]
include = ["zerobase", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
