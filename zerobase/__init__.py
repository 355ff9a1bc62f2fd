"""Demo HTTP API, Ollama translation endpoint, SQLAlchemy examples, JSON logging and console helpers."""

__version__ = "0.1.0"