"""Simple Product API: CRUD over an in-memory product catalog."""

__version__ = "1.0.0"
