"""HTTP CRUD service for auction products."""

__version__ = "0.1.0"
