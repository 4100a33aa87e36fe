"""Storefront discovery backend: search, suggestions and recently-viewed history."""

__version__ = "1.0.0"
