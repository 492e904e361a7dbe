"""
Bag Store API package.

Provides the FastAPI application, dependency wiring and request gates.
The application itself lives in ``api.app``.
"""
