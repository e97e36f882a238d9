"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, storage and error
handling), ``schemas`` (Pydantic payloads), ``services`` (business
logic) and ``api`` (routers).
"""

from .main import app, create_app  # noqa: F401
