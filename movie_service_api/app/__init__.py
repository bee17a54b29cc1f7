"""
Application package initializer.

This package contains the main entrypoint for the service and all of
its submodules: configuration and logging in ``core``, HTTP routes in
``api/v1/endpoints``, file access and page decoration in ``services``
and response schemas in ``schemas``.
"""

from .main import app, create_app  # noqa: F401
