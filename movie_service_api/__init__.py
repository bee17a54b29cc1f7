"""
Top-level package for the Movie Service.

All functionality lives in submodules under ``app``; import the ASGI
application as ``movie_service_api.app.main:app``.
"""

__all__ = []
