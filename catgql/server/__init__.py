"""
HTTP surface: request routing, operation execution and app assembly.

This package exposes `create_app` at the top-level so ASGI servers can
load the app via the string reference "catgql.server:create_app".
"""

from .app import create_app

__all__ = ["create_app"]
