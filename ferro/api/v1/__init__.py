"""
API v1 package.

Contains versioned API routes for the publishing API.
"""

from ferro.api.v1.routes import router

__all__ = ["router"]
