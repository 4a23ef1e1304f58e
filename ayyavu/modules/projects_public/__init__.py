"""
Projects Public Module
======================

Read-only catalog endpoints, open to any origin allowed by ``CORS_ORIGINS``.
"""

from .routes import projects_public_bp

__all__ = ['projects_public_bp']
