"""
Ayyavu Modules
==============

Flask blueprint modules for the portfolio backend.
"""

__all__ = ['auth', 'projects', 'projects_public']
