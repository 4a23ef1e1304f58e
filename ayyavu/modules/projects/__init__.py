"""
Projects Admin Module
=====================

Admin API for the construction portfolio catalog.

Provides:
- Project creation, full-replace editing and deletion
- Image upload alongside create/update
"""

from flask import Blueprint

projects_bp = Blueprint('projects_admin', __name__, url_prefix='/api/admin/projects')

from . import routes
from .repository import ProjectRepository

__all__ = ['projects_bp', 'ProjectRepository']
