"""
Projects Admin Routes
=====================

Create, update and delete catalog entries. Every route sits behind
``require_admin``; the optional ``image`` attachment is stored before the
repository call and its path handed over as the media reference.
"""

from flask import current_app, jsonify

from ayyavu.core.errors import NotFound, StoreError
from ayyavu.core.forms import request_data
from ayyavu.core.logging_service import logger
from ayyavu.core.storage import upload_from_request
from ayyavu.modules.auth.sessions import require_admin
from . import projects_bp
from .repository import parse_project_id


def get_repository():
    return current_app.extensions['ayyavu'].projects


def _error(e):
    body, status = e.to_response()
    return jsonify(body), status


@projects_bp.route('', methods=['POST'])
@require_admin
def create_project():
    """Create new project"""
    try:
        image_url = upload_from_request('image')
        project = get_repository().create(request_data(), media_ref=image_url)
    except StoreError as e:
        return _error(e)

    logger.log_user_action('projects', f"created project {project['id']}")
    return jsonify({
        'success': True,
        'id': project['id'],
        'message': 'Project created successfully'
    })


@projects_bp.route('/<project_id>', methods=['PUT'])
@require_admin
def update_project(project_id):
    """Update project"""
    try:
        project_id = parse_project_id(project_id)
        image_url = upload_from_request('image')
        get_repository().update(project_id, request_data(), media_ref=image_url)
    except (NotFound, StoreError) as e:
        return _error(e)

    logger.log_user_action('projects', f"updated project {project_id}")
    return jsonify({'success': True, 'message': 'Project updated successfully'})


@projects_bp.route('/<project_id>', methods=['DELETE'])
@require_admin
def delete_project(project_id):
    """Delete project"""
    try:
        project_id = parse_project_id(project_id)
        get_repository().delete(project_id)
    except (NotFound, StoreError) as e:
        return _error(e)

    logger.log_user_action('projects', f"deleted project {project_id}")
    return jsonify({'success': True, 'message': 'Project deleted successfully'})
