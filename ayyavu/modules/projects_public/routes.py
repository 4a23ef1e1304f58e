"""
Projects Public Routes
======================

Public catalog API consumed by the portfolio site.
"""

from flask import Blueprint, current_app, jsonify, request
from flask_cors import cross_origin

from ayyavu.core.errors import NotFound, StoreError
from ayyavu.modules.projects.repository import parse_project_id

projects_public_bp = Blueprint('projects', __name__, url_prefix='/api/projects')


@projects_public_bp.route('', methods=['GET'])
@cross_origin()
def list_projects():
    """All projects, optionally filtered by ?status= and ?category="""
    try:
        projects = current_app.extensions['ayyavu'].projects.list(
            status=request.args.get('status'),
            category=request.args.get('category'),
        )
    except StoreError as e:
        body, status = e.to_response()
        return jsonify(body), status
    return jsonify(projects)


@projects_public_bp.route('/<project_id>', methods=['GET'])
@cross_origin()
def get_project(project_id):
    """Single project"""
    try:
        project = current_app.extensions['ayyavu'].projects.get(parse_project_id(project_id))
    except (NotFound, StoreError) as e:
        body, status = e.to_response()
        return jsonify(body), status
    return jsonify(project)
