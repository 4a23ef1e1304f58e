"""
Storage Utility
===============

Local file storage for project images. Files are written under the
configured upload folder and referenced by a public URL path.
"""

import os
import time

from flask import current_app, request
from werkzeug.utils import secure_filename

from .logging_service import logger


def stored_name(original_filename, now=None):
    """Timestamp-prefixed filename, e.g. ``1700000000000-villa.jpg``."""
    millis = int((now if now is not None else time.time()) * 1000)
    filename = secure_filename(original_filename or '') or 'upload'
    return f"{millis}-{filename}"


def save_upload(file, upload_dir=None, url_prefix=None):
    """Write an uploaded file to the upload folder.

    Args:
        file: werkzeug FileStorage from ``request.files``.
        upload_dir: Target directory, defaults to ``UPLOAD_FOLDER``.
        url_prefix: Public prefix, defaults to ``UPLOAD_URL_PREFIX``.

    Returns:
        Public path like "/uploads/1700000000000-villa.jpg". The file is on
        disk before the path is returned.
    """
    if upload_dir is None:
        upload_dir = current_app.config['UPLOAD_FOLDER']
    if url_prefix is None:
        url_prefix = current_app.config.get('UPLOAD_URL_PREFIX', '/uploads')

    os.makedirs(upload_dir, exist_ok=True)
    filename = stored_name(file.filename)
    filepath = os.path.join(upload_dir, filename)
    file.save(filepath)

    logger.info('storage', f"Stored upload {filename}", {'bytes': os.path.getsize(filepath)})
    return f"{url_prefix.rstrip('/')}/{filename}"


def upload_from_request(field='image'):
    """Store the attachment sent under ``field``, or return None if absent."""
    file = request.files.get(field)
    if file is None or not file.filename:
        return None
    return save_upload(file)
