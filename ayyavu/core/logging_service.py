"""
Centralized logging service for the portfolio backend.
Wraps the standard logging module with per-source loggers and request context.
"""

import json
import logging
import traceback

from flask import request, has_request_context

ROOT_LOGGER = 'ayyavu'
LOG_FORMAT = '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s'


def configure_logging(level='INFO'):
    """Attach a console handler to the package logger (idempotent)."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return root


class LoggingService:
    """Application-wide logging helpers keyed by source component"""

    @staticmethod
    def _get_request_context():
        """Extract request context information"""
        if not has_request_context():
            return None, None

        ip_address = request.headers.get('X-Forwarded-For', request.remote_addr)
        if ip_address and ',' in ip_address:
            ip_address = ip_address.split(',')[0].strip()

        return ip_address, request.path

    @staticmethod
    def log(level, source, message, details=None, user_id=None):
        """
        Log a message under the ``ayyavu.<source>`` logger

        Args:
            level (str): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            source (str): Source component (auth, projects, storage, etc.)
            message (str): Main log message
            details (str/dict): Additional details (JSON-encoded if dict)
            user_id: Optional principal identifier
        """
        ip_address, request_path = LoggingService._get_request_context()

        parts = [message]
        if request_path:
            parts.append(f"path={request_path} ip={ip_address}")
        if user_id is not None:
            parts.append(f"user={user_id}")
        if details:
            if isinstance(details, dict):
                details = json.dumps(details, default=str)
            parts.append(f"details={details}")

        logging.getLogger(f"{ROOT_LOGGER}.{source}").log(
            logging.getLevelName(level.upper()), ' | '.join(parts)
        )

    @staticmethod
    def debug(source, message, details=None, user_id=None):
        LoggingService.log('DEBUG', source, message, details, user_id)

    @staticmethod
    def info(source, message, details=None, user_id=None):
        LoggingService.log('INFO', source, message, details, user_id)

    @staticmethod
    def warning(source, message, details=None, user_id=None):
        LoggingService.log('WARNING', source, message, details, user_id)

    @staticmethod
    def error(source, message, details=None, user_id=None):
        LoggingService.log('ERROR', source, message, details, user_id)

    @staticmethod
    def log_user_action(source, action, user_id=None, details=None):
        """Log admin actions (login, create, delete, etc.)"""
        LoggingService.info(source, f"User action: {action}", details, user_id)

    @staticmethod
    def log_error_with_traceback(source, error, details=None):
        """Log error with full traceback"""
        error_details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': traceback.format_exc()
        }
        if details:
            error_details['additional_details'] = details

        LoggingService.error(source, f"Exception occurred: {type(error).__name__}", error_details)

    @staticmethod
    def log_security_event(message, details=None):
        """Log security-related events"""
        LoggingService.warning('security', message, details)


# Convenience instance for easy importing
logger = LoggingService()
