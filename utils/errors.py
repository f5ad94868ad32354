"""
Errors Module - Exception taxonomy shared by the repository, auth and API layers
Every error carries a human-readable message and the HTTP status it maps to.
"""

from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException


class PortfolioError(Exception):
    """Base class for errors surfaced to API callers"""
    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'message': self.message}


class ValidationError(PortfolioError):
    """Bad or missing input"""
    status_code = 400
    default_message = 'Invalid input'

    def __init__(self, message=None, fields=None):
        self.fields = dict(fields or {})
        if message is None and self.fields:
            message = 'Invalid fields: ' + ', '.join(sorted(self.fields))
        super().__init__(message)

    def to_dict(self):
        body = super().to_dict()
        if self.fields:
            body['fields'] = self.fields
        return body


class AlreadyExists(PortfolioError):
    status_code = 400
    default_message = 'User already exists'


class InvalidCredentials(PortfolioError):
    status_code = 401
    default_message = 'Invalid credentials'


class Unauthorized(PortfolioError):
    status_code = 401
    default_message = 'Unauthorized'


class NotFound(PortfolioError):
    status_code = 404
    default_message = 'Not found'


class ServiceUnavailable(PortfolioError):
    """A dependent external service (mail transport) is missing or failing"""
    status_code = 500
    default_message = 'Email service not configured'


class StorageError(PortfolioError):
    status_code = 500
    default_message = 'Storage failure'


def register_error_handlers(app):
    """Render every error as a JSON body with a `message` field"""

    @app.errorhandler(PortfolioError)
    def handle_portfolio_error(e):
        if e.status_code >= 500:
            app.logger.error(f"{type(e).__name__}: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return jsonify({'message': e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def internal_server_error(e):
        current_app.logger.exception(f"Server Error: {str(e)}")
        return jsonify({'message': 'Internal server error'}), 500


__all__ = [
    'PortfolioError',
    'ValidationError',
    'AlreadyExists',
    'InvalidCredentials',
    'Unauthorized',
    'NotFound',
    'ServiceUnavailable',
    'StorageError',
    'register_error_handlers'
]
