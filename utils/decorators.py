"""
Decorators Module - Authentication decorators for API routes
"""

from functools import wraps
from flask import current_app, request
from flask_login import current_user
from .errors import Unauthorized


def login_required(f):
    """Decorator to require an authenticated admin session

    Raises Unauthorized before the view runs, so a rejected request never
    reaches the repository.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            current_app.logger.warning(f"Unauthorized {request.method} {request.path}")
            raise Unauthorized()
        return f(*args, **kwargs)
    return decorated_function
