"""
Auth Blueprint - Authentication and authorization
Handles: Register, Login, Logout, current session lookup
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')

from . import routes
