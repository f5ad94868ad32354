"""
Contact Blueprint - Public contact form delivered by email
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__, url_prefix='/api')

from . import routes
