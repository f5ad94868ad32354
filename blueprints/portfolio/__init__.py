"""
Portfolio Blueprint - Public content API and its admin mutations
Handles: Profile, Projects, Skills, Experience
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='/api')

from . import routes
