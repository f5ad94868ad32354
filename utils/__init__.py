"""
Utils Package - Centralized utility modules initialization
"""

from .errors import (
    PortfolioError,
    ValidationError,
    AlreadyExists,
    InvalidCredentials,
    Unauthorized,
    NotFound,
    ServiceUnavailable,
    StorageError,
    register_error_handlers
)
from .decorators import login_required
from .data import (
    user_to_dict,
    profile_to_dict,
    project_to_dict,
    skill_to_dict,
    experience_to_dict,
    get_default_portfolio_data
)
from .notifications import send_email, send_contact_message, is_mail_configured
from .security import (
    register,
    login,
    logout,
    current_user,
    purge_expired_sessions,
    hash_password,
    verify_password
)

__all__ = [
    # Errors
    'PortfolioError',
    'ValidationError',
    'AlreadyExists',
    'InvalidCredentials',
    'Unauthorized',
    'NotFound',
    'ServiceUnavailable',
    'StorageError',
    'register_error_handlers',

    # Decorators
    'login_required',

    # Data
    'user_to_dict',
    'profile_to_dict',
    'project_to_dict',
    'skill_to_dict',
    'experience_to_dict',
    'get_default_portfolio_data',

    # Notifications
    'send_email',
    'send_contact_message',
    'is_mail_configured',

    # Security
    'register',
    'login',
    'logout',
    'current_user',
    'purge_expired_sessions',
    'hash_password',
    'verify_password'
]
