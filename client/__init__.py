"""
Client Package - HTTP client and confirmed-write state store for the portfolio API
"""

from .api import ApiError, PortfolioAPI
from .state import (
    LoadState,
    Profile,
    Project,
    Skill,
    Experience,
    PortfolioState,
    PortfolioStore
)

__all__ = [
    'ApiError',
    'PortfolioAPI',
    'LoadState',
    'Profile',
    'Project',
    'Skill',
    'Experience',
    'PortfolioState',
    'PortfolioStore'
]
