"""
Special Events Financial Engine - Main Package

Financial planning and reporting backend for recurring ticketed events:
forecast vs. actual analysis, cash flow projections, NPV/IRR, scenario
analysis and risk scoring, exposed as a Flask REST API.

Author: Flask Enterprise Template
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Flask Enterprise Template"

# Package metadata
__title__ = "Special Events Financial Engine"
__description__ = "Financial computation backend for special events planning"
__license__ = "MIT"

# Import main application factory
from src.app import create_app

# Export public API
__all__ = [
    'create_app',
    '__version__',
    '__author__',
    '__title__',
    '__description__',
]


def get_version():
    """Get package version"""
    return __version__


def get_info():
    """Get package information"""
    return {
        'name': __title__,
        'version': __version__,
        'description': __description__,
        'author': __author__,
        'license': __license__,
    }
