"""
API Schemas Package

This package contains all Marshmallow schemas for API validation.

Author: Flask Enterprise Template
License: MIT
"""

# Import all schemas from organized folders
from .special_events import *
from .special_events import __all__ as _special_events_all

# Export all schemas
__all__ = list(_special_events_all)
