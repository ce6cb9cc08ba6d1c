"""
Routes Package - Main entry point for all API routes

This package contains all route modules for API v1 including:
- Health routes
- Special event finance routes
- Financial model routes
- Risk routes

Author: Flask Enterprise Template
License: MIT
"""

from flask import Blueprint

# Create main API v1 blueprint
api_v1 = Blueprint("api_v1", __name__)

# Import all route modules to register them with Flask-RESTX namespaces
# Common routes
from .common import health_routes

# Special events routes
from .special_events import event_finance_routes
from .special_events import financial_model_routes
from .special_events import risk_routes

# Note: Routes are registered via Flask-RESTX namespaces
# No need to register blueprints here as they're handled by the API

__all__ = ['api_v1']
