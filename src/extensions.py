"""
Flask Extensions Configuration

This module initializes all Flask extensions used by the application.

Features:
- CORS configuration
- Rate limiting
- Caching of scenario analyses
- API documentation with Flask-RESTX

Author: Flask Enterprise Template
License: MIT
"""

from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_restx import Api
from flask_caching import Cache

# CORS for cross-origin requests
cors = CORS()

# Rate limiting
limiter = Limiter(key_func=get_remote_address)

# Cache for scenario analyses
cache = Cache()

# Flask-RESTX API with Swagger documentation
api = Api(
    title='Special Events Financial Engine API',
    version='1.0',
    description='Forecasts, actuals, cash flow projections, scenario analysis and risk scoring for special events',
    doc='/docs/',
    default_mediatype='application/json'
)


def init_extensions(app):
    """
    Initialize all Flask extensions with the application.

    Args:
        app: Flask application instance
    """
    # Initialize CORS
    cors.init_app(
        app,
        origins=app.config.get('CORS_ORIGINS', '*'),
        methods=app.config.get('CORS_METHODS', ['GET', 'POST', 'OPTIONS']),
        allow_headers=app.config.get('CORS_ALLOW_HEADERS', ['Content-Type']),
        expose_headers=app.config.get('CORS_EXPOSE_HEADERS', []),
        supports_credentials=app.config.get('CORS_SUPPORTS_CREDENTIALS', False)
    )

    # Initialize rate limiting
    limiter.init_app(app)

    # Initialize cache
    cache.init_app(app, config={
        'CACHE_TYPE': app.config.get('CACHE_TYPE', 'SimpleCache'),
        'CACHE_DEFAULT_TIMEOUT': app.config.get('CACHE_DEFAULT_TIMEOUT', 300),
        'CACHE_KEY_PREFIX': app.config.get('CACHE_KEY_PREFIX', 'event_finance_')
    })

    # Initialize API
    api.init_app(app)
