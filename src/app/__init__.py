"""
Special Events Financial Engine - Application Factory

This module implements the Flask application factory pattern with
modular configuration, blueprint registration, and error handling.

Features:
- Environment-based configuration
- CORS support for cross-origin requests
- Modular blueprint and namespace registration
- Centralized error handling
- Security headers
- Request/response logging

Author: Flask Enterprise Template
License: MIT
"""

import os
import logging

from flask import Flask
from dotenv import load_dotenv
from ..config import get_config, validate_config
from ..extensions import api as restx_api, init_extensions
from .api.v1 import register_all_namespaces
from .api.v1.routes import api_v1
from ..common.exceptions import register_error_handlers, ConfigurationError
from ..common.logger import setup_comprehensive_logging

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------
# Initialize the Flask application
# -----------------------------------------------------------------------
def create_app(config_class=None):
    """
    Flask application factory.

    Args:
        config_class: Configuration class, or an environment name
            ('development', 'testing', 'staging', 'production')

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    # Load configuration
    env_name = os.getenv('FLASK_ENV', 'development')
    if config_class is None:
        config_class = get_config(env_name)
    elif isinstance(config_class, str):
        # If config_class is a string (environment name), get the actual config class
        env_name = config_class
        config_class = get_config(config_class)

    app.config.from_object(config_class)
    app.config['FLASK_ENV'] = env_name

    # Validate configuration
    config_valid, config_message = validate_config(env_name)
    if not config_valid:
        raise ConfigurationError(f"Configuration validation failed: {config_message}")

    # Setup logging before anything else logs
    setup_comprehensive_logging(app)

    # Initialize extensions
    init_extensions(app)

    # Setup error handlers
    register_error_handlers(app)

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        # Swagger UI needs inline scripts on /docs/
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "script-src 'self' 'unsafe-inline'; "
            "img-src 'self' data:; "
            "frame-ancestors 'self';"
        )

        for header, value in app.config.get('SECURITY_HEADERS', {}).items():
            response.headers[header] = value

        return response

    # Register main API v1 blueprint
    app.register_blueprint(api_v1, url_prefix="/api/v1")

    # Register all namespaces for Swagger documentation
    register_all_namespaces(restx_api)

    # Log application startup
    app.logger.info(f"Special Events Financial Engine started in {env_name} mode")

    return app
