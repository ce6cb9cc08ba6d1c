"""
Custom Exception Classes for the Special Events Financial Engine

This module defines custom exception classes for better error handling
and standardized error responses across the application.

Features:
- API-specific exceptions with status codes
- Financial model validation exceptions
- Risk register exceptions
- Configuration exceptions
- Global error handlers

Author: Flask Enterprise Template
License: MIT
"""

from flask import jsonify


class APIError(Exception):
    """Base API exception class with status code"""

    def __init__(self, message, status_code=400, error_code=None, details=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details


class FinancialModelError(APIError):
    """Exception raised when a financial model cannot be projected"""

    def __init__(self, message="Financial model is invalid", details=None):
        super().__init__(message, status_code=422, error_code="FINANCIAL_MODEL_ERROR", details=details)


class RiskValidationError(APIError):
    """Exception raised when a risk entry or status change is invalid"""

    def __init__(self, message="Risk validation failed", details=None):
        super().__init__(message, status_code=400, error_code="RISK_VALIDATION_ERROR", details=details)


class ConfigurationError(APIError):
    """Exception raised when configuration is invalid"""

    def __init__(self, message="Configuration error", details=None):
        super().__init__(message, status_code=500, error_code="CONFIGURATION_ERROR", details=details)


def register_error_handlers(app):
    """
    Register global error handlers for the Flask application.

    Args:
        app: Flask application instance
    """

    @app.errorhandler(APIError)
    def handle_api_error(error):
        """Handle custom API errors"""
        response = {
            'success': False,
            'message': error.message,
            'error_code': error.error_code,
            'status_code': error.status_code
        }

        if error.details:
            response['details'] = error.details

        app.logger.warning(f"API error {error.error_code}: {error.message}")
        return jsonify(response), error.status_code

    @app.errorhandler(404)
    def not_found(e):
        """Handle 404 Not Found errors"""
        return jsonify({
            'success': False,
            'message': 'Resource not found',
            'error_code': 'NOT_FOUND',
            'status_code': 404
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        """Handle 405 Method Not Allowed errors"""
        return jsonify({
            'success': False,
            'message': 'Method not allowed',
            'error_code': 'METHOD_NOT_ALLOWED',
            'status_code': 405
        }), 405

    @app.errorhandler(429)
    def rate_limit_exceeded(e):
        """Handle 429 Too Many Requests raised by flask-limiter"""
        return jsonify({
            'success': False,
            'message': 'Rate limit exceeded',
            'error_code': 'RATE_LIMIT_EXCEEDED',
            'status_code': 429
        }), 429

    @app.errorhandler(500)
    def server_error(e):
        """Handle 500 Internal Server Error"""
        return jsonify({
            'success': False,
            'message': 'Internal server error',
            'error_code': 'INTERNAL_SERVER_ERROR',
            'status_code': 500
        }), 500

    @app.errorhandler(Exception)
    def handle_exception(error):
        """Handle unexpected exceptions"""
        app.logger.error(f"Unhandled exception: {str(error)}", exc_info=True)

        # Return generic error in production, detailed in development
        if app.config.get('DEBUG'):
            return jsonify({
                'success': False,
                'message': str(error),
                'error_code': 'UNHANDLED_EXCEPTION',
                'status_code': 500
            }), 500
        else:
            return jsonify({
                'success': False,
                'message': 'An unexpected error occurred',
                'error_code': 'INTERNAL_SERVER_ERROR',
                'status_code': 500
            }), 500
