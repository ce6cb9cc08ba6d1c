"""
API package for the Special Events Financial Engine

This package contains API-related modules including:
- v1 API implementation with namespaces, routes, and services
- Flask-RESTX namespaces for Swagger documentation
- Marshmallow schemas for request validation

Author: Flask Enterprise Template
License: MIT
"""

from .v1 import api_v1, register_all_namespaces

__all__ = ['api_v1', 'register_all_namespaces']
