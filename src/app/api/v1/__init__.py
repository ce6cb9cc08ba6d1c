"""
API v1 Package - Main entry point for API version 1

This package contains all API v1 components including:
- Routes (health, events, financial models, risks)
- Services (health monitoring)
- Swaggers (documentation)

Author: Flask Enterprise Template
License: MIT
"""

from .routes import api_v1
from .swaggers import health_ns, events_ns, financial_models_ns, risks_ns


def register_all_namespaces(restx_api):
    """Register all RESTX namespaces with the shared Api instance."""
    namespaces = (
        # Mount /health namespace under v1 prefix in swagger
        (health_ns, '/api/v1/health'),
        # Mount /events namespace under v1 prefix in swagger
        (events_ns, '/api/v1/events'),
        # Mount /financial-models namespace under v1 prefix in swagger
        (financial_models_ns, '/api/v1/financial-models'),
        # Mount /risks namespace under v1 prefix in swagger
        (risks_ns, '/api/v1/risks'),
    )
    for namespace, path in namespaces:
        if namespace in restx_api.namespaces:
            # Shared Api instance: init_app already bound its resources to the new app
            continue
        restx_api.add_namespace(namespace, path=path)


__all__ = [
    'api_v1',
    'register_all_namespaces',
    'health_ns',
    'events_ns',
    'financial_models_ns',
    'risks_ns',
]
