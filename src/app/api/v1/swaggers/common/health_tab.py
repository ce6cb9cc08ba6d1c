"""
Health Tab Swagger Documentation

Contains all health check related API documentation including:
- Basic health check
- Detailed health check
- Health summary
"""

from flask_restx import Namespace, fields

# Create Health Namespace
health_ns = Namespace('health', description='Health check operations')

# Health Check Response Models
basic_health_response_model = health_ns.model('BasicHealthResponse', {
    'status': fields.String(description='Overall system status', enum=['healthy', 'degraded', 'unhealthy']),
    'timestamp': fields.DateTime(description='Health check timestamp'),
    'version': fields.String(description='API version'),
    'environment': fields.String(description='Environment (development/production)'),
    'checks': fields.Raw(description='System resources and computation engine checks')
})

detailed_health_response_model = health_ns.model('DetailedHealthResponse', {
    'status': fields.String(description='Overall system status'),
    'timestamp': fields.DateTime(description='Health check timestamp'),
    'version': fields.String(description='API version'),
    'environment': fields.String(description='Environment'),
    'checks': fields.Raw(description='System, engine and configuration checks'),
    'performance': fields.Raw(description='Process metrics')
})

health_summary_response_model = health_ns.model('HealthSummaryResponse', {
    'overall_status': fields.String(description='Overall system health status'),
    'healthy_checks': fields.Integer(description='Number of healthy checks'),
    'total_checks': fields.Integer(description='Total number of checks'),
    'health_percentage': fields.Float(description='Share of healthy checks'),
    'timestamp': fields.DateTime(description='Health check timestamp')
})

# Example Responses
EXAMPLE_BASIC_HEALTH = {
    "status": "healthy",
    "timestamp": "2026-03-01T15:30:00Z",
    "version": "v1",
    "environment": "development",
    "checks": {
        "system": {"status": "healthy", "cpu_percent": 12.5},
        "engine": {"status": "healthy"}
    }
}

EXAMPLE_HEALTH_SUMMARY = {
    "overall_status": "healthy",
    "healthy_checks": 2,
    "total_checks": 2,
    "health_percentage": 100.0,
    "timestamp": "2026-03-01T15:30:00Z"
}
