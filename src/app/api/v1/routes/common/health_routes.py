"""
Health Check Routes

Provides health check endpoints for monitoring system status
"""

from flask import current_app, request
from flask_restx import Resource
from src.common.response_utils import success_response, error_response
from src.common.localization import get_message
from src.app.api.v1.services import HealthService
from src.app.api.v1.swaggers import (
    health_ns,
    basic_health_response_model,
    detailed_health_response_model,
    health_summary_response_model,
)


@health_ns.route('/')
class HealthCheck(Resource):
    """Basic health check endpoint"""

    @health_ns.doc('health_check', responses={
        200: ('System is healthy', basic_health_response_model),
        503: 'System is unhealthy'
    })
    def get(self):
        """Get basic system health status"""
        locale = request.headers.get('Accept-Language', 'en')
        try:
            health_service = HealthService()
            health_data = health_service.get_system_health()
            status_code = health_service.get_health_status_code()

            if status_code == 200:
                return success_response(
                    message=get_message('health_system_healthy', locale),
                    data=health_data
                )
            else:
                return error_response(
                    message=get_message('health_check_failed', locale),
                    data=health_data,
                    status_code=status_code
                )
        except Exception as e:
            current_app.logger.error(f"Health check error: {str(e)}")
            return error_response(
                message=get_message('health_check_failed', locale),
                data={"error": str(e)},
                status_code=500
            )


@health_ns.route('/detailed')
class DetailedHealthCheck(Resource):
    """Detailed health check endpoint"""

    @health_ns.doc('detailed_health_check', responses={
        200: ('Detailed health check completed', detailed_health_response_model),
        503: 'System is unhealthy'
    })
    def get(self):
        """Get detailed system health status"""
        locale = request.headers.get('Accept-Language', 'en')
        try:
            health_service = HealthService()
            health_data = health_service.get_detailed_health()
            status_code = health_service.get_health_status_code()

            if status_code == 200:
                return success_response(
                    message=get_message('health_detailed_success', locale),
                    data=health_data
                )
            else:
                return error_response(
                    message=get_message('health_detailed_failed', locale),
                    data=health_data,
                    status_code=status_code
                )
        except Exception as e:
            current_app.logger.error(f"Detailed health check error: {str(e)}")
            return error_response(
                message=get_message('health_detailed_failed', locale),
                data={"error": str(e)},
                status_code=500
            )


@health_ns.route('/summary')
class HealthSummary(Resource):
    """Health summary endpoint"""

    @health_ns.doc('health_summary', responses={
        200: ('Health summary retrieved', health_summary_response_model)
    })
    def get(self):
        """Get health summary"""
        locale = request.headers.get('Accept-Language', 'en')
        try:
            health_service = HealthService()
            summary_data = health_service.get_health_summary()
            return success_response(
                message=get_message('health_summary_success', locale),
                data=summary_data
            )
        except Exception as e:
            current_app.logger.error(f"Health summary error: {str(e)}")
            return error_response(
                message=get_message('health_summary_failed', locale),
                data={"error": str(e)},
                status_code=500
            )
