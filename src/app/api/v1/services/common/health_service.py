"""
Health Monitoring Service

This module provides health monitoring capabilities including:
- System resource monitoring
- Application configuration checks
- Computation engine self-check
- Performance metrics

Author: Flask Enterprise Template
License: MIT
"""

import psutil
from datetime import datetime
from typing import Dict, Any
from flask import current_app, request
from src.common.localization import get_message


class HealthService:
    """Service for health monitoring"""

    def __init__(self):
        self.start_time = datetime.utcnow()

    @staticmethod
    def _locale():
        return request.headers.get('Accept-Language', 'en')

    def get_system_health(self) -> Dict[str, Any]:
        """
        Get basic system health status.

        Returns:
            dict: System health information
        """
        try:
            system_health = self._check_system_resources()
            engine_health = self._check_computation_engine()

            # Determine overall health
            overall_status = 'healthy'
            if engine_health['status'] != 'healthy':
                overall_status = 'unhealthy'
            elif system_health['status'] != 'healthy':
                overall_status = 'degraded'

            return {
                'status': overall_status,
                'timestamp': datetime.utcnow().isoformat(),
                'version': current_app.config.get('API_VERSION', 'v1'),
                'environment': current_app.config.get('FLASK_ENV', 'development'),
                'checks': {
                    'system': system_health,
                    'engine': engine_health
                }
            }
        except Exception as e:
            current_app.logger.error(f"Health check failed: {str(e)}")
            return {
                'status': 'unhealthy',
                'timestamp': datetime.utcnow().isoformat(),
                'version': current_app.config.get('API_VERSION', 'v1'),
                'error': str(e)
            }

    def get_detailed_health(self) -> Dict[str, Any]:
        """
        Get detailed system health information.

        Returns:
            dict: Detailed health information
        """
        basic_health = self.get_system_health()
        checks = basic_health.setdefault('checks', {})

        try:
            checks['configuration'] = self._check_configuration()
        except Exception as e:
            checks['configuration'] = {
                'status': 'unhealthy',
                'message': get_message('app_health_check_failed', self._locale(), error=str(e))
            }

        try:
            basic_health['performance'] = self._get_performance_metrics()
        except Exception as e:
            current_app.logger.warning(f"Performance metrics collection failed: {str(e)}")
            basic_health['performance'] = {
                'error': get_message('performance_metrics_failed', self._locale(), error=str(e))
            }

        return basic_health

    def _check_system_resources(self) -> Dict[str, Any]:
        """
        Check system resource usage.

        Returns:
            dict: System resource information
        """
        cpu_percent = psutil.cpu_percent(interval=0.1)
        memory = psutil.virtual_memory()
        disk = psutil.disk_usage('/')

        status = 'healthy'
        if cpu_percent > 80 or memory.percent > 80 or disk.percent > 90:
            status = 'degraded'
        if cpu_percent > 95 or memory.percent > 95 or disk.percent > 95:
            status = 'critical'

        return {
            'status': status,
            'cpu_percent': cpu_percent,
            'memory': {
                'total': memory.total,
                'available': memory.available,
                'percent': memory.percent,
                'used': memory.used
            },
            'disk': {
                'total': disk.total,
                'free': disk.free,
                'percent': disk.percent,
                'used': disk.used
            }
        }

    def _check_computation_engine(self) -> Dict[str, Any]:
        """
        Run a known computation through the engine.

        Returns:
            dict: Engine health information
        """
        from src.app.services.special_events.core.formula_library import (
            calculate_npv,
            calculate_payback_period,
            calculate_variance,
        )

        variance = calculate_variance(120, 100)
        npv = calculate_npv([-100, 110], 0.1)
        payback = calculate_payback_period([-100, 60, 60])
        healthy = (
            abs(variance.percentage - 20.0) < 1e-9
            and abs(npv) < 1e-9
            and abs(payback - (1 + 40 / 60)) < 1e-9
        )
        return {'status': 'healthy' if healthy else 'unhealthy'}

    def _check_configuration(self) -> Dict[str, Any]:
        """
        Check application configuration.

        Returns:
            dict: Configuration health information
        """
        config_issues = []
        locale = self._locale()

        if current_app.config.get('SECRET_KEY') in (None, '', 'dev-key-change-in-production'):
            config_issues.append(get_message('secret_key_not_configured', locale))

        return {
            'status': 'healthy' if not config_issues else 'degraded',
            'issues': config_issues,
            'message': get_message('configuration_healthy', locale) if not config_issues else None,
            'finance_defaults': {
                'periods': current_app.config.get('DEFAULT_PROJECTION_PERIODS'),
                'discount_rate': current_app.config.get('DEFAULT_DISCOUNT_RATE'),
                'cache_type': current_app.config.get('CACHE_TYPE')
            }
        }

    def _get_performance_metrics(self) -> Dict[str, Any]:
        """
        Get performance metrics.

        Returns:
            dict: Performance metrics
        """
        process = psutil.Process()

        return {
            'process': {
                'pid': process.pid,
                'memory_percent': process.memory_percent(),
                'cpu_percent': process.cpu_percent(),
                'num_threads': process.num_threads(),
                'create_time': datetime.fromtimestamp(process.create_time()).isoformat()
            },
            'timestamp': datetime.utcnow().isoformat()
        }

    def get_health_summary(self) -> Dict[str, Any]:
        """
        Get a summary of health status.

        Returns:
            dict: Health summary
        """
        health = self.get_system_health()

        healthy_checks = 0
        total_checks = 0

        for check_data in health.get('checks', {}).values():
            if isinstance(check_data, dict) and 'status' in check_data:
                total_checks += 1
                if check_data['status'] == 'healthy':
                    healthy_checks += 1

        return {
            'overall_status': health['status'],
            'healthy_checks': healthy_checks,
            'total_checks': total_checks,
            'health_percentage': (healthy_checks / total_checks * 100) if total_checks > 0 else 0,
            'timestamp': health['timestamp']
        }

    def is_healthy(self) -> bool:
        """
        Check if the system is healthy.

        Returns:
            bool: True if system is healthy
        """
        return self.get_system_health()['status'] == 'healthy'

    def get_health_status_code(self) -> int:
        """
        Get appropriate HTTP status code for health status.

        Returns:
            int: HTTP status code
        """
        health = self.get_system_health()

        if health['status'] in ('healthy', 'degraded'):
            return 200
        return 503  # Service unavailable
