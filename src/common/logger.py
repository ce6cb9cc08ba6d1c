"""
Logging Configuration for the Special Events Financial Engine

This module provides logging configuration with:
- Environment-based log levels
- Rotating file handlers (main, error, performance)
- Structured logging with JSON format
- Request/response logging with request ids and durations
- Slow request detection
- Sensitive payload filtering
- Computation logging decorator for the service layer

Author: Flask Enterprise Template
License: MIT
"""

import os
import json
import logging
import logging.handlers
import time
import traceback
import uuid
from datetime import datetime
from functools import wraps
from flask import request, g, has_request_context


PACKAGE_LOGGER = 'src'

RESERVED_RECORD_FIELDS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'exc_info', 'exc_text', 'stack_info', 'lineno', 'funcName',
    'created', 'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'message', 'taskName'
}


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging"""

    def format(self, record):
        log_entry = {
            'timestamp': datetime.utcnow().isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
            'message': record.getMessage(),
            'thread': record.thread,
            'process': record.process
        }

        # Add exception info if present
        if record.exc_info:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': traceback.format_exception(*record.exc_info)
            }

        # Add extra fields from record
        for key, value in record.__dict__.items():
            if key not in RESERVED_RECORD_FIELDS:
                log_entry[key] = value

        return json.dumps(log_entry, default=str, ensure_ascii=False)


def _rotating_handler(path, level, formatter, config):
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=config.get('LOG_MAX_BYTES', 10485760),
        backupCount=config.get('LOG_BACKUP_COUNT', 5)
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(app):
    """
    Setup logging for the Flask application.

    Handlers are attached to ``app.logger`` and to the ``src`` package
    logger, so that service and core module loggers share the same files.

    Args:
        app: Flask application instance
    """
    config = app.config
    log_file = config.get('LOG_FILE', 'logs/app.log')

    # Create logs directory if it doesn't exist
    log_dir = os.path.dirname(log_file)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir)

    # Set log level
    log_level = getattr(logging, str(config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    for logger in (app.logger, package_logger):
        logger.setLevel(log_level)
        # Remove previously attached handlers
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

    # Create formatters
    detailed_formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s in %(module)s.%(funcName)s:%(lineno)d: %(message)s'
    )
    json_formatter = JSONFormatter()

    handlers = []

    # Console handler for development
    if config.get('DEBUG'):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(detailed_formatter)
        handlers.append(console_handler)

    # Main application log file
    handlers.append(_rotating_handler(log_file, log_level, json_formatter, config))

    # Error file handler
    handlers.append(_rotating_handler(
        log_file.replace('.log', '_error.log'), logging.ERROR, json_formatter, config
    ))

    # Performance log handler
    if config.get('ENABLE_PERFORMANCE_MONITORING'):
        handlers.append(_rotating_handler(
            log_file.replace('.log', '_performance.log'), logging.WARNING, json_formatter, config
        ))

    for handler in handlers:
        app.logger.addHandler(handler)
        package_logger.addHandler(handler)
    package_logger.propagate = False

    # Set logging level for other loggers
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)

    app.logger.info("Logging configured", extra={
        'environment': config.get('FLASK_ENV', 'development'),
        'log_level': config.get('LOG_LEVEL', 'INFO'),
        'performance_monitoring': bool(config.get('ENABLE_PERFORMANCE_MONITORING'))
    })


def get_client_info():
    """Extract client information from request"""
    client_ip = request.headers.get('X-Forwarded-For', request.headers.get('X-Real-IP', request.remote_addr)) or 'unknown'
    if ',' in client_ip:
        client_ip = client_ip.split(',')[0].strip()

    return {
        'ip_address': client_ip,
        'user_agent': request.headers.get('User-Agent', 'Unknown'),
        'language': request.headers.get('Accept-Language', 'Unknown').split(',')[0],
        'referrer': request.headers.get('Referer', 'Direct'),
        'origin': request.headers.get('Origin', 'Unknown')
    }


def get_request_payload():
    """Safely extract request payload, filtering sensitive information"""
    if request.is_json:
        payload = request.get_json(silent=True)
        if payload:
            return filter_sensitive_data(payload)

    elif request.form:
        return filter_sensitive_data(dict(request.form))

    elif request.data:
        # Raw data (limit size for logging)
        if len(request.data) < 1000:
            try:
                return {'raw_data': request.data.decode('utf-8')[:500]}
            except UnicodeDecodeError:
                return {'raw_data': 'binary_data'}

    return None


def filter_sensitive_data(data):
    """Filter sensitive information from data"""
    sensitive_fields = {
        'password', 'passwd', 'pwd', 'secret', 'token', 'api_key',
        'access_token', 'refresh_token', 'authorization', 'auth',
        'credit_card', 'card_number', 'cvv', 'email', 'phone'
    }

    if isinstance(data, dict):
        filtered = {}
        for key, value in data.items():
            if any(sensitive in str(key).lower() for sensitive in sensitive_fields):
                filtered[key] = '[FILTERED]'
            elif isinstance(value, (dict, list)):
                filtered[key] = filter_sensitive_data(value)
            else:
                filtered[key] = value
        return filtered
    elif isinstance(data, list):
        return [filter_sensitive_data(item) for item in data]
    else:
        return data


def _skip_request_logging():
    return request.path.startswith('/api/v1/health') or request.path.startswith('/static')


def log_request_start(app):
    """Log request start with client and payload information"""

    @app.before_request
    def log_request_info():
        g.start_time = datetime.utcnow()
        g.request_id = request.headers.get('X-Request-ID') or str(uuid.uuid4())

        # Skip logging for health checks and static files
        if _skip_request_logging():
            return

        app.logger.info("API Request Started", extra={
            'request_id': g.request_id,
            'method': request.method,
            'path': request.path,
            'endpoint': request.endpoint,
            'query_params': dict(request.args),
            'request_payload': get_request_payload(),
            'client_info': get_client_info(),
            'headers': {
                'content_type': request.content_type,
                'content_length': request.content_length,
                'host': request.host,
                'scheme': request.scheme
            },
            'timestamp': g.start_time.isoformat()
        })


def get_response_info(response):
    """Extract response information for logging"""
    response_info = {
        'status_code': response.status_code,
        'content_type': response.content_type,
        'content_length': response.content_length,
        'is_json': response.is_json,
        'is_streamed': response.is_streamed
    }

    # Only log small, non-streamed responses
    if not response.is_streamed and response.content_length and response.content_length < 2000:
        if response.is_json:
            response_info['data'] = response.get_json(silent=True)
        else:
            response_info['data'] = response.get_data(as_text=True)[:1000]

    return response_info


def log_request_end(app):
    """Log request end with response information and slow request warnings"""

    @app.after_request
    def log_response_info(response):
        if getattr(g, 'request_id', None):
            response.headers['X-Request-ID'] = g.request_id

        # Skip logging for health checks and static files
        if _skip_request_logging():
            return response

        if hasattr(g, 'start_time'):
            duration = datetime.utcnow() - g.start_time
            duration_ms = duration.total_seconds() * 1000

            app.logger.info("API Request Completed", extra={
                'request_id': getattr(g, 'request_id', 'unknown'),
                'method': request.method,
                'path': request.path,
                'endpoint': request.endpoint,
                'status_code': response.status_code,
                'duration_ms': round(duration_ms, 2),
                'response_info': get_response_info(response),
                'timestamp': datetime.utcnow().isoformat()
            })

            # Log slow requests
            threshold = app.config.get('PERFORMANCE_LOG_THRESHOLD', 1.0)
            if (app.config.get('ENABLE_PERFORMANCE_MONITORING') and
                    duration.total_seconds() > threshold):
                app.logger.warning("Slow Request Detected", extra={
                    'request_id': getattr(g, 'request_id', 'unknown'),
                    'method': request.method,
                    'path': request.path,
                    'duration_ms': round(duration_ms, 2),
                    'threshold_seconds': threshold,
                    'performance_issue': True
                })

        return response


def log_computation(operation):
    """
    Service-layer logger for financial computations.

    Logs the operation name, request id and duration of every call at info
    level, and failures at error level before re-raising them.

    Usage:
        @log_computation('cash_flow_projection')
        def project_cash_flow(payload): ...
    """

    def decorator(func):
        logger = logging.getLogger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            request_id = getattr(g, 'request_id', None) if has_request_context() else None
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"Computation {operation} failed: {str(e)}", extra={
                    'operation': operation,
                    'request_id': request_id,
                    'error_type': type(e).__name__,
                    'duration_ms': round((time.perf_counter() - start) * 1000, 2)
                })
                raise

            logger.info(f"Computation {operation} completed", extra={
                'operation': operation,
                'request_id': request_id,
                'duration_ms': round((time.perf_counter() - start) * 1000, 2)
            })
            return result

        return wrapper
    return decorator


def get_logger(name=None):
    """
    Get a logger instance.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(name)
    return logging.getLogger(__name__)


def setup_comprehensive_logging(app):
    """
    Setup the logging system for the Flask application.
    This is the main function to call to enable all logging features.

    Args:
        app: Flask application instance
    """
    setup_logging(app)

    # Setup request/response logging
    log_request_start(app)
    log_request_end(app)

    app.logger.info("Comprehensive logging system initialized", extra={
        'features': [
            'request_response_logging',
            'error_logging',
            'performance_monitoring',
            'computation_logging'
        ]
    })
