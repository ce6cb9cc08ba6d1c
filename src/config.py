"""
Special Events Financial Engine - Configuration Management

This module handles environment-based configuration for development,
testing, staging and production environments including:
- Security settings
- Logging and performance monitoring
- Rate limiting
- Caching configuration
- Financial computation defaults

Author: Flask Enterprise Template
License: MIT
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Base configuration class"""

    # Flask Core Settings
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-key-change-in-production'

    # CORS Configuration
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*').split(',') if os.environ.get('CORS_ORIGINS', '*') != '*' else '*'
    CORS_METHODS = ['GET', 'POST', 'OPTIONS']
    CORS_ALLOW_HEADERS = ['Content-Type', 'Accept-Language', 'X-Requested-With', 'X-Request-ID']
    CORS_EXPOSE_HEADERS = ['X-Request-ID']
    CORS_SUPPORTS_CREDENTIALS = False

    # Security Headers
    SECURITY_HEADERS = {
        'X-Content-Type-Options': 'nosniff',
        'X-Frame-Options': 'SAMEORIGIN',
        'X-XSS-Protection': '1; mode=block',
        'Referrer-Policy': 'strict-origin-when-cross-origin',
        'Permissions-Policy': 'geolocation=(), microphone=(), camera=()'
    }

    # Logging Configuration
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FILE = os.environ.get('LOG_FILE', 'logs/app.log')
    LOG_MAX_BYTES = int(os.environ.get('LOG_MAX_BYTES', 10485760))  # 10MB
    LOG_BACKUP_COUNT = int(os.environ.get('LOG_BACKUP_COUNT', 5))

    # Rate Limiting
    RATELIMIT_ENABLED = os.environ.get('RATE_LIMIT_ENABLED', 'True').lower() == 'true'
    RATELIMIT_DEFAULT = os.environ.get('RATE_LIMIT_DEFAULT', '100 per hour')
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URL', 'memory://')
    RATELIMIT_HEADERS_ENABLED = True
    SCENARIO_RATE_LIMIT = os.environ.get('SCENARIO_RATE_LIMIT', '30 per minute')

    # Performance Monitoring
    ENABLE_PERFORMANCE_MONITORING = os.environ.get('ENABLE_PERFORMANCE_MONITORING', 'True').lower() == 'true'
    PERFORMANCE_LOG_THRESHOLD = float(os.environ.get('PERFORMANCE_LOG_THRESHOLD', 1.0))  # seconds

    # Cache Configuration
    CACHE_TYPE = os.environ.get('CACHE_TYPE', 'SimpleCache')
    CACHE_DEFAULT_TIMEOUT = int(os.environ.get('CACHE_DEFAULT_TIMEOUT', 300))  # 5 minutes
    CACHE_KEY_PREFIX = os.environ.get('CACHE_KEY_PREFIX', 'event_finance_')
    SCENARIO_CACHE_TIMEOUT = int(os.environ.get('SCENARIO_CACHE_TIMEOUT', 600))  # 10 minutes

    # API Configuration
    API_TITLE = 'Special Events Financial Engine API'
    API_VERSION = 'v1'
    API_DESCRIPTION = 'Forecasts, actuals, cash flow projections, scenario analysis and risk scoring for special events'
    API_DOC_URL = '/docs/'

    # Request size limit
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 2 * 1024 * 1024))  # 2MB

    # Financial computation defaults
    DEFAULT_PROJECTION_PERIODS = int(os.environ.get('DEFAULT_PROJECTION_PERIODS', 36))
    MAX_PROJECTION_PERIODS = int(os.environ.get('MAX_PROJECTION_PERIODS', 120))
    DEFAULT_DISCOUNT_RATE = float(os.environ.get('DEFAULT_DISCOUNT_RATE', 0.1))
    DEFAULT_FNB_COGS_PCT = float(os.environ.get('DEFAULT_FNB_COGS_PCT', 30))
    DEFAULT_MERCH_COGS_PCT = float(os.environ.get('DEFAULT_MERCH_COGS_PCT', 50))

    @staticmethod
    def validate_required_config():
        """Validate that all required configuration is present and coherent"""
        errors = []

        if Config.DEFAULT_PROJECTION_PERIODS < 1:
            errors.append('DEFAULT_PROJECTION_PERIODS must be at least 1')
        if Config.MAX_PROJECTION_PERIODS < Config.DEFAULT_PROJECTION_PERIODS:
            errors.append('MAX_PROJECTION_PERIODS must not be lower than DEFAULT_PROJECTION_PERIODS')
        if Config.DEFAULT_DISCOUNT_RATE <= -1:
            errors.append('DEFAULT_DISCOUNT_RATE must be greater than -1')
        for name in ('DEFAULT_FNB_COGS_PCT', 'DEFAULT_MERCH_COGS_PCT'):
            if not 0 <= getattr(Config, name) <= 100:
                errors.append(f'{name} must be between 0 and 100')

        if errors:
            raise ValueError(f"Invalid configuration: {'; '.join(errors)}")
        return True


class DevelopmentConfig(Config):
    """Development environment configuration"""

    DEBUG = True
    TESTING = False

    # Relaxed CORS for development
    CORS_ORIGINS = ['http://localhost:3000', 'http://127.0.0.1:3000', 'http://localhost:5173', 'http://127.0.0.1:5173']

    # Development logging
    LOG_LEVEL = 'DEBUG'

    # Development performance monitoring
    ENABLE_PERFORMANCE_MONITORING = True
    PERFORMANCE_LOG_THRESHOLD = 0.5  # Log requests taking more than 0.5 seconds

    # Development cache settings
    CACHE_DEFAULT_TIMEOUT = 60  # 1 minute


class TestingConfig(Config):
    """Testing environment configuration"""

    DEBUG = False
    TESTING = True

    SECRET_KEY = 'test-secret-key'

    LOG_FILE = os.environ.get('TEST_LOG_FILE', 'logs/test_app.log')

    # Disable performance monitoring for tests
    ENABLE_PERFORMANCE_MONITORING = False

    # No rate limiting during tests
    RATELIMIT_ENABLED = False

    # Scenario results are computed on every request
    CACHE_TYPE = 'NullCache'
    CACHE_DEFAULT_TIMEOUT = 1


class ProductionConfig(Config):
    """Production environment configuration"""

    DEBUG = False
    TESTING = False

    # Production CORS (should be restricted to actual domains)
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', 'https://yourdomain.com').split(',')

    # Production logging
    LOG_LEVEL = 'WARNING'

    # Production performance monitoring
    ENABLE_PERFORMANCE_MONITORING = True
    PERFORMANCE_LOG_THRESHOLD = 2.0  # Log requests taking more than 2 seconds

    # Production cache settings
    CACHE_TYPE = os.environ.get('CACHE_TYPE', 'SimpleCache')
    CACHE_DEFAULT_TIMEOUT = 600  # 10 minutes

    @staticmethod
    def validate_production_config():
        """Additional validation for production environment"""
        # Ensure secure secret key
        if Config.SECRET_KEY == 'dev-key-change-in-production':
            raise ValueError("You must set a secure SECRET_KEY for production!")

        return True


class StagingConfig(ProductionConfig):
    """Staging environment configuration (inherits from Production)"""

    DEBUG = False
    TESTING = False

    # Slightly more verbose logging for staging
    LOG_LEVEL = 'INFO'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'staging': StagingConfig,
    'default': DevelopmentConfig
}


def get_config(env_name=None):
    """Get configuration class for specified environment"""
    if env_name is None:
        env_name = os.getenv('FLASK_ENV', 'development')

    return config.get(env_name, config['default'])


def validate_config(env_name=None):
    """Validate configuration for specified environment"""
    if env_name is None:
        env_name = os.getenv('FLASK_ENV', 'development')

    try:
        # Basic validation
        Config.validate_required_config()

        # Production-specific validation
        if env_name == 'production':
            ProductionConfig.validate_production_config()

        return True, "Configuration valid"

    except ValueError as e:
        return False, str(e)


def get_finance_defaults(app_config=None):
    """
    Get the financial computation defaults.

    Args:
        app_config: Mapping to read from (``current_app.config``); the
            environment's configuration class is used when omitted.

    Returns:
        dict: Finance defaults
    """
    if app_config is None:
        config_class = get_config()
        app_config = {key: getattr(config_class, key) for key in dir(config_class) if key.isupper()}

    return {
        'periods': app_config.get('DEFAULT_PROJECTION_PERIODS', 36),
        'max_periods': app_config.get('MAX_PROJECTION_PERIODS', 120),
        'discount_rate': app_config.get('DEFAULT_DISCOUNT_RATE', 0.1),
        'fnb_cogs_pct': app_config.get('DEFAULT_FNB_COGS_PCT', 30.0),
        'merch_cogs_pct': app_config.get('DEFAULT_MERCH_COGS_PCT', 50.0),
    }
