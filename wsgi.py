#!/usr/bin/env python3
"""
Special Events Financial Engine - Production WSGI Entry Point

This file is used by production WSGI servers like gunicorn.

Usage with gunicorn:
    gunicorn --bind 0.0.0.0:5000 wsgi:application
    gunicorn --bind 0.0.0.0:5000 --workers 4 --worker-class sync wsgi:application

Environment Variables Required:
    - FLASK_ENV=production
    - SECRET_KEY (secure random key)
    - All other production configurations in .env

Author: Flask Enterprise Template
License: MIT
"""

import os
from src.app import create_app
from dotenv import load_dotenv, find_dotenv

# Load environment variables
load_dotenv(find_dotenv())

# Create application instance (logging is configured by the factory)
env_name = os.getenv('FLASK_ENV', 'production')
application = create_app(env_name)

# For compatibility with some WSGI servers
app = application

if __name__ == "__main__":
    # This should not be used in production
    # Use gunicorn instead: gunicorn wsgi:application
    application.run(host='0.0.0.0', port=5000)
