# WSGI (Web Server Gateway Interface) configuration for production deployment

# Used by production servers like:
# - Gunicorn
# - uWSGI
#
# Run: gunicorn config.wsgi:application --bind 0.0.0.0:8000 --workers 4
# ==============================================================================

import os
from django.core.wsgi import get_wsgi_application

# Set the default Django settings module
# Points to config/settings.py
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

# Create WSGI application
# This is what the production server will call
application = get_wsgi_application()
