# ASGI (Asynchronous Server Gateway Interface) configuration

# The lead desk is plain request/response, so the stock Django ASGI handler
# is enough. Use it with any ASGI server:
# - Uvicorn:  uvicorn config.asgi:application --host 0.0.0.0 --port 8000
# - Hypercorn: hypercorn config.asgi:application --bind 0.0.0.0:8000
# ==============================================================================

import os
from django.core.asgi import get_asgi_application

# Set the default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

application = get_asgi_application()
