# Celery is a distributed task queue for running background jobs

# - Track UTM link clicks without slowing down the lead form
#
# Start worker: celery -A config worker -l info
# ==============================================================================

import os
from celery import Celery

# Set the default Django settings module for Celery
# This ensures Celery uses the same settings as Django
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

# Create Celery app instance
# 'leaddesk' is the app name (appears in logs and monitoring)
app = Celery('leaddesk')

# Load Celery configuration from Django settings
# All settings prefixed with 'CELERY_' will be used
# Example: CELERY_BROKER_URL, CELERY_RESULT_BACKEND
app.config_from_object('django.conf:settings', namespace='CELERY')

# Auto-discover tasks from all installed apps
# Looks for tasks.py file in each app
# Example: apps/leads/tasks.py
app.autodiscover_tasks()


# CELERY TASK ANNOTATIONS

# Configure specific tasks
app.conf.task_annotations = {
    # Set rate limits (prevent overwhelming external APIs)
    'apps.leads.tasks.track_utm_click': {
        'rate_limit': '60/m',
    },
}
