"""
Celery configuration for CommApp project.
"""

import os

from celery import Celery

# Set the default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

app = Celery('commapp')

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object('django.conf:settings', namespace='CELERY')

# Task modules live outside Django apps, so list them explicitly.
app.autodiscover_tasks(['application'], related_name='tasks')

app.conf.task_routes = {
    'application.tasks.project_tasks.*': {'queue': 'projects'},
}

app.conf.beat_schedule = {
    'recalculate-active-projects': {
        'task': 'application.tasks.project_tasks.recalculate_active_projects',
        'schedule': 3600.0,  # Every hour
    },
}
