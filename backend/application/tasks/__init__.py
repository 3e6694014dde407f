"""
Celery tasks.

Imported by config.celery autodiscovery.
"""

from . import project_tasks  # noqa: F401
