"""
HTTP client side of the CommApp API, used by the page models.
"""

from .client import ApiClientError, CommAppApiClient
from .repositories import ApiProjectRepository, ApiProjectTaskRepository

__all__ = [
    'ApiClientError',
    'CommAppApiClient',
    'ApiProjectRepository',
    'ApiProjectTaskRepository',
]
