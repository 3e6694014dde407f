"""
API v1 Serializers.
"""

from .base import BaseModelSerializer, UserMinimalSerializer
from .auth import LoginSerializer, UserProfileSerializer
from .project import (
    ProjectListSerializer,
    ProjectDetailSerializer,
    ProjectTaskSerializer,
    ProjectTaskNestedSerializer,
    ProjectStatusChangeSerializer,
)
from .facility import FacilitySerializer

__all__ = [
    'BaseModelSerializer',
    'UserMinimalSerializer',
    'LoginSerializer',
    'UserProfileSerializer',
    'ProjectListSerializer',
    'ProjectDetailSerializer',
    'ProjectTaskSerializer',
    'ProjectTaskNestedSerializer',
    'ProjectStatusChangeSerializer',
    'FacilitySerializer',
]
