"""
Persistence Models Package.

All Django ORM models for CommApp.
"""

# Base mixins and managers
from .base import (
    TimeStampedMixin,
    SoftDeleteMixin,
    VersionedMixin,
    AuditMixin,
    ActiveManager,
    AllObjectsManager,
)

# Facility models
from .facility import (
    Facility,
    ColorThemeChoices,
)

# Project models
from .project import (
    Project,
    ProjectTask,
    ProjectStatusChoices,
)


__all__ = [
    # Base
    'TimeStampedMixin',
    'SoftDeleteMixin',
    'VersionedMixin',
    'AuditMixin',
    'ActiveManager',
    'AllObjectsManager',
    
    # Facility
    'Facility',
    'ColorThemeChoices',
    
    # Project
    'Project',
    'ProjectTask',
    'ProjectStatusChoices',
]
