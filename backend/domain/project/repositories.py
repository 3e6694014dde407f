"""
Project Domain - Repository Interfaces.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from domain.shared.value_objects import ProjectStatus

from .aggregates import Project
from .entities import ProjectTask


class ProjectRepository(ABC):
    """Repository interface for Project aggregate."""
    
    @abstractmethod
    async def list_async(self, status: Optional[ProjectStatus] = None) -> List[Project]:
        """Get all projects, optionally filtered by status."""
        pass
    
    @abstractmethod
    async def get_async(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID, with its tasks loaded."""
        pass
    
    @abstractmethod
    async def save_async(self, project: Project) -> Project:
        """Create or update project."""
        pass
    
    @abstractmethod
    async def delete_async(self, project_id: UUID) -> bool:
        """Delete project. Returns False when it does not exist."""
        pass


class ProjectTaskRepository(ABC):
    """Repository interface for ProjectTask."""
    
    @abstractmethod
    async def list_by_project_async(self, project_id: UUID) -> List[ProjectTask]:
        """Get all tasks for a project."""
        pass
    
    @abstractmethod
    async def save_async(self, task: ProjectTask) -> ProjectTask:
        """Create or update task."""
        pass
