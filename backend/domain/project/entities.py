"""
Project Domain - Entities.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from domain.shared.base_entity import AuditableEntity, utcnow
from domain.shared.exceptions import ValidationException


@dataclass(eq=False)
class ProjectTask(AuditableEntity):
    """
    A single task within a project.
    """
    
    project_id: Optional[UUID] = None
    title: str = ""
    is_completed: bool = False
    position: int = 0
    completed_at: Optional[datetime] = None
    
    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise ValidationException("Task title is required", "title")
    
    # =========================================================================
    # COMMANDS
    # =========================================================================
    
    def complete(self, user_id: Optional[int] = None) -> None:
        """Mark the task completed."""
        if self.is_completed:
            return
        self.is_completed = True
        self.completed_at = utcnow()
        self.updated_by = user_id
        self.increment_version()
    
    def reopen(self, user_id: Optional[int] = None) -> None:
        """Mark the task not completed."""
        if not self.is_completed:
            return
        self.is_completed = False
        self.completed_at = None
        self.updated_by = user_id
        self.increment_version()
