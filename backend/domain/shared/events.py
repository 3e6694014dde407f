"""
Domain Events.

Domain events are records of significant business occurrences.
They are used for decoupling and eventual consistency.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from .base_entity import utcnow


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for all domain events.
    
    Domain events are immutable records of something that happened in the domain.
    """
    
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=utcnow)
    
    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__


# =============================================================================
# PROJECT EVENTS
# =============================================================================

@dataclass(frozen=True)
class ProjectCreated(DomainEvent):
    """Event raised when a new project is created."""
    
    project_id: Optional[UUID] = None
    name: str = ""


@dataclass(frozen=True)
class ProjectStatusChanged(DomainEvent):
    """Event raised when project status changes."""
    
    project_id: Optional[UUID] = None
    old_status: str = ""
    new_status: str = ""


@dataclass(frozen=True)
class ProjectTaskAdded(DomainEvent):
    """Event raised when a task is added to a project."""
    
    project_id: Optional[UUID] = None
    task_id: Optional[UUID] = None
    title: str = ""


@dataclass(frozen=True)
class ProjectTaskCompletionChanged(DomainEvent):
    """Event raised when a task is completed or reopened."""
    
    project_id: Optional[UUID] = None
    task_id: Optional[UUID] = None
    is_completed: bool = False


@dataclass(frozen=True)
class ProgressUpdated(DomainEvent):
    """Event raised after project progress is recalculated."""
    
    project_id: Optional[UUID] = None
    old_progress: Decimal = Decimal('0')
    new_progress: Decimal = Decimal('0')
