"""
Project Domain - Aggregates.

Project is the aggregate root; tasks are only changed through it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Set
from uuid import UUID

from domain.shared.base_aggregate import AggregateRoot
from domain.shared.value_objects import ProjectStatus, Progress
from domain.shared.events import (
    ProjectCreated,
    ProjectStatusChanged,
    ProjectTaskAdded,
    ProjectTaskCompletionChanged,
    ProgressUpdated,
)
from domain.shared.exceptions import (
    ValidationException,
    EntityNotFoundException,
    StatusTransitionException,
)

from .entities import ProjectTask


# Valid status transitions
VALID_STATUS_TRANSITIONS: Dict[ProjectStatus, Set[ProjectStatus]] = {
    ProjectStatus.DRAFT: {ProjectStatus.ACTIVE, ProjectStatus.CANCELLED},
    ProjectStatus.ACTIVE: {ProjectStatus.ON_HOLD, ProjectStatus.COMPLETED, ProjectStatus.CANCELLED},
    ProjectStatus.ON_HOLD: {ProjectStatus.ACTIVE, ProjectStatus.CANCELLED},
    ProjectStatus.COMPLETED: {ProjectStatus.ACTIVE},
    ProjectStatus.CANCELLED: set(),
}


def check_status_transition(current: ProjectStatus, target: ProjectStatus) -> None:
    """Raise StatusTransitionException unless current -> target is allowed."""
    allowed = VALID_STATUS_TRANSITIONS.get(current, set())
    if target not in allowed:
        raise StatusTransitionException(
            entity_type="Project",
            current_status=current.value,
            target_status=target.value,
            allowed_transitions=sorted(s.value for s in allowed),
        )


@dataclass(eq=False)
class Project(AggregateRoot):
    """
    Project - the aggregate root listed by the project list page
    and opened by id on the detail page.
    """
    
    name: str = ""
    description: str = ""
    icon: str = ""
    status: ProjectStatus = ProjectStatus.DRAFT
    facility_id: Optional[UUID] = None
    
    # Progress (calculated from tasks)
    progress_percent: Decimal = Decimal('0')
    
    _tasks: List[ProjectTask] = field(default_factory=list, repr=False)
    _tasks_loaded: bool = field(default=False, repr=False)
    
    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValidationException("Project name is required", "name")
    
    @classmethod
    def create(
        cls,
        name: str,
        description: str = "",
        icon: str = "",
        facility_id: Optional[UUID] = None,
        user_id: Optional[int] = None,
    ) -> Project:
        """Create a new draft project and record a ProjectCreated event."""
        project = cls(
            name=name.strip(),
            description=description,
            icon=icon,
            facility_id=facility_id,
            created_by=user_id,
            updated_by=user_id,
        )
        project._tasks_loaded = True
        project.add_domain_event(ProjectCreated(project_id=project.id, name=project.name))
        return project
    
    # =========================================================================
    # PROPERTIES
    # =========================================================================
    
    @property
    def tasks(self) -> List[ProjectTask]:
        """Get all tasks ordered by position."""
        return sorted(self._tasks, key=lambda t: t.position)
    
    @property
    def tasks_loaded(self) -> bool:
        """False for projects read without their tasks (e.g. from a list)."""
        return self._tasks_loaded
    
    @property
    def completed_tasks(self) -> List[ProjectTask]:
        return [t for t in self._tasks if t.is_completed]
    
    @property
    def is_completed(self) -> bool:
        return self.status == ProjectStatus.COMPLETED
    
    # =========================================================================
    # TASK MANAGEMENT
    # =========================================================================
    
    def get_task(self, task_id: UUID) -> ProjectTask:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise EntityNotFoundException("ProjectTask", task_id)
    
    def load_tasks(self, tasks: List[ProjectTask]) -> None:
        """Replace the task list with already persisted tasks (no events)."""
        self._tasks = list(tasks)
        self._tasks_loaded = True
    
    def add_task(self, title: str, user_id: Optional[int] = None) -> ProjectTask:
        """Append a new task at the end of the list."""
        position = max((t.position for t in self._tasks), default=-1) + 1
        task = ProjectTask(
            project_id=self.id,
            title=title.strip() if title else title,
            position=position,
            created_by=user_id,
            updated_by=user_id,
        )
        self._tasks.append(task)
        self.add_domain_event(ProjectTaskAdded(project_id=self.id, task_id=task.id, title=task.title))
        self.recalculate_progress()
        return task
    
    def set_task_completed(
        self,
        task_id: UUID,
        completed: bool,
        user_id: Optional[int] = None
    ) -> ProjectTask:
        task = self.get_task(task_id)
        if task.is_completed == completed:
            return task
        if completed:
            task.complete(user_id)
        else:
            task.reopen(user_id)
        self.add_domain_event(ProjectTaskCompletionChanged(
            project_id=self.id,
            task_id=task.id,
            is_completed=task.is_completed,
        ))
        self.recalculate_progress()
        return task
    
    def remove_task(self, task_id: UUID) -> None:
        task = self.get_task(task_id)
        self._tasks.remove(task)
        self.recalculate_progress()
    
    # =========================================================================
    # STATUS & PROGRESS
    # =========================================================================
    
    def change_status(self, new_status: ProjectStatus, user_id: Optional[int] = None) -> None:
        """Change status, enforcing VALID_STATUS_TRANSITIONS."""
        if new_status == self.status:
            return
        check_status_transition(self.status, new_status)
        old_status = self.status
        self.status = new_status
        self.updated_by = user_id
        self.increment_version()
        self.add_domain_event(ProjectStatusChanged(
            project_id=self.id,
            old_status=old_status.value,
            new_status=new_status.value,
        ))
    
    def recalculate_progress(self) -> Progress:
        """Recompute progress_percent from the task list."""
        progress = Progress.from_counts(len(self.completed_tasks), len(self._tasks))
        if progress.percent != self.progress_percent:
            old = self.progress_percent
            self.progress_percent = progress.percent
            self.add_domain_event(ProgressUpdated(
                project_id=self.id,
                old_progress=old,
                new_progress=progress.percent,
            ))
        return progress
    
    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationException("Project name is required", "name", self.name)
        if self.is_completed and len(self.completed_tasks) != len(self._tasks):
            raise ValidationException(
                "Completed project cannot have open tasks",
                "status",
                self.status.value,
            )
