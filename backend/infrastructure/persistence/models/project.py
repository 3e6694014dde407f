"""
Project ORM Models.

Models for projects and their tasks.
"""

from decimal import Decimal

from django.db import models
from django.db.models import Max
from django.utils import timezone

from domain.shared.value_objects import ProjectStatus, Progress

from .base import BaseModel, BaseModelWithHistory, ActiveManager, AllObjectsManager
from .facility import Facility


class ProjectStatusChoices(models.TextChoices):
    """Project status choices."""
    
    DRAFT = ProjectStatus.DRAFT.value, 'Draft'
    ACTIVE = ProjectStatus.ACTIVE.value, 'Active'
    ON_HOLD = ProjectStatus.ON_HOLD.value, 'On hold'
    COMPLETED = ProjectStatus.COMPLETED.value, 'Completed'
    CANCELLED = ProjectStatus.CANCELLED.value, 'Cancelled'


class Project(BaseModelWithHistory):
    """
    Project - a named list of tasks, optionally tied to a facility.
    """
    
    name = models.CharField(
        max_length=255,
        verbose_name="Name"
    )
    description = models.TextField(
        blank=True,
        verbose_name="Description"
    )
    icon = models.CharField(
        max_length=50,
        blank=True,
        verbose_name="Icon"
    )
    status = models.CharField(
        max_length=20,
        choices=ProjectStatusChoices.choices,
        default=ProjectStatusChoices.DRAFT,
        db_index=True,
        verbose_name="Status"
    )
    facility = models.ForeignKey(
        Facility,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='projects',
        verbose_name="Facility"
    )
    
    # Calculated from tasks by recalculate_progress
    progress_percent = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal('0'),
        verbose_name="Progress, %"
    )
    
    objects = ActiveManager()
    all_objects = AllObjectsManager()
    
    class Meta:
        db_table = 'projects'
        verbose_name = "Project"
        verbose_name_plural = "Projects"
        ordering = ['-created_at']
    
    def __str__(self):
        return self.name
    
    def recalculate_progress(self, save: bool = True) -> Decimal:
        """Set progress_percent from completed/total tasks."""
        tasks = self.tasks.filter(deleted_at__isnull=True)
        total = tasks.count()
        completed = tasks.filter(is_completed=True).count()
        self.progress_percent = Progress.from_counts(completed, total).percent
        if save:
            self.save(update_fields=['progress_percent', 'updated_at', 'version'])
        return self.progress_percent


class ProjectTask(BaseModel):
    """
    A single task within a project.
    """
    
    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='tasks',
        verbose_name="Project"
    )
    title = models.CharField(
        max_length=255,
        verbose_name="Title"
    )
    is_completed = models.BooleanField(
        default=False,
        db_index=True,
        verbose_name="Completed"
    )
    # Assigned on first save when left empty
    position = models.PositiveIntegerField(
        null=True,
        blank=True,
        verbose_name="Position"
    )
    completed_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name="Completed at"
    )
    
    objects = ActiveManager()
    all_objects = AllObjectsManager()
    
    class Meta:
        db_table = 'project_tasks'
        verbose_name = "Project task"
        verbose_name_plural = "Project tasks"
        ordering = ['position', 'created_at']
    
    def __str__(self):
        return self.title
    
    def save(self, *args, **kwargs):
        if self._state.adding and self.position is None:
            last = ProjectTask.all_objects.filter(project_id=self.project_id).aggregate(
                max_position=Max('position')
            )['max_position']
            self.position = 0 if last is None else last + 1
        super().save(*args, **kwargs)
    
    def apply_completion(self, completed: bool, user=None):
        """Set completion fields without saving."""
        self.is_completed = completed
        self.completed_at = timezone.now() if completed else None
        self.updated_by = user

    def set_completed(self, completed: bool, user=None):
        self.apply_completion(completed, user=user)
        self.save(update_fields=['is_completed', 'completed_at', 'updated_by', 'updated_at', 'version'])
