"""
Django ORM implementations of the project repositories.

The ORM is synchronous; every call is wrapped with asgiref's sync_to_async
so the repositories satisfy the async domain interfaces.
"""

import logging
from typing import List, Optional
from uuid import UUID

from asgiref.sync import sync_to_async
from django.db import transaction

from domain.project.aggregates import Project
from domain.project.entities import ProjectTask
from domain.project.repositories import ProjectRepository, ProjectTaskRepository
from domain.shared.value_objects import ProjectStatus

from .models import (
    Project as ProjectModel,
    ProjectTask as ProjectTaskModel,
    Facility as FacilityModel,
)

logger = logging.getLogger(__name__)


# =============================================================================
# MAPPERS
# =============================================================================

def task_to_domain(row: ProjectTaskModel) -> ProjectTask:
    return ProjectTask(
        id=row.id,
        created_at=row.created_at,
        updated_at=row.updated_at,
        version=row.version,
        created_by=row.created_by_id,
        updated_by=row.updated_by_id,
        deleted_at=row.deleted_at,
        project_id=row.project_id,
        title=row.title,
        is_completed=row.is_completed,
        position=row.position,
        completed_at=row.completed_at,
    )


def project_to_domain(row: ProjectModel, with_tasks: bool = False) -> Project:
    project = Project(
        id=row.id,
        created_at=row.created_at,
        updated_at=row.updated_at,
        version=row.version,
        created_by=row.created_by_id,
        updated_by=row.updated_by_id,
        deleted_at=row.deleted_at,
        name=row.name,
        description=row.description,
        icon=row.icon,
        status=ProjectStatus(row.status),
        facility_id=row.facility.external_id if row.facility_id else None,
        progress_percent=row.progress_percent,
    )
    if with_tasks:
        project.load_tasks([task_to_domain(t) for t in row.tasks.all()])
    return project


# =============================================================================
# REPOSITORIES
# =============================================================================

class DjangoProjectRepository(ProjectRepository):
    """Project repository backed by the relational database."""

    def _list(self, status: Optional[ProjectStatus]) -> List[Project]:
        queryset = ProjectModel.objects.select_related('facility')
        if status is not None:
            queryset = queryset.filter(status=status.value)
        return [project_to_domain(row) for row in queryset]

    def _get(self, project_id: UUID) -> Optional[Project]:
        row = (
            ProjectModel.objects.select_related('facility')
            .prefetch_related('tasks')
            .filter(id=project_id)
            .first()
        )
        if row is None:
            return None
        return project_to_domain(row, with_tasks=True)

    def _save(self, project: Project) -> Project:
        project.validate()
        facility = None
        if project.facility_id:
            facility = FacilityModel.objects.filter(external_id=project.facility_id).first()

        with transaction.atomic():
            row, created = ProjectModel.all_objects.update_or_create(
                id=project.id,
                defaults={
                    'name': project.name,
                    'description': project.description,
                    'icon': project.icon,
                    'status': project.status.value,
                    'facility': facility,
                    'progress_percent': project.progress_percent,
                    'deleted_at': project.deleted_at,
                    'created_by_id': project.created_by,
                    'updated_by_id': project.updated_by,
                },
            )
            kept_ids = []
            for task in project.tasks:
                ProjectTaskModel.all_objects.update_or_create(
                    id=task.id,
                    defaults={
                        'project': row,
                        'title': task.title,
                        'is_completed': task.is_completed,
                        'position': task.position,
                        'completed_at': task.completed_at,
                        'created_by_id': task.created_by,
                        'updated_by_id': task.updated_by,
                    },
                )
                kept_ids.append(task.id)
            # Tasks missing from a project read without them are not dropped.
            if project.tasks_loaded:
                dropped = ProjectTaskModel.objects.filter(project=row).exclude(id__in=kept_ids)
                for task_row in dropped:
                    task_row.soft_delete()

        logger.info("%s project %s (%s)", "Created" if created else "Updated", row.id, row.name)
        project.clear_domain_events()
        return self._get(row.id) or project

    def _delete(self, project_id: UUID) -> bool:
        row = ProjectModel.objects.filter(id=project_id).first()
        if row is None:
            return False
        row.soft_delete()
        logger.info("Soft-deleted project %s", project_id)
        return True

    async def list_async(self, status: Optional[ProjectStatus] = None) -> List[Project]:
        return await sync_to_async(self._list)(status)

    async def get_async(self, project_id: UUID) -> Optional[Project]:
        return await sync_to_async(self._get)(project_id)

    async def save_async(self, project: Project) -> Project:
        return await sync_to_async(self._save)(project)

    async def delete_async(self, project_id: UUID) -> bool:
        return await sync_to_async(self._delete)(project_id)


class DjangoProjectTaskRepository(ProjectTaskRepository):
    """Task repository backed by the relational database."""

    def _list_by_project(self, project_id: UUID) -> List[ProjectTask]:
        return [
            task_to_domain(row)
            for row in ProjectTaskModel.objects.filter(project_id=project_id)
        ]

    def _save(self, task: ProjectTask) -> ProjectTask:
        with transaction.atomic():
            row, _ = ProjectTaskModel.all_objects.update_or_create(
                id=task.id,
                defaults={
                    'project_id': task.project_id,
                    'title': task.title,
                    'is_completed': task.is_completed,
                    'position': task.position,
                    'completed_at': task.completed_at,
                    'created_by_id': task.created_by,
                    'updated_by_id': task.updated_by,
                },
            )
            row.project.recalculate_progress()
        return task_to_domain(row)

    async def list_by_project_async(self, project_id: UUID) -> List[ProjectTask]:
        return await sync_to_async(self._list_by_project)(project_id)

    async def save_async(self, task: ProjectTask) -> ProjectTask:
        return await sync_to_async(self._save)(task)
