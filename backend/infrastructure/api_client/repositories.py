"""
Project repositories over the REST API.

requests is blocking; calls run in a worker thread via asyncio.to_thread
so the page models' event loop is not stalled.
"""

import asyncio
import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from domain.project.aggregates import Project
from domain.project.entities import ProjectTask
from domain.project.repositories import ProjectRepository, ProjectTaskRepository
from domain.shared.exceptions import EntityNotFoundException
from domain.shared.value_objects import ProjectStatus

from .client import ApiClientError, CommAppApiClient

logger = logging.getLogger(__name__)


def _parse_dt(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value.replace('Z', '+00:00'))


def task_from_json(data: Dict[str, Any]) -> ProjectTask:
    return ProjectTask(
        id=UUID(str(data['id'])),
        project_id=UUID(str(data['project'])),
        title=data['title'],
        is_completed=bool(data.get('is_completed')),
        position=int(data.get('position') or 0),
        completed_at=_parse_dt(data.get('completed_at')),
        version=int(data.get('version') or 1),
    )


def project_from_json(data: Dict[str, Any]) -> Project:
    project = Project(
        id=UUID(str(data['id'])),
        name=data['name'],
        description=data.get('description') or '',
        icon=data.get('icon') or '',
        status=ProjectStatus(data.get('status') or ProjectStatus.DRAFT.value),
        facility_id=UUID(str(data['facility'])) if data.get('facility') else None,
        progress_percent=Decimal(str(data.get('progress_percent') or '0')),
        version=int(data.get('version') or 1),
    )
    if 'tasks' in data:
        project.load_tasks([task_from_json(t) for t in data['tasks']])
    return project


def project_to_json(project: Project) -> Dict[str, Any]:
    return {
        'name': project.name,
        'description': project.description,
        'icon': project.icon,
        'status': project.status.value,
        'facility': str(project.facility_id) if project.facility_id else None,
    }


class ApiProjectRepository(ProjectRepository):
    """ProjectRepository talking to /api/v1/projects/."""

    def __init__(self, client: CommAppApiClient):
        self.client = client

    def _list(self, status: Optional[ProjectStatus]) -> List[Project]:
        params = {'status': status.value} if status else None
        return [project_from_json(item) for item in self.client.iter_results('projects/', params=params)]

    def _get(self, project_id: UUID) -> Optional[Project]:
        try:
            data = self.client.get(f'projects/{project_id}/')
        except ApiClientError as exc:
            if exc.status_code == 404:
                return None
            raise
        return project_from_json(data)

    def _save(self, project: Project) -> Project:
        payload = project_to_json(project)
        if self._get(project.id) is None:
            payload['id'] = str(project.id)
            data = self.client.post('projects/', json=payload)
        else:
            data = self.client.patch(f'projects/{project.id}/', json=payload)
        saved = project_from_json(data)
        logger.info("Saved project %s via API", saved.id)
        return saved

    def _delete(self, project_id: UUID) -> bool:
        try:
            self.client.delete(f'projects/{project_id}/')
        except ApiClientError as exc:
            if exc.status_code == 404:
                return False
            raise
        return True

    async def list_async(self, status: Optional[ProjectStatus] = None) -> List[Project]:
        return await asyncio.to_thread(self._list, status)

    async def get_async(self, project_id: UUID) -> Optional[Project]:
        return await asyncio.to_thread(self._get, project_id)

    async def save_async(self, project: Project) -> Project:
        return await asyncio.to_thread(self._save, project)

    async def delete_async(self, project_id: UUID) -> bool:
        return await asyncio.to_thread(self._delete, project_id)


class ApiProjectTaskRepository(ProjectTaskRepository):
    """ProjectTaskRepository talking to /api/v1/project-tasks/."""

    def __init__(self, client: CommAppApiClient):
        self.client = client

    def _list_by_project(self, project_id: UUID) -> List[ProjectTask]:
        try:
            data = self.client.get(f'projects/{project_id}/tasks/')
        except ApiClientError as exc:
            if exc.status_code == 404:
                raise EntityNotFoundException('Project', project_id) from exc
            raise
        return [task_from_json(item) for item in data]

    def _save(self, task: ProjectTask) -> ProjectTask:
        payload = {
            'project': str(task.project_id),
            'title': task.title,
            'is_completed': task.is_completed,
            'position': task.position,
        }
        try:
            data = self.client.patch(f'project-tasks/{task.id}/', json=payload)
        except ApiClientError as exc:
            if exc.status_code != 404:
                raise
            payload['id'] = str(task.id)
            data = self.client.post('project-tasks/', json=payload)
        return task_from_json(data)

    async def list_by_project_async(self, project_id: UUID) -> List[ProjectTask]:
        return await asyncio.to_thread(self._list_by_project, project_id)

    async def save_async(self, task: ProjectTask) -> ProjectTask:
        return await asyncio.to_thread(self._save, task)
