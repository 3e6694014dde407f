"""
In-memory collaborators for page model tests.
"""

import asyncio
from typing import Dict, List, Optional
from uuid import UUID

from domain.project.aggregates import Project
from domain.project.entities import ProjectTask
from domain.project.repositories import ProjectRepository, ProjectTaskRepository
from domain.shared.value_objects import ProjectStatus
from application.page_models import Navigator


class InMemoryProjectRepository(ProjectRepository):

    def __init__(self, projects: Optional[List[Project]] = None):
        self.projects: Dict[UUID, Project] = {p.id: p for p in projects or []}
        self.list_calls = 0
        self.error: Optional[Exception] = None
        self.gate: Optional[asyncio.Event] = None
        self.save_error: Optional[Exception] = None

    async def list_async(self, status: Optional[ProjectStatus] = None) -> List[Project]:
        self.list_calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return [p for p in self.projects.values() if status is None or p.status == status]

    async def get_async(self, project_id: UUID) -> Optional[Project]:
        if self.error is not None:
            raise self.error
        return self.projects.get(project_id)

    async def save_async(self, project: Project) -> Project:
        if self.save_error is not None:
            raise self.save_error
        project.validate()
        self.projects[project.id] = project
        return project

    async def delete_async(self, project_id: UUID) -> bool:
        return self.projects.pop(project_id, None) is not None


class InMemoryTaskRepository(ProjectTaskRepository):

    def __init__(self):
        self.saved: List[ProjectTask] = []
        self.error: Optional[Exception] = None

    async def list_by_project_async(self, project_id: UUID) -> List[ProjectTask]:
        return [t for t in self.saved if t.project_id == project_id]

    async def save_async(self, task: ProjectTask) -> ProjectTask:
        if self.error is not None:
            raise self.error
        self.saved.append(task)
        return task


class RecordingNavigator(Navigator):

    def __init__(self):
        self.routes: List[str] = []

    async def go_to(self, route: str) -> None:
        self.routes.append(route)
