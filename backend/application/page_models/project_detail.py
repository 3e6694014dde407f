"""
Project detail page model.

Opened through `project?id=<uuid>` for an existing project
or `project` for a new one.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Mapping, Optional, Union
from uuid import UUID

from domain.project.aggregates import Project
from domain.project.entities import ProjectTask
from domain.project.repositories import ProjectRepository, ProjectTaskRepository
from domain.shared.exceptions import DomainException

from .commands import AsyncRelayCommand
from .navigation import BACK, Navigator, build_route
from .observable import ObservableObject
from .state import LoadState, LoadStateMachine

logger = logging.getLogger(__name__)


class ProjectTaskPageModel(ABC):
    """A page model that lists tasks and can open one of them."""

    navigate_to_task_command: AsyncRelayCommand

    @property
    @abstractmethod
    def is_busy(self) -> bool:
        pass

    @abstractmethod
    async def navigate_to_task(self, task: ProjectTask) -> None:
        pass


class ProjectDetailPageModel(ObservableObject, ProjectTaskPageModel):
    """
    Observable properties: project, name, description, tasks,
    state, is_busy, error.
    """

    def __init__(
        self,
        project_repository: ProjectRepository,
        navigator: Navigator,
        task_repository: Optional[ProjectTaskRepository] = None,
    ):
        super().__init__()
        self._project_repository = project_repository
        self._task_repository = task_repository
        self._navigator = navigator
        self._project: Optional[Project] = None
        self._name = ''
        self._description = ''
        self._tasks: List[ProjectTask] = []
        self._load = LoadStateMachine()

        self.navigate_to_task_command = AsyncRelayCommand(self.navigate_to_task)
        self.save_command = AsyncRelayCommand(self.save)
        self.toggle_task_command = AsyncRelayCommand(self.toggle_task)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def project(self) -> Optional[Project]:
        return self._project

    @property
    def is_new(self) -> bool:
        return self._project is None

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._set_property('name', value)

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str) -> None:
        self._set_property('description', value)

    @property
    def tasks(self) -> List[ProjectTask]:
        return self._tasks

    @property
    def state(self) -> LoadState:
        return self._load.state

    @property
    def is_busy(self) -> bool:
        return self._load.is_busy

    @property
    def error(self) -> Optional[str]:
        return self._load.error

    def _publish_state(self) -> None:
        for name in ('state', 'is_busy', 'error'):
            self.notify(name)

    def _show(self, project: Optional[Project]) -> None:
        self._set_property('project', project)
        self.name = project.name if project else ''
        self.description = project.description if project else ''
        self._set_property('tasks', project.tasks if project else [])

    # =========================================================================
    # COMMANDS
    # =========================================================================

    async def apply_query(self, query: Mapping[str, str]) -> None:
        """Route handler for `project` / `project?id=...`."""
        project_id = query.get('id')
        if not project_id:
            self._show(None)
            return
        await self.load(project_id)

    def _fail(self, message: str) -> None:
        self._load.fail(message)
        self._publish_state()

    async def load(self, project_id: Union[UUID, str]) -> None:
        if self._load.is_busy:
            return
        self._load.start()
        self._publish_state()
        try:
            project_id = project_id if isinstance(project_id, UUID) else UUID(project_id)
        except ValueError:
            self._fail(f"Invalid project id '{project_id}'")
            return

        try:
            project = await self._project_repository.get_async(project_id)
        except Exception as exc:
            logger.exception("Loading project %s failed", project_id)
            self._fail(str(exc) or type(exc).__name__)
            return

        if project is None:
            self._fail(f"Project {project_id} not found")
            return

        self._show(project)
        self._load.succeed()
        self._publish_state()

    async def navigate_to_task(self, task: ProjectTask) -> None:
        await self._navigator.go_to(build_route('task', id=task.id))

    async def toggle_task(self, task: ProjectTask) -> None:
        """Flip a task's completion and persist it; reverted if the save fails."""
        if self._project is None or self._load.is_busy:
            return
        completed = not task.is_completed
        self._load.start()
        self._publish_state()
        updated = self._project.set_task_completed(task.id, completed)
        try:
            if self._task_repository is not None:
                await self._task_repository.save_async(updated)
        except Exception as exc:
            logger.exception("Saving task %s failed", task.id)
            self._project.set_task_completed(task.id, not completed)
            self._fail(str(exc) or type(exc).__name__)
            return
        finally:
            self._set_property('tasks', self._project.tasks)

        self._load.succeed()
        self._publish_state()

    async def save(self) -> Optional[Project]:
        """Create or update the project, then go back."""
        if self._load.is_busy:
            return None
        self._load.start()
        self._publish_state()
        try:
            if self._project is None:
                project = Project.create(name=self._name, description=self._description)
            else:
                project = self._project
                project.name = self._name.strip()
                project.description = self._description
                project.validate()
            saved = await self._project_repository.save_async(project)
        except DomainException as exc:
            logger.info("Project not saved: %s", exc.message)
            self._fail(exc.message)
            return None
        except Exception as exc:
            logger.exception("Saving project failed")
            self._fail(str(exc) or type(exc).__name__)
            return None

        self._show(saved)
        self._load.succeed()
        self._publish_state()
        await self._navigator.go_to(BACK)
        return saved
