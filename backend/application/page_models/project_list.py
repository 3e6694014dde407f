"""
Project list page model.

Loads the project list when its page appears and routes to the
project detail / new project pages.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from domain.project.aggregates import Project
from domain.project.repositories import ProjectRepository

from .commands import AsyncRelayCommand
from .navigation import Navigator, build_route
from .observable import ObservableObject
from .state import LoadState, LoadStateMachine

logger = logging.getLogger(__name__)


class ProjectListPageModel(ObservableObject):
    """
    Observable properties: projects, state, is_busy, error.

    A failed load keeps the previously loaded projects. A second
    `appearing()` while a load is running returns immediately.
    """

    def __init__(self, project_repository: ProjectRepository, navigator: Navigator):
        super().__init__()
        self._project_repository = project_repository
        self._navigator = navigator
        self._projects: List[Project] = []
        self._load = LoadStateMachine()

        self.appearing_command = AsyncRelayCommand(self.appearing)
        self.navigate_to_project_command = AsyncRelayCommand(self.navigate_to_project)
        self.add_project_command = AsyncRelayCommand(self.add_project)

    @property
    def projects(self) -> List[Project]:
        return self._projects

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

    async def appearing(self) -> None:
        if self._load.is_busy:
            logger.debug("Project list already loading, appearing ignored")
            return

        self._load.start()
        self._publish_state()
        try:
            projects = await self._project_repository.list_async()
        except Exception as exc:
            logger.exception("Loading projects failed")
            self._load.fail(str(exc) or type(exc).__name__)
            self._publish_state()
            return

        self._set_property('projects', list(projects))
        self._load.succeed()
        self._publish_state()
        logger.debug("Loaded %d projects", len(self._projects))

    async def navigate_to_project(self, project: Project) -> None:
        await self._navigator.go_to(build_route('project', id=project.id))

    async def add_project(self) -> None:
        await self._navigator.go_to(build_route('project'))
