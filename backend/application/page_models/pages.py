"""
Pages and the composition root that wires them to page models.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Optional

from domain.project.repositories import ProjectRepository, ProjectTaskRepository

from .navigation import ShellNavigator
from .project_detail import ProjectDetailPageModel
from .project_list import ProjectListPageModel


class Page:
    """A page bound to a page model supplied from outside."""

    title = ''

    def __init__(self, model: Any = None):
        self.binding_context = model

    async def on_appearing(self) -> None:
        appearing = getattr(self.binding_context, 'appearing', None)
        if appearing is None:
            return
        result = appearing()
        if inspect.isawaitable(result):
            await result


class MainPage(Page):
    title = 'Projects'

    def __init__(self, model: ProjectListPageModel):
        super().__init__(model)


class ProjectDetailPage(Page):
    title = 'Project'

    def __init__(self, model: ProjectDetailPageModel):
        super().__init__(model)


@dataclass
class AppShell:
    navigator: ShellNavigator
    main_page: MainPage
    project_page: ProjectDetailPage


def create_app_shell(
    project_repository: ProjectRepository,
    task_repository: Optional[ProjectTaskRepository] = None,
) -> AppShell:
    """Build the navigator, page models and pages, and register routes."""
    navigator = ShellNavigator(root='main')
    list_model = ProjectListPageModel(project_repository, navigator)
    detail_model = ProjectDetailPageModel(project_repository, navigator, task_repository)
    navigator.register('project', detail_model.apply_query)
    return AppShell(
        navigator=navigator,
        main_page=MainPage(list_model),
        project_page=ProjectDetailPage(detail_model),
    )
