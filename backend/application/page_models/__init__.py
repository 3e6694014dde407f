"""
Page models for the CommApp client.

Page models hold UI state and expose async commands; pages bind to them.
They depend on domain repositories and a Navigator only, never on HTTP
or the ORM directly.
"""

from .commands import AsyncRelayCommand
from .navigation import BACK, Navigator, ShellNavigator, build_route, parse_route
from .observable import ObservableObject
from .pages import AppShell, MainPage, Page, ProjectDetailPage, create_app_shell
from .project_detail import ProjectDetailPageModel, ProjectTaskPageModel
from .project_list import ProjectListPageModel
from .state import LoadState, LoadStateMachine

__all__ = [
    'AsyncRelayCommand',
    'BACK',
    'Navigator',
    'ShellNavigator',
    'build_route',
    'parse_route',
    'ObservableObject',
    'AppShell',
    'MainPage',
    'Page',
    'ProjectDetailPage',
    'create_app_shell',
    'ProjectDetailPageModel',
    'ProjectTaskPageModel',
    'ProjectListPageModel',
    'LoadState',
    'LoadStateMachine',
]
