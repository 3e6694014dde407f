"""
Tests for the ORM-backed project repositories.
"""

from decimal import Decimal

import pytest
from asgiref.sync import async_to_sync

from domain.project.aggregates import Project
from domain.shared.value_objects import ProjectStatus
from infrastructure.persistence.models import (
    Project as ProjectModel,
    ProjectTask as ProjectTaskModel,
)
from infrastructure.persistence.repositories import (
    DjangoProjectRepository,
    DjangoProjectTaskRepository,
)

pytestmark = pytest.mark.django_db(transaction=True)


@pytest.fixture
def repository():
    return DjangoProjectRepository()


def test_list_maps_rows(repository, project):
    projects = async_to_sync(repository.list_async)()

    assert len(projects) == 1
    assert projects[0].id == project.id
    assert projects[0].status is ProjectStatus.ACTIVE
    assert projects[0].facility_id == project.facility.external_id


def test_list_filters_by_status(repository, project):
    assert async_to_sync(repository.list_async)(ProjectStatus.DRAFT) == []


def test_get_loads_tasks(repository, project):
    loaded = async_to_sync(repository.get_async)(project.id)

    assert [t.title for t in loaded.tasks] == ['Windows', 'Carpets', 'Garden']
    assert len(loaded.completed_tasks) == 1


def test_save_new_project_with_tasks(repository, user):
    project = Project.create(name='Garage', user_id=user.id)
    first = project.add_task('Sort boxes')
    project.add_task('Sweep')
    project.set_task_completed(first.id, True)

    saved = async_to_sync(repository.save_async)(project)

    row = ProjectModel.objects.get(id=project.id)
    assert row.created_by == user
    assert row.progress_percent == Decimal('50.00')
    assert [t.title for t in saved.tasks] == ['Sort boxes', 'Sweep']
    assert project.domain_events == []


def test_save_removes_dropped_tasks(repository, project):
    loaded = async_to_sync(repository.get_async)(project.id)
    loaded.remove_task(loaded.tasks[-1].id)

    saved = async_to_sync(repository.save_async)(loaded)

    assert [t.title for t in saved.tasks] == ['Windows', 'Carpets']
    garden = ProjectTaskModel.all_objects.get(project_id=project.id, title='Garden')
    assert garden.deleted_at is not None


def test_save_listed_project_keeps_tasks(repository, project):
    listed = async_to_sync(repository.list_async)()[0]
    listed.description = 'Spring clean'

    async_to_sync(repository.save_async)(listed)

    project.refresh_from_db()
    assert project.description == 'Spring clean'
    assert project.tasks.count() == 3
    assert not ProjectTaskModel.all_objects.filter(
        project_id=project.id, deleted_at__isnull=False
    ).exists()


def test_delete_is_soft(repository, project):
    assert async_to_sync(repository.delete_async)(project.id) is True
    assert async_to_sync(repository.get_async)(project.id) is None
    assert ProjectModel.all_objects.filter(id=project.id).exists()
    assert async_to_sync(repository.delete_async)(project.id) is False


def test_task_repository_updates_progress(project):
    tasks = DjangoProjectTaskRepository()
    listed = async_to_sync(tasks.list_by_project_async)(project.id)
    carpets = next(t for t in listed if t.title == 'Carpets')
    carpets.complete()

    async_to_sync(tasks.save_async)(carpets)

    project.refresh_from_db()
    assert project.progress_percent == Decimal('66.67')
