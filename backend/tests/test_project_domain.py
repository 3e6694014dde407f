"""
Tests for the Project aggregate.
"""

from decimal import Decimal

import pytest

from domain.project.aggregates import Project, check_status_transition
from domain.project.entities import ProjectTask
from domain.shared.events import ProjectCreated, ProjectStatusChanged, ProgressUpdated
from domain.shared.exceptions import (
    EntityNotFoundException,
    StatusTransitionException,
    ValidationException,
)
from domain.shared.value_objects import Progress, ProjectStatus


class TestProjectCreation:

    def test_create_draft_project(self):
        project = Project.create(name='  Kitchen  ', description='Renovation')

        assert project.name == 'Kitchen'
        assert project.status is ProjectStatus.DRAFT
        assert project.progress_percent == Decimal('0')
        assert isinstance(project.domain_events[0], ProjectCreated)

    def test_name_required(self):
        with pytest.raises(ValidationException):
            Project.create(name='  ')

    def test_task_title_required(self):
        with pytest.raises(ValidationException):
            ProjectTask(title='')

    def test_tasks_loaded_flag(self):
        assert Project.create(name='New').tasks_loaded is True

        listed = Project(name='Listed')
        assert listed.tasks_loaded is False
        listed.load_tasks([])
        assert listed.tasks_loaded is True


class TestTasksAndProgress:

    def test_tasks_ordered_by_position(self):
        project = Project.create(name='P')
        first = project.add_task('First')
        second = project.add_task('Second')

        assert [t.position for t in project.tasks] == [0, 1]
        assert project.tasks == [first, second]

    def test_progress_rounds_to_two_places(self):
        project = Project.create(name='P')
        tasks = [project.add_task(f'T{i}') for i in range(3)]

        project.set_task_completed(tasks[0].id, True)

        assert project.progress_percent == Decimal('33.33')
        assert any(isinstance(e, ProgressUpdated) for e in project.domain_events)

    def test_reopen_task(self):
        project = Project.create(name='P')
        task = project.add_task('Only')
        project.set_task_completed(task.id, True)
        assert project.progress_percent == Decimal('100.00')
        assert task.completed_at is not None

        project.set_task_completed(task.id, False)

        assert project.progress_percent == Decimal('0.00')
        assert task.completed_at is None

    def test_remove_task(self):
        project = Project.create(name='P')
        task = project.add_task('Gone')
        project.remove_task(task.id)

        with pytest.raises(EntityNotFoundException):
            project.get_task(task.id)

    def test_no_tasks_means_zero_progress(self):
        assert Progress.from_counts(0, 0).percent == Decimal('0')
        assert Progress.from_counts(2, 3).percent == Decimal('66.67')


class TestStatus:

    def test_valid_transition(self):
        project = Project.create(name='P')
        project.clear_domain_events()

        project.change_status(ProjectStatus.ACTIVE)

        assert project.status is ProjectStatus.ACTIVE
        assert isinstance(project.domain_events[0], ProjectStatusChanged)

    def test_invalid_transition(self):
        project = Project.create(name='P')

        with pytest.raises(StatusTransitionException) as exc_info:
            project.change_status(ProjectStatus.COMPLETED)

        assert exc_info.value.details['allowed_transitions'] == ['active', 'cancelled']

    def test_cancelled_is_final(self):
        with pytest.raises(StatusTransitionException):
            check_status_transition(ProjectStatus.CANCELLED, ProjectStatus.ACTIVE)

    def test_completed_project_cannot_have_open_tasks(self):
        project = Project.create(name='P')
        project.add_task('Open')
        project.status = ProjectStatus.COMPLETED

        with pytest.raises(ValidationException):
            project.validate()
