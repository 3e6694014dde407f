"""
API tests for projects and project tasks.
"""

import uuid
from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status

from infrastructure.persistence.models import Project, ProjectTask, ProjectStatusChoices

pytestmark = pytest.mark.django_db


class TestAuth:

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('api_v1:projects-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_returns_tokens(self, api_client, user):
        response = api_client.post(
            reverse('api_v1:auth-login'),
            {'username': 'tester', 'password': 'tester-password-123'},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['access']
        assert response.data['user']['username'] == 'tester'

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")
        me = api_client.get(reverse('api_v1:auth-me'))
        assert me.data['email'] == 'tester@example.com'

    def test_login_rejects_bad_password(self, api_client, user):
        response = api_client.post(
            reverse('api_v1:auth-login'),
            {'username': 'tester', 'password': 'wrong'},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_refresh(self, api_client, user):
        login = api_client.post(
            reverse('api_v1:auth-login'),
            {'username': 'tester', 'password': 'tester-password-123'},
            format='json',
        )

        response = api_client.post(
            reverse('api_v1:auth-refresh'),
            {'refresh': login.data['refresh']},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert 'access' in response.data

    def test_refresh_with_bad_token(self, api_client):
        response = api_client.post(
            reverse('api_v1:auth-refresh'),
            {'refresh': 'not-a-token'},
            format='json',
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestProjectEndpoints:

    def test_list(self, auth_client, project):
        response = auth_client.get(reverse('api_v1:projects-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        item = response.data['results'][0]
        assert item['id'] == str(project.id)
        assert item['tasks_count'] == 3
        assert item['facility'] == str(project.facility.external_id)

    def test_list_filters_by_status(self, auth_client, project):
        response = auth_client.get(reverse('api_v1:projects-list'), {'status': 'draft'})

        assert response.data['count'] == 0

    def test_retrieve_includes_tasks(self, auth_client, project):
        response = auth_client.get(reverse('api_v1:projects-detail', args=[project.id]))

        assert response.status_code == status.HTTP_200_OK
        assert [t['title'] for t in response.data['tasks']] == ['Windows', 'Carpets', 'Garden']
        assert response.data['status_display'] == 'Active'

    def test_create_sets_audit_fields(self, auth_client, user):
        response = auth_client.post(
            reverse('api_v1:projects-list'),
            {'name': 'Fresh start', 'icon': 'rocket'},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        project = Project.objects.get(id=response.data['id'])
        assert project.created_by == user
        assert project.status == ProjectStatusChoices.DRAFT

    def test_create_with_client_id(self, auth_client):
        project_id = uuid.uuid4()

        response = auth_client.post(
            reverse('api_v1:projects-list'),
            {'id': str(project_id), 'name': 'Offline'},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert Project.objects.filter(id=project_id).exists()

    def test_create_requires_name(self, auth_client):
        response = auth_client.post(
            reverse('api_v1:projects-list'),
            {'name': '   '},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_rejects_invalid_status(self, auth_client, project):
        response = auth_client.patch(
            reverse('api_v1:projects-detail', args=[project.id]),
            {'status': 'draft'},
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_destroy_soft_deletes(self, auth_client, project):
        response = auth_client.delete(reverse('api_v1:projects-detail', args=[project.id]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Project.objects.filter(id=project.id).exists()
        assert Project.all_objects.get(id=project.id).deleted_at is not None

    def test_tasks_action(self, auth_client, project):
        url = reverse('api_v1:projects-tasks', args=[project.id])

        listed = auth_client.get(url)
        created = auth_client.post(url, {'title': 'Attic'}, format='json')

        assert [t['title'] for t in listed.data] == ['Windows', 'Carpets', 'Garden']
        assert created.status_code == status.HTTP_201_CREATED
        assert created.data['position'] == 3
        project.refresh_from_db()
        assert project.progress_percent == Decimal('25.00')

    def test_recalculate(self, auth_client, project):
        response = auth_client.post(reverse('api_v1:projects-recalculate', args=[project.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['progress_percent'] == 33.33

    def test_change_status(self, auth_client, project):
        response = auth_client.post(
            reverse('api_v1:projects-change-status', args=[project.id]),
            {'status': 'on_hold'},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        project.refresh_from_db()
        assert project.status == ProjectStatusChoices.ON_HOLD

    def test_change_status_invalid_transition(self, auth_client, project):
        response = auth_client.post(
            reverse('api_v1:projects-change-status', args=[project.id]),
            {'status': 'draft'},
            format='json',
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.data['error'] == 'invalid_status_transition'
        assert response.data['details']['current_status'] == 'active'

    def test_history(self, auth_client, project):
        auth_client.patch(
            reverse('api_v1:projects-detail', args=[project.id]),
            {'name': 'Renamed'},
            format='json',
        )

        response = auth_client.get(reverse('api_v1:projects-history', args=[project.id]))

        assert response.status_code == status.HTTP_200_OK
        assert [h['type'] for h in response.data][:2] == ['~', '+']


class TestProjectTaskEndpoints:

    def test_toggle_recalculates_progress(self, auth_client, project, django_capture_on_commit_callbacks):
        task = project.tasks.get(title='Carpets')

        with django_capture_on_commit_callbacks(execute=True):
            response = auth_client.post(reverse('api_v1:project-tasks-toggle', args=[task.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['is_completed'] is True
        assert response.data['completed_at'] is not None
        project.refresh_from_db()
        assert project.progress_percent == Decimal('66.67')

    def test_filter_by_project(self, auth_client, project):
        other = Project.objects.create(name='Other')
        ProjectTask.objects.create(project=other, title='Elsewhere')

        response = auth_client.get(reverse('api_v1:project-tasks-list'), {'project': str(project.id)})

        assert response.data['count'] == 3

    def test_create_with_client_id(self, auth_client, project):
        task_id = uuid.uuid4()

        response = auth_client.post(
            reverse('api_v1:project-tasks-list'),
            {'id': str(task_id), 'project': str(project.id), 'title': 'Roof'},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert ProjectTask.objects.get(id=task_id).position == 3

    def test_create_keeps_explicit_zero_position(self, auth_client, project):
        response = auth_client.post(
            reverse('api_v1:project-tasks-list'),
            {'project': str(project.id), 'title': 'Roof', 'position': 0},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['position'] == 0
        assert ProjectTask.objects.get(id=response.data['id']).position == 0

    def test_patch_completion(self, auth_client, project):
        task = project.tasks.get(title='Garden')

        response = auth_client.patch(
            reverse('api_v1:project-tasks-detail', args=[task.id]),
            {'is_completed': True},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        task.refresh_from_db()
        assert task.is_completed
        assert task.completed_at is not None
        assert task.version == 2
        assert response.data['version'] == 2

    def test_destroy_soft_deletes(self, auth_client, project):
        task = project.tasks.get(title='Garden')

        response = auth_client.delete(reverse('api_v1:project-tasks-detail', args=[task.id]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert ProjectTask.all_objects.get(id=task.id).is_deleted

    def test_tasks_of_deleted_project_hidden(self, auth_client, project):
        project.soft_delete()

        response = auth_client.get(reverse('api_v1:project-tasks-list'))

        assert response.data['count'] == 0
