"""
Tests for the requests-based API client and its repositories.

The HTTP session is mocked; no server is started.
"""

import asyncio
import json
import uuid
from decimal import Decimal
from unittest import mock

import pytest
import requests

from domain.project.aggregates import Project
from domain.shared.exceptions import EntityNotFoundException
from domain.shared.value_objects import ProjectStatus
from infrastructure.api_client import (
    ApiClientError,
    ApiProjectRepository,
    ApiProjectTaskRepository,
    CommAppApiClient,
)

BASE_URL = 'http://api.example/api/v1'


def make_response(status_code, payload=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = b'' if payload is None else json.dumps(payload).encode()
    response.headers['Content-Type'] = 'application/json'
    return response


def project_payload(project_id=None, name='Alpha', **extra):
    data = {
        'id': str(project_id or uuid.uuid4()),
        'name': name,
        'description': '',
        'icon': '',
        'status': 'active',
        'facility': None,
        'progress_percent': '50.00',
        'version': 2,
    }
    data.update(extra)
    return data


@pytest.fixture
def session():
    session = requests.Session()
    session.request = mock.Mock()
    session.get = mock.Mock()
    return session


@pytest.fixture
def client(session):
    return CommAppApiClient(BASE_URL, session=session)


class TestClient:

    def test_login_sets_bearer_header(self, client, session):
        session.request.return_value = make_response(200, {'access': 'abc', 'refresh': 'def'})

        client.login('tester', 'secret')

        method, url = session.request.call_args.args
        assert (method, url) == ('POST', f'{BASE_URL}/auth/login/')
        assert session.headers['Authorization'] == 'Bearer abc'

    def test_clearing_token_drops_header(self, client, session):
        client.token = 'abc'
        client.token = None

        assert 'Authorization' not in session.headers

    def test_error_response_raises(self, client, session):
        session.request.return_value = make_response(404, {'detail': 'Not found.'})

        with pytest.raises(ApiClientError) as exc_info:
            client.get('projects/x/')

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == {'detail': 'Not found.'}

    def test_no_content(self, client, session):
        session.request.return_value = make_response(204)

        assert client.delete('projects/x/') is None

    def test_iter_results_follows_next(self, client, session):
        session.request.return_value = make_response(
            200, {'results': [{'n': 1}], 'next': f'{BASE_URL}/projects/?page=2'}
        )
        session.get.return_value = make_response(200, {'results': [{'n': 2}], 'next': None})

        assert list(client.iter_results('projects/')) == [{'n': 1}, {'n': 2}]


class TestApiProjectRepository:

    def test_list(self, client, session):
        first, second = project_payload(name='Alpha'), project_payload(name='Beta')
        session.request.return_value = make_response(200, {'results': [first, second], 'next': None})
        repository = ApiProjectRepository(client)

        projects = asyncio.run(repository.list_async(ProjectStatus.ACTIVE))

        assert [p.name for p in projects] == ['Alpha', 'Beta']
        assert projects[0].progress_percent == Decimal('50.00')
        assert session.request.call_args.kwargs['params'] == {'status': 'active'}

    def test_get_missing_returns_none(self, client, session):
        session.request.return_value = make_response(404, {'detail': 'Not found.'})

        assert asyncio.run(ApiProjectRepository(client).get_async(uuid.uuid4())) is None

    def test_get_with_tasks(self, client, session):
        project_id = uuid.uuid4()
        task = {
            'id': str(uuid.uuid4()),
            'project': str(project_id),
            'title': 'Paint',
            'is_completed': True,
            'position': 0,
            'completed_at': '2026-01-02T10:00:00Z',
        }
        session.request.return_value = make_response(200, project_payload(project_id, tasks=[task]))

        project = asyncio.run(ApiProjectRepository(client).get_async(project_id))

        assert project.id == project_id
        assert project.tasks[0].title == 'Paint'
        assert project.tasks[0].completed_at.year == 2026

    def test_save_new_project_posts_with_id(self, client, session):
        project = Project.create(name='Offline')
        session.request.side_effect = [
            make_response(404, {'detail': 'Not found.'}),
            make_response(201, project_payload(project.id, name='Offline', status='draft')),
        ]

        saved = asyncio.run(ApiProjectRepository(client).save_async(project))

        method, url = session.request.call_args.args
        assert (method, url) == ('POST', f'{BASE_URL}/projects/')
        assert session.request.call_args.kwargs['json']['id'] == str(project.id)
        assert saved.id == project.id

    def test_save_existing_project_patches(self, client, session):
        project = Project.create(name='Known')
        session.request.side_effect = [
            make_response(200, project_payload(project.id, name='Known')),
            make_response(200, project_payload(project.id, name='Known')),
        ]

        asyncio.run(ApiProjectRepository(client).save_async(project))

        method, url = session.request.call_args.args
        assert (method, url) == ('PATCH', f'{BASE_URL}/projects/{project.id}/')

    def test_delete_missing(self, client, session):
        session.request.return_value = make_response(404, {'detail': 'Not found.'})

        assert asyncio.run(ApiProjectRepository(client).delete_async(uuid.uuid4())) is False


class TestApiProjectTaskRepository:

    def test_list_for_missing_project(self, client, session):
        session.request.return_value = make_response(404, {'detail': 'Not found.'})

        with pytest.raises(EntityNotFoundException):
            asyncio.run(ApiProjectTaskRepository(client).list_by_project_async(uuid.uuid4()))

    def test_save_falls_back_to_create(self, client, session):
        project = Project.create(name='P')
        task = project.add_task('New task')
        created = {
            'id': str(task.id),
            'project': str(project.id),
            'title': 'New task',
            'is_completed': False,
            'position': 0,
        }
        session.request.side_effect = [
            make_response(404, {'detail': 'Not found.'}),
            make_response(201, created),
        ]

        saved = asyncio.run(ApiProjectTaskRepository(client).save_async(task))

        method, url = session.request.call_args.args
        assert (method, url) == ('POST', f'{BASE_URL}/project-tasks/')
        assert saved.id == task.id


def test_server_errors_propagate(client, session):
    session.request.return_value = make_response(500, {'detail': 'boom'})

    with pytest.raises(ApiClientError):
        asyncio.run(ApiProjectRepository(client).get_async(uuid.uuid4()))
