"""
Shared pytest fixtures.
"""

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from domain.facility import Facility, FacilityAddress, FacilityContact, FacilitySettings
from infrastructure.persistence.models import (
    Facility as FacilityModel,
    Project,
    ProjectTask,
    ProjectStatusChoices,
)

User = get_user_model()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    return User.objects.create_user(
        username='tester',
        password='tester-password-123',
        email='tester@example.com',
    )


@pytest.fixture
def auth_client(api_client, user):
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def facility(db):
    return FacilityModel.objects.create(
        name='Springfield Care Home',
        short_name='Springfield',
        address='1 Main St',
        city='Springfield',
        state='IL',
        zip='62704',
        phone='(217) 555-0100',
        email='office@springfield.example',
        website='',
        primary_color='#112233',
        secondary_color='#445566',
    )


@pytest.fixture
def project(user, facility):
    project = Project.objects.create(
        name='Spring cleaning',
        description='Seasonal chores',
        status=ProjectStatusChoices.ACTIVE,
        facility=facility,
        created_by=user,
        updated_by=user,
    )
    ProjectTask.objects.create(project=project, title='Windows', is_completed=True)
    ProjectTask.objects.create(project=project, title='Carpets')
    ProjectTask.objects.create(project=project, title='Garden')
    return project


@pytest.fixture
def springfield():
    """Facility value object with the documented example address."""
    return Facility(
        id='springfield',
        name='Springfield Care Home',
        short_name='Springfield',
        address=FacilityAddress(
            street='1 Main St',
            city='Springfield',
            state='IL',
            zip_code='62704',
        ),
        contact=FacilityContact(
            phone='(217) 555-0100',
            email='office@springfield.example',
            website='',
        ),
        settings=FacilitySettings(
            primary_color='#112233',
            secondary_color='#445566',
        ),
    )
