"""
API tests for facilities, branding and the facility context middleware.
"""

import pytest
from django.test import override_settings
from django.urls import reverse
from rest_framework import status

from domain.facility import MOCK_FACILITY
from infrastructure.persistence.models import Facility

pytestmark = pytest.mark.django_db


class TestFacilityEndpoints:

    def test_list(self, auth_client, facility):
        response = auth_client.get(reverse('api_v1:facilities-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['results'][0]['external_id'] == str(facility.external_id)

    def test_create_normalizes_colors(self, auth_client):
        response = auth_client.post(
            reverse('api_v1:facilities-list'),
            {
                'name': 'Lakeside',
                'address': '9 Shore Rd',
                'city': 'Flagstaff',
                'state': 'AZ',
                'zip': '86001',
                'primary_color': '#aabbcc',
                'secondary_color': '#001122',
            },
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['primary_color'] == '#AABBCC'
        assert Facility.objects.filter(external_id=response.data['external_id']).exists()

    def test_create_rejects_bad_color(self, auth_client):
        response = auth_client.post(
            reverse('api_v1:facilities-list'),
            {
                'name': 'Lakeside',
                'address': '9 Shore Rd',
                'city': 'Flagstaff',
                'state': 'AZ',
                'zip': '86001',
                'primary_color': 'blue',
            },
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'primary_color' in response.data

    def test_update_by_external_id(self, auth_client, facility):
        response = auth_client.patch(
            reverse('api_v1:facilities-detail', args=[facility.external_id]),
            {'short_name': 'SCH'},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        facility.refresh_from_db()
        assert facility.short_name == 'SCH'

    def test_unknown_external_id(self, auth_client):
        response = auth_client.get(
            reverse('api_v1:facilities-detail', args=['00000000-0000-0000-0000-000000000000'])
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_stored_facility_branding(self, auth_client, facility):
        response = auth_client.get(reverse('api_v1:facilities-branding', args=[facility.external_id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['address']['full'] == '1 Main St, Springfield, IL 62704'
        assert response.data['contact']['website_link'] == '#'
        assert response.data['theme']['css_variables']['--facility-primary'] == '#112233'


class TestCurrentBranding:

    def test_defaults_to_mock_facility(self, auth_client):
        response = auth_client.get(reverse('api_v1:facilities-current-branding'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['facility']['id'] == MOCK_FACILITY.id
        assert response.data['address']['short'] == 'Cottonwood, Arizona'
        assert response.data['error'] is None
        assert response.data['is_loading'] is False

    def test_configured_facility(self, auth_client, facility):
        with override_settings(COMMAPP_FACILITY_ID=str(facility.external_id)):
            response = auth_client.get(reverse('api_v1:facilities-current-branding'))

        assert response.data['facility']['id'] == str(facility.external_id)
        assert response.data['address']['city_state'] == 'Springfield, IL'

    def test_unknown_configured_facility_falls_back(self, auth_client):
        missing = '11111111-1111-1111-1111-111111111111'

        with override_settings(COMMAPP_FACILITY_ID=missing):
            response = auth_client.get(reverse('api_v1:facilities-current-branding'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['facility']['id'] == MOCK_FACILITY.id
        assert missing in response.data['error']
