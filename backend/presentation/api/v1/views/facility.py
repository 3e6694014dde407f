"""
Facility Views.

Facility CRUD plus branding (theme, address and contact display data).
"""

import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import filters
from rest_framework.decorators import action
from rest_framework.response import Response

from domain.facility import build_facility_branding, use_facility_context
from infrastructure.persistence.models import Facility
from ..serializers.facility import FacilitySerializer
from .base import BaseModelViewSet

logger = logging.getLogger(__name__)


class FacilityViewSet(BaseModelViewSet):
    """
    ViewSet for facilities.
    
    Endpoints:
    - GET /facilities/ - list facilities
    - POST /facilities/ - create facility
    - GET /facilities/{external_id}/ - get facility
    - PUT/PATCH /facilities/{external_id}/ - update facility
    - DELETE /facilities/{external_id}/ - delete facility
    - GET /facilities/branding/ - branding of the request's facility context
    - GET /facilities/{external_id}/branding/ - branding of a stored facility
    """
    
    queryset = Facility.objects.all()
    serializer_class = FacilitySerializer
    lookup_field = 'external_id'
    lookup_value_regex = '[0-9a-f-]{36}'
    
    search_fields = ['name', 'short_name', 'city', 'state']
    filterset_fields = ['state', 'city', 'is_active']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']
    
    filter_backends = [
        DjangoFilterBackend,
        filters.SearchFilter,
        filters.OrderingFilter,
    ]
    
    # Facilities carry no audit or soft-delete columns
    def perform_create(self, serializer):
        facility = serializer.save()
        logger.info("Facility %s created", facility.external_id)
    
    def perform_update(self, serializer):
        serializer.save()
    
    def perform_destroy(self, instance):
        logger.info("Facility %s deleted", instance.external_id)
        instance.delete()
    
    @action(detail=False, methods=['get'], url_path='branding', url_name='current-branding')
    def current_branding(self, request):
        """Branding for the facility provided by FacilityContextMiddleware."""
        context = use_facility_context()
        data = build_facility_branding(context.facility)
        data['is_loading'] = context.is_loading
        data['error'] = context.error
        return Response(data)
    
    @action(detail=True, methods=['get'])
    def branding(self, request, external_id=None):
        """Branding for one stored facility."""
        facility = self.get_object()
        return Response(build_facility_branding(facility.to_value_object()))
