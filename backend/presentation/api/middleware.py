"""
Facility context middleware.

Wraps every request in a FacilityProvider so views can call
use_facility_context().
"""

import logging

from django.conf import settings

from domain.facility import MOCK_FACILITY, FacilityProvider
from infrastructure.persistence.models import Facility

logger = logging.getLogger(__name__)


def resolve_facility_provider() -> FacilityProvider:
    """
    Provider for the configured facility.

    COMMAPP_FACILITY_ID empty -> MOCK_FACILITY.
    Unknown id -> MOCK_FACILITY with the error set on the context value.
    """
    facility_id = getattr(settings, 'COMMAPP_FACILITY_ID', '')
    if not facility_id:
        return FacilityProvider(MOCK_FACILITY)

    row = Facility.objects.filter(external_id=facility_id, is_active=True).first()
    if row is None:
        logger.error("Configured facility %s not found, using mock facility", facility_id)
        return FacilityProvider(MOCK_FACILITY, error=f"Facility '{facility_id}' not found")

    return FacilityProvider(row.to_value_object())


class FacilityContextMiddleware:
    
    def __init__(self, get_response):
        self.get_response = get_response
    
    def __call__(self, request):
        with resolve_facility_provider() as provider:
            request.facility_context = provider.value
            return self.get_response(request)
