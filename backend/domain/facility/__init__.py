"""
Facility Domain - branding and contact information of a physical location.

Public API:
- Facility and its nested value objects
- formatting helpers (theme, address, contact)
- FacilityProvider / use_facility_context
- MOCK_FACILITY, the built-in facility record
"""

from .value_objects import (
    Facility,
    FacilityAddress,
    FacilityContact,
    FacilitySettings,
)
from .formatting import (
    get_facility_theme,
    format_facility_address,
    format_facility_contact,
    build_facility_branding,
)
from .context import (
    FacilityContextValue,
    FacilityProvider,
    use_facility_context,
    use_facility,
)
from .mock import MOCK_FACILITY, get_facility_data


__all__ = [
    'Facility',
    'FacilityAddress',
    'FacilityContact',
    'FacilitySettings',
    'get_facility_theme',
    'format_facility_address',
    'format_facility_contact',
    'build_facility_branding',
    'FacilityContextValue',
    'FacilityProvider',
    'use_facility_context',
    'use_facility',
    'MOCK_FACILITY',
    'get_facility_data',
]
