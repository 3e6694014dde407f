"""
Facility Domain - built-in facility record.

Served until a facility is configured (COMMAPP_FACILITY_ID).
"""

import asyncio
from datetime import date

from domain.shared.value_objects import ColorTheme, TimeFormat

from .value_objects import Facility, FacilityAddress, FacilityContact, FacilitySettings


MOCK_FACILITY = Facility(
    id='alc-cottonwood-001',
    name='Valencia Assisted Living of Cottonwood',
    short_name='ALC Cottonwood',
    logo='/static/branding/alc-logo.svg',
    address=FacilityAddress(
        street='1234 Valencia Drive',
        city='Cottonwood',
        state='Arizona',
        zip_code='86326',
        country='United States',
    ),
    contact=FacilityContact(
        phone='(928) 634-7755',
        email='info@valenciaassisted.com',
        website='https://valenciaassisted.com',
        emergency_contact='(928) 634-7755',
    ),
    settings=FacilitySettings(
        theme=ColorTheme.LIGHT,
        primary_color='#5A8FA3',
        secondary_color='#A4B494',
        timezone='America/Phoenix',
        language='en-US',
        date_format='MM/DD/YYYY',
        time_format=TimeFormat.H12,
    ),
    established=date(2018, 3, 15),
    license_number='AZ-ALF-2018-001234',
    capacity=120,
    description=(
        'Valencia Assisted Living of Cottonwood provides exceptional care and '
        'comfortable living for seniors in a beautiful Arizona setting.'
    ),
)


async def get_facility_data(delay: float = 0.1) -> Facility:
    """Loader for FacilityProvider.load that simulates a network round trip."""
    await asyncio.sleep(delay)
    return MOCK_FACILITY
