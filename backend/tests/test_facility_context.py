"""
Tests for FacilityProvider / use_facility_context.
"""

import asyncio

import pytest

from domain.facility import (
    MOCK_FACILITY,
    FacilityProvider,
    get_facility_data,
    use_facility,
    use_facility_context,
)
from domain.shared.exceptions import FacilityContextMissingException


def test_lookup_outside_provider_raises():
    with pytest.raises(FacilityContextMissingException) as exc_info:
        use_facility_context()

    assert exc_info.value.code == 'FACILITY_CONTEXT_MISSING'


def test_lookup_returns_provider_value():
    with FacilityProvider() as provider:
        value = use_facility_context()

        assert value is provider.value
        assert value.facility is MOCK_FACILITY
        assert value.is_loading is False
        assert value.error is None

    with pytest.raises(FacilityContextMissingException):
        use_facility()


def test_nested_providers_restore_outer(springfield):
    with FacilityProvider() as outer:
        with FacilityProvider(springfield) as inner:
            assert use_facility_context() is inner.value
            assert use_facility_context().facility.id == 'springfield'

        assert use_facility_context() is outer.value


def test_provider_is_scoped_to_its_task(springfield):

    async def reader():
        return use_facility_context().facility.id

    async def main():
        with FacilityProvider(springfield):
            inside = await asyncio.create_task(reader())
        return inside

    assert asyncio.run(main()) == 'springfield'

    with pytest.raises(FacilityContextMissingException):
        use_facility_context()


def test_load_replaces_facility(springfield):
    provider = FacilityProvider(springfield)

    async def run():
        return await provider.load(lambda: get_facility_data(delay=0))

    value = asyncio.run(run())

    assert value is provider.value
    assert value.facility is MOCK_FACILITY
    assert value.is_loading is False
    assert value.error is None


def test_load_reports_loading_state(springfield):
    provider = FacilityProvider(springfield)
    seen = []

    def loader():
        seen.append(provider.value.is_loading)
        return MOCK_FACILITY

    asyncio.run(provider.load(loader))

    assert seen == [True]
    assert provider.value.is_loading is False


def test_failed_load_keeps_previous_facility(springfield):
    provider = FacilityProvider(springfield)

    def loader():
        raise RuntimeError('facility service unavailable')

    value = asyncio.run(provider.load(loader))

    assert value.facility is springfield
    assert value.is_loading is False
    assert value.error == 'facility service unavailable'


def test_provider_error_argument(springfield):
    with FacilityProvider(springfield, error='not configured'):
        assert use_facility_context().error == 'not configured'
