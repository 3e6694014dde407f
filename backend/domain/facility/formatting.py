"""
Facility Domain - display formatting.

Pure functions: the facility is always passed in explicitly,
nothing here reads the facility context.
"""

from typing import Any, Dict

from .value_objects import Facility


def get_facility_theme(facility: Facility) -> Dict[str, Any]:
    """Theme tokens, CSS custom properties and Tailwind arbitrary-value classes."""
    primary = facility.settings.primary_color
    secondary = facility.settings.secondary_color
    return {
        'primary_color': primary,
        'secondary_color': secondary,
        'theme': facility.settings.theme.value,
        'css_variables': {
            '--facility-primary': primary,
            '--facility-secondary': secondary,
        },
        'tailwind_classes': {
            'primary': f'[color:{primary}]',
            'secondary': f'[color:{secondary}]',
            'primary_bg': f'[background-color:{primary}]',
            'secondary_bg': f'[background-color:{secondary}]',
        },
    }


def format_facility_address(facility: Facility) -> Dict[str, str]:
    address = facility.address
    city_state = f'{address.city}, {address.state}'
    return {
        'full': f'{address.street}, {city_state} {address.zip_code}',
        'short': city_state,
        'city_state': city_state,
        'with_zip': f'{city_state} {address.zip_code}',
    }


def format_facility_contact(facility: Facility) -> Dict[str, Any]:
    """
    Contact strings and links.
    
    `website_link` falls back to '#' when the facility has no website.
    """
    contact = facility.contact
    return {
        'phone': contact.phone,
        'email': contact.email,
        'website': contact.website,
        # TODO: format as (xxx) xxx-xxxx once phone numbers are stored normalized
        'phone_formatted': contact.phone,
        'email_link': f'mailto:{contact.email}',
        'website_link': contact.website or '#',
    }


def build_facility_branding(facility: Facility) -> Dict[str, Any]:
    """Everything a client needs to brand its UI, in one payload."""
    return {
        'facility': facility.to_dict(),
        'theme': get_facility_theme(facility),
        'address': format_facility_address(facility),
        'contact': format_facility_contact(facility),
    }
