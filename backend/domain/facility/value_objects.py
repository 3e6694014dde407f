"""
Facility Domain - Value Objects.

A Facility is immutable from the point of view of its consumers:
every piece is a frozen dataclass.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional

from domain.shared.value_objects import ColorTheme, TimeFormat


@dataclass(frozen=True)
class FacilityAddress:
    street: str
    city: str
    state: str
    zip_code: str
    country: str = "United States"


@dataclass(frozen=True)
class FacilityContact:
    phone: str
    email: str
    website: Optional[str] = None
    emergency_contact: str = ""


@dataclass(frozen=True)
class FacilitySettings:
    primary_color: str
    secondary_color: str
    theme: ColorTheme = ColorTheme.LIGHT
    timezone: str = "America/Phoenix"
    language: str = "en-US"
    date_format: str = "MM/DD/YYYY"
    time_format: TimeFormat = TimeFormat.H12


@dataclass(frozen=True)
class Facility:
    """
    Branding/configuration record of a physical location.
    """
    
    id: str
    name: str
    address: FacilityAddress
    contact: FacilityContact
    settings: FacilitySettings
    short_name: str = ""
    logo: str = ""
    established: Optional[date] = None
    license_number: str = ""
    capacity: int = 0
    description: str = ""
    
    def to_dict(self) -> Dict[str, Any]:
        """Plain dict with enums and dates rendered as strings."""
        return {
            'id': self.id,
            'name': self.name,
            'short_name': self.short_name,
            'logo': self.logo,
            'address': {
                'street': self.address.street,
                'city': self.address.city,
                'state': self.address.state,
                'zip_code': self.address.zip_code,
                'country': self.address.country,
            },
            'contact': {
                'phone': self.contact.phone,
                'email': self.contact.email,
                'website': self.contact.website,
                'emergency_contact': self.contact.emergency_contact,
            },
            'settings': {
                'theme': self.settings.theme.value,
                'primary_color': self.settings.primary_color,
                'secondary_color': self.settings.secondary_color,
                'timezone': self.settings.timezone,
                'language': self.settings.language,
                'date_format': self.settings.date_format,
                'time_format': self.settings.time_format.value,
            },
            'established': self.established.isoformat() if self.established else None,
            'license_number': self.license_number,
            'capacity': self.capacity,
            'description': self.description,
        }
