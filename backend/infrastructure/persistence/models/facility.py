"""
Facility ORM Models.
"""

import uuid

from django.db import models

from domain.facility import (
    Facility as FacilityValue,
    FacilityAddress,
    FacilityContact,
    FacilitySettings,
)
from domain.shared.value_objects import ColorTheme

from .base import TimeStampedMixin


class ColorThemeChoices(models.TextChoices):
    LIGHT = ColorTheme.LIGHT.value, 'Light'
    DARK = ColorTheme.DARK.value, 'Dark'


class Facility(TimeStampedMixin):
    """
    A physical location (assisted-living facility).
    
    Integer primary key stays internal; clients only ever see external_id.
    """
    
    external_id = models.UUIDField(
        default=uuid.uuid4,
        unique=True,
        editable=False,
        verbose_name="External ID"
    )
    name = models.CharField(max_length=255, verbose_name="Name")
    short_name = models.CharField(max_length=100, blank=True, verbose_name="Short name")
    
    # Address
    address = models.CharField(max_length=255, verbose_name="Street address")
    city = models.CharField(max_length=100, verbose_name="City")
    state = models.CharField(max_length=100, verbose_name="State")
    zip = models.CharField(max_length=20, verbose_name="ZIP code")
    country = models.CharField(max_length=100, default='United States', verbose_name="Country")
    
    # Contact
    phone = models.CharField(max_length=50, blank=True, verbose_name="Phone")
    email = models.EmailField(blank=True, verbose_name="Email")
    website = models.URLField(blank=True, verbose_name="Website")
    
    # Branding
    primary_color = models.CharField(max_length=7, default='#5A8FA3', verbose_name="Primary color")
    secondary_color = models.CharField(max_length=7, default='#A4B494', verbose_name="Secondary color")
    theme = models.CharField(
        max_length=10,
        choices=ColorThemeChoices.choices,
        default=ColorThemeChoices.LIGHT,
        verbose_name="Theme"
    )
    
    is_active = models.BooleanField(default=True, db_index=True, verbose_name="Active")
    
    class Meta:
        db_table = 'facilities'
        verbose_name = "Facility"
        verbose_name_plural = "Facilities"
        ordering = ['name']
    
    def __str__(self):
        return self.name
    
    def to_value_object(self) -> FacilityValue:
        """Convert into the immutable Facility used by the branding helpers."""
        return FacilityValue(
            id=str(self.external_id),
            name=self.name,
            short_name=self.short_name or self.name,
            address=FacilityAddress(
                street=self.address,
                city=self.city,
                state=self.state,
                zip_code=self.zip,
                country=self.country,
            ),
            contact=FacilityContact(
                phone=self.phone,
                email=self.email,
                website=self.website or None,
            ),
            settings=FacilitySettings(
                primary_color=self.primary_color,
                secondary_color=self.secondary_color,
                theme=ColorTheme(self.theme),
            ),
        )
