"""
Facility Serializers.
"""

from rest_framework import serializers

from infrastructure.persistence.models import Facility
from .base import BaseModelSerializer


class FacilitySerializer(BaseModelSerializer):
    """Create/update/read serializer for facilities, keyed by external_id."""
    
    theme_display = serializers.CharField(source='get_theme_display', read_only=True)
    
    class Meta:
        model = Facility
        fields = [
            'external_id', 'name', 'short_name',
            'address', 'city', 'state', 'zip', 'country',
            'phone', 'email', 'website',
            'primary_color', 'secondary_color', 'theme', 'theme_display',
            'is_active', 'created_at', 'updated_at',
        ]
        read_only_fields = ['external_id', 'created_at', 'updated_at']
    
    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError('Name is required.')
        return value.strip()
    
    def _validate_color(self, value):
        if len(value) != 7 or not value.startswith('#'):
            raise serializers.ValidationError('Use a #RRGGBB color.')
        try:
            int(value[1:], 16)
        except ValueError:
            raise serializers.ValidationError('Use a #RRGGBB color.')
        return value.upper()
    
    def validate_primary_color(self, value):
        return self._validate_color(value)
    
    def validate_secondary_color(self, value):
        return self._validate_color(value)

