"""
List filters for the inventory pages.
"""

import django_filters
from django.db.models import Q

from .models import Device, DeviceRelationship


class DeviceFilter(django_filters.FilterSet):
    """Filter devices by type, status and free-text search."""

    q = django_filters.CharFilter(method='filter_search', label='Search')
    type = django_filters.ChoiceFilter(choices=Device.Type.choices, empty_label='All Types')
    status = django_filters.ChoiceFilter(choices=Device.Status.choices, empty_label='All Statuses')

    class Meta:
        model = Device
        fields = ['type', 'status']

    def filter_search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(
            Q(name__icontains=value) |
            Q(ip_address__icontains=value) |
            Q(make__icontains=value) |
            Q(model__icontains=value) |
            Q(operating_system__icontains=value)
        )


class DeviceRelationshipFilter(django_filters.FilterSet):
    """Filter relationships by device (parent or child) and type."""

    device = django_filters.ModelChoiceFilter(
        queryset=Device.objects.order_by('name'),
        method='filter_device',
        empty_label='All Devices',
    )
    relationship_type = django_filters.ChoiceFilter(
        choices=DeviceRelationship.Type.choices,
        empty_label='All Relationships',
    )

    class Meta:
        model = DeviceRelationship
        fields = ['relationship_type']

    def filter_device(self, queryset, name, value):
        return queryset.involving(value.pk)
