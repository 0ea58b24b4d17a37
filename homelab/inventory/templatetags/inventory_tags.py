"""
Template tags for inventory app.
"""
from django import template
from django.db.models import Count
from homelab.inventory.models import Device, DeviceRelationship

register = template.Library()

DEVICE_TYPE_ICONS = {
    Device.Type.PHYSICAL_SERVER: 'bi-hdd-rack',
    Device.Type.VIRTUAL_MACHINE: 'bi-pc-display',
    Device.Type.ROUTER: 'bi-router',
    Device.Type.SWITCH: 'bi-diagram-3',
    Device.Type.ACCESS_POINT: 'bi-wifi',
    Device.Type.STORAGE: 'bi-device-hdd',
}

STATUS_BADGE_CLASSES = {
    Device.Status.ONLINE: 'bg-success',
    Device.Status.OFFLINE: 'bg-secondary',
    Device.Status.MAINTENANCE: 'bg-warning text-dark',
    Device.Status.ERROR: 'bg-danger',
}


@register.filter
def device_type_icon(device_type):
    """Return Bootstrap icon class for a device type."""
    return DEVICE_TYPE_ICONS.get(device_type, 'bi-box')


@register.filter
def status_badge_class(status):
    """Return CSS badge class for device status."""
    return STATUS_BADGE_CLASSES.get(status, 'bg-secondary')


@register.filter
def relationship_label(relationship_type):
    try:
        return DeviceRelationship.Type(relationship_type).label
    except ValueError:
        return relationship_type


@register.simple_tag
def get_device_type_counts():
    """Return (value, label, count) for every device type, zeros included."""
    counts = dict(
        Device.objects.order_by().values_list('type').annotate(total=Count('id'))
    )
    return [(value, label, counts.get(value, 0)) for value, label in Device.Type.choices]


@register.inclusion_tag('inventory/partials/device_badge.html')
def device_badge(device):
    """Render a device badge."""
    return {'device': device}


@register.filter
def get_item(mapping, key):
    """Look up ``key`` in a dict from a template."""
    if not mapping:
        return None
    return mapping.get(key)


@register.simple_tag(takes_context=True)
def url_replace(context, **kwargs):
    """Current query string with the given parameters replaced (keeps filters when paginating)."""
    query = context['request'].GET.copy()
    for key, value in kwargs.items():
        query[key] = value
    return query.urlencode()
