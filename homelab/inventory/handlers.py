"""
Inventory handlers - one function per storage operation.

Handlers receive values that already passed the input schemas and return
model instances. A missing row is reported as None (or False for deletes),
never as an exception. Storage failures are logged and re-raised unchanged.

Relationship endpoint lookups and the following write are separate round
trips; a device deleted between the two surfaces as a storage error.
"""

import logging

from django.db import DatabaseError
from django.utils import timezone

from .exceptions import DeviceNotFoundError, SelfRelationshipError
from .models import Device, DeviceRelationship

logger = logging.getLogger('homelab.inventory')

DEVICE_FIELDS = (
    'name', 'type', 'ip_address', 'make', 'model', 'operating_system',
    'cpu', 'ram', 'storage_capacity', 'status', 'notes',
)

RELATIONSHIP_FIELDS = (
    'parent_device_id', 'child_device_id', 'relationship_type', 'description',
)


def _device_values(data):
    """Map validated input to column values, enums checked against their choices."""
    values = {name: data[name] for name in DEVICE_FIELDS if name in data}
    if values.get('type') is not None:
        values['type'] = Device.Type(values['type'])
    if values.get('status') is not None:
        values['status'] = Device.Status(values['status'])
    return values


def _require_device(device_id, role):
    if not Device.objects.filter(pk=device_id).exists():
        raise DeviceNotFoundError(device_id, role)


# ============== Devices ==============

def create_device(data):
    """Insert a device; unset optionals are stored as null, status defaults to offline."""
    values = {name: None for name in DEVICE_FIELDS}
    values.update(_device_values(data))
    if values['status'] is None:
        values['status'] = Device.Status.OFFLINE

    try:
        device = Device.objects.create(**values)
    except DatabaseError as e:
        logger.error(f"Device creation failed: {e}")
        raise

    logger.info(f"Created device {device.pk} ({device.name})")
    return device


def get_devices():
    try:
        return list(Device.objects.all())
    except DatabaseError as e:
        logger.error(f"Device listing failed: {e}")
        raise


def get_devices_by_type(device_type):
    try:
        return list(Device.objects.filter(type=Device.Type(device_type)))
    except DatabaseError as e:
        logger.error(f"Get devices by type failed: {e}")
        raise


def get_device_by_id(device_id):
    try:
        return Device.objects.filter(pk=device_id).first()
    except DatabaseError as e:
        logger.error(f"Device retrieval failed: {e}")
        raise


def update_device(device_id, patch):
    """
    Apply ``patch`` to a device in a single UPDATE.

    Only keys present in the patch are written; ``updated_at`` is always
    refreshed. Returns None when the patch is empty (nothing to do) or when
    the device does not exist.
    """
    values = _device_values(patch)
    if not values:
        return None

    values['updated_at'] = timezone.now()
    try:
        updated = Device.objects.filter(pk=device_id).update(**values)
        if not updated:
            return None
        return Device.objects.get(pk=device_id)
    except DatabaseError as e:
        logger.error(f"Device update failed: {e}")
        raise


def delete_device(device_id):
    """Delete a device. Its relationships go with it through the cascade rule."""
    try:
        deleted, _ = Device.objects.filter(pk=device_id).delete()
    except DatabaseError as e:
        logger.error(f"Device deletion failed: {e}")
        raise

    if deleted:
        logger.info(f"Deleted device {device_id}")
    return deleted > 0


# ============== Relationships ==============

def create_device_relationship(data):
    """
    Link two existing devices.

    Raises DeviceNotFoundError naming the missing side (parent checked
    first) and SelfRelationshipError when parent and child are the same.
    """
    parent_id = data['parent_device_id']
    child_id = data['child_device_id']
    if parent_id == child_id:
        raise SelfRelationshipError()

    try:
        _require_device(parent_id, 'parent')
        _require_device(child_id, 'child')
        relationship = DeviceRelationship.objects.create(
            parent_device_id=parent_id,
            child_device_id=child_id,
            relationship_type=DeviceRelationship.Type(data['relationship_type']),
            description=data.get('description'),
        )
    except DatabaseError as e:
        logger.error(f"Device relationship creation failed: {e}")
        raise

    logger.info(
        f"Created relationship {relationship.pk}: "
        f"{parent_id} {relationship.relationship_type} {child_id}"
    )
    return relationship


def get_all_device_relationships():
    try:
        return list(DeviceRelationship.objects.all())
    except DatabaseError as e:
        logger.error(f"Relationship listing failed: {e}")
        raise


def get_device_relationships(device_id=None, relationship_type=None):
    """
    Relationships filtered by device (as parent or child) and/or type.
    Both filters together return the intersection.
    """
    queryset = DeviceRelationship.objects.all()
    if device_id is not None:
        queryset = queryset.involving(device_id)
    if relationship_type:
        queryset = queryset.of_type(DeviceRelationship.Type(relationship_type))

    try:
        return list(queryset)
    except DatabaseError as e:
        logger.error(f"Relationship filtering failed: {e}")
        raise


def update_device_relationship(relationship_id, patch):
    """
    Apply ``patch`` to a relationship.

    Returns None when the relationship does not exist and the stored row
    unchanged when the patch is empty. Changed endpoints must exist, and the
    resulting (parent, child) pair, merged with the stored values, must not
    point a device at itself.
    """
    try:
        relationship = DeviceRelationship.objects.filter(pk=relationship_id).first()
        if relationship is None:
            return None

        values = {name: patch[name] for name in RELATIONSHIP_FIELDS if name in patch}
        if not values:
            return relationship

        if 'parent_device_id' in values:
            _require_device(values['parent_device_id'], 'parent')
        if 'child_device_id' in values:
            _require_device(values['child_device_id'], 'child')

        parent_id = values.get('parent_device_id', relationship.parent_device_id)
        child_id = values.get('child_device_id', relationship.child_device_id)
        if parent_id == child_id:
            raise SelfRelationshipError()

        if values.get('relationship_type') is not None:
            values['relationship_type'] = DeviceRelationship.Type(values['relationship_type'])

        for name, value in values.items():
            setattr(relationship, name, value)
        relationship.save(update_fields=list(values))
    except DatabaseError as e:
        logger.error(f"Device relationship update failed: {e}")
        raise

    return relationship


def delete_device_relationship(relationship_id):
    try:
        deleted, _ = DeviceRelationship.objects.filter(pk=relationship_id).delete()
    except DatabaseError as e:
        logger.error(f"Device relationship deletion failed: {e}")
        raise

    if deleted:
        logger.info(f"Deleted relationship {relationship_id}")
    return deleted > 0
