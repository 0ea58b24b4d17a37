"""
Model serializers for the RPC endpoint.

Rows become plain dicts; timestamps are ISO-8601 strings and capacities
are floats.
"""

from typing import Any, Dict, Optional


def _isoformat(value) -> Optional[str]:
    return value.isoformat() if value else None


def _float(value) -> Optional[float]:
    return float(value) if value is not None else None


def serialize_device(device) -> Dict[str, Any]:
    """Serialize a Device with every column, nulls preserved."""
    return {
        'id': device.pk,
        'name': device.name,
        'type': str(device.type),
        'ip_address': device.ip_address,
        'make': device.make,
        'model': device.model,
        'operating_system': device.operating_system,
        'cpu': device.cpu,
        'ram': _float(device.ram),
        'storage_capacity': _float(device.storage_capacity),
        'status': str(device.status),
        'notes': device.notes,
        'created_at': _isoformat(device.created_at),
        'updated_at': _isoformat(device.updated_at),
    }


def serialize_relationship(relationship) -> Dict[str, Any]:
    """Serialize a DeviceRelationship, referencing devices by id."""
    return {
        'id': relationship.pk,
        'parent_device_id': relationship.parent_device_id,
        'child_device_id': relationship.child_device_id,
        'relationship_type': str(relationship.relationship_type),
        'description': relationship.description,
        'created_at': _isoformat(relationship.created_at),
    }
